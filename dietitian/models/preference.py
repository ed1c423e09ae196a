"""
界面偏好：语言、货币、主题
"""

from pydantic import BaseModel
from enum import Enum
from .order import Currency


class Language(str, Enum):
    EN = "en"
    TW = "tw"
    FR = "fr"
    ES = "es"
    ZH = "zh"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class Preferences(BaseModel):
    """用户偏好；主题为进程级设置，随文件持久化"""
    language: Language = Language.EN
    currency: Currency = Currency.GHS
    theme: Theme = Theme.LIGHT

    model_config = {"use_enum_values": True}
