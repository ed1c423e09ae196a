"""
偏好服务
语言、货币按用户保存在内存库；主题是唯一跨重启保留的设置，写入 JSON 文件
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..config.settings import settings
from ..constants import TRANSLATIONS
from ..core.database import DatabaseManager, db_manager
from ..core.exceptions import ValidationError
from ..models.order import Currency
from ..models.preference import Language, Preferences, Theme

logger = logging.getLogger(__name__)


def translate(key: str, language: str) -> str:
    """查翻译表，缺失时原样返回 key"""
    return TRANSLATIONS.get(language, {}).get(key) or key


def format_price(price_usd: float, currency: str, exchange_rate: Optional[float] = None) -> str:
    """按货币格式化美元价格"""
    if currency == Currency.GHS:
        rate = settings.exchange_rate if exchange_rate is None else exchange_rate
        return f"₵ {price_usd * rate:.2f}"
    return f"$ {price_usd:.2f}"


class ThemeStore:
    """主题持久化（对应浏览器本地存储中的单个键）"""

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path or settings.theme_file)
        self._theme: Optional[str] = None

    def load(self) -> str:
        """读取主题；文件缺失或损坏时回退到 light"""
        theme = Theme.LIGHT.value
        if self.path.exists():
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
                if isinstance(data, dict) and data.get("theme") in {t.value for t in Theme}:
                    theme = data["theme"]
            except (OSError, ValueError) as e:
                logger.warning("Ignoring unreadable theme file %s: %s", self.path, e)
        self._theme = theme
        return theme

    @property
    def theme(self) -> str:
        if self._theme is None:
            return self.load()
        return self._theme

    def save(self, theme: str) -> str:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"theme": theme}), encoding="utf-8")
        self._theme = theme
        return theme

    def toggle(self) -> str:
        new_theme = Theme.DARK.value if self.theme == Theme.LIGHT.value else Theme.LIGHT.value
        logger.info("Theme switched to %s", new_theme)
        return self.save(new_theme)


class PreferenceService:
    """偏好服务"""

    def __init__(self, db: Optional[DatabaseManager] = None, theme_store: Optional[ThemeStore] = None):
        self.db = db or db_manager
        self.theme_store = theme_store or theme_store_default

    def get(self, user_id: int) -> Preferences:
        row = self.db.execute_one(
            "SELECT language, currency FROM preferences WHERE user_id = ?", [user_id])
        if row:
            language, currency = row
        else:
            language, currency = settings.default_language, settings.default_currency
        return Preferences(language=language, currency=currency, theme=self.theme_store.theme)

    def update(self, user_id: int, language: Optional[str] = None,
               currency: Optional[str] = None) -> Preferences:
        current = self.get(user_id)
        language = _value(language) or current.language
        currency = _value(currency) or current.currency
        try:
            Language(language)
            Currency(currency)
        except ValueError as e:
            raise ValidationError(str(e))

        with self.db.transaction() as conn:
            exists = conn.execute(
                "SELECT 1 FROM preferences WHERE user_id = ?", [user_id]).fetchone()
            if exists:
                conn.execute(
                    "UPDATE preferences SET language = ?, currency = ? WHERE user_id = ?",
                    [language, currency, user_id]
                )
            else:
                conn.execute(
                    "INSERT INTO preferences(user_id, language, currency) VALUES (?,?,?)",
                    [user_id, language, currency]
                )
        return self.get(user_id)

    def toggle_theme(self) -> str:
        return self.theme_store.toggle()


def _value(v):
    return getattr(v, "value", v)


# 全局主题存储
theme_store_default = ThemeStore()
