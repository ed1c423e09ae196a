"""
路由共用依赖
"""

from fastapi import Depends

from ..core.security import Session, get_current_session
from ..models.user import User
from ..services.preference_service import PreferenceService
from ..services.user_service import UserService


def get_current_user(session: Session = Depends(get_current_session)) -> User:
    """当前登录用户（令牌有效但用户已不存在时返回404）"""
    return UserService().get_user(session.user_id)


def currency_for(user_id: int) -> str:
    """用户当前的显示货币"""
    return PreferenceService().get(user_id).currency
