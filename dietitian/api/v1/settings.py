"""
显示偏好路由模块
语言和货币按用户保存；主题为全局设置，持久化到本地文件
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from ...config.settings import settings
from ...core.error_handler import create_success_response
from ...core.security import Session, get_current_session
from ...models.order import Currency
from ...models.preference import Language
from ...schemas.user import PreferenceUpdateRequest
from ...services.preference_service import PreferenceService, format_price, translate

router = APIRouter()


@router.get("")
def get_preferences(session: Session = Depends(get_current_session)):
    return create_success_response(PreferenceService().get(session.user_id))


@router.patch("")
def update_preferences(request: PreferenceUpdateRequest,
                       session: Session = Depends(get_current_session)):
    prefs = PreferenceService().update(session.user_id, request.language, request.currency)
    return create_success_response(prefs, "Preferences saved")


@router.post("/theme/toggle")
def toggle_theme():
    """切换明暗主题"""
    theme = PreferenceService().toggle_theme()
    return create_success_response({"theme": theme})


@router.get("/translate")
def translate_key(key: str = Query(..., min_length=1),
                  language: Optional[Language] = Query(None)):
    """界面文案翻译；缺失时返回键本身"""
    lang = language.value if language else settings.default_language
    return create_success_response({"key": key, "language": lang, "text": translate(key, lang)})


@router.get("/format-price")
def format_price_endpoint(amount: float = Query(..., ge=0),
                          currency: Optional[Currency] = Query(None)):
    """把USD金额按货币格式化"""
    code = currency.value if currency else settings.default_currency
    return create_success_response({
        "amount": amount,
        "currency": code,
        "formatted": format_price(amount, code),
    })
