"""
客服聊天路由模块
"""

from fastapi import APIRouter

from ...core.error_handler import create_success_response
from ...schemas.user import ChatReply, ChatRequest
from ...services.chat_service import chat_service

router = APIRouter()


@router.post("")
def send_message(request: ChatRequest):
    """转发给聊天服务；失败时返回 CHAT_UNAVAILABLE 及友好提示"""
    history = [turn.model_dump() for turn in request.history]
    text = chat_service.send_message(request.message, history)
    return create_success_response(ChatReply(text=text))
