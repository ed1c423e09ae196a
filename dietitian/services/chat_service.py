"""
客服聊天服务
把用户消息和之前的对话转发给 LLM（Gemini 的 OpenAI 兼容接口），返回回复文本
不重试、不流式；失败记录日志后以统一的友好提示返回给前端
"""

import logging
from typing import Any, Dict, List, Optional

from openai import OpenAI, OpenAIError

from ..config.settings import settings
from ..core.exceptions import ChatServiceError

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Sorry, I'm having trouble connecting right now. Please try again."

# 对话中的角色映射：前端使用 user/model
ROLE_MAP = {"user": "user", "model": "assistant"}


class ChatService:
    """客服聊天服务"""

    def __init__(self, client: Optional[OpenAI] = None, model: Optional[str] = None):
        self._client = client
        self.model = model or settings.llm_model

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            if not settings.gemini_api_key:
                logger.error("GEMINI_API_KEY is not configured; chat is unavailable")
                raise ChatServiceError(FALLBACK_MESSAGE, details={"reason": "not_configured"})
            self._client = OpenAI(api_key=settings.gemini_api_key, base_url=settings.llm_base_url)
        return self._client

    def build_messages(self, message: str, history: List[Dict[str, Any]]) -> List[Dict[str, str]]:
        """把前端对话记录转换为提供方的消息格式，最后附上新消息"""
        messages = []
        for turn in history:
            role = ROLE_MAP.get(turn.get("role"))
            if role is None:
                continue
            messages.append({"role": role, "content": turn.get("text", "")})
        messages.append({"role": "user", "content": message})
        return messages

    def send_message(self, message: str, history: List[Dict[str, Any]]) -> str:
        """
        发送消息并返回回复文本

        Raises:
            ChatServiceError: 未配置或调用失败
        """
        client = self.client
        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(message, history),
            )
        except OpenAIError as e:
            logger.warning("Chat request failed: %s", e)
            raise ChatServiceError(FALLBACK_MESSAGE, details={"reason": type(e).__name__})

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


# 全局服务实例
chat_service = ChatService()
