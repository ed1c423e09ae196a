"""
用户、偏好与聊天相关的请求/响应模式
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional
from ..models.appointment import Appointment
from ..models.order import Currency, Order
from ..models.preference import Language
from ..models.user import User


class UserProfileResponse(BaseModel):
    """用户档案（订单与预约按需汇总）"""
    user: User
    orders: List[Order]
    appointments: List[Appointment]


class PreferenceUpdateRequest(BaseModel):
    language: Optional[Language] = None
    currency: Optional[Currency] = None


class ChatTurn(BaseModel):
    """一轮对话"""
    role: Literal["user", "model"]
    text: str


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=4000)
    history: List[ChatTurn] = Field(default_factory=list)

    @field_validator("message")
    @classmethod
    def not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("message must not be blank")
        return v


class ChatReply(BaseModel):
    role: Literal["model"] = "model"
    text: str
