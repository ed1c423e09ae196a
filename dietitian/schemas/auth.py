"""
认证相关的请求/响应模式
"""

from pydantic import BaseModel, Field
from typing import Optional
from ..models.user import User


class LoginRequest(BaseModel):
    """登录请求；演示账号可不带密码"""
    email: str = Field(..., min_length=3, description="邮箱")
    password: Optional[str] = Field(None, description="密码")

    model_config = {
        "json_schema_extra": {
            "example": {"email": "user@example.com", "password": "user123"}
        }
    }


class RegisterRequest(BaseModel):
    """注册请求"""
    name: str = Field(..., min_length=1, max_length=100, description="姓名")
    email: str = Field(..., min_length=3, max_length=200, description="邮箱")
    password: Optional[str] = Field(None, description="密码，缺省为 123456")


class LoginResponse(BaseModel):
    """登录响应"""
    token: str = Field(description="JWT访问令牌")
    token_type: str = Field(default="Bearer", description="令牌类型")
    user: User = Field(description="当前用户")


class EmailExistsResponse(BaseModel):
    email: str
    exists: bool
