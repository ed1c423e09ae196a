"""
用户相关数据模型
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from enum import Enum
from .base import BaseEntity, TimestampMixin


class UserRole(str, Enum):
    """用户角色"""
    USER = "user"
    ADMIN = "admin"


class UserBase(BaseModel):
    """用户基础字段"""
    name: str = Field(..., min_length=1, max_length=100, description="姓名")
    email: str = Field(..., min_length=3, max_length=200, description="邮箱")
    phone: Optional[str] = Field(None, max_length=30, description="电话")
    dietary_preferences: List[str] = Field(default_factory=list, description="饮食偏好")
    allergies: List[str] = Field(default_factory=list, description="过敏原")


class User(UserBase, BaseEntity, TimestampMixin):
    """用户完整模型（不含密码）"""
    id: int = Field(..., description="用户ID")
    role: UserRole = Field(UserRole.USER, description="角色")

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value


class UserUpdate(BaseModel):
    """用户信息更新"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    dietary_preferences: Optional[List[str]] = None
    allergies: Optional[List[str]] = None
