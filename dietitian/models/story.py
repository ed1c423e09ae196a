"""
用户评价（Story）数据模型
"""

from pydantic import Field
from typing import Optional
from .base import BaseEntity
from .user import UserRole


class Story(BaseEntity):
    """评价；管理员发布的评价自动通过审核"""
    id: int
    user_id: Optional[int] = None
    author_name: str
    content: str
    rating: int = Field(..., ge=1, le=5)
    approved: bool = False
    date: str = Field(..., description="发布日期 YYYY-MM-DD")
    image: Optional[str] = None
    role: UserRole
