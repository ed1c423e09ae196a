"""
咨询预约相关数据模型
"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Set
from enum import Enum
from .base import ActionTrail, BaseEntity


class AppointmentStatus(str, Enum):
    """预约状态枚举"""
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


# 合法的状态流转；已完成、已取消为终态
APPOINTMENT_TRANSITIONS: Dict[AppointmentStatus, Set[AppointmentStatus]] = {
    AppointmentStatus.PENDING: {AppointmentStatus.CONFIRMED, AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED},
    AppointmentStatus.CONFIRMED: {AppointmentStatus.PENDING, AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED},
    AppointmentStatus.COMPLETED: set(),
    AppointmentStatus.CANCELLED: set(),
}


class BookingService(BaseModel):
    """可预约的咨询服务"""
    id: str
    name: str
    duration_min: int
    price: float = Field(..., description="价格（USD）")
    description: str


class Appointment(BaseEntity):
    """预约完整模型"""
    id: int = Field(..., description="预约ID")
    user_id: Optional[int] = None
    user_name: str
    service_name: str
    date: str = Field(..., description="日期 YYYY-MM-DD")
    time: str = Field(..., description="时间 HH:MM")
    status: AppointmentStatus
    notes: Optional[str] = None
    history: List[ActionTrail] = Field(default_factory=list)
