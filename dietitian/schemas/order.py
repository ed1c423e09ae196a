"""
订单与预约相关的请求/响应模式
"""

from pydantic import BaseModel, Field
from typing import Literal, Optional
from ..models.appointment import AppointmentStatus
from ..models.order import OrderStatus


class PaymentDetails(BaseModel):
    """支付信息（仅用于生成支付描述，不做真实扣款）"""
    method: Literal["momo", "card"] = Field("momo", description="支付方式")
    momo_network: Optional[Literal["MTN", "Telecel", "AT"]] = Field("MTN", description="移动钱包网络")
    momo_number: Optional[str] = Field(None, description="移动钱包号码")
    card_name: Optional[str] = None
    card_number: Optional[str] = None
    expiry: Optional[str] = None
    cvc: Optional[str] = None


class CheckoutRequest(BaseModel):
    """结账请求"""
    shipping_address: str = Field(..., min_length=1, max_length=500, description="配送地址")
    payment: PaymentDetails


class OrderStatusUpdateRequest(BaseModel):
    """订单状态更新"""
    status: OrderStatus
    note: Optional[str] = Field(None, max_length=500)


class BookingRequest(BaseModel):
    """预约请求"""
    service_id: str = Field(..., description="咨询服务ID")
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="日期 YYYY-MM-DD")
    time: str = Field(..., pattern=r"^\d{2}:\d{2}$", description="时间 HH:MM")
    notes: Optional[str] = Field(None, max_length=500)


class AppointmentStatusUpdateRequest(BaseModel):
    """预约状态更新"""
    status: AppointmentStatus
    note: Optional[str] = Field(None, max_length=500)


class StoryCreateRequest(BaseModel):
    """评价提交"""
    content: str = Field(..., min_length=1, max_length=2000)
    rating: int = Field(5, ge=1, le=5)
