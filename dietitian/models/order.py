"""
订单相关数据模型
"""

from pydantic import Field
from datetime import datetime
from typing import Dict, List, Optional, Set
from enum import Enum
from .base import ActionTrail, BaseEntity
from .cart import CartItem


class OrderStatus(str, Enum):
    """订单状态枚举"""
    PROCESSING = "Processing"
    PREPARING = "Preparing"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class Currency(str, Enum):
    """结算货币"""
    GHS = "GHS"
    USD = "USD"


# 合法的状态流转；已送达、已取消为终态
ORDER_TRANSITIONS: Dict[OrderStatus, Set[OrderStatus]] = {
    OrderStatus.PROCESSING: {OrderStatus.PREPARING, OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.PREPARING: {OrderStatus.PROCESSING, OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
}


class Order(BaseEntity):
    """订单完整模型"""
    id: int = Field(..., description="订单ID")
    user_id: Optional[int] = Field(None, description="下单用户ID")
    customer_name: str = Field(..., description="下单人姓名")
    date: datetime = Field(..., description="下单时间")
    items: List[CartItem] = Field(..., description="下单时的购物车快照")
    total: float = Field(..., description="订单总额（USD）")
    status: OrderStatus = Field(..., description="订单状态")
    payment_method: str = Field(..., description="支付方式描述")
    shipping_address: str = Field(..., description="配送地址")
    currency: Currency = Field(..., description="结算货币")
    is_subscription: bool = Field(False, description="是否包含周期订购")
    history: List[ActionTrail] = Field(default_factory=list, description="状态流转记录")
