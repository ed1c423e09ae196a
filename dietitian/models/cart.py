"""
购物车相关数据模型
"""

from pydantic import BaseModel, Field
from typing import List
from enum import Enum
from .meal import AddOn, Meal


class Portion(str, Enum):
    """份量"""
    STANDARD = "Standard"
    LARGE = "Large"


class Frequency(str, Enum):
    """配送频率，非一次性订购享受折扣"""
    ONE_TIME = "One-time"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"


class MealCustomization(BaseModel):
    """
    餐品定制

    omitted_ingredients 仅作记录，不参与计价
    """
    portion: Portion = Portion.STANDARD
    omitted_ingredients: List[str] = Field(default_factory=list)
    notes: str = ""
    frequency: Frequency = Frequency.ONE_TIME
    selected_add_ons: List[AddOn] = Field(default_factory=list)

    model_config = {"use_enum_values": True}


class CartItem(BaseModel):
    """购物车条目：加入时的餐品快照 + 定制 + 固化的单价"""
    cart_id: str = Field(..., description="条目标识（餐品ID + 定制序列化）")
    meal: Meal
    customization: MealCustomization
    quantity: int = Field(..., ge=1)
    final_price: float = Field(..., description="加入时计算的单价（USD）")

    @property
    def line_total(self) -> float:
        return self.final_price * self.quantity


class Cart(BaseModel):
    """购物车视图"""
    items: List[CartItem] = Field(default_factory=list)

    @property
    def total(self) -> float:
        return sum(item.line_total for item in self.items)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def is_subscription(self) -> bool:
        return any(item.customization.frequency != Frequency.ONE_TIME.value for item in self.items)
