"""
餐品与购物车相关的请求/响应模式
"""

from pydantic import BaseModel, Field
from typing import List
from ..models.cart import CartItem, Frequency, MealCustomization, Portion


class MealQuoteRequest(BaseModel):
    """定制报价请求"""
    portion: Portion = Field(Portion.STANDARD, description="份量")
    frequency: Frequency = Field(Frequency.ONE_TIME, description="配送频率")
    add_ons: List[str] = Field(default_factory=list, description="所选加料名称")


class MealQuoteResponse(BaseModel):
    """定制报价响应"""
    meal_id: int
    customization: MealCustomization
    unit_price: float = Field(..., description="单价（USD）")
    formatted_price: str = Field(..., description="按当前货币格式化的单价")


class CartAddRequest(MealQuoteRequest):
    """加入购物车请求"""
    meal_id: int = Field(..., description="餐品ID")
    notes: str = Field("", max_length=500, description="备注")
    omitted_ingredients: List[str] = Field(default_factory=list, description="去掉的配料")


class CartQuantityRequest(BaseModel):
    """数量增量，可为负"""
    delta: int = Field(..., description="数量增量")


class CartResponse(BaseModel):
    """购物车响应"""
    items: List[CartItem]
    total: float = Field(..., description="合计（USD）")
    formatted_total: str
    item_count: int
