"""
餐品相关数据模型
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Union
from enum import Enum
from .base import BaseEntity, TimestampMixin


class DietaryType(str, Enum):
    """饮食标签"""
    VEGAN = "Vegan"
    KETO = "Keto"
    PALEO = "Paleo"
    GLUTEN_FREE = "Gluten Free"
    BALANCED = "Balanced"
    PESCATARIAN = "Pescatarian"


class MealCategory(str, Enum):
    """餐品档次"""
    REGULAR = "Regular"
    BRONZE = "Bronze"
    PREMIUM = "Premium"


class AddOn(BaseModel):
    """可选加料，价格以美元计"""
    name: str = Field(..., min_length=1, max_length=100, description="加料名称")
    price: float = Field(..., ge=0, description="加价（USD）")


def _split_ingredients(v):
    if isinstance(v, str):
        return [part.strip() for part in v.split(",") if part.strip()]
    return v


def _unique_add_on_names(v):
    if not v:
        return v
    names = [a.name for a in v]
    if len(names) != len(set(names)):
        raise ValueError("add-on names must be unique")
    return v


class MealBase(BaseModel):
    """餐品基础字段"""
    name: str = Field(..., min_length=1, max_length=200, description="名称")
    description: str = Field("", max_length=2000, description="描述")
    price: float = Field(..., gt=0, description="基础价格（USD）")
    calories: int = Field(0, ge=0)
    protein: int = Field(0, ge=0)
    carbs: int = Field(0, ge=0)
    fats: int = Field(0, ge=0)
    image: str = Field("", description="图片地址")
    tags: List[DietaryType] = Field(default_factory=list, description="饮食标签")
    ingredients: List[str] = Field(default_factory=list, description="配料")
    category: MealCategory = Field(MealCategory.REGULAR, description="档次")
    available_add_ons: List[AddOn] = Field(default_factory=list, description="可选加料")


class MealCreate(MealBase):
    """餐品创建模型，配料可用逗号分隔的字符串提交"""
    ingredients: Union[List[str], str] = Field(default_factory=list)

    @field_validator("ingredients", mode="before")
    @classmethod
    def split_ingredients(cls, v):
        return _split_ingredients(v)

    @field_validator("available_add_ons")
    @classmethod
    def validate_add_ons(cls, v):
        return _unique_add_on_names(v)


class MealUpdate(BaseModel):
    """餐品更新模型（部分字段）"""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    price: Optional[float] = Field(None, gt=0)
    calories: Optional[int] = Field(None, ge=0)
    protein: Optional[int] = Field(None, ge=0)
    carbs: Optional[int] = Field(None, ge=0)
    fats: Optional[int] = Field(None, ge=0)
    image: Optional[str] = None
    tags: Optional[List[DietaryType]] = None
    ingredients: Optional[Union[List[str], str]] = None
    category: Optional[MealCategory] = None
    available_add_ons: Optional[List[AddOn]] = None

    @field_validator("ingredients", mode="before")
    @classmethod
    def split_ingredients(cls, v):
        return _split_ingredients(v)

    @field_validator("available_add_ons")
    @classmethod
    def validate_add_ons(cls, v):
        return _unique_add_on_names(v)


class Meal(MealBase, BaseEntity, TimestampMixin):
    """餐品完整模型"""
    id: int = Field(..., description="餐品ID")
    in_stock: bool = Field(True, description="是否有货")

    def find_add_on(self, name: str) -> Optional[AddOn]:
        for add_on in self.available_add_ons:
            if add_on.name == name:
                return add_on
        return None
