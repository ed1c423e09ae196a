"""
计价模块
纯函数：根据餐品基础价、份量、加料和配送频率计算单价

计价规则：
- 大份按基础价的 1.5 倍计
- 加上所选加料的价格
- 周期订购（非一次性）整体九折
"""

from typing import Iterable, Tuple, List

from ..core.exceptions import ValidationError
from ..models.cart import Frequency, MealCustomization, Portion
from ..models.meal import AddOn, Meal

LARGE_PORTION_MULTIPLIER = 1.5
SUBSCRIPTION_DISCOUNT = 0.9


def calculate_unit_price(base_price: float, portion: str, add_ons: Iterable[AddOn],
                         frequency: str) -> float:
    """计算单价（USD，未取整）"""
    price = base_price * LARGE_PORTION_MULTIPLIER if portion == Portion.LARGE else base_price
    price += sum(add_on.price for add_on in add_ons)
    if frequency != Frequency.ONE_TIME:
        price *= SUBSCRIPTION_DISCOUNT
    return price


def price_for(meal: Meal, customization: MealCustomization) -> float:
    return calculate_unit_price(
        meal.price, customization.portion, customization.selected_add_ons, customization.frequency)


def cart_line_id(meal_id: int, customization: MealCustomization) -> str:
    """购物车条目标识：相同餐品 + 相同定制 视为同一条目"""
    return f"{meal_id}-{customization.model_dump_json()}"


def resolve_add_ons(meal: Meal, names: List[str]) -> List[AddOn]:
    """
    按名称从餐品的可选加料中取出加料（价格以目录为准）

    Raises:
        ValidationError: 名称不在该餐品的可选加料中
    """
    resolved = []
    for name in names:
        add_on = meal.find_add_on(name)
        if add_on is None:
            raise ValidationError(
                f"Add-on '{name}' is not offered for {meal.name}",
                details={"meal_id": meal.id, "add_on": name})
        resolved.append(add_on)
    return resolved


def quote(meal: Meal, portion: str, add_on_names: List[str],
          frequency: str) -> Tuple[MealCustomization, float]:
    """定制弹窗中的实时报价，不写入购物车"""
    customization = MealCustomization(
        portion=portion,
        frequency=frequency,
        selected_add_ons=resolve_add_ons(meal, add_on_names),
    )
    return customization, price_for(meal, customization)
