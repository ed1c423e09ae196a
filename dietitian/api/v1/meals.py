"""
餐品目录路由模块
公开浏览与报价；增删改和缺货切换仅限管理员
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from ...config.settings import settings
from ...core.error_handler import create_success_response
from ...core.security import Session, require_admin
from ...models.meal import MealCreate, MealUpdate
from ...models.order import Currency
from ...schemas.meal import MealQuoteRequest, MealQuoteResponse
from ...services.meal_service import MealService
from ...services.preference_service import format_price
from ...services.pricing import quote

router = APIRouter()


@router.get("")
def list_meals(category: Optional[str] = Query(None, description="Regular / Bronze / Premium / All")):
    """餐品列表，可按分类筛选"""
    meals = MealService().list_meals(category)
    return create_success_response(meals)


@router.get("/{meal_id}")
def get_meal(meal_id: int):
    return create_success_response(MealService().get_meal(meal_id))


@router.post("/{meal_id}/quote")
def quote_meal(meal_id: int, request: MealQuoteRequest,
               currency: Optional[Currency] = Query(None)):
    """定制报价：份量、加料、频率实时计算单价"""
    meal = MealService().get_meal(meal_id)
    customization, price = quote(meal, request.portion, request.add_ons, request.frequency)
    currency_code = currency.value if currency else settings.default_currency
    return create_success_response(MealQuoteResponse(
        meal_id=meal.id,
        customization=customization,
        unit_price=price,
        formatted_price=format_price(price, currency_code),
    ))


@router.post("")
def create_meal(meal_data: MealCreate, admin: Session = Depends(require_admin)):
    """新增餐品（管理员）"""
    meal = MealService().create_meal(meal_data)
    return create_success_response(meal, "Meal created")


@router.patch("/{meal_id}")
def update_meal(meal_id: int, update: MealUpdate, admin: Session = Depends(require_admin)):
    meal = MealService().update_meal(meal_id, update)
    return create_success_response(meal, "Meal updated")


@router.post("/{meal_id}/toggle-stock")
def toggle_stock(meal_id: int, admin: Session = Depends(require_admin)):
    """切换缺货状态（管理员）"""
    meal = MealService().toggle_stock(meal_id)
    return create_success_response(meal, "In stock" if meal.in_stock else "Out of stock")


@router.delete("/{meal_id}")
def delete_meal(meal_id: int, admin: Session = Depends(require_admin)):
    MealService().delete_meal(meal_id)
    return create_success_response({"meal_id": meal_id}, "Meal deleted")
