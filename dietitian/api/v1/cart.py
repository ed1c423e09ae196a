"""
购物车路由模块
购物车行由 cart_id（餐品ID + 定制内容）标识，通过查询参数传递
"""

from fastapi import APIRouter, Depends, Query

from ...core.error_handler import create_success_response
from ...core.security import Session, get_current_session
from ...models.cart import Cart
from ...schemas.meal import CartAddRequest, CartQuantityRequest, CartResponse
from ...services.cart_service import CartService
from ...services.meal_service import MealService
from ...services.preference_service import format_price
from ..deps import currency_for

router = APIRouter()


def _cart_response(user_id: int, cart: Cart) -> dict:
    return CartResponse(
        items=cart.items,
        total=cart.total,
        formatted_total=format_price(cart.total, currency_for(user_id)),
        item_count=cart.item_count,
    ).model_dump(mode="json")


@router.get("")
def get_cart(session: Session = Depends(get_current_session)):
    cart = CartService().get_cart(session.user_id)
    return create_success_response(_cart_response(session.user_id, cart))


@router.post("/items")
def add_to_cart(request: CartAddRequest, session: Session = Depends(get_current_session)):
    """加入购物车；相同餐品和定制会合并数量"""
    meal = MealService().get_meal(request.meal_id)
    cart = CartService().add_item(
        session.user_id,
        meal,
        portion=request.portion,
        frequency=request.frequency,
        add_on_names=request.add_ons,
        notes=request.notes,
        omitted_ingredients=request.omitted_ingredients,
    )
    return create_success_response(_cart_response(session.user_id, cart), "Added to cart")


@router.patch("/items")
def update_quantity(request: CartQuantityRequest,
                    cart_id: str = Query(..., description="购物车行标识"),
                    session: Session = Depends(get_current_session)):
    """调整数量；减到0即移除该行"""
    cart = CartService().update_quantity(session.user_id, cart_id, request.delta)
    return create_success_response(_cart_response(session.user_id, cart))


@router.delete("/items")
def remove_item(cart_id: str = Query(...), session: Session = Depends(get_current_session)):
    cart = CartService().remove_item(session.user_id, cart_id)
    return create_success_response(_cart_response(session.user_id, cart), "Removed from cart")


@router.delete("")
def clear_cart(session: Session = Depends(get_current_session)):
    cart = CartService().clear(session.user_id)
    return create_success_response(_cart_response(session.user_id, cart), "Cart cleared")
