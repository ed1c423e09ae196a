"""
订单路由模块
结账（模拟支付）、我的订单；订单列表与状态流转仅限管理员
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from ...core.error_handler import create_success_response
from ...core.security import Session, require_admin
from ...models.user import User
from ...schemas.order import CheckoutRequest, OrderStatusUpdateRequest
from ...services.order_service import OrderService, describe_payment
from ..deps import currency_for, get_current_user

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/checkout")
async def checkout(request: CheckoutRequest, user: User = Depends(get_current_user)):
    """
    结账

    先校验支付信息，再模拟支付耗时，最后把购物车转为订单
    """
    payment = request.payment
    payment_method = describe_payment(
        payment.method,
        momo_network=payment.momo_network,
        momo_number=payment.momo_number,
        card_number=payment.card_number,
    )
    currency = await run_in_threadpool(currency_for, user.id)
    order = await OrderService().checkout(
        user,
        shipping_address=request.shipping_address,
        payment_method=payment_method,
        currency=currency,
    )
    return create_success_response(order, "Payment successful")


@router.get("/mine")
def my_orders(user: User = Depends(get_current_user)):
    return create_success_response(OrderService().list_orders(user.id))


@router.get("")
def list_orders(admin: Session = Depends(require_admin)):
    """全部订单（管理员），最新在前"""
    return create_success_response(OrderService().list_orders())


@router.patch("/{order_id}/status")
def update_order_status(order_id: int, request: OrderStatusUpdateRequest,
                        admin: Session = Depends(require_admin)):
    order = OrderService().update_status(order_id, request.status.value, request.note)
    logger.info("Admin %s moved order %s to %s", admin.user_id, order_id, order.status)
    return create_success_response(order, "Order status updated")
