"""
订单服务模块
提供结账下单、订单查询和管理员状态流转

主要功能：
- 模拟支付后将购物车快照转为订单，并清空购物车
- 订单状态流转，每次流转追加一条历史记录

业务规则：
- 新订单状态为 Processing，历史记录仅一条
- 订单金额即购物车在结账时的合计（单价已在加入购物车时固化）
- 含任意周期订购条目的订单标记为订阅
"""

import asyncio
import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi.concurrency import run_in_threadpool

from ..config.settings import settings
from ..core.database import DatabaseManager, db_manager
from ..core.exceptions import EmptyCartError, OrderNotFoundError, ValidationError
from ..models.cart import CartItem
from ..models.order import ORDER_TRANSITIONS, Currency, Order, OrderStatus
from ..models.user import User
from .cart_service import CartService
from .history_service import append_entry, check_transition, load_histories

logger = logging.getLogger(__name__)

ORDER_COLUMNS = """order_id, user_id, customer_name, items_json, total, status, payment_method,
                   shipping_address, currency, is_subscription, created_at"""


def describe_payment(method: str, momo_network: Optional[str] = None, momo_number: Optional[str] = None,
                     card_number: Optional[str] = None) -> str:
    """
    生成支付方式描述（不涉及真实支付）

    Raises:
        ValidationError: 缺少对应支付方式的必填信息
    """
    if method == "momo":
        if not momo_network or not momo_number:
            raise ValidationError("Mobile money network and number are required")
        digits = "".join(ch for ch in momo_number if ch.isdigit())[:10]
        return f"{momo_network} MoMo ({digits})"
    if method == "card":
        if not card_number:
            raise ValidationError("Card number is required")
        return f"Card ending {card_number.replace(' ', '')[-4:]}"
    raise ValidationError(f"Unsupported payment method '{method}'")


class OrderService:
    """订单服务类"""

    def __init__(self, db: Optional[DatabaseManager] = None, cart_service: Optional[CartService] = None):
        self.db = db or db_manager
        self.carts = cart_service or CartService(self.db)

    async def checkout(self, user: User, shipping_address: str, payment_method: str,
                       currency: str = Currency.GHS.value,
                       payment_delay: Optional[float] = None) -> Order:
        """
        结账

        Args:
            user: 下单用户
            shipping_address: 配送地址
            payment_method: 支付方式描述（见 describe_payment）
            currency: 结算货币
            payment_delay: 模拟支付耗时，默认取配置

        Raises:
            EmptyCartError: 购物车为空
        """
        cart = await run_in_threadpool(self.carts.get_cart, user.id)
        if not cart.items:
            raise EmptyCartError("Your cart is empty")

        delay = settings.payment_delay_seconds if payment_delay is None else payment_delay
        if delay > 0:
            await asyncio.sleep(delay)

        # DuckDB 调用是阻塞的，放到线程池执行
        return await run_in_threadpool(self.place_order, user, shipping_address, payment_method, currency)

    def place_order(self, user: User, shipping_address: str, payment_method: str,
                    currency: str = Currency.GHS.value) -> Order:
        """将购物车转为订单并清空购物车（同一事务）"""
        cart = self.carts.get_cart(user.id)
        if not cart.items:
            raise EmptyCartError("Your cart is empty")

        now = datetime.now()
        items_json = json.dumps([item.model_dump(mode="json") for item in cart.items])

        with self.db.transaction() as conn:
            order_id = conn.execute(
                """
                INSERT INTO orders(user_id, customer_name, items_json, total, status, payment_method,
                                   shipping_address, currency, is_subscription, created_at)
                VALUES (?,?,?,?,?,?,?,?,?,?) RETURNING order_id
                """,
                [user.id, user.name, items_json, cart.total, OrderStatus.PROCESSING.value,
                 payment_method, shipping_address, currency, cart.is_subscription, now]
            ).fetchone()[0]
            append_entry(conn, "order", order_id, OrderStatus.PROCESSING.value, "Order placed", at=now)
            conn.execute("DELETE FROM cart_items WHERE user_id = ?", [user.id])

        logger.info("Order %s placed by user %s, total %.2f USD", order_id, user.id, cart.total)
        return self.get_order(order_id)

    def get_order(self, order_id: int) -> Order:
        rows = self.db.fetch_dicts(f"SELECT {ORDER_COLUMNS} FROM orders WHERE order_id = ?", [order_id])
        if not rows:
            raise OrderNotFoundError(f"Order {order_id} not found", details={"order_id": order_id})
        return self._build_orders(rows)[0]

    def list_orders(self, user_id: Optional[int] = None) -> List[Order]:
        """订单列表，最新在前；指定 user_id 时只返回该用户的订单"""
        if user_id is None:
            rows = self.db.fetch_dicts(
                f"SELECT {ORDER_COLUMNS} FROM orders ORDER BY created_at DESC, order_id DESC")
        else:
            rows = self.db.fetch_dicts(
                f"SELECT {ORDER_COLUMNS} FROM orders WHERE user_id = ? ORDER BY created_at DESC, order_id DESC",
                [user_id]
            )
        return self._build_orders(rows)

    def update_status(self, order_id: int, status: str, note: Optional[str] = None) -> Order:
        """
        管理员更新订单状态，追加一条历史记录

        Raises:
            OrderNotFoundError: 订单不存在
            InvalidStatusTransitionError: 非法流转
        """
        order = self.get_order(order_id)
        status = getattr(status, "value", status)
        check_transition(ORDER_TRANSITIONS, order.status, status, "order")

        with self.db.transaction() as conn:
            conn.execute("UPDATE orders SET status = ? WHERE order_id = ?", [status, order_id])
            append_entry(conn, "order", order_id, status, note)

        logger.info("Order %s: %s -> %s", order_id, order.status, status)
        return self.get_order(order_id)

    def total_revenue(self) -> float:
        return self.db.execute_one("SELECT COALESCE(SUM(total), 0) FROM orders")[0]

    def count_by_status(self, status: str) -> int:
        return self.db.execute_one("SELECT COUNT(*) FROM orders WHERE status = ?", [status])[0]

    def _build_orders(self, rows: List[Dict[str, Any]]) -> List[Order]:
        histories = load_histories(self.db, "order", [row["order_id"] for row in rows])
        return [
            Order(
                id=row["order_id"],
                user_id=row["user_id"],
                customer_name=row["customer_name"],
                date=row["created_at"],
                items=[CartItem.model_validate(item) for item in json.loads(row["items_json"])],
                total=row["total"],
                status=row["status"],
                payment_method=row["payment_method"],
                shipping_address=row["shipping_address"],
                currency=row["currency"],
                is_subscription=bool(row["is_subscription"]),
                history=histories.get(row["order_id"], []),
            )
            for row in rows
        ]
