"""
购物车服务
每个登录用户一辆购物车；条目按 餐品ID + 定制 合并

业务规则：
- 相同餐品、相同定制再次加入时数量 +1，不新增条目
- 单价在加入时计算并固化，之后目录调价不影响购物车
- 数量调整到 0 时删除该条目
"""

import logging
from typing import List, Optional

from ..core.database import DatabaseManager, db_manager
from ..core.exceptions import CartItemNotFoundError, MealOutOfStockError
from ..models.cart import Cart, CartItem, MealCustomization
from ..models.meal import Meal
from .pricing import cart_line_id, price_for, resolve_add_ons

logger = logging.getLogger(__name__)


class CartService:
    """购物车服务"""

    def __init__(self, db: Optional[DatabaseManager] = None):
        self.db = db or db_manager

    def get_cart(self, user_id: int) -> Cart:
        rows = self.db.execute_query(
            """
            SELECT cart_id, meal_json, customization_json, quantity, final_price
            FROM cart_items WHERE user_id = ? ORDER BY position
            """,
            [user_id]
        )
        items = [
            CartItem(
                cart_id=row[0],
                meal=Meal.model_validate_json(row[1]),
                customization=MealCustomization.model_validate_json(row[2]),
                quantity=row[3],
                final_price=row[4],
            )
            for row in rows
        ]
        return Cart(items=items)

    def add_item(self, user_id: int, meal: Meal, portion: str, frequency: str,
                 add_on_names: List[str], notes: str = "",
                 omitted_ingredients: Optional[List[str]] = None) -> Cart:
        """
        加入购物车

        Raises:
            MealOutOfStockError: 餐品缺货
            ValidationError: 加料不在该餐品的可选列表中
        """
        if not meal.in_stock:
            raise MealOutOfStockError(f"{meal.name} is out of stock", details={"meal_id": meal.id})

        customization = MealCustomization(
            portion=portion,
            frequency=frequency,
            notes=notes,
            omitted_ingredients=omitted_ingredients or [],
            selected_add_ons=resolve_add_ons(meal, add_on_names),
        )
        return self.add_customized(user_id, meal, customization)

    def add_customized(self, user_id: int, meal: Meal, customization: MealCustomization) -> Cart:
        """按已解析的定制加入购物车"""
        cart_id = cart_line_id(meal.id, customization)

        with self.db.transaction() as conn:
            existing = conn.execute(
                "SELECT quantity FROM cart_items WHERE user_id = ? AND cart_id = ?",
                [user_id, cart_id]
            ).fetchone()

            if existing:
                conn.execute(
                    "UPDATE cart_items SET quantity = quantity + 1 WHERE user_id = ? AND cart_id = ?",
                    [user_id, cart_id]
                )
            else:
                position = conn.execute(
                    "SELECT COALESCE(MAX(position), 0) + 1 FROM cart_items WHERE user_id = ?",
                    [user_id]
                ).fetchone()[0]
                conn.execute(
                    """
                    INSERT INTO cart_items(user_id, cart_id, meal_json, customization_json,
                                           quantity, final_price, position)
                    VALUES (?,?,?,?,1,?,?)
                    """,
                    [user_id, cart_id, meal.model_dump_json(), customization.model_dump_json(),
                     price_for(meal, customization), position]
                )

        logger.debug("User %s added meal %s to cart", user_id, meal.id)
        return self.get_cart(user_id)

    def remove_item(self, user_id: int, cart_id: str) -> Cart:
        self._require_item(user_id, cart_id)
        self.db.execute_query(
            "DELETE FROM cart_items WHERE user_id = ? AND cart_id = ?", [user_id, cart_id])
        return self.get_cart(user_id)

    def update_quantity(self, user_id: int, cart_id: str, delta: int) -> Cart:
        """按增量调整数量，结果不低于 0，为 0 时移除条目"""
        quantity = self._require_item(user_id, cart_id)
        new_quantity = max(0, quantity + delta)

        if new_quantity == 0:
            self.db.execute_query(
                "DELETE FROM cart_items WHERE user_id = ? AND cart_id = ?", [user_id, cart_id])
        else:
            self.db.execute_query(
                "UPDATE cart_items SET quantity = ? WHERE user_id = ? AND cart_id = ?",
                [new_quantity, user_id, cart_id]
            )
        return self.get_cart(user_id)

    def clear(self, user_id: int) -> Cart:
        self.db.execute_query("DELETE FROM cart_items WHERE user_id = ?", [user_id])
        return Cart()

    def _require_item(self, user_id: int, cart_id: str) -> int:
        row = self.db.execute_one(
            "SELECT quantity FROM cart_items WHERE user_id = ? AND cart_id = ?", [user_id, cart_id])
        if not row:
            raise CartItemNotFoundError("Cart item not found", details={"cart_id": cart_id})
        return row[0]
