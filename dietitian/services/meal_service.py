"""
餐品服务
处理餐品目录的查询和管理员维护操作
"""

import json
import logging
from typing import Any, Dict, List, Optional

from ..core.database import DatabaseManager, db_manager
from ..core.exceptions import MealNotFoundError, ValidationError
from ..models.meal import Meal, MealCategory, MealCreate, MealUpdate

logger = logging.getLogger(__name__)

MEAL_COLUMNS = """meal_id, name, description, price, calories, protein, carbs, fats,
                  image, tags, ingredients, category, in_stock, add_ons, created_at"""

ALL_CATEGORIES = "All"


class MealService:
    """餐品服务"""

    def __init__(self, db: Optional[DatabaseManager] = None):
        self.db = db or db_manager

    def list_meals(self, category: Optional[str] = None) -> List[Meal]:
        """
        获取餐品列表

        Args:
            category: 档次过滤；为空或 "All" 时返回全部
        """
        if not category or category == ALL_CATEGORIES:
            rows = self.db.fetch_dicts(f"SELECT {MEAL_COLUMNS} FROM meals ORDER BY meal_id")
        else:
            self._validate_category(category)
            rows = self.db.fetch_dicts(
                f"SELECT {MEAL_COLUMNS} FROM meals WHERE category = ? ORDER BY meal_id",
                [category]
            )
        return [self._row_to_meal(row) for row in rows]

    def get_meal(self, meal_id: int) -> Meal:
        """获取单个餐品"""
        rows = self.db.fetch_dicts(f"SELECT {MEAL_COLUMNS} FROM meals WHERE meal_id = ?", [meal_id])
        if not rows:
            raise MealNotFoundError(f"Meal {meal_id} not found", details={"meal_id": meal_id})
        return self._row_to_meal(rows[0])

    def create_meal(self, meal_data: MealCreate) -> Meal:
        """创建餐品，新品默认有货"""
        row = self.db.execute_one(
            """
            INSERT INTO meals(name, description, price, calories, protein, carbs, fats,
                              image, tags, ingredients, category, in_stock, add_ons)
            VALUES (?,?,?,?,?,?,?,?,?,?,?,TRUE,?) RETURNING meal_id
            """,
            [
                meal_data.name, meal_data.description, meal_data.price,
                meal_data.calories, meal_data.protein, meal_data.carbs, meal_data.fats,
                meal_data.image,
                json.dumps([str(_value(t)) for t in meal_data.tags]),
                json.dumps(meal_data.ingredients),
                _value(meal_data.category),
                json.dumps([a.model_dump() for a in meal_data.available_add_ons]),
            ]
        )
        logger.info("Meal %s created: %s", row[0], meal_data.name)
        return self.get_meal(row[0])

    def update_meal(self, meal_id: int, update: MealUpdate) -> Meal:
        """部分更新餐品；已在购物车中的快照不受影响"""
        self.get_meal(meal_id)

        changes: Dict[str, Any] = {}
        for field, value in update.model_dump(exclude_unset=True).items():
            if value is None:
                continue
            if field == "tags":
                changes["tags"] = json.dumps([str(_value(t)) for t in value])
            elif field == "ingredients":
                changes["ingredients"] = json.dumps(value)
            elif field == "available_add_ons":
                changes["add_ons"] = json.dumps(value)
            elif field == "category":
                changes["category"] = _value(value)
            else:
                changes[field] = value

        if changes:
            assignments = ", ".join(f"{column} = ?" for column in changes)
            self.db.execute_query(
                f"UPDATE meals SET {assignments} WHERE meal_id = ?",
                list(changes.values()) + [meal_id]
            )
            logger.info("Meal %s updated: %s", meal_id, sorted(changes))
        return self.get_meal(meal_id)

    def toggle_stock(self, meal_id: int) -> Meal:
        """切换有货/缺货"""
        self.get_meal(meal_id)
        self.db.execute_query("UPDATE meals SET in_stock = NOT in_stock WHERE meal_id = ?", [meal_id])
        meal = self.get_meal(meal_id)
        logger.info("Meal %s stock set to %s", meal_id, meal.in_stock)
        return meal

    def delete_meal(self, meal_id: int) -> None:
        """删除餐品"""
        self.get_meal(meal_id)
        self.db.execute_query("DELETE FROM meals WHERE meal_id = ?", [meal_id])
        logger.info("Meal %s deleted", meal_id)

    def count(self) -> int:
        return self.db.execute_one("SELECT COUNT(*) FROM meals")[0]

    def _validate_category(self, category: str):
        valid = [c.value for c in MealCategory]
        if category not in valid:
            raise ValidationError(
                f"Unknown category '{category}'",
                details={"valid_categories": [ALL_CATEGORIES] + valid})

    def _row_to_meal(self, row: Dict[str, Any]) -> Meal:
        return Meal(
            id=row["meal_id"],
            name=row["name"],
            description=row["description"] or "",
            price=row["price"],
            calories=row["calories"] or 0,
            protein=row["protein"] or 0,
            carbs=row["carbs"] or 0,
            fats=row["fats"] or 0,
            image=row["image"] or "",
            tags=json.loads(row["tags"] or "[]"),
            ingredients=json.loads(row["ingredients"] or "[]"),
            category=row["category"],
            in_stock=bool(row["in_stock"]),
            available_add_ons=json.loads(row["add_ons"] or "[]"),
            created_at=row["created_at"],
        )


def _value(v):
    """枚举取值（模型可能已开启 use_enum_values）"""
    return getattr(v, "value", v)
