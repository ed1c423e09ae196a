"""
用户服务
用户资料的读写；资料中的订单和预约每次按需重新汇总
"""

import json
import logging
from typing import Any, Dict, Optional

from ..core.database import DatabaseManager, db_manager
from ..core.exceptions import UserNotFoundError
from ..models.user import User, UserUpdate
from .appointment_service import AppointmentService
from .order_service import OrderService

logger = logging.getLogger(__name__)

USER_COLUMNS = "id, role, name, email, phone, dietary_preferences, allergies, created_at"


class UserService:
    """用户服务"""

    def __init__(self, db: Optional[DatabaseManager] = None):
        self.db = db or db_manager

    def create_user(self, name: str, email: str, password: str, role: str = "user") -> User:
        user_id = self.db.execute_one(
            "INSERT INTO users(role, name, email, password) VALUES (?,?,?,?) RETURNING id",
            [role, name, email, password]
        )[0]
        return self.get_user(user_id)

    def get_user(self, user_id: int) -> User:
        rows = self.db.fetch_dicts(f"SELECT {USER_COLUMNS} FROM users WHERE id = ?", [user_id])
        if not rows:
            raise UserNotFoundError(f"User {user_id} not found", details={"user_id": user_id})
        return self._row_to_user(rows[0])

    def update_profile(self, user_id: int, update: UserUpdate) -> User:
        """更新姓名、电话、饮食偏好、过敏原"""
        self.get_user(user_id)

        changes: Dict[str, Any] = {}
        for field, value in update.model_dump(exclude_unset=True).items():
            if value is None:
                continue
            if field in ("dietary_preferences", "allergies"):
                changes[field] = json.dumps(value)
            else:
                changes[field] = value

        if changes:
            assignments = ", ".join(f"{column} = ?" for column in changes)
            self.db.execute_query(
                f"UPDATE users SET {assignments} WHERE id = ?", list(changes.values()) + [user_id])
            logger.info("User %s updated profile fields %s", user_id, sorted(changes))
        return self.get_user(user_id)

    def get_profile(self, user_id: int) -> Dict[str, Any]:
        """用户资料 + 本人的订单和预约"""
        user = self.get_user(user_id)
        return {
            "user": user,
            "orders": OrderService(self.db).list_orders(user_id=user_id),
            "appointments": AppointmentService(self.db).list_appointments(user_id=user_id),
        }

    def _row_to_user(self, row: Dict[str, Any]) -> User:
        return User(
            id=row["id"],
            role=row["role"],
            name=row["name"],
            email=row["email"],
            phone=row["phone"],
            dietary_preferences=json.loads(row["dietary_preferences"] or "[]"),
            allergies=json.loads(row["allergies"] or "[]"),
            created_at=row["created_at"],
        )
