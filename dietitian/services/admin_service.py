"""
后台概览统计
"""

from typing import Any, Dict, Optional

from ..core.database import DatabaseManager, db_manager
from ..models.appointment import AppointmentStatus
from ..models.order import OrderStatus
from .appointment_service import AppointmentService
from .meal_service import MealService
from .order_service import OrderService
from .story_service import StoryService


class AdminService:
    """后台概览"""

    def __init__(self, db: Optional[DatabaseManager] = None):
        self.db = db or db_manager
        self.orders = OrderService(self.db)
        self.appointments = AppointmentService(self.db)
        self.meals = MealService(self.db)
        self.stories = StoryService(self.db)

    def overview(self) -> Dict[str, Any]:
        return {
            "total_revenue": self.orders.total_revenue(),
            "pending_orders": self.orders.count_by_status(OrderStatus.PROCESSING.value),
            "pending_appointments": self.appointments.count_by_status(AppointmentStatus.PENDING.value),
            "meal_count": self.meals.count(),
            "stories_awaiting_approval": self.stories.count_pending(),
            "recent_orders": self.orders.list_orders()[:3],
            "recent_appointments": self.appointments.list_appointments()[:2],
        }
