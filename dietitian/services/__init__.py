"""
Business logic services.
Contains service layer implementations for catalog, cart, orders and back-office operations.
"""

from .admin_service import AdminService
from .appointment_service import AppointmentService
from .auth_service import AuthService
from .cart_service import CartService
from .chat_service import ChatService
from .meal_service import MealService
from .order_service import OrderService
from .preference_service import PreferenceService
from .story_service import StoryService
from .user_service import UserService

__all__ = [
    "AdminService",
    "AppointmentService",
    "AuthService",
    "CartService",
    "ChatService",
    "MealService",
    "OrderService",
    "PreferenceService",
    "StoryService",
    "UserService",
]
