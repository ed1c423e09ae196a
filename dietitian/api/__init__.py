"""
API routes and endpoints.
"""

from fastapi import APIRouter
from .v1 import admin, appointments, auth, cart, chat, meals, orders, settings, stories, users

api_router = APIRouter()

# 包含所有v1路由
api_router.include_router(auth.router, prefix="/auth", tags=["认证"])
api_router.include_router(users.router, prefix="/users", tags=["用户"])
api_router.include_router(meals.router, prefix="/meals", tags=["餐品"])
api_router.include_router(cart.router, prefix="/cart", tags=["购物车"])
api_router.include_router(orders.router, prefix="/orders", tags=["订单"])
api_router.include_router(appointments.router, prefix="/appointments", tags=["预约"])
api_router.include_router(stories.router, prefix="/stories", tags=["评价"])
api_router.include_router(settings.router, prefix="/settings", tags=["偏好"])
api_router.include_router(chat.router, prefix="/chat", tags=["客服"])
api_router.include_router(admin.router, prefix="/admin", tags=["管理"])
