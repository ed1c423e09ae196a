"""
自定义异常类
每个异常携带稳定的 error_code，由 error_handler 映射为 HTTP 状态码
"""

from typing import Any, Dict, Optional


class BaseApplicationError(Exception):
    """应用基础异常类"""

    default_code = "APPLICATION_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}
        super().__init__(self.message)


class DatabaseError(BaseApplicationError):
    """数据库相关异常"""
    default_code = "DATABASE_ERROR"


class AuthenticationError(BaseApplicationError):
    """认证相关异常"""
    default_code = "AUTHENTICATION_FAILED"


class AuthorizationError(BaseApplicationError):
    """授权相关异常"""
    default_code = "ADMIN_REQUIRED"


class ValidationError(BaseApplicationError):
    """数据验证异常"""
    default_code = "VALIDATION_ERROR"


class BusinessLogicError(BaseApplicationError):
    """业务逻辑异常"""
    default_code = "BUSINESS_RULE_VIOLATION"


class NotFoundError(BusinessLogicError):
    """资源不存在"""
    default_code = "RESOURCE_NOT_FOUND"


class MealNotFoundError(NotFoundError):
    """餐品不存在"""
    default_code = "MEAL_NOT_FOUND"


class OrderNotFoundError(NotFoundError):
    """订单不存在"""
    default_code = "ORDER_NOT_FOUND"


class AppointmentNotFoundError(NotFoundError):
    """预约不存在"""
    default_code = "APPOINTMENT_NOT_FOUND"


class StoryNotFoundError(NotFoundError):
    """评价不存在"""
    default_code = "STORY_NOT_FOUND"


class CartItemNotFoundError(NotFoundError):
    """购物车条目不存在"""
    default_code = "CART_ITEM_NOT_FOUND"


class UserNotFoundError(NotFoundError):
    """用户不存在"""
    default_code = "USER_NOT_FOUND"


class DuplicateEmailError(BusinessLogicError):
    """邮箱已注册"""
    default_code = "DUPLICATE_EMAIL"


class MealOutOfStockError(BusinessLogicError):
    """餐品缺货"""
    default_code = "MEAL_OUT_OF_STOCK"


class EmptyCartError(BusinessLogicError):
    """购物车为空"""
    default_code = "EMPTY_CART"


class InvalidStatusTransitionError(BusinessLogicError):
    """非法的状态流转"""
    default_code = "STATUS_TRANSITION_INVALID"


class ChatServiceError(BaseApplicationError):
    """客服聊天调用失败"""
    default_code = "CHAT_UNAVAILABLE"
