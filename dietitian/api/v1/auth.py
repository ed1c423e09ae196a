"""
认证路由模块
演示账号登录、注册、登出
"""

from fastapi import APIRouter, Depends, Query

from ...core.error_handler import create_success_response
from ...core.security import Session, get_current_session
from ...schemas.auth import EmailExistsResponse, LoginRequest, LoginResponse, RegisterRequest
from ...services.auth_service import AuthService

router = APIRouter()


@router.post("/login")
def login(request: LoginRequest):
    """登录，返回JWT令牌和用户信息"""
    result = AuthService().login(request.email, request.password)
    return create_success_response(LoginResponse(**result), "Signed in")


@router.post("/register")
def register(request: RegisterRequest):
    """注册新用户（角色固定为 user）并直接登录"""
    result = AuthService().register(request.name, request.email, request.password)
    return create_success_response(LoginResponse(**result), "Account created")


@router.post("/logout")
def logout(session: Session = Depends(get_current_session)):
    AuthService().logout(session)
    return create_success_response(message="Signed out")


@router.get("/email-exists")
def email_exists(email: str = Query(..., min_length=3)):
    """注册前检查邮箱是否已被使用"""
    exists = AuthService().email_exists(email)
    return create_success_response(EmailExistsResponse(email=email, exists=exists))
