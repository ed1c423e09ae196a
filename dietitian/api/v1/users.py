"""
用户档案路由模块
"""

from fastapi import APIRouter, Depends

from ...core.error_handler import create_success_response
from ...core.security import Session, get_current_session
from ...models.user import UserUpdate
from ...schemas.user import UserProfileResponse
from ...services.user_service import UserService

router = APIRouter()


@router.get("/me")
def get_my_profile(session: Session = Depends(get_current_session)):
    """当前用户档案，附带其订单和预约"""
    profile = UserService().get_profile(session.user_id)
    return create_success_response(UserProfileResponse(**profile))


@router.patch("/me")
def update_my_profile(update: UserUpdate, session: Session = Depends(get_current_session)):
    user = UserService().update_profile(session.user_id, update)
    return create_success_response(user, "Profile updated")
