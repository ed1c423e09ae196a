"""
管理后台路由模块
"""

from fastapi import APIRouter, Depends

from ...core.error_handler import create_success_response
from ...core.security import Session, require_admin
from ...services.admin_service import AdminService

router = APIRouter()


@router.get("/overview")
def overview(admin: Session = Depends(require_admin)):
    """后台概览：营收、待处理数量和最近记录"""
    return create_success_response(AdminService().overview())
