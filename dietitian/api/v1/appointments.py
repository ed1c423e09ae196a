"""
咨询预约路由模块
"""

from fastapi import APIRouter, Depends

from ...core.error_handler import create_success_response
from ...core.security import Session, require_admin
from ...models.user import User
from ...schemas.order import AppointmentStatusUpdateRequest, BookingRequest
from ...services.appointment_service import AppointmentService
from ..deps import get_current_user

router = APIRouter()


@router.get("/services")
def list_services():
    """可预约的咨询服务"""
    return create_success_response(AppointmentService().list_services())


@router.post("")
def book_appointment(request: BookingRequest, user: User = Depends(get_current_user)):
    appointment = AppointmentService().book(
        user, request.service_id, request.date, request.time, request.notes)
    return create_success_response(appointment, "Appointment requested")


@router.get("/mine")
def my_appointments(user: User = Depends(get_current_user)):
    return create_success_response(AppointmentService().list_appointments(user.id))


@router.get("")
def list_appointments(admin: Session = Depends(require_admin)):
    return create_success_response(AppointmentService().list_appointments())


@router.patch("/{appointment_id}/status")
def update_appointment_status(appointment_id: int, request: AppointmentStatusUpdateRequest,
                              admin: Session = Depends(require_admin)):
    """预约状态流转（管理员），每次流转追加一条历史记录"""
    appointment = AppointmentService().update_status(
        appointment_id, request.status.value, request.note)
    return create_success_response(appointment, "Appointment status updated")
