"""
预约服务测试
"""

import pytest

from dietitian.core.exceptions import (
    AppointmentNotFoundError,
    InvalidStatusTransitionError,
    ValidationError
)
from dietitian.services.appointment_service import AppointmentService


class TestAppointmentService:

    def test_book_starts_pending(self, test_db, demo_user):
        appointment = AppointmentService(test_db).book(demo_user, "s1", "2026-11-02", "10:00", "First visit")
        assert appointment.status == "Pending"
        assert appointment.service_name == "Initial Nutrition Consultation"
        assert appointment.user_name == "Kwame Mensah"
        assert len(appointment.history) == 1

    def test_unknown_service(self, test_db, demo_user):
        with pytest.raises(ValidationError):
            AppointmentService(test_db).book(demo_user, "s9", "2026-11-02", "10:00")

    def test_confirm_then_complete(self, test_db, demo_user):
        service = AppointmentService(test_db)
        appointment = service.book(demo_user, "s2", "2026-11-03", "14:30")
        booked = appointment.history[0]

        confirmed = service.update_status(appointment.id, "Confirmed").history[1]
        done = service.update_status(appointment.id, "Completed", "Plan shared")
        assert [h.status for h in done.history] == ["Pending", "Confirmed", "Completed"]
        # 已有记录不被修改
        assert done.history[0] == booked
        assert done.history[0].note == "Appointment booked"
        assert done.history[1] == confirmed

        with pytest.raises(InvalidStatusTransitionError):
            service.update_status(appointment.id, "Pending")

    def test_list_scoped_to_user(self, test_db, demo_user, demo_admin):
        service = AppointmentService(test_db)
        service.book(demo_user, "s1", "2026-11-02", "10:00")
        service.book(demo_admin, "s3", "2026-11-04", "09:00")

        assert len(service.list_appointments()) == 2
        mine = service.list_appointments(demo_user.id)
        assert [a.user_id for a in mine] == [demo_user.id]
        assert service.count_by_status("Pending") == 2

    def test_missing_appointment(self, test_db):
        with pytest.raises(AppointmentNotFoundError):
            AppointmentService(test_db).update_status(999, "Confirmed")
