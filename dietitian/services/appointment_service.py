"""
预约服务
咨询预约的创建、查询和管理员状态流转
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..constants import SERVICES
from ..core.database import DatabaseManager, db_manager
from ..core.exceptions import AppointmentNotFoundError, ValidationError
from ..models.appointment import (
    APPOINTMENT_TRANSITIONS,
    Appointment,
    AppointmentStatus,
    BookingService,
)
from ..models.user import User
from .history_service import append_entry, check_transition, load_histories

logger = logging.getLogger(__name__)

APPOINTMENT_COLUMNS = "appointment_id, user_id, user_name, service_name, date, time, status, notes, created_at"


class AppointmentService:
    """预约服务"""

    def __init__(self, db: Optional[DatabaseManager] = None):
        self.db = db or db_manager

    def list_services(self) -> List[BookingService]:
        return list(SERVICES)

    def get_service(self, service_id: str) -> BookingService:
        for service in SERVICES:
            if service.id == service_id:
                return service
        raise ValidationError(f"Unknown service '{service_id}'", details={"service_id": service_id})

    def book(self, user: User, service_id: str, date: str, time: str,
             notes: Optional[str] = None) -> Appointment:
        """创建预约，初始状态 Pending"""
        service = self.get_service(service_id)
        now = datetime.now()

        with self.db.transaction() as conn:
            appointment_id = conn.execute(
                """
                INSERT INTO appointments(user_id, user_name, service_name, date, time, status, notes, created_at)
                VALUES (?,?,?,?,?,?,?,?) RETURNING appointment_id
                """,
                [user.id, user.name, service.name, date, time,
                 AppointmentStatus.PENDING.value, notes, now]
            ).fetchone()[0]
            append_entry(conn, "appointment", appointment_id, AppointmentStatus.PENDING.value,
                         "Appointment booked", at=now)

        logger.info("Appointment %s booked by user %s for %s %s", appointment_id, user.id, date, time)
        return self.get_appointment(appointment_id)

    def get_appointment(self, appointment_id: int) -> Appointment:
        rows = self.db.fetch_dicts(
            f"SELECT {APPOINTMENT_COLUMNS} FROM appointments WHERE appointment_id = ?", [appointment_id])
        if not rows:
            raise AppointmentNotFoundError(
                f"Appointment {appointment_id} not found", details={"appointment_id": appointment_id})
        return self._build(rows)[0]

    def list_appointments(self, user_id: Optional[int] = None) -> List[Appointment]:
        """预约列表，最新在前"""
        if user_id is None:
            rows = self.db.fetch_dicts(
                f"SELECT {APPOINTMENT_COLUMNS} FROM appointments ORDER BY created_at DESC, appointment_id DESC")
        else:
            rows = self.db.fetch_dicts(
                f"""SELECT {APPOINTMENT_COLUMNS} FROM appointments WHERE user_id = ?
                    ORDER BY created_at DESC, appointment_id DESC""",
                [user_id]
            )
        return self._build(rows)

    def update_status(self, appointment_id: int, status: str, note: Optional[str] = None) -> Appointment:
        """管理员更新预约状态，追加一条历史记录"""
        appointment = self.get_appointment(appointment_id)
        status = getattr(status, "value", status)
        check_transition(APPOINTMENT_TRANSITIONS, appointment.status, status, "appointment")

        with self.db.transaction() as conn:
            conn.execute("UPDATE appointments SET status = ? WHERE appointment_id = ?", [status, appointment_id])
            append_entry(conn, "appointment", appointment_id, status, note)

        logger.info("Appointment %s: %s -> %s", appointment_id, appointment.status, status)
        return self.get_appointment(appointment_id)

    def count_by_status(self, status: str) -> int:
        return self.db.execute_one("SELECT COUNT(*) FROM appointments WHERE status = ?", [status])[0]

    def _build(self, rows: List[Dict[str, Any]]) -> List[Appointment]:
        histories = load_histories(self.db, "appointment", [row["appointment_id"] for row in rows])
        return [
            Appointment(
                id=row["appointment_id"],
                user_id=row["user_id"],
                user_name=row["user_name"],
                service_name=row["service_name"],
                date=row["date"],
                time=row["time"],
                status=row["status"],
                notes=row["notes"],
                history=histories.get(row["appointment_id"], []),
            )
            for row in rows
        ]
