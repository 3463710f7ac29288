"""
Appointment Repository - Data access layer for scheduling operations
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Appointment
from domain.enums import AppointmentStatus


class AppointmentRepository(BaseRepository[Appointment]):
    """Repository for appointment data access"""

    def __init__(self, db: Session):
        super().__init__(db, Appointment)

    def find(
        self,
        patient_id: Optional[UUID] = None,
        provider_id: Optional[UUID] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        status: Optional[AppointmentStatus] = None,
    ) -> List[Appointment]:
        """List appointments ordered by start time, optionally filtered"""
        query = self.db.query(Appointment)

        if patient_id:
            query = query.filter(Appointment.patient_id == patient_id)
        if provider_id:
            query = query.filter(Appointment.provider_id == provider_id)
        if start_date and end_date:
            query = query.filter(
                Appointment.start_time >= start_date,
                Appointment.start_time <= end_date,
            )
        if status:
            query = query.filter(Appointment.status == status)

        return query.order_by(Appointment.start_time.asc()).all()

    def count_by_type_and_status(
        self, appointment_type: str, status: AppointmentStatus
    ) -> int:
        return (
            self.db.query(func.count(Appointment.id))
            .filter(
                Appointment.appointment_type == appointment_type,
                Appointment.status == status,
            )
            .scalar()
        )
