"""
Appointment scheduling model.
"""

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    Boolean,
    Integer,
    ForeignKey,
    Uuid,
    Enum as SQLEnum,
)
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import AppointmentStatus


class Appointment(Base):
    """A visit between a patient and a provider"""

    __tablename__ = "appointment"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    patient_id = Column(
        Uuid, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    patient_name = Column(Text)
    provider_id = Column(
        Uuid, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    provider_name = Column(Text)
    title = Column(Text, nullable=False)
    description = Column(Text)
    specialty = Column(Text)
    appointment_type = Column(Text)  # Checkup, Follow-up, Consultation, ...
    start_time = Column(TIMESTAMP(timezone=True), nullable=False, index=True)
    end_time = Column(TIMESTAMP(timezone=True), nullable=False)
    duration = Column(Integer, nullable=False, default=30)  # minutes
    location = Column(Text)
    is_virtual = Column(Boolean, nullable=False, default=False)
    meeting_link = Column(Text)
    notes = Column(Text)
    status = Column(
        SQLEnum(AppointmentStatus, name="appointment_status"),
        nullable=False,
        default=AppointmentStatus.SCHEDULED,
    )
    cancel_reason = Column(Text)
    created_by = Column(Uuid)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )
