from datetime import datetime
from typing import List, Optional
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, ForbiddenError, ServiceValidationError
from domain.enums import AppointmentStatus, UserRole
from domain.models import Appointment, User
from domain.schemas.appointment_schemas import (
    AppointmentCreate,
    AppointmentUpdate,
    AppointmentResponse,
)
from repositories import AppointmentRepository, UserRepository

logger = logging.getLogger("inpep.appointments")

DEFAULT_CANCEL_REASON = "No reason provided"
DEFAULT_DURATION_MINUTES = 30

# Roles that may read every appointment
OVERSIGHT_ROLES = (UserRole.CAREGIVER, UserRole.INSURER)


class AppointmentService:
    @staticmethod
    def _get_or_404(repo: AppointmentRepository, appointment_id: UUID) -> Appointment:
        appointment = repo.get_by_id(appointment_id)
        if not appointment:
            raise NotFoundError("Appointment not found")
        return appointment

    @staticmethod
    def list_appointments(
        db: Session,
        current_user: User,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        status: Optional[AppointmentStatus] = None,
    ) -> List[AppointmentResponse]:
        """
        List appointments visible to the caller.

        Patients see their own, providers see the ones they run, caregivers and
        insurers see all of them.
        """
        patient_id = current_user.id if current_user.role == UserRole.PATIENT else None
        provider_id = current_user.id if current_user.role == UserRole.PROVIDER else None

        appointments = AppointmentRepository(db).find(
            patient_id=patient_id,
            provider_id=provider_id,
            start_date=start_date,
            end_date=end_date,
            status=status,
        )
        return [AppointmentResponse.model_validate(a) for a in appointments]

    @staticmethod
    def get_appointment(
        db: Session, current_user: User, appointment_id: UUID
    ) -> AppointmentResponse:
        appointment = AppointmentService._get_or_404(
            AppointmentRepository(db), appointment_id
        )

        allowed = current_user.role in OVERSIGHT_ROLES or current_user.id in (
            appointment.patient_id,
            appointment.provider_id,
        )
        if not allowed:
            logger.warning(
                f"appointment_access_denied appointment_id={appointment_id} "
                f"user_id={current_user.id}"
            )
            raise ForbiddenError("Access denied")

        return AppointmentResponse.model_validate(appointment)

    @staticmethod
    def create_appointment(
        db: Session, current_user: User, data: AppointmentCreate
    ) -> AppointmentResponse:
        """
        Schedule an appointment between an existing patient and provider.

        Raises:
            ServiceValidationError: If either party is unknown or holds the wrong role
        """
        users = UserRepository(db)

        provider = users.get_by_id(data.provider_id)
        if not provider or provider.role != UserRole.PROVIDER:
            raise ServiceValidationError("Invalid provider")

        patient = users.get_by_id(data.patient_id)
        if not patient or patient.role != UserRole.PATIENT:
            raise ServiceValidationError("Invalid patient")

        appointment = Appointment(
            patient_id=patient.id,
            patient_name=data.patient_name or patient.name,
            provider_id=provider.id,
            provider_name=data.provider_name or provider.name,
            title=data.title,
            description=data.description,
            specialty=data.specialty,
            appointment_type=data.appointment_type,
            start_time=data.start_time,
            end_time=data.end_time,
            duration=data.duration or DEFAULT_DURATION_MINUTES,
            location=data.location,
            is_virtual=bool(data.is_virtual),
            meeting_link=data.meeting_link,
            notes=data.notes,
            status=AppointmentStatus.SCHEDULED,
            created_by=current_user.id,
        )
        appointment = AppointmentRepository(db).create(appointment)

        logger.info(
            f"appointment_created appointment_id={appointment.id} "
            f"patient_id={patient.id} provider_id={provider.id} "
            f"created_by={current_user.id}"
        )
        return AppointmentResponse.model_validate(appointment)

    @staticmethod
    def update_appointment(
        db: Session, current_user: User, appointment_id: UUID, data: AppointmentUpdate
    ) -> AppointmentResponse:
        """Apply a partial update. Only the owning provider or a caregiver may edit."""
        repo = AppointmentRepository(db)
        appointment = AppointmentService._get_or_404(repo, appointment_id)

        is_owner = (
            current_user.role == UserRole.PROVIDER
            and appointment.provider_id == current_user.id
        )
        if not (is_owner or current_user.role == UserRole.CAREGIVER):
            raise ForbiddenError("Access denied")

        changes = data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(appointment, field, value)

        appointment = repo.update(appointment)
        logger.info(
            f"appointment_updated appointment_id={appointment_id} "
            f"fields={','.join(sorted(changes)) or 'none'}"
        )
        return AppointmentResponse.model_validate(appointment)

    @staticmethod
    def cancel_appointment(
        db: Session, appointment_id: UUID, cancel_reason: Optional[str] = None
    ) -> AppointmentResponse:
        repo = AppointmentRepository(db)
        appointment = AppointmentService._get_or_404(repo, appointment_id)

        appointment.status = AppointmentStatus.CANCELLED
        appointment.cancel_reason = cancel_reason or DEFAULT_CANCEL_REASON
        appointment = repo.update(appointment)

        logger.info(f"appointment_cancelled appointment_id={appointment_id}")
        return AppointmentResponse.model_validate(appointment)

    @staticmethod
    def delete_appointment(db: Session, current_user: User, appointment_id: UUID) -> None:
        if current_user.role not in (UserRole.PROVIDER, UserRole.CAREGIVER):
            raise ForbiddenError("Access denied")

        repo = AppointmentRepository(db)
        AppointmentService._get_or_404(repo, appointment_id)
        repo.delete(appointment_id)

        logger.info(
            f"appointment_deleted appointment_id={appointment_id} "
            f"user_id={current_user.id}"
        )
