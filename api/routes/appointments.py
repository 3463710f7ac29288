"""Appointment scheduling routes"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_current_user
from domain.enums import AppointmentStatus
from domain.models import User
from domain.schemas.appointment_schemas import (
    AppointmentCreate,
    AppointmentUpdate,
    AppointmentCancel,
    AppointmentResponse,
    MessageResponse,
)
from services import AppointmentService

router = APIRouter(prefix="/appointments", tags=["Appointments"])
logger = logging.getLogger("inpep.api.appointments")


@router.get("", response_model=List[AppointmentResponse])
def list_appointments(
    start_date: Optional[datetime] = Query(None, description="Window start (inclusive)"),
    end_date: Optional[datetime] = Query(None, description="Window end (inclusive)"),
    status: Optional[AppointmentStatus] = Query(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    List the caller's appointments in start time order.

    Patients and providers only see their own appointments; caregivers and
    insurers see all. The date window applies only when both bounds are given.
    """
    return AppointmentService.list_appointments(
        db, current_user, start_date=start_date, end_date=end_date, status=status
    )


@router.get("/{appointment_id}", response_model=AppointmentResponse)
def get_appointment(
    appointment_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return AppointmentService.get_appointment(db, current_user, appointment_id)


@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
def create_appointment(
    data: AppointmentCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Schedule an appointment.

    Raises:
        400: Missing fields, or the patient/provider is unknown
    """
    return AppointmentService.create_appointment(db, current_user, data)


@router.put("/{appointment_id}", response_model=AppointmentResponse)
def update_appointment(
    appointment_id: UUID,
    data: AppointmentUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return AppointmentService.update_appointment(db, current_user, appointment_id, data)


@router.patch("/{appointment_id}/cancel", response_model=AppointmentResponse)
def cancel_appointment(
    appointment_id: UUID,
    data: Optional[AppointmentCancel] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    reason = data.cancel_reason if data else None
    logger.debug(f"cancel requested appointment_id={appointment_id} by={current_user.id}")
    return AppointmentService.cancel_appointment(db, appointment_id, reason)


@router.delete("/{appointment_id}", response_model=MessageResponse)
def delete_appointment(
    appointment_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    AppointmentService.delete_appointment(db, current_user, appointment_id)
    return {"message": "Appointment deleted successfully"}
