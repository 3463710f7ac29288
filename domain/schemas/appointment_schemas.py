from pydantic import BaseModel, Field, model_validator
from typing import Optional
from datetime import datetime
from uuid import UUID

from domain.enums import AppointmentStatus

REQUIRED_ON_UPDATE = ("title", "start_time", "end_time", "duration", "is_virtual", "status")


class AppointmentCreate(BaseModel):
    """Schema for scheduling an appointment"""

    patient_id: UUID
    provider_id: UUID
    title: str = Field(..., min_length=1)
    start_time: datetime
    end_time: datetime
    patient_name: Optional[str] = None
    provider_name: Optional[str] = None
    description: Optional[str] = None
    specialty: Optional[str] = None
    appointment_type: Optional[str] = Field(
        None, description="Visit kind (e.g., 'Checkup', 'Follow-up')"
    )
    duration: Optional[int] = Field(None, gt=0, description="Length in minutes")
    location: Optional[str] = None
    is_virtual: Optional[bool] = None
    meeting_link: Optional[str] = None
    notes: Optional[str] = None


class AppointmentUpdate(BaseModel):
    """Partial update; only supplied fields are applied"""

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    specialty: Optional[str] = None
    appointment_type: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration: Optional[int] = Field(None, gt=0)
    location: Optional[str] = None
    is_virtual: Optional[bool] = None
    meeting_link: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[AppointmentStatus] = None

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        nulls = sorted(
            name
            for name in REQUIRED_ON_UPDATE
            if name in self.model_fields_set and getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"{', '.join(nulls)} cannot be null")
        return self


class AppointmentCancel(BaseModel):
    cancel_reason: Optional[str] = None


class AppointmentResponse(BaseModel):
    id: UUID
    patient_id: UUID
    patient_name: Optional[str] = None
    provider_id: UUID
    provider_name: Optional[str] = None
    title: str
    description: Optional[str] = None
    specialty: Optional[str] = None
    appointment_type: Optional[str] = None
    start_time: datetime
    end_time: datetime
    duration: int
    location: Optional[str] = None
    is_virtual: bool
    meeting_link: Optional[str] = None
    notes: Optional[str] = None
    status: AppointmentStatus
    cancel_reason: Optional[str] = None
    created_by: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    message: str
