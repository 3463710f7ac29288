from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import date, datetime
from uuid import UUID

from domain.enums import UserRole


class RegisterRequest(BaseModel):
    """Schema for creating a new account"""

    email: EmailStr
    password: str
    name: str = Field(..., min_length=1)
    role: UserRole
    phone_number: Optional[str] = None
    date_of_birth: Optional[date] = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class UserSummary(BaseModel):
    """Identity returned alongside an access token"""

    id: UUID
    email: str
    name: str
    role: UserRole

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    token: str
    user: UserSummary


class UserProfileResponse(BaseModel):
    """Full profile of the signed-in user"""

    id: UUID
    email: str
    name: str
    role: UserRole
    phone_number: Optional[str] = None
    date_of_birth: Optional[date] = None
    address: Optional[str] = None
    is_active: bool
    last_login: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
