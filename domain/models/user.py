"""
User account model shared by every role.
"""

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    Boolean,
    Date,
    Uuid,
    ForeignKey,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import UserRole


class User(Base):
    """User account model"""

    __tablename__ = "app_user"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(Text, unique=True, nullable=False, index=True)
    password_hash = Column(Text, nullable=False)
    name = Column(Text, nullable=False)
    role = Column(SQLEnum(UserRole, name="user_role"), nullable=False)
    phone_number = Column(Text)
    date_of_birth = Column(Date)
    address = Column(Text)
    is_active = Column(Boolean, nullable=False, default=True)
    last_login = Column(TIMESTAMP(timezone=True))
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    meal_plans = relationship(
        "MealPlan", back_populates="patient", cascade="all, delete-orphan"
    )
    provider_profile = relationship(
        "ProviderProfile",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )


class ProviderProfile(Base):
    """Practice details for PROVIDER accounts"""

    __tablename__ = "provider_profile"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid,
        ForeignKey("app_user.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    specialty = Column(Text)
    license_number = Column(Text)
    npi_number = Column(Text)
    clinic_name = Column(Text)
    clinic_address = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="provider_profile")
