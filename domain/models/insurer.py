"""
Insurer-side models: claims and patient risk assessments.
"""

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    Boolean,
    Integer,
    Float,
    JSON,
    Uuid,
    ForeignKey,
    Enum as SQLEnum,
)
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import ClaimStatus, ClaimType, RiskLevel


class Claim(Base):
    """Insurance claim submitted for a patient visit or service"""

    __tablename__ = "claim"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    claim_number = Column(Text, unique=True, nullable=False)
    patient_id = Column(
        Uuid, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    patient_name = Column(Text)
    provider_id = Column(
        Uuid, ForeignKey("app_user.id", ondelete="SET NULL"), index=True
    )
    provider_name = Column(Text)
    claim_type = Column(SQLEnum(ClaimType, name="claim_type"), nullable=False)
    status = Column(
        SQLEnum(ClaimStatus, name="claim_status"),
        nullable=False,
        default=ClaimStatus.PENDING,
        index=True,
    )
    service_date = Column(TIMESTAMP(timezone=True), nullable=False)
    submitted_date = Column(
        TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    )
    processed_date = Column(TIMESTAMP(timezone=True))
    claimed_amount = Column(Float, nullable=False)
    approved_amount = Column(Float)
    deductible = Column(Float)
    copay = Column(Float)
    denial_reason = Column(Text)
    diagnosis_code = Column(Text)
    procedure_code = Column(Text)
    description = Column(Text)

    # Precomputed review signals
    is_high_cost = Column(Boolean, nullable=False, default=False)
    is_fraud_suspect = Column(Boolean, nullable=False, default=False)
    risk_score = Column(Float)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class RiskAssessment(Base):
    """Population-health risk snapshot for a member"""

    __tablename__ = "risk_assessment"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    patient_id = Column(
        Uuid, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    patient_name = Column(Text)
    overall_risk_score = Column(Float, nullable=False)
    risk_level = Column(SQLEnum(RiskLevel, name="risk_level"), nullable=False)
    chronic_conditions = Column(JSON, nullable=False, default=list)
    recent_hospitalizations = Column(Integer, nullable=False, default=0)
    medication_count = Column(Integer, nullable=False, default=0)
    missed_appointments = Column(Integer, nullable=False, default=0)
    hospitalization_risk = Column(Float)
    cost_prediction = Column(Float)
    interventions = Column(JSON, nullable=False, default=list)
    assessed_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    next_assessment = Column(TIMESTAMP(timezone=True))
