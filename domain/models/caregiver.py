"""
ReclaiMe caregiver engagement model.
"""

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    Boolean,
    Integer,
    JSON,
    Uuid,
    ForeignKey,
    Enum as SQLEnum,
)
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import EngagementLevel


class CaregiverEngagement(Base):
    """Weekly engagement snapshot for a caregiver/patient pair"""

    __tablename__ = "caregiver_engagement"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    caregiver_id = Column(
        Uuid, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    caregiver_name = Column(Text, nullable=False)
    patient_id = Column(
        Uuid, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    patient_name = Column(Text)
    engagement_score = Column(Integer, nullable=False, default=0)  # 0-100
    engagement_level = Column(
        SQLEnum(
            EngagementLevel,
            name="engagement_level",
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        default=EngagementLevel.MODERATE,
    )

    # Activity counters for the week
    wellness_plan_updates = Column(Integer, nullable=False, default=0)
    medication_logs = Column(Integer, nullable=False, default=0)
    meal_plan_updates = Column(Integer, nullable=False, default=0)
    vitals_recorded = Column(Integer, nullable=False, default=0)
    messages_exchanged = Column(Integer, nullable=False, default=0)

    stress_level = Column(Text)
    stress_factors = Column(JSON, nullable=False, default=list)
    burnout_risk = Column(Integer, nullable=False, default=0)  # 0-100
    last_activity_at = Column(TIMESTAMP(timezone=True))
    last_activity_type = Column(Text)
    week_start = Column(TIMESTAMP(timezone=True))

    # Provider follow-up flag
    is_flagged = Column(Boolean, nullable=False, default=False)
    flagged_at = Column(TIMESTAMP(timezone=True))

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )
