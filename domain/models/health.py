"""
Health tracking models: recorded metrics and generated insights.
"""

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    Boolean,
    Float,
    JSON,
    Uuid,
    Enum as SQLEnum,
)
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import (
    InsightCategory,
    InsightSeverity,
    InsightType,
    MetricType,
)


class HealthMetric(Base):
    """A single vital-sign reading"""

    __tablename__ = "health_metric"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    patient_id = Column(Uuid, nullable=False, index=True)
    metric_type = Column(SQLEnum(MetricType, name="metric_type"), nullable=False)
    value = Column(Float, nullable=False)
    unit = Column(Text, nullable=False)
    additional_data = Column(JSON)  # e.g. {"systolic": 120, "diastolic": 80}
    notes = Column(Text)
    recorded_by = Column(Uuid)
    recorded_at = Column(TIMESTAMP(timezone=True), nullable=False, index=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())


class HealthInsight(Base):
    """Insight derived from a patient's metrics"""

    __tablename__ = "health_insight"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    patient_id = Column(Uuid, nullable=False, index=True)
    insight_type = Column(SQLEnum(InsightType, name="insight_type"), nullable=False)
    category = Column(SQLEnum(InsightCategory, name="insight_category"), nullable=False)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    severity = Column(SQLEnum(InsightSeverity, name="insight_severity"), nullable=False)
    confidence = Column(Float, nullable=False)
    data_points = Column(JSON)  # ids of the metrics behind the insight
    is_read = Column(Boolean, nullable=False, default=False)
    is_dismissed = Column(Boolean, nullable=False, default=False)
    generated_at = Column(TIMESTAMP(timezone=True), nullable=False)
