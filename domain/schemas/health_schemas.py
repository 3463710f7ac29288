from pydantic import BaseModel
from typing import Optional, List, Dict, Any
from datetime import datetime
from uuid import UUID

from domain.enums import MetricType, InsightType, InsightCategory, InsightSeverity


class HealthMetricCreate(BaseModel):
    """Schema for recording a health reading"""

    metric_type: MetricType
    value: float
    unit: str
    patient_id: Optional[UUID] = None
    additional_data: Optional[Dict[str, Any]] = None
    notes: Optional[str] = None
    recorded_at: Optional[datetime] = None


class HealthMetricResponse(BaseModel):
    id: UUID
    patient_id: UUID
    metric_type: MetricType
    value: float
    unit: str
    additional_data: Optional[Dict[str, Any]] = None
    notes: Optional[str] = None
    recorded_by: Optional[UUID] = None
    recorded_at: datetime

    model_config = {"from_attributes": True}


class HealthInsightResponse(BaseModel):
    id: UUID
    patient_id: UUID
    insight_type: InsightType
    category: InsightCategory
    title: str
    description: str
    severity: InsightSeverity
    confidence: float
    data_points: Optional[List[str]] = None
    is_read: bool
    is_dismissed: bool
    generated_at: datetime

    model_config = {"from_attributes": True}
