from pydantic import BaseModel
from typing import List
from uuid import UUID

from domain.enums import EngagementLevel


class CaregiverActivities(BaseModel):
    """Weekly activity counters"""

    wellness_plan_updates: int
    medication_logs: int
    meal_plan_updates: int
    vitals_recorded: int
    messages_exchanged: int


class CaregiverEntry(BaseModel):
    """One caregiver row on the ReclaiMe dashboard"""

    id: UUID
    caregiver_id: UUID
    caregiver_name: str
    patient_id: UUID
    patient_name: str
    relationship: str
    engagement_score: int
    engagement_level: EngagementLevel
    burnout_risk: int
    last_activity: str
    trend: str  # "up" or "down"
    flagged: bool
    activities: CaregiverActivities


class EngagementSummary(BaseModel):
    total_caregivers: int
    avg_engagement: int
    at_risk_count: int
    active_this_week: int


class CaregiverDashboardResponse(BaseModel):
    caregivers: List[CaregiverEntry]
    summary: EngagementSummary


class FlagRequest(BaseModel):
    flagged: bool


class CaregiverFlagResponse(BaseModel):
    success: bool
    flagged: bool
    message: str
