"""
Caregiver engagement mappers.
Turns engagement rows into ReclaiMe dashboard entries.
"""

from datetime import datetime
from typing import Optional

from domain.models import CaregiverEngagement
from domain.schemas.caregiver_schemas import CaregiverEntry, CaregiverActivities
from core.utils.helpers import format_last_activity

DEFAULT_RELATIONSHIP = "Family Caregiver"
NO_ACTIVITY_LABEL = "No recent activity"
TREND_UP_THRESHOLD = 70


class CaregiverMapper:
    """Mapper for caregiver engagement transformations."""

    @staticmethod
    def to_entry(
        row: CaregiverEngagement, now: Optional[datetime] = None
    ) -> CaregiverEntry:
        """
        Convert a CaregiverEngagement row to a dashboard entry.

        Args:
            row: CaregiverEngagement ORM instance
            now: Reference time for the "last activity" label

        Returns:
            CaregiverEntry DTO
        """
        if row.last_activity_at:
            last_activity = format_last_activity(row.last_activity_at, now)
        else:
            last_activity = NO_ACTIVITY_LABEL

        return CaregiverEntry(
            id=row.id,
            caregiver_id=row.caregiver_id,
            caregiver_name=row.caregiver_name,
            patient_id=row.patient_id,
            patient_name=row.patient_name or "",
            relationship=DEFAULT_RELATIONSHIP,
            engagement_score=row.engagement_score,
            engagement_level=row.engagement_level,
            burnout_risk=row.burnout_risk,
            last_activity=last_activity,
            trend="up" if row.engagement_score >= TREND_UP_THRESHOLD else "down",
            flagged=bool(row.is_flagged),
            activities=CaregiverActivities(
                wellness_plan_updates=row.wellness_plan_updates,
                medication_logs=row.medication_logs,
                meal_plan_updates=row.meal_plan_updates,
                vitals_recorded=row.vitals_recorded,
                messages_exchanged=row.messages_exchanged,
            ),
        )
