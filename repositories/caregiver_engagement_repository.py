"""
Caregiver Engagement Repository - Data access layer for ReclaiMe metrics
"""

from typing import List
from sqlalchemy import case
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import CaregiverEngagement
from domain.enums import EngagementLevel

# Least engaged first so alerts surface at the top of the dashboard
ENGAGEMENT_LEVEL_ORDER = {
    EngagementLevel.LOW: 0,
    EngagementLevel.MODERATE: 1,
    EngagementLevel.HIGH: 2,
}


class CaregiverEngagementRepository(BaseRepository[CaregiverEngagement]):
    """Repository for caregiver engagement data access"""

    def __init__(self, db: Session):
        super().__init__(db, CaregiverEngagement)

    def list_for_dashboard(self) -> List[CaregiverEngagement]:
        """All engagement rows, lowest engagement level then highest burnout risk first"""
        level_rank = case(
            *[
                (CaregiverEngagement.engagement_level == level, rank)
                for level, rank in ENGAGEMENT_LEVEL_ORDER.items()
            ],
            else_=len(ENGAGEMENT_LEVEL_ORDER),
        )
        return (
            self.db.query(CaregiverEngagement)
            .order_by(level_rank.asc(), CaregiverEngagement.burnout_risk.desc())
            .all()
        )
