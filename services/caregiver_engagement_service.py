from datetime import timedelta
from uuid import UUID
from typing import Optional
import logging

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from core.utils.helpers import utcnow, ensure_utc, round_half_up
from domain.mappers import CaregiverMapper
from domain.schemas.caregiver_schemas import (
    CaregiverDashboardResponse,
    CaregiverFlagResponse,
    EngagementSummary,
)
from repositories import CaregiverEngagementRepository

logger = logging.getLogger("inpep.caregiver_engagement")

AT_RISK_BURNOUT_THRESHOLD = 60
ACTIVE_WINDOW = timedelta(days=7)


class CaregiverEngagementService:
    @staticmethod
    def get_dashboard(
        db: Session, provider_id: Optional[str] = None
    ) -> CaregiverDashboardResponse:
        """
        Build the ReclaiMe caregiver dashboard.

        Rows are listed least engaged first, then by burnout risk. The summary
        counts caregivers at burnout risk and those active in the past week.

        Args:
            db: Database session
            provider_id: Requesting provider; engagement rows are not yet
                linked to providers so every row is returned

        Returns:
            CaregiverDashboardResponse
        """
        rows = CaregiverEngagementRepository(db).list_for_dashboard()
        now = utcnow()

        total = len(rows)
        avg_engagement = (
            round_half_up(sum(r.engagement_score for r in rows) / total) if total else 0
        )
        at_risk = sum(1 for r in rows if r.burnout_risk >= AT_RISK_BURNOUT_THRESHOLD)
        active = sum(
            1
            for r in rows
            if r.last_activity_at and now - ensure_utc(r.last_activity_at) <= ACTIVE_WINDOW
        )

        logger.debug(
            f"caregiver_dashboard provider_id={provider_id or 'none'} "
            f"caregivers={total} at_risk={at_risk}"
        )

        return CaregiverDashboardResponse(
            caregivers=[CaregiverMapper.to_entry(r, now) for r in rows],
            summary=EngagementSummary(
                total_caregivers=total,
                avg_engagement=avg_engagement,
                at_risk_count=at_risk,
                active_this_week=active,
            ),
        )

    @staticmethod
    def set_flag(db: Session, engagement_id: UUID, flagged: bool) -> CaregiverFlagResponse:
        """Flag a caregiver for provider follow-up, or clear the flag"""
        repo = CaregiverEngagementRepository(db)
        engagement = repo.get_by_id(engagement_id)
        if not engagement:
            raise NotFoundError("Caregiver engagement record not found")

        engagement.is_flagged = flagged
        engagement.flagged_at = utcnow() if flagged else None
        repo.update(engagement)

        logger.info(
            f"caregiver_flag_changed engagement_id={engagement_id} "
            f"caregiver_id={engagement.caregiver_id} flagged={flagged}"
        )

        return CaregiverFlagResponse(
            success=True,
            flagged=flagged,
            message="Caregiver flagged for follow-up" if flagged else "Flag removed",
        )
