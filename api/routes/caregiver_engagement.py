"""ReclaiMe caregiver engagement routes"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_current_user
from domain.models import User
from domain.schemas.caregiver_schemas import (
    CaregiverDashboardResponse,
    CaregiverFlagResponse,
    FlagRequest,
)
from services import CaregiverEngagementService

router = APIRouter(prefix="/caregiver-engagement", tags=["Caregiver Engagement"])
logger = logging.getLogger("inpep.api.caregiver_engagement")


@router.get("", response_model=CaregiverDashboardResponse)
def get_caregiver_engagement(
    provider_id: Optional[str] = Query(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Caregiver engagement dashboard.

    Least engaged caregivers come first, then those at highest burnout risk.
    """
    return CaregiverEngagementService.get_dashboard(db, provider_id)


@router.post("/{engagement_id}/flag", response_model=CaregiverFlagResponse)
def flag_caregiver(
    engagement_id: UUID,
    data: FlagRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    logger.debug(f"flag requested engagement_id={engagement_id} by={current_user.id}")
    return CaregiverEngagementService.set_flag(db, engagement_id, data.flagged)
