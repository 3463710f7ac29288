"""Insurer analytics routes (INSURER role only)"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, require_roles
from domain.enums import ClaimStatus, RiskLevel, UserRole
from domain.models import User
from domain.schemas.insurer_schemas import (
    DashboardOverviewResponse,
    ClaimResponse,
    ClaimFlagRequest,
    RiskAssessmentResponse,
    PopulationHealthResponse,
    CostAnalyticsResponse,
)
from services import InsurerService

router = APIRouter(prefix="/insurer", tags=["Insurer"])
logger = logging.getLogger("inpep.api.insurer")

insurer_only = require_roles(UserRole.INSURER)


@router.get("/dashboard/overview", response_model=DashboardOverviewResponse)
def get_dashboard_overview(
    current_user: User = Depends(insurer_only), db: Session = Depends(get_db)
):
    return InsurerService.get_dashboard_overview(db)


@router.get("/claims", response_model=List[ClaimResponse])
def list_claims(
    status: Optional[ClaimStatus] = Query(None),
    start_date: Optional[datetime] = Query(None, description="Service date from"),
    end_date: Optional[datetime] = Query(None, description="Service date to"),
    limit: int = Query(50, ge=1, le=500),
    current_user: User = Depends(insurer_only),
    db: Session = Depends(get_db),
):
    """Claims, most recently submitted first"""
    return InsurerService.list_claims(
        db, status=status, start_date=start_date, end_date=end_date, limit=limit
    )


@router.patch("/claims/{claim_id}/flag", response_model=ClaimResponse)
def flag_claim(
    claim_id: UUID,
    data: ClaimFlagRequest,
    current_user: User = Depends(insurer_only),
    db: Session = Depends(get_db),
):
    """Mark a claim as a fraud suspect for manual review"""
    return InsurerService.flag_claim(db, claim_id, data.flagged)


@router.get("/risk-assessments", response_model=List[RiskAssessmentResponse])
def list_risk_assessments(
    risk_level: Optional[RiskLevel] = Query(None),
    limit: int = Query(50, ge=1, le=500),
    current_user: User = Depends(insurer_only),
    db: Session = Depends(get_db),
):
    return InsurerService.list_risk_assessments(db, risk_level=risk_level, limit=limit)


@router.get("/population-health", response_model=PopulationHealthResponse)
def get_population_health(
    current_user: User = Depends(insurer_only), db: Session = Depends(get_db)
):
    return InsurerService.get_population_health(db)


@router.get("/cost-analytics", response_model=CostAnalyticsResponse)
def get_cost_analytics(
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    current_user: User = Depends(insurer_only),
    db: Session = Depends(get_db),
):
    return InsurerService.get_cost_analytics(db, start_date=start_date, end_date=end_date)
