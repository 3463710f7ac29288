"""Health metrics and insights routes"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_current_user
from domain.enums import MetricType
from domain.models import User
from domain.schemas.health_schemas import (
    HealthMetricCreate,
    HealthMetricResponse,
    HealthInsightResponse,
)
from services import HealthService

router = APIRouter(prefix="/health", tags=["Health"])
logger = logging.getLogger("inpep.api.health")


@router.get("/metrics", response_model=List[HealthMetricResponse])
def list_metrics(
    patient_id: Optional[UUID] = Query(None, description="Required unless the caller is a patient"),
    metric_type: Optional[MetricType] = Query(None),
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Latest 100 readings, newest first"""
    return HealthService.list_metrics(
        db,
        current_user,
        patient_id=patient_id,
        metric_type=metric_type,
        start_date=start_date,
        end_date=end_date,
    )


@router.post("/metrics", response_model=HealthMetricResponse, status_code=status.HTTP_201_CREATED)
def record_metric(
    data: HealthMetricCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return HealthService.record_metric(db, current_user, data)


@router.post("/insights/generate", response_model=List[HealthInsightResponse])
def generate_insights(
    current_user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Analyse the caller's readings (patients only; other roles name a patient)"""
    return HealthService.generate_insights(db, current_user)


@router.post("/insights/generate/{patient_id}", response_model=List[HealthInsightResponse])
def generate_insights_for_patient(
    patient_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return HealthService.generate_insights(db, current_user, patient_id)


@router.get("/insights", response_model=List[HealthInsightResponse])
def list_insights(
    patient_id: Optional[UUID] = Query(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Undismissed insights, most severe first"""
    return HealthService.list_insights(db, current_user, patient_id)


@router.patch("/insights/{insight_id}/read", response_model=HealthInsightResponse)
def mark_insight_read(
    insight_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return HealthService.mark_insight_read(db, insight_id)


@router.patch("/insights/{insight_id}/dismiss", response_model=HealthInsightResponse)
def dismiss_insight(
    insight_id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return HealthService.dismiss_insight(db, insight_id)
