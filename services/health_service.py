from datetime import datetime, timedelta
from typing import List, Optional
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, ServiceValidationError
from core.utils.helpers import utcnow, ensure_utc
from domain.enums import MetricType, UserRole
from domain.models import HealthInsight, HealthMetric, User
from domain.schemas.health_schemas import (
    HealthMetricCreate,
    HealthMetricResponse,
    HealthInsightResponse,
)
from repositories import HealthMetricRepository, HealthInsightRepository, UserRepository
from services import insight_generator

logger = logging.getLogger("inpep.health")

INSIGHT_RETENTION = timedelta(days=7)
METRICS_LIMIT = 100


class HealthService:
    @staticmethod
    def resolve_patient_id(current_user: User, patient_id: Optional[UUID]) -> UUID:
        """
        Patients always act on their own record; every other role must name one.

        Raises:
            ServiceValidationError: If a non-patient caller gives no patient id
        """
        if current_user.role == UserRole.PATIENT:
            return current_user.id
        if not patient_id:
            raise ServiceValidationError("Patient ID required")
        return patient_id

    @staticmethod
    def list_metrics(
        db: Session,
        current_user: User,
        patient_id: Optional[UUID] = None,
        metric_type: Optional[MetricType] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> List[HealthMetricResponse]:
        target = HealthService.resolve_patient_id(current_user, patient_id)
        metrics = HealthMetricRepository(db).find(
            target,
            metric_type=metric_type,
            start=start_date,
            end=end_date,
            limit=METRICS_LIMIT,
        )
        return [HealthMetricResponse.model_validate(m) for m in metrics]

    @staticmethod
    def record_metric(
        db: Session, current_user: User, data: HealthMetricCreate
    ) -> HealthMetricResponse:
        target = HealthService.resolve_patient_id(current_user, data.patient_id)
        if current_user.role != UserRole.PATIENT:
            patient = UserRepository(db).get_by_id(target)
            if not patient or patient.role != UserRole.PATIENT:
                raise ServiceValidationError("Invalid patient")

        metric = HealthMetric(
            patient_id=target,
            metric_type=data.metric_type,
            value=data.value,
            unit=data.unit,
            additional_data=data.additional_data,
            notes=data.notes,
            recorded_by=current_user.id,
            recorded_at=data.recorded_at or utcnow(),
        )
        metric = HealthMetricRepository(db).create(metric)

        logger.info(
            f"metric_recorded metric_id={metric.id} patient_id={target} "
            f"type={data.metric_type.value} recorded_by={current_user.id}"
        )
        return HealthMetricResponse.model_validate(metric)

    @staticmethod
    def generate_insights(
        db: Session, current_user: User, patient_id: Optional[UUID] = None
    ) -> List[HealthInsightResponse]:
        """
        Analyse every reading of a patient and store the resulting insights.

        Insights older than a week are discarded first.
        """
        target = HealthService.resolve_patient_id(current_user, patient_id)
        metrics = HealthMetricRepository(db).get_all_for_patient(target)

        generated = insight_generator.generate_insights(
            insight_generator.group_by_type(metrics)
        )

        now = utcnow()
        insights_repo = HealthInsightRepository(db)
        removed = insights_repo.delete_older_than(target, now - INSIGHT_RETENTION)

        saved = insights_repo.bulk_create(
            [
                HealthInsight(
                    patient_id=target,
                    insight_type=g.insight_type,
                    category=g.category,
                    title=g.title,
                    description=g.description,
                    severity=g.severity,
                    confidence=g.confidence,
                    data_points=g.data_points,
                    generated_at=now,
                )
                for g in generated
            ]
        )

        logger.info(
            f"insights_generated patient_id={target} metrics={len(metrics)} "
            f"created={len(saved)} removed={removed}"
        )
        return [HealthInsightResponse.model_validate(i) for i in saved]

    @staticmethod
    def list_insights(
        db: Session, current_user: User, patient_id: Optional[UUID] = None
    ) -> List[HealthInsightResponse]:
        """Undismissed insights, most severe first, then newest first"""
        target = HealthService.resolve_patient_id(current_user, patient_id)
        insights = HealthInsightRepository(db).get_visible(target)

        # Stable sorts: newest first, then by severity
        insights.sort(key=lambda i: ensure_utc(i.generated_at), reverse=True)
        insights.sort(key=lambda i: i.severity.rank, reverse=True)

        return [HealthInsightResponse.model_validate(i) for i in insights]

    @staticmethod
    def _set_insight_flag(db: Session, insight_id: UUID, **flags) -> HealthInsightResponse:
        repo = HealthInsightRepository(db)
        insight = repo.get_by_id(insight_id)
        if not insight:
            raise NotFoundError("Insight not found")

        for name, value in flags.items():
            setattr(insight, name, value)
        insight = repo.update(insight)
        return HealthInsightResponse.model_validate(insight)

    @staticmethod
    def mark_insight_read(db: Session, insight_id: UUID) -> HealthInsightResponse:
        logger.debug(f"insight_read insight_id={insight_id}")
        return HealthService._set_insight_flag(db, insight_id, is_read=True)

    @staticmethod
    def dismiss_insight(db: Session, insight_id: UUID) -> HealthInsightResponse:
        logger.info(f"insight_dismissed insight_id={insight_id}")
        return HealthService._set_insight_flag(db, insight_id, is_dismissed=True)
