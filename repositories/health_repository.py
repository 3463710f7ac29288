"""
Health Repository - Data access layer for health metrics and insights
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import HealthMetric, HealthInsight
from domain.enums import MetricType


class HealthMetricRepository(BaseRepository[HealthMetric]):
    """Repository for health metric data access"""

    def __init__(self, db: Session):
        super().__init__(db, HealthMetric)

    def find(
        self,
        patient_id: UUID,
        metric_type: Optional[MetricType] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: int = 100,
    ) -> List[HealthMetric]:
        """Latest readings of a patient"""
        query = self.db.query(HealthMetric).filter(HealthMetric.patient_id == patient_id)

        if metric_type:
            query = query.filter(HealthMetric.metric_type == metric_type)
        if start and end:
            query = query.filter(
                HealthMetric.recorded_at >= start, HealthMetric.recorded_at <= end
            )

        return query.order_by(HealthMetric.recorded_at.desc()).limit(limit).all()

    def get_all_for_patient(self, patient_id: UUID) -> List[HealthMetric]:
        """Every reading of a patient, oldest first"""
        return (
            self.db.query(HealthMetric)
            .filter(HealthMetric.patient_id == patient_id)
            .order_by(HealthMetric.recorded_at.asc())
            .all()
        )

    def count_tracking_patients(self) -> int:
        """Number of distinct patients with at least one reading"""
        return self.db.query(func.count(func.distinct(HealthMetric.patient_id))).scalar()

    def average_value(self, metric_type: MetricType) -> Optional[float]:
        return (
            self.db.query(func.avg(HealthMetric.value))
            .filter(HealthMetric.metric_type == metric_type)
            .scalar()
        )


class HealthInsightRepository(BaseRepository[HealthInsight]):
    """Repository for health insight data access"""

    def __init__(self, db: Session):
        super().__init__(db, HealthInsight)

    def get_visible(self, patient_id: UUID) -> List[HealthInsight]:
        """Undismissed insights of a patient, newest first"""
        return (
            self.db.query(HealthInsight)
            .filter(
                HealthInsight.patient_id == patient_id,
                HealthInsight.is_dismissed.is_(False),
            )
            .order_by(HealthInsight.generated_at.desc())
            .all()
        )

    def delete_older_than(self, patient_id: UUID, cutoff: datetime) -> int:
        """Remove a patient's insights generated before the cutoff"""
        count = (
            self.db.query(HealthInsight)
            .filter(
                HealthInsight.patient_id == patient_id,
                HealthInsight.generated_at < cutoff,
            )
            .delete(synchronize_session=False)
        )
        self.db.flush()
        return count

    def bulk_create(self, insights: List[HealthInsight]) -> List[HealthInsight]:
        self.db.add_all(insights)
        self.db.commit()
        for insight in insights:
            self.db.refresh(insight)
        return insights

    def count_by_category_and_severity(self) -> List[dict]:
        results = (
            self.db.query(
                HealthInsight.category,
                HealthInsight.severity,
                func.count(HealthInsight.id).label("insight_count"),
            )
            .group_by(HealthInsight.category, HealthInsight.severity)
            .order_by(HealthInsight.category, HealthInsight.severity)
            .all()
        )
        return [
            {"category": r.category, "severity": r.severity, "count": r.insight_count}
            for r in results
        ]
