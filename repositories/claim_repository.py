"""
Claim Repository - Data access layer for insurer claims and risk assessments
"""

from datetime import datetime
from typing import Dict, List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Claim, RiskAssessment
from domain.enums import ClaimStatus, RiskLevel


class ClaimRepository(BaseRepository[Claim]):
    """Repository for claim data access"""

    def __init__(self, db: Session):
        super().__init__(db, Claim)

    def _service_window(self, query, start: Optional[datetime], end: Optional[datetime]):
        if start and end:
            query = query.filter(Claim.service_date >= start, Claim.service_date <= end)
        return query

    def find(
        self,
        status: Optional[ClaimStatus] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: int = 50,
    ) -> List[Claim]:
        """Claims, most recently submitted first"""
        query = self.db.query(Claim)
        if status:
            query = query.filter(Claim.status == status)
        query = self._service_window(query, start, end)
        return query.order_by(Claim.submitted_date.desc()).limit(limit).all()

    def count(self, status: Optional[ClaimStatus] = None) -> int:
        query = self.db.query(func.count(Claim.id))
        if status:
            query = query.filter(Claim.status == status)
        return query.scalar()

    def amount_totals(self) -> Dict[str, float]:
        """Sum of claimed and approved amounts across all claims"""
        claimed, approved = self.db.query(
            func.coalesce(func.sum(Claim.claimed_amount), 0.0),
            func.coalesce(func.sum(Claim.approved_amount), 0.0),
        ).one()
        return {"claimed": float(claimed), "approved": float(approved)}

    def grouped_totals(
        self,
        column,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[dict]:
        """Counts and amount sums grouped by a claim column (type or status)"""
        query = self.db.query(
            column.label("key"),
            func.count(Claim.id).label("claim_count"),
            func.coalesce(func.sum(Claim.claimed_amount), 0.0).label("claimed"),
            func.coalesce(func.sum(Claim.approved_amount), 0.0).label("approved"),
        )
        query = self._service_window(query, start, end)
        results = query.group_by(column).order_by(column).all()

        return [
            {
                "key": r.key,
                "count": r.claim_count,
                "total_claimed": float(r.claimed),
                "total_approved": float(r.approved),
            }
            for r in results
        ]

    def high_cost(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: int = 10,
    ) -> List[Claim]:
        query = self.db.query(Claim).filter(Claim.is_high_cost.is_(True))
        query = self._service_window(query, start, end)
        return query.order_by(Claim.claimed_amount.desc()).limit(limit).all()


class RiskAssessmentRepository(BaseRepository[RiskAssessment]):
    """Repository for risk assessment data access"""

    def __init__(self, db: Session):
        super().__init__(db, RiskAssessment)

    def find(self, risk_level: Optional[RiskLevel] = None, limit: int = 50) -> List[RiskAssessment]:
        """Assessments, highest overall risk first"""
        query = self.db.query(RiskAssessment)
        if risk_level:
            query = query.filter(RiskAssessment.risk_level == risk_level)
        return query.order_by(RiskAssessment.overall_risk_score.desc()).limit(limit).all()

    def count_at_levels(self, levels: List[RiskLevel]) -> int:
        return (
            self.db.query(func.count(RiskAssessment.id))
            .filter(RiskAssessment.risk_level.in_(levels))
            .scalar()
        )
