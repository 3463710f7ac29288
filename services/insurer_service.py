"""
Insurer analytics service: claims, risk and population health.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.enums import (
    AppointmentStatus,
    ClaimStatus,
    MetricType,
    RiskLevel,
    UserRole,
)
from domain.models import Claim
from domain.schemas.insurer_schemas import (
    DashboardOverviewResponse,
    ClaimResponse,
    RiskAssessmentResponse,
    PopulationHealthResponse,
    MetricAverages,
    InsightCount,
    CostAnalyticsResponse,
    ClaimTypeTotals,
    ClaimStatusTotals,
)
from repositories import (
    AppointmentRepository,
    ClaimRepository,
    HealthInsightRepository,
    HealthMetricRepository,
    RiskAssessmentRepository,
    UserRepository,
)

logger = logging.getLogger("inpep.insurer")

HIGH_RISK_LEVELS = [RiskLevel.HIGH, RiskLevel.CRITICAL]
PREVENTIVE_APPOINTMENT_TYPE = "Checkup"
SAVINGS_PER_PREVENTIVE_VISIT = 1000
HIGH_COST_CLAIMS_LIMIT = 10


class InsurerService:
    @staticmethod
    def get_dashboard_overview(db: Session) -> DashboardOverviewResponse:
        """Headline member, claim and risk figures"""
        users = UserRepository(db)
        claims = ClaimRepository(db)

        total_claims = claims.count()
        amounts = claims.amount_totals()

        return DashboardOverviewResponse(
            total_members=users.count_active(UserRole.PATIENT),
            total_claims=total_claims,
            pending_claims=claims.count(ClaimStatus.PENDING),
            approved_claims=claims.count(ClaimStatus.APPROVED),
            total_claimed_amount=amounts["claimed"],
            total_approved_amount=amounts["approved"],
            cost_savings=amounts["claimed"] - amounts["approved"],
            high_risk_patients=RiskAssessmentRepository(db).count_at_levels(
                HIGH_RISK_LEVELS
            ),
            active_providers=users.count_active(UserRole.PROVIDER),
            average_claim_amount=(
                amounts["claimed"] / total_claims if total_claims else 0
            ),
        )

    @staticmethod
    def list_claims(
        db: Session,
        status: Optional[ClaimStatus] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        limit: int = 50,
    ) -> List[ClaimResponse]:
        claims = ClaimRepository(db).find(
            status=status, start=start_date, end=end_date, limit=limit
        )
        return [ClaimResponse.model_validate(c) for c in claims]

    @staticmethod
    def flag_claim(db: Session, claim_id: UUID, flagged: bool) -> ClaimResponse:
        """Mark a claim as a fraud suspect for manual review, or clear the mark"""
        repo = ClaimRepository(db)
        claim = repo.get_by_id(claim_id)
        if not claim:
            raise NotFoundError("Claim not found")

        claim.is_fraud_suspect = flagged
        claim = repo.update(claim)

        logger.info(
            f"claim_flag_changed claim_id={claim_id} "
            f"claim_number={claim.claim_number} fraud_suspect={flagged}"
        )
        return ClaimResponse.model_validate(claim)

    @staticmethod
    def list_risk_assessments(
        db: Session, risk_level: Optional[RiskLevel] = None, limit: int = 50
    ) -> List[RiskAssessmentResponse]:
        assessments = RiskAssessmentRepository(db).find(risk_level=risk_level, limit=limit)
        return [RiskAssessmentResponse.model_validate(a) for a in assessments]

    @staticmethod
    def get_population_health(db: Session) -> PopulationHealthResponse:
        """
        Tracking coverage, average vitals and insight distribution.

        The tracking percentage is 0 when there are no active patients.
        """
        metrics = HealthMetricRepository(db)

        total_patients = UserRepository(db).count_active(UserRole.PATIENT)
        tracking = metrics.count_tracking_patients()

        return PopulationHealthResponse(
            total_patients=total_patients,
            patients_tracking=tracking,
            tracking_percentage=(
                tracking / total_patients * 100 if total_patients else 0
            ),
            average_metrics=MetricAverages(
                blood_pressure=metrics.average_value(MetricType.BLOOD_PRESSURE),
                glucose=metrics.average_value(MetricType.GLUCOSE),
                weight=metrics.average_value(MetricType.WEIGHT),
            ),
            insights_by_category=[
                InsightCount(**row)
                for row in HealthInsightRepository(db).count_by_category_and_severity()
            ],
        )

    @staticmethod
    def get_cost_analytics(
        db: Session,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> CostAnalyticsResponse:
        """
        Claim spend by type and status, the costliest claims and the savings
        attributed to completed preventive checkups.
        """
        claims = ClaimRepository(db)

        by_type = claims.grouped_totals(Claim.claim_type, start_date, end_date)
        by_status = claims.grouped_totals(Claim.status, start_date, end_date)
        high_cost = claims.high_cost(start_date, end_date, limit=HIGH_COST_CLAIMS_LIMIT)

        preventive = AppointmentRepository(db).count_by_type_and_status(
            PREVENTIVE_APPOINTMENT_TYPE, AppointmentStatus.COMPLETED
        )

        logger.debug(
            f"cost_analytics claim_types={len(by_type)} high_cost={len(high_cost)} "
            f"preventive_visits={preventive}"
        )

        return CostAnalyticsResponse(
            claims_by_type=[
                ClaimTypeTotals(
                    claim_type=row["key"],
                    count=row["count"],
                    total_claimed=row["total_claimed"],
                    total_approved=row["total_approved"],
                )
                for row in by_type
            ],
            claims_by_status=[
                ClaimStatusTotals(
                    status=row["key"],
                    count=row["count"],
                    total_claimed=row["total_claimed"],
                    total_approved=row["total_approved"],
                )
                for row in by_status
            ],
            high_cost_claims=[ClaimResponse.model_validate(c) for c in high_cost],
            preventive_care_appointments=preventive,
            estimated_preventive_savings=preventive * SAVINGS_PER_PREVENTIVE_VISIT,
        )
