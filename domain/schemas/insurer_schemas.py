from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from domain.enums import ClaimType, ClaimStatus, RiskLevel, InsightCategory, InsightSeverity


class DashboardOverviewResponse(BaseModel):
    """Headline numbers for the insurer dashboard"""

    total_members: int
    total_claims: int
    pending_claims: int
    approved_claims: int
    total_claimed_amount: float
    total_approved_amount: float
    cost_savings: float
    high_risk_patients: int
    active_providers: int
    average_claim_amount: float


class ClaimResponse(BaseModel):
    id: UUID
    claim_number: str
    patient_id: UUID
    patient_name: Optional[str] = None
    provider_id: Optional[UUID] = None
    provider_name: Optional[str] = None
    claim_type: ClaimType
    status: ClaimStatus
    service_date: datetime
    submitted_date: Optional[datetime] = None
    processed_date: Optional[datetime] = None
    claimed_amount: float
    approved_amount: Optional[float] = None
    deductible: Optional[float] = None
    copay: Optional[float] = None
    denial_reason: Optional[str] = None
    diagnosis_code: Optional[str] = None
    procedure_code: Optional[str] = None
    description: Optional[str] = None
    is_high_cost: bool
    is_fraud_suspect: bool
    risk_score: Optional[float] = None

    model_config = {"from_attributes": True}


class ClaimFlagRequest(BaseModel):
    flagged: bool


class RiskAssessmentResponse(BaseModel):
    id: UUID
    patient_id: UUID
    patient_name: Optional[str] = None
    overall_risk_score: float
    risk_level: RiskLevel
    chronic_conditions: List[str] = []
    recent_hospitalizations: int
    medication_count: int
    missed_appointments: int
    hospitalization_risk: Optional[float] = None
    cost_prediction: Optional[float] = None
    interventions: List[str] = []
    assessed_at: Optional[datetime] = None
    next_assessment: Optional[datetime] = None

    model_config = {"from_attributes": True}


class MetricAverages(BaseModel):
    blood_pressure: Optional[float] = None
    glucose: Optional[float] = None
    weight: Optional[float] = None


class InsightCount(BaseModel):
    category: InsightCategory
    severity: InsightSeverity
    count: int


class PopulationHealthResponse(BaseModel):
    total_patients: int
    patients_tracking: int
    tracking_percentage: float
    average_metrics: MetricAverages
    insights_by_category: List[InsightCount]


class ClaimTypeTotals(BaseModel):
    claim_type: ClaimType
    count: int
    total_claimed: float
    total_approved: float


class ClaimStatusTotals(BaseModel):
    status: ClaimStatus
    count: int
    total_claimed: float
    total_approved: float


class CostAnalyticsResponse(BaseModel):
    """Claim spend breakdown and preventive care estimate"""

    claims_by_type: List[ClaimTypeTotals]
    claims_by_status: List[ClaimStatusTotals]
    high_cost_claims: List[ClaimResponse]
    preventive_care_appointments: int
    estimated_preventive_savings: float
