"""
Shared test fixtures and utilities for the inPEP test suite.

This module contains mock objects, factory helpers and the test client that
are reused across test files. Pytest fixtures live in conftest.py.
"""

import uuid
from types import SimpleNamespace
from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from domain.enums import (
    AppointmentStatus,
    ClaimStatus,
    ClaimType,
    EngagementLevel,
    InsightCategory,
    InsightSeverity,
    InsightType,
    MealType,
    MetricType,
    RecipeDifficulty,
    RiskLevel,
    UserRole,
)
from domain.models import (
    Appointment,
    CaregiverEngagement,
    Claim,
    HealthInsight,
    HealthMetric,
    MealPlan,
    NutritionLog,
    PlannedMeal,
    Recipe,
    RiskAssessment,
    User,
)
from main import app
from services import AuthService

client = TestClient(app)

DEFAULT_PASSWORD = "secret123"


def utc(*args) -> datetime:
    """Timezone-aware UTC datetime shorthand"""
    return datetime(*args, tzinfo=timezone.utc)


def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4().hex[:8]}@example.com"


# Realistic default people per role
REALISTIC_USERS = {
    UserRole.PATIENT: {"name": "Maria Lopez", "email_prefix": "maria.lopez"},
    UserRole.CAREGIVER: {"name": "Daniel Lopez", "email_prefix": "daniel.lopez"},
    UserRole.PROVIDER: {"name": "Dr. Aisha Khan", "email_prefix": "aisha.khan"},
    UserRole.INSURER: {"name": "Tom Becker", "email_prefix": "tom.becker"},
}


# =============================================================================
# MOCK OBJECTS (for route tests with patched services)
# =============================================================================


def make_user(role: UserRole = UserRole.PATIENT, user_id=None, name=None, email=None):
    """
    Create a mock user object for route tests.

    Args:
        role: Role of the user. Defaults to PATIENT.
        user_id: Optional UUID. Generates a new one if not provided.
        name: Display name. Uses a realistic default for the role.
        email: Email address. Auto-generated if not provided.

    Returns:
        SimpleNamespace: Mock user exposing the attributes routes read.
    """
    profile = REALISTIC_USERS[role]
    return SimpleNamespace(
        id=user_id or uuid.uuid4(),
        email=email or unique_email(profile["email_prefix"]),
        name=name or profile["name"],
        role=role,
        is_active=True,
    )


# =============================================================================
# FACTORY HELPERS (persisted rows)
# =============================================================================


def _save(db: Session, entity):
    db.add(entity)
    db.commit()
    db.refresh(entity)
    return entity


def create_user(
    db: Session,
    role: UserRole = UserRole.PATIENT,
    email=None,
    name=None,
    password: str = DEFAULT_PASSWORD,
    is_active: bool = True,
) -> User:
    profile = REALISTIC_USERS[role]
    return _save(
        db,
        User(
            email=email or unique_email(profile["email_prefix"]),
            password_hash=AuthService.hash_password(password),
            name=name or profile["name"],
            role=role,
            is_active=is_active,
        ),
    )


def auth_headers(user) -> dict:
    """Bearer header carrying a real signed token for the user"""
    return {"Authorization": f"Bearer {AuthService.create_access_token(user)}"}


def make_recipe(db: Session, **overrides) -> Recipe:
    """
    Persist a recipe with realistic defaults.

    Example:
        >>> make_recipe(db, name="Jollof Rice", calories=450, dietary_tags=["vegan"])
    """
    fields = dict(
        name="Caribbean Stewed Chicken",
        description="Slow cooked chicken with thyme and allspice",
        prep_time=15,
        cook_time=45,
        servings=4,
        difficulty=RecipeDifficulty.MEDIUM,
        category=MealType.DINNER,
        cuisine="Caribbean",
        dietary_tags=["high-protein"],
        calories=520,
        protein=38.0,
        carbs=30.0,
        fat=22.0,
        good_for=["hypertension"],
        ingredients=[{"name": "chicken thighs", "amount": 800, "unit": "g"}],
        instructions=["Season the chicken", "Brown and simmer for 40 minutes"],
        rating=4.5,
        review_count=12,
        is_public=True,
    )
    fields.update(overrides)
    return _save(db, Recipe(**fields))


def make_meal_plan(db: Session, patient: User, **overrides) -> MealPlan:
    fields = dict(
        patient_id=patient.id,
        patient_name=patient.name,
        plan_name="Heart Healthy Week",
        start_date=utc(2025, 3, 1),
        end_date=utc(2025, 3, 31),
        is_active=True,
        target_calories=1800,
        target_protein=90.0,
        target_carbs=200.0,
        target_fat=60.0,
        diet_type="DASH",
        restrictions=["low-sodium"],
        health_conditions=["hypertension"],
    )
    fields.update(overrides)
    return _save(db, MealPlan(**fields))


def make_planned_meal(db: Session, plan: MealPlan, **overrides) -> PlannedMeal:
    fields = dict(
        meal_plan_id=plan.id,
        date=utc(2025, 3, 10, 8),
        meal_type=MealType.BREAKFAST,
        recipe_name="Oatmeal with Berries",
        calories=350,
        protein=12.0,
        carbs=55.0,
        fat=8.0,
    )
    fields.update(overrides)
    return _save(db, PlannedMeal(**fields))


def make_nutrition_log(db: Session, patient: User, **overrides) -> NutritionLog:
    fields = dict(
        patient_id=patient.id,
        date=utc(2025, 3, 10),
        calories=1750,
        protein=85.0,
        carbs=210.0,
        fat=58.0,
        water_intake_ml=1800,
    )
    fields.update(overrides)
    return _save(db, NutritionLog(**fields))


def make_appointment(db: Session, patient: User, provider: User, **overrides) -> Appointment:
    fields = dict(
        patient_id=patient.id,
        patient_name=patient.name,
        provider_id=provider.id,
        provider_name=provider.name,
        title="Quarterly checkup",
        appointment_type="Checkup",
        start_time=utc(2025, 4, 2, 9),
        end_time=utc(2025, 4, 2, 9, 30),
        duration=30,
        status=AppointmentStatus.SCHEDULED,
    )
    fields.update(overrides)
    return _save(db, Appointment(**fields))


def make_engagement(db: Session, **overrides) -> CaregiverEngagement:
    fields = dict(
        caregiver_id=uuid.uuid4(),
        caregiver_name="Daniel Lopez",
        patient_id=uuid.uuid4(),
        patient_name="Maria Lopez",
        engagement_score=75,
        engagement_level=EngagementLevel.HIGH,
        wellness_plan_updates=3,
        medication_logs=7,
        meal_plan_updates=2,
        vitals_recorded=5,
        messages_exchanged=9,
        stress_level="moderate",
        stress_factors=["work schedule"],
        burnout_risk=30,
        last_activity_at=datetime.now(timezone.utc) - timedelta(hours=5),
        last_activity_type="medication_log",
    )
    fields.update(overrides)
    return _save(db, CaregiverEngagement(**fields))


def make_claim(db: Session, **overrides) -> Claim:
    fields = dict(
        claim_number=f"CLM-{uuid.uuid4().hex[:8].upper()}",
        patient_id=uuid.uuid4(),
        patient_name="Maria Lopez",
        provider_id=uuid.uuid4(),
        provider_name="Dr. Aisha Khan",
        claim_type=ClaimType.MEDICAL,
        status=ClaimStatus.PENDING,
        service_date=utc(2025, 2, 14),
        submitted_date=utc(2025, 2, 16),
        claimed_amount=1200.0,
        is_high_cost=False,
    )
    fields.update(overrides)
    return _save(db, Claim(**fields))


def make_risk_assessment(db: Session, **overrides) -> RiskAssessment:
    fields = dict(
        patient_id=uuid.uuid4(),
        patient_name="Maria Lopez",
        overall_risk_score=55.0,
        risk_level=RiskLevel.MEDIUM,
        chronic_conditions=["hypertension"],
        recent_hospitalizations=0,
        medication_count=3,
        missed_appointments=1,
        interventions=["Medication review"],
    )
    fields.update(overrides)
    return _save(db, RiskAssessment(**fields))


def make_metric(db: Session, patient_id, **overrides) -> HealthMetric:
    fields = dict(
        patient_id=patient_id,
        metric_type=MetricType.HEART_RATE,
        value=72.0,
        unit="bpm",
        recorded_at=datetime.now(timezone.utc),
    )
    fields.update(overrides)
    return _save(db, HealthMetric(**fields))


def make_insight(db: Session, patient_id, **overrides) -> HealthInsight:
    fields = dict(
        patient_id=patient_id,
        insight_type=InsightType.TREND,
        category=InsightCategory.CARDIOVASCULAR,
        title="Low Resting Heart Rate",
        description="Your average resting heart rate is 55 bpm.",
        severity=InsightSeverity.INFO,
        confidence=0.85,
        generated_at=datetime.now(timezone.utc),
    )
    fields.update(overrides)
    return _save(db, HealthInsight(**fields))
