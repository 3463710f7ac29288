"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.user import User, ProviderProfile
from domain.models.appointment import Appointment
from domain.models.meal_plan import Recipe, MealPlan, PlannedMeal, NutritionLog
from domain.models.caregiver import CaregiverEngagement
from domain.models.insurer import Claim, RiskAssessment
from domain.models.health import HealthMetric, HealthInsight

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # User models
    "User",
    "ProviderProfile",
    # Scheduling
    "Appointment",
    # Heredibles
    "Recipe",
    "MealPlan",
    "PlannedMeal",
    "NutritionLog",
    # ReclaiMe
    "CaregiverEngagement",
    # Insurer
    "Claim",
    "RiskAssessment",
    # Health tracking
    "HealthMetric",
    "HealthInsight",
]
