"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository
from repositories.appointment_repository import AppointmentRepository
from repositories.recipe_repository import RecipeRepository
from repositories.meal_plan_repository import (
    MealPlanRepository,
    PlannedMealRepository,
    NutritionLogRepository,
)
from repositories.caregiver_engagement_repository import (
    CaregiverEngagementRepository,
)
from repositories.claim_repository import ClaimRepository, RiskAssessmentRepository
from repositories.health_repository import (
    HealthMetricRepository,
    HealthInsightRepository,
)

__all__ = [
    "BaseRepository",
    "UserRepository",
    "AppointmentRepository",
    "RecipeRepository",
    "MealPlanRepository",
    "PlannedMealRepository",
    "NutritionLogRepository",
    "CaregiverEngagementRepository",
    "ClaimRepository",
    "RiskAssessmentRepository",
    "HealthMetricRepository",
    "HealthInsightRepository",
]
