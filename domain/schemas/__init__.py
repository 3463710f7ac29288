"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.auth_schemas import (
    RegisterRequest,
    LoginRequest,
    UserSummary,
    AuthResponse,
    UserProfileResponse,
)
from domain.schemas.appointment_schemas import (
    AppointmentCreate,
    AppointmentUpdate,
    AppointmentCancel,
    AppointmentResponse,
    MessageResponse,
)
from domain.schemas.provider_schemas import ProviderResponse
from domain.schemas.heredibles_schemas import (
    RecipeResponse,
    PlannedMealResponse,
    MealPlanResponse,
    MealPlanWithMealsResponse,
    CompleteMealRequest,
    MealPhotoRequest,
    RateMealRequest,
    MealPreferencesResponse,
    NutritionLogResponse,
    NutritionSummaryResponse,
)
from domain.schemas.caregiver_schemas import (
    CaregiverEntry,
    CaregiverDashboardResponse,
    FlagRequest,
    CaregiverFlagResponse,
)
from domain.schemas.insurer_schemas import (
    DashboardOverviewResponse,
    ClaimResponse,
    ClaimFlagRequest,
    RiskAssessmentResponse,
    PopulationHealthResponse,
    CostAnalyticsResponse,
)
from domain.schemas.health_schemas import (
    HealthMetricCreate,
    HealthMetricResponse,
    HealthInsightResponse,
)

__all__ = [
    # Auth schemas
    "RegisterRequest",
    "LoginRequest",
    "UserSummary",
    "AuthResponse",
    "UserProfileResponse",
    # Appointment schemas
    "AppointmentCreate",
    "AppointmentUpdate",
    "AppointmentCancel",
    "AppointmentResponse",
    "MessageResponse",
    # Provider schemas
    "ProviderResponse",
    # Heredibles schemas
    "RecipeResponse",
    "PlannedMealResponse",
    "MealPlanResponse",
    "MealPlanWithMealsResponse",
    "CompleteMealRequest",
    "MealPhotoRequest",
    "RateMealRequest",
    "MealPreferencesResponse",
    "NutritionLogResponse",
    "NutritionSummaryResponse",
    # Caregiver engagement schemas
    "CaregiverEntry",
    "CaregiverDashboardResponse",
    "FlagRequest",
    "CaregiverFlagResponse",
    # Insurer schemas
    "DashboardOverviewResponse",
    "ClaimResponse",
    "ClaimFlagRequest",
    "RiskAssessmentResponse",
    "PopulationHealthResponse",
    "CostAnalyticsResponse",
    # Health schemas
    "HealthMetricCreate",
    "HealthMetricResponse",
    "HealthInsightResponse",
]
