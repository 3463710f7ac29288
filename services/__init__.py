"""Services package - Business logic layer"""

from services.auth_service import AuthService
from services.appointment_service import AppointmentService
from services.heredibles_service import HerediblesService
from services.caregiver_engagement_service import CaregiverEngagementService
from services.insurer_service import InsurerService
from services.health_service import HealthService
from services.provider_service import ProviderService

# Note: insight_generator contains pure functions, not a class

__all__ = [
    "AuthService",
    "AppointmentService",
    "HerediblesService",
    "CaregiverEngagementService",
    "InsurerService",
    "HealthService",
    "ProviderService",
]
