"""
Domain enums for the inPEP application.
Contains all enumeration types used across the domain models.
"""

import enum


class UserRole(str, enum.Enum):
    """Roles a platform user can hold"""

    PATIENT = "PATIENT"
    CAREGIVER = "CAREGIVER"
    PROVIDER = "PROVIDER"
    INSURER = "INSURER"


class AppointmentStatus(str, enum.Enum):
    """Lifecycle of an appointment"""

    SCHEDULED = "SCHEDULED"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    NO_SHOW = "NO_SHOW"


class RecipeDifficulty(str, enum.Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class MealType(str, enum.Enum):
    """Recipe category / planned meal slot"""

    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"
    SNACK = "SNACK"
    DESSERT = "DESSERT"


class EngagementLevel(str, enum.Enum):
    """Caregiver engagement bands, listed in alert order"""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class ClaimType(str, enum.Enum):
    MEDICAL = "MEDICAL"
    PHARMACY = "PHARMACY"
    DENTAL = "DENTAL"
    VISION = "VISION"


class ClaimStatus(str, enum.Enum):
    PENDING = "PENDING"
    UNDER_REVIEW = "UNDER_REVIEW"
    APPROVED = "APPROVED"
    DENIED = "DENIED"


class RiskLevel(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class MetricType(str, enum.Enum):
    """Kinds of health readings a patient or caregiver can record"""

    BLOOD_PRESSURE = "BLOOD_PRESSURE"
    HEART_RATE = "HEART_RATE"
    WEIGHT = "WEIGHT"
    GLUCOSE = "GLUCOSE"
    OXYGEN_SATURATION = "OXYGEN_SATURATION"
    TEMPERATURE = "TEMPERATURE"


class InsightType(str, enum.Enum):
    TREND = "TREND"
    RISK = "RISK"
    RECOMMENDATION = "RECOMMENDATION"
    ACHIEVEMENT = "ACHIEVEMENT"


class InsightCategory(str, enum.Enum):
    CARDIOVASCULAR = "CARDIOVASCULAR"
    DIABETES = "DIABETES"
    WEIGHT = "WEIGHT"
    GENERAL = "GENERAL"


class InsightSeverity(str, enum.Enum):
    """Insight severity, least to most urgent"""

    INFO = "INFO"
    WARNING = "WARNING"
    ALERT = "ALERT"
    CRITICAL = "CRITICAL"

    @property
    def rank(self) -> int:
        return list(InsightSeverity).index(self)
