"""API routes package"""

from . import (
    system,
    auth,
    appointments,
    providers,
    heredibles,
    caregiver_engagement,
    insurer,
    health,
)

__all__ = [
    "system",
    "auth",
    "appointments",
    "providers",
    "heredibles",
    "caregiver_engagement",
    "insurer",
    "health",
]
