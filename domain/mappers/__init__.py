"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.user_mapper import UserMapper
from domain.mappers.caregiver_mapper import CaregiverMapper

__all__ = ["UserMapper", "CaregiverMapper"]
