"""
User domain mappers.
Handles transformation between the User ORM model and auth DTOs.
"""

from domain.models import User
from domain.schemas.auth_schemas import UserSummary, UserProfileResponse
from domain.schemas.provider_schemas import ProviderResponse

DEFAULT_SPECIALTY = "General"
DEFAULT_DEPARTMENT = "inPEP Medical Center"


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_summary(user: User) -> UserSummary:
        """Identity block embedded in register/login responses."""
        return UserSummary(
            id=user.id,
            email=user.email,
            name=user.name,
            role=user.role,
        )

    @staticmethod
    def to_profile(user: User) -> UserProfileResponse:
        """
        Convert User ORM model to UserProfileResponse DTO.

        The password hash never leaves the model.

        Args:
            user: User ORM instance

        Returns:
            UserProfileResponse DTO
        """
        return UserProfileResponse.model_validate(user)

    @staticmethod
    def to_provider(user: User) -> ProviderResponse:
        """Directory entry; providers without a profile get clinic defaults."""
        profile = user.provider_profile
        return ProviderResponse(
            id=user.id,
            name=user.name,
            email=user.email,
            specialty=(profile and profile.specialty) or DEFAULT_SPECIALTY,
            department=(profile and profile.clinic_name) or DEFAULT_DEPARTMENT,
            license_number=profile.license_number if profile else None,
        )
