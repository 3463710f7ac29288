"""
Authentication service: account registration, login and access tokens.
"""

from datetime import timedelta
from typing import Any, Dict
from uuid import UUID
import logging

import jwt
from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash, check_password_hash

from app.config import settings
from app.exceptions import (
    ServiceValidationError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
)
from core.utils.helpers import utcnow
from domain.enums import UserRole
from domain.models import User, ProviderProfile
from domain.mappers import UserMapper
from domain.schemas.auth_schemas import (
    RegisterRequest,
    LoginRequest,
    AuthResponse,
    UserProfileResponse,
)
from repositories import UserRepository

logger = logging.getLogger("inpep.auth")

MIN_PASSWORD_LENGTH = 6
INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    @staticmethod
    def hash_password(password: str) -> str:
        return generate_password_hash(password)

    @staticmethod
    def verify_password(password_hash: str, password: str) -> bool:
        return check_password_hash(password_hash, password)

    @staticmethod
    def create_access_token(user: User) -> str:
        """Sign a bearer token carrying the user's identity and role"""
        now = utcnow()
        payload = {
            "sub": str(user.id),
            "email": user.email,
            "name": user.name,
            "role": user.role.value,
            "iat": now,
            "exp": now + timedelta(minutes=settings.jwt_expires_minutes),
        }
        return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    @staticmethod
    def decode_access_token(token: str) -> Dict[str, Any]:
        """
        Verify a bearer token and return its claims.

        Raises:
            UnauthorizedError: If the token is expired, tampered with or malformed
        """
        try:
            return jwt.decode(
                token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
            )
        except jwt.ExpiredSignatureError:
            raise UnauthorizedError("Token has expired")
        except jwt.InvalidTokenError:
            raise UnauthorizedError("Invalid token")

    @staticmethod
    def register(db: Session, data: RegisterRequest) -> AuthResponse:
        """
        Create an account and sign the user in.

        Raises:
            ServiceValidationError: If the password is too short
            ConflictError: If the email is already registered
        """
        if len(data.password) < MIN_PASSWORD_LENGTH:
            raise ServiceValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        repo = UserRepository(db)
        if repo.get_by_email(data.email):
            logger.warning(f"register_rejected reason=duplicate_email email={data.email}")
            raise ConflictError("User with this email already exists")

        extra = {}
        if data.role == UserRole.PROVIDER:
            extra["provider_profile"] = ProviderProfile(
                license_number=f"LIC-{int(utcnow().timestamp() * 1000)}"
            )

        user = repo.create_user(
            email=data.email.strip().lower(),
            password_hash=AuthService.hash_password(data.password),
            name=data.name,
            role=data.role,
            phone_number=data.phone_number,
            date_of_birth=data.date_of_birth,
            **extra,
        )

        logger.info(f"user_registered user_id={user.id} role={user.role.value}")

        return AuthResponse(
            token=AuthService.create_access_token(user),
            user=UserMapper.to_summary(user),
        )

    @staticmethod
    def login(db: Session, data: LoginRequest) -> AuthResponse:
        """
        Check credentials and issue a token.

        Raises:
            UnauthorizedError: Unknown email or wrong password
            ForbiddenError: The account is deactivated
        """
        repo = UserRepository(db)
        user = repo.get_by_email(data.email)

        if not user or not AuthService.verify_password(user.password_hash, data.password):
            logger.warning(f"login_failed email={data.email}")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        if not user.is_active:
            logger.warning(f"login_rejected reason=inactive user_id={user.id}")
            raise ForbiddenError("Account is deactivated")

        user.last_login = utcnow()
        repo.update(user)

        logger.info(f"user_logged_in user_id={user.id}")

        return AuthResponse(
            token=AuthService.create_access_token(user),
            user=UserMapper.to_summary(user),
        )

    @staticmethod
    def get_profile(db: Session, user_id: UUID) -> UserProfileResponse:
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return UserMapper.to_profile(user)
