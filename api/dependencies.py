"""
API dependencies for dependency injection
"""

from typing import Callable, Generator, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.exceptions import ForbiddenError, UnauthorizedError
from domain.enums import UserRole
from domain.models import User, get_db_session
from repositories import UserRepository
from services import AuthService

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the caller from the ``Authorization: Bearer <token>`` header.

    Raises:
        UnauthorizedError: No token, a bad or expired token, or an unknown or
            deactivated account
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("No token provided")

    claims = AuthService.decode_access_token(credentials.credentials)

    try:
        user_id = UUID(str(claims.get("sub")))
    except ValueError:
        raise UnauthorizedError("Invalid token")

    user = UserRepository(db).get_by_id(user_id)
    if not user or not user.is_active:
        raise UnauthorizedError("User not found or inactive")

    return user


def require_roles(*roles: UserRole) -> Callable[..., User]:
    """
    Dependency factory restricting a route to the given roles.

    Usage:
        @router.get("/claims")
        def claims(user: User = Depends(require_roles(UserRole.INSURER))):
            ...
    """

    def dependency(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            raise ForbiddenError("Insufficient permissions")
        return current_user

    return dependency
