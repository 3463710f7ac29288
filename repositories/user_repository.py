"""
User Repository - Data access layer for user-related operations
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import User
from domain.enums import UserRole
from app.exceptions import ConflictError


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)"""
        return (
            self.db.query(User)
            .filter(func.lower(User.email) == email.strip().lower())
            .first()
        )

    def create_user(self, **fields) -> User:
        """Create a new user"""
        user = User(**fields)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("User with this email already exists")

    def list_active(self, role: UserRole) -> List[User]:
        """Active users holding a role, alphabetical by name"""
        query = self.db.query(User).filter(User.role == role, User.is_active.is_(True))
        if role == UserRole.PROVIDER:
            query = query.options(selectinload(User.provider_profile))
        return query.order_by(User.name.asc(), User.id.asc()).all()

    def count_active(self, role: UserRole) -> int:
        """Count active users holding a role"""
        return (
            self.db.query(func.count(User.id))
            .filter(User.role == role, User.is_active.is_(True))
            .scalar()
        )
