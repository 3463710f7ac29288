"""Account registration, login and profile routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_current_user
from domain.models import User
from domain.schemas.auth_schemas import (
    RegisterRequest,
    LoginRequest,
    AuthResponse,
    UserProfileResponse,
)
from services import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger("inpep.api.auth")


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    """
    Create an account and return an access token.

    Raises:
        400: Password shorter than 6 characters or invalid body
        409: Email already registered
    """
    return AuthService.register(db, data)


@router.post("/login", response_model=AuthResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    """
    Exchange credentials for an access token.

    Raises:
        401: Unknown email or wrong password
        403: Account deactivated
    """
    return AuthService.login(db, data)


@router.get("/profile", response_model=UserProfileResponse)
def get_profile(
    current_user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Profile of the signed-in user"""
    return AuthService.get_profile(db, current_user.id)
