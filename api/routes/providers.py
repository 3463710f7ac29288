"""Provider directory routes"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.dependencies import get_db, get_current_user
from domain.models import User
from domain.schemas.provider_schemas import ProviderResponse
from services import ProviderService

router = APIRouter(prefix="/providers", tags=["Providers"])


@router.get("", response_model=List[ProviderResponse])
def list_providers(
    current_user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Active providers ordered by name"""
    return ProviderService.list_providers(db)
