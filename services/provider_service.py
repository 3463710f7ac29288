from typing import List
import logging

from sqlalchemy.orm import Session

from domain.enums import UserRole
from domain.mappers import UserMapper
from domain.schemas.provider_schemas import ProviderResponse
from repositories import UserRepository

logger = logging.getLogger("inpep.providers")


class ProviderService:
    @staticmethod
    def list_providers(db: Session) -> List[ProviderResponse]:
        """Active providers in name order, for appointment booking"""
        providers = UserRepository(db).list_active(UserRole.PROVIDER)
        logger.debug(f"providers_listed count={len(providers)}")
        return [UserMapper.to_provider(p) for p in providers]
