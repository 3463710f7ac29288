"""
Shared data access for every inPEP table.

Each concrete repository binds a model; the generic CRUD below relies on all
tables exposing a UUID ``id`` primary key.
"""

from typing import Generic, TypeVar, Optional, List, Type
from uuid import UUID
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.exceptions import ServiceValidationError

ModelType = TypeVar("ModelType")

logger = logging.getLogger("inpep.repositories")


class BaseRepository(Generic[ModelType]):
    """
    CRUD helpers bound to one model.

    Writes commit immediately. A constraint violation rolls the session back
    and surfaces as ServiceValidationError so the API answers 400.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: UUID) -> Optional[ModelType]:
        return self.db.get(self.model, entity_id)

    def get_all(self, skip: int = 0, limit: int = 100) -> List[ModelType]:
        return self.db.query(self.model).offset(skip).limit(limit).all()

    def create(self, entity: ModelType) -> ModelType:
        self.db.add(entity)
        return self._commit(entity)

    def update(self, entity: ModelType) -> ModelType:
        return self._commit(entity)

    def delete(self, entity_id: UUID) -> bool:
        """Delete a row by id; False when nothing matched"""
        entity = self.get_by_id(entity_id)
        if entity is None:
            return False
        self.db.delete(entity)
        self.db.commit()
        return True

    def exists(self, entity_id: UUID) -> bool:
        return self.get_by_id(entity_id) is not None

    def _commit(self, entity: ModelType) -> ModelType:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning(
                f"integrity_error table={self.model.__tablename__} error={exc.orig}"
            )
            raise ServiceValidationError(
                f"Invalid {self.model.__tablename__.replace('_', ' ')} data"
            )
        self.db.refresh(entity)
        return entity
