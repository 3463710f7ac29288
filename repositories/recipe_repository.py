"""
Recipe Repository - Data access layer for the Heredibles recipe library
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Recipe
from domain.enums import MealType, RecipeDifficulty


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipe data access"""

    def __init__(self, db: Session):
        super().__init__(db, Recipe)

    def list_public(
        self,
        category: Optional[MealType] = None,
        difficulty: Optional[RecipeDifficulty] = None,
        max_calories: Optional[int] = None,
    ) -> List[Recipe]:
        """Public recipes, highest rated first"""
        query = self.db.query(Recipe).filter(Recipe.is_public.is_(True))

        if category:
            query = query.filter(Recipe.category == category)
        if difficulty:
            query = query.filter(Recipe.difficulty == difficulty)
        if max_calories is not None:
            query = query.filter(Recipe.calories <= max_calories)

        return query.order_by(Recipe.rating.desc()).all()
