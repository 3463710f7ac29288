"""
Meal Plan Repository - Data access layer for meal plan operations
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import MealPlan, PlannedMeal, NutritionLog


class MealPlanRepository(BaseRepository[MealPlan]):
    """Repository for meal plan data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealPlan)

    def get_by_patient_id(self, patient_id: UUID) -> List[MealPlan]:
        """All plans of a patient, newest first"""
        return (
            self.db.query(MealPlan)
            .filter(MealPlan.patient_id == patient_id)
            .order_by(MealPlan.created_at.desc())
            .all()
        )

    def get_active(self, patient_id: UUID) -> Optional[MealPlan]:
        """Most recently created active plan of a patient"""
        return (
            self.db.query(MealPlan)
            .filter(MealPlan.patient_id == patient_id, MealPlan.is_active.is_(True))
            .order_by(MealPlan.created_at.desc())
            .first()
        )


class PlannedMealRepository(BaseRepository[PlannedMeal]):
    """Repository for planned meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, PlannedMeal)

    def get_by_plan_id(
        self,
        meal_plan_id: UUID,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        completed_only: bool = False,
    ) -> List[PlannedMeal]:
        """Meals of a plan in date order, optionally within an inclusive window"""
        query = self.db.query(PlannedMeal).filter(
            PlannedMeal.meal_plan_id == meal_plan_id
        )

        if start and end:
            query = query.filter(PlannedMeal.date >= start, PlannedMeal.date <= end)
        if completed_only:
            query = query.filter(PlannedMeal.is_completed.is_(True))

        return query.order_by(PlannedMeal.date.asc()).all()

    def get_rated_for_patient(self, patient_id: UUID) -> List[PlannedMeal]:
        """Rated meals across all of a patient's plans, oldest rating first"""
        return (
            self.db.query(PlannedMeal)
            .join(MealPlan, PlannedMeal.meal_plan_id == MealPlan.id)
            .filter(MealPlan.patient_id == patient_id, PlannedMeal.rating.isnot(None))
            .order_by(PlannedMeal.rated_at.asc(), PlannedMeal.date.asc())
            .all()
        )


class NutritionLogRepository(BaseRepository[NutritionLog]):
    """Repository for nutrition log data access"""

    def __init__(self, db: Session):
        super().__init__(db, NutritionLog)

    def get_by_patient_id(
        self,
        patient_id: UUID,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[NutritionLog]:
        """Logs of a patient, newest first"""
        query = self.db.query(NutritionLog).filter(
            NutritionLog.patient_id == patient_id
        )

        if start and end:
            query = query.filter(NutritionLog.date >= start, NutritionLog.date <= end)

        return query.order_by(NutritionLog.date.desc()).all()
