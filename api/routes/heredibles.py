"""Heredibles routes: recipes, meal plans, meal tracking and nutrition"""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_current_user
from domain.enums import MealType, RecipeDifficulty
from domain.models import User
from domain.schemas.heredibles_schemas import (
    RecipeResponse,
    MealPlanResponse,
    MealPlanWithMealsResponse,
    PlannedMealResponse,
    CompleteMealRequest,
    MealPhotoRequest,
    RateMealRequest,
    MealPreferencesResponse,
    NutritionLogResponse,
    NutritionSummaryResponse,
)
from services import HerediblesService

router = APIRouter(prefix="/heredibles", tags=["Heredibles"])
logger = logging.getLogger("inpep.api.heredibles")


# ============================================================================
# Recipes (public)
# ============================================================================


@router.get("/recipes", response_model=List[RecipeResponse])
def list_recipes(
    category: Optional[MealType] = Query(None),
    difficulty: Optional[RecipeDifficulty] = Query(None),
    max_calories: Optional[int] = Query(None, ge=0),
    dietary_tags: Optional[str] = Query(
        None, description="Comma separated tags, e.g. 'vegan,gluten-free'"
    ),
    db: Session = Depends(get_db),
):
    """
    Browse public recipes, highest rated first.

    A recipe matches the tag filter when it carries any of the requested tags.
    """
    return HerediblesService.list_recipes(
        db,
        category=category,
        difficulty=difficulty,
        max_calories=max_calories,
        dietary_tags=dietary_tags,
    )


@router.get("/recipes/{recipe_id}", response_model=RecipeResponse)
def get_recipe(recipe_id: UUID, db: Session = Depends(get_db)):
    return HerediblesService.get_recipe(db, recipe_id)


# ============================================================================
# Meal plans
# ============================================================================


@router.get("/meal-plans", response_model=List[MealPlanResponse])
def list_meal_plans(
    patient_id: Optional[UUID] = Query(None, description="Defaults to the caller"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return HerediblesService.list_meal_plans(db, patient_id or current_user.id)


@router.get("/meal-plans/active", response_model=Optional[MealPlanWithMealsResponse])
def get_active_meal_plan(
    patient_id: Optional[UUID] = Query(None, description="Defaults to the caller"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Most recent active plan with its meals, or null"""
    return HerediblesService.get_active_meal_plan(db, patient_id or current_user.id)


@router.get("/planned-meals", response_model=List[PlannedMealResponse])
def list_planned_meals(
    meal_plan_id: Optional[UUID] = Query(None),
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return HerediblesService.list_planned_meals(
        db, meal_plan_id, start_date=start_date, end_date=end_date
    )


# ============================================================================
# Meal tracking
# ============================================================================


@router.patch("/planned-meals/{meal_id}/complete", response_model=PlannedMealResponse)
def complete_meal(
    meal_id: UUID,
    data: Optional[CompleteMealRequest] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Mark a meal as eaten, optionally with a photo as proof"""
    data = data or CompleteMealRequest()
    return HerediblesService.complete_meal(
        db, current_user, meal_id, notes=data.notes, photo_url=data.photo_url
    )


@router.patch("/planned-meals/{meal_id}/photo", response_model=PlannedMealResponse)
def add_meal_photo(
    meal_id: UUID,
    data: Optional[MealPhotoRequest] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    photo_url = data.photo_url if data else None
    return HerediblesService.add_meal_photo(db, current_user, meal_id, photo_url)


@router.patch("/planned-meals/{meal_id}/rate", response_model=PlannedMealResponse)
def rate_meal(
    meal_id: UUID,
    data: Optional[RateMealRequest] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Rate a meal from 1 to 5 with optional feedback.

    Raises:
        400: Rating missing or out of range
        404: Meal not found
    """
    data = data or RateMealRequest()
    return HerediblesService.rate_meal(
        db, current_user, meal_id, rating=data.rating, feedback=data.feedback
    )


@router.get("/meal-preferences", response_model=MealPreferencesResponse)
def get_meal_preferences(
    patient_id: Optional[UUID] = Query(None, description="Defaults to the caller"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return HerediblesService.get_meal_preferences(db, patient_id or current_user.id)


# ============================================================================
# Nutrition
# ============================================================================


@router.get("/nutrition-logs", response_model=List[NutritionLogResponse])
def list_nutrition_logs(
    patient_id: Optional[UUID] = Query(None, description="Defaults to the caller"),
    start_date: Optional[datetime] = Query(None),
    end_date: Optional[datetime] = Query(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return HerediblesService.list_nutrition_logs(
        db, patient_id or current_user.id, start_date=start_date, end_date=end_date
    )


@router.get("/nutrition-summary", response_model=NutritionSummaryResponse)
def get_nutrition_summary(
    patient_id: Optional[UUID] = Query(None, description="Defaults to the caller"),
    day: Optional[date] = Query(None, alias="date", description="Defaults to today"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Completed-meal totals for one day against the active plan's targets"""
    return HerediblesService.get_nutrition_summary(db, patient_id or current_user.id, day)


@router.get("/recommended-recipes", response_model=List[RecipeResponse])
def get_recommended_recipes(
    patient_id: Optional[UUID] = Query(None, description="Defaults to the caller"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return HerediblesService.get_recommended_recipes(db, patient_id or current_user.id)
