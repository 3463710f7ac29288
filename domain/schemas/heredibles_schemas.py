from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from datetime import datetime
from uuid import UUID

from domain.enums import MealType, RecipeDifficulty


# ============================================================================
# Recipes
# ============================================================================


class RecipeResponse(BaseModel):
    """Recipe as listed in the Heredibles library"""

    id: UUID
    name: str
    description: Optional[str] = None
    prep_time: Optional[int] = None
    cook_time: Optional[int] = None
    servings: Optional[int] = None
    difficulty: Optional[RecipeDifficulty] = None
    category: Optional[MealType] = None
    cuisine: Optional[str] = None
    dietary_tags: List[str] = []
    calories: int
    protein: float
    carbs: float
    fat: float
    fiber: Optional[float] = None
    sugar: Optional[float] = None
    sodium: Optional[float] = None
    good_for: List[str] = []
    ingredients: List[Dict[str, Any]] = []
    instructions: List[str] = []
    tips: Optional[str] = None
    image_url: Optional[str] = None
    rating: float
    review_count: int
    is_public: bool

    model_config = {"from_attributes": True}


# ============================================================================
# Meal plans
# ============================================================================


class PlannedMealResponse(BaseModel):
    id: UUID
    meal_plan_id: UUID
    date: datetime
    meal_type: MealType
    recipe_id: Optional[UUID] = None
    recipe_name: str
    calories: int
    protein: float
    carbs: float
    fat: float
    is_completed: bool
    completed_at: Optional[datetime] = None
    notes: Optional[str] = None
    photo_url: Optional[str] = None
    photo_taken_by: Optional[UUID] = None
    photo_taken_at: Optional[datetime] = None
    rating: Optional[int] = None
    rated_by: Optional[UUID] = None
    rated_at: Optional[datetime] = None
    feedback: Optional[str] = None

    model_config = {"from_attributes": True}


class MealPlanResponse(BaseModel):
    id: UUID
    patient_id: UUID
    patient_name: Optional[str] = None
    plan_name: str
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    is_active: bool
    target_calories: Optional[int] = None
    target_protein: Optional[float] = None
    target_carbs: Optional[float] = None
    target_fat: Optional[float] = None
    diet_type: Optional[str] = None
    restrictions: List[str] = []
    health_conditions: List[str] = []
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class MealPlanWithMealsResponse(MealPlanResponse):
    """Active plan including its meals in date order"""

    meals: List[PlannedMealResponse] = []


class CompleteMealRequest(BaseModel):
    notes: Optional[str] = None
    photo_url: Optional[str] = Field(None, description="Optional photo proof")


class MealPhotoRequest(BaseModel):
    photo_url: Optional[str] = None


class RateMealRequest(BaseModel):
    """Rating is range-checked by the service so the error message stays specific"""

    rating: Optional[int] = None
    feedback: Optional[str] = None


# ============================================================================
# Preferences analytics
# ============================================================================


class MealTypeRating(BaseModel):
    meal_type: MealType
    average_rating: float
    count: int


class RecipeRating(BaseModel):
    recipe_name: str
    average_rating: float
    count: int


class RecentRating(BaseModel):
    meal_id: UUID
    recipe_name: str
    meal_type: MealType
    rating: int
    feedback: Optional[str] = None
    rated_at: Optional[datetime] = None


class MealPreferencesResponse(BaseModel):
    """Aggregated rating analytics for one patient"""

    total_ratings: int
    average_rating: float
    by_meal_type: List[MealTypeRating]
    top_rated: List[RecipeRating]
    least_rated: List[RecipeRating]
    recent_ratings: List[RecentRating]


# ============================================================================
# Nutrition
# ============================================================================


class NutritionLogResponse(BaseModel):
    id: UUID
    patient_id: UUID
    date: datetime
    calories: int
    protein: float
    carbs: float
    fat: float
    water_intake_ml: Optional[int] = None
    notes: Optional[str] = None

    model_config = {"from_attributes": True}


class MacroTotals(BaseModel):
    calories: float
    protein: float
    carbs: float
    fat: float


class MacroPercentages(BaseModel):
    calories: int
    protein: int
    carbs: int
    fat: int


class NutritionSummaryResponse(BaseModel):
    """Daily intake from completed meals against plan targets"""

    date: datetime
    totals: MacroTotals
    targets: Optional[MacroTotals] = None
    percentages: Optional[MacroPercentages] = None
    meals_completed: int
