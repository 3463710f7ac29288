"""
Heredibles service: recipe library, meal plans, meal tracking and nutrition.
"""

from collections import OrderedDict
from datetime import date, datetime
from typing import List, Optional
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, ServiceValidationError
from core.utils.helpers import utcnow, day_bounds, round_half_up, split_csv
from domain.enums import MealType, RecipeDifficulty
from domain.models import PlannedMeal, User
from domain.schemas.heredibles_schemas import (
    RecipeResponse,
    MealPlanResponse,
    MealPlanWithMealsResponse,
    PlannedMealResponse,
    MealPreferencesResponse,
    MealTypeRating,
    RecipeRating,
    RecentRating,
    NutritionLogResponse,
    NutritionSummaryResponse,
    MacroTotals,
    MacroPercentages,
)
from repositories import (
    RecipeRepository,
    MealPlanRepository,
    PlannedMealRepository,
    NutritionLogRepository,
)

logger = logging.getLogger("inpep.heredibles")

# Daily targets used when a plan leaves them unset
DEFAULT_TARGETS = {"calories": 2000, "protein": 100, "carbs": 250, "fat": 70}
MIN_RATING = 1
MAX_RATING = 5
PREFERENCE_LIST_SIZE = 5
RECENT_RATINGS_SIZE = 10
RECOMMENDATION_LIMIT = 10
MACROS = ("calories", "protein", "carbs", "fat")


class HerediblesService:
    # ------------------------------------------------------------------
    # Recipes
    # ------------------------------------------------------------------

    @staticmethod
    def list_recipes(
        db: Session,
        category: Optional[MealType] = None,
        difficulty: Optional[RecipeDifficulty] = None,
        max_calories: Optional[int] = None,
        dietary_tags: Optional[str] = None,
    ) -> List[RecipeResponse]:
        """
        Public recipes, highest rated first.

        Args:
            category: Meal category filter
            difficulty: Difficulty filter
            max_calories: Upper bound on calories per serving (inclusive)
            dietary_tags: Comma separated tags; a recipe matches if it carries any of them

        Returns:
            List of RecipeResponse
        """
        recipes = RecipeRepository(db).list_public(
            category=category, difficulty=difficulty, max_calories=max_calories
        )

        wanted = split_csv(dietary_tags)
        if wanted:
            recipes = [
                r for r in recipes if any(tag in (r.dietary_tags or []) for tag in wanted)
            ]

        return [RecipeResponse.model_validate(r) for r in recipes]

    @staticmethod
    def get_recipe(db: Session, recipe_id: UUID) -> RecipeResponse:
        recipe = RecipeRepository(db).get_by_id(recipe_id)
        if not recipe:
            raise NotFoundError("Recipe not found")
        return RecipeResponse.model_validate(recipe)

    # ------------------------------------------------------------------
    # Meal plans
    # ------------------------------------------------------------------

    @staticmethod
    def list_meal_plans(db: Session, patient_id: UUID) -> List[MealPlanResponse]:
        plans = MealPlanRepository(db).get_by_patient_id(patient_id)
        return [MealPlanResponse.model_validate(p) for p in plans]

    @staticmethod
    def get_active_meal_plan(
        db: Session, patient_id: UUID
    ) -> Optional[MealPlanWithMealsResponse]:
        plan = MealPlanRepository(db).get_active(patient_id)
        if not plan:
            return None
        return MealPlanWithMealsResponse.model_validate(plan)

    @staticmethod
    def list_planned_meals(
        db: Session,
        meal_plan_id: Optional[UUID],
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> List[PlannedMealResponse]:
        if not meal_plan_id:
            raise ServiceValidationError("Meal plan ID is required")

        meals = PlannedMealRepository(db).get_by_plan_id(
            meal_plan_id, start=start_date, end=end_date
        )
        return [PlannedMealResponse.model_validate(m) for m in meals]

    # ------------------------------------------------------------------
    # Meal tracking
    # ------------------------------------------------------------------

    @staticmethod
    def _get_meal_or_404(repo: PlannedMealRepository, meal_id: UUID) -> PlannedMeal:
        meal = repo.get_by_id(meal_id)
        if not meal:
            raise NotFoundError("Planned meal not found")
        return meal

    @staticmethod
    def complete_meal(
        db: Session,
        current_user: User,
        meal_id: UUID,
        notes: Optional[str] = None,
        photo_url: Optional[str] = None,
    ) -> PlannedMealResponse:
        """
        Mark a planned meal as eaten.

        Photo fields are replaced on every call: set when a photo URL comes
        with the request, cleared otherwise.
        """
        repo = PlannedMealRepository(db)
        meal = HerediblesService._get_meal_or_404(repo, meal_id)
        now = utcnow()

        meal.is_completed = True
        meal.completed_at = now
        meal.notes = notes or None
        if photo_url:
            meal.photo_url = photo_url
            meal.photo_taken_by = current_user.id
            meal.photo_taken_at = now
        else:
            meal.photo_url = None
            meal.photo_taken_by = None
            meal.photo_taken_at = None

        meal = repo.update(meal)
        logger.info(
            f"meal_completed meal_id={meal_id} user_id={current_user.id} "
            f"has_photo={bool(photo_url)}"
        )
        return PlannedMealResponse.model_validate(meal)

    @staticmethod
    def add_meal_photo(
        db: Session, current_user: User, meal_id: UUID, photo_url: Optional[str]
    ) -> PlannedMealResponse:
        if not photo_url:
            raise ServiceValidationError("Photo URL is required")

        repo = PlannedMealRepository(db)
        meal = HerediblesService._get_meal_or_404(repo, meal_id)

        meal.photo_url = photo_url
        meal.photo_taken_by = current_user.id
        meal.photo_taken_at = utcnow()

        meal = repo.update(meal)
        logger.info(f"meal_photo_added meal_id={meal_id} user_id={current_user.id}")
        return PlannedMealResponse.model_validate(meal)

    @staticmethod
    def rate_meal(
        db: Session,
        current_user: User,
        meal_id: UUID,
        rating: Optional[int],
        feedback: Optional[str] = None,
    ) -> PlannedMealResponse:
        if rating is None or not (MIN_RATING <= rating <= MAX_RATING):
            raise ServiceValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}"
            )

        repo = PlannedMealRepository(db)
        meal = HerediblesService._get_meal_or_404(repo, meal_id)

        meal.rating = rating
        meal.rated_by = current_user.id
        meal.rated_at = utcnow()
        meal.feedback = feedback or None

        meal = repo.update(meal)
        logger.info(f"meal_rated meal_id={meal_id} rating={rating} user_id={current_user.id}")
        return PlannedMealResponse.model_validate(meal)

    # ------------------------------------------------------------------
    # Preferences analytics
    # ------------------------------------------------------------------

    @staticmethod
    def get_meal_preferences(db: Session, patient_id: UUID) -> MealPreferencesResponse:
        """
        Summarise how a patient rates their meals.

        Ratings are averaged overall, per meal type and per recipe name. The
        recipe averages feed the top and least rated lists.
        """
        rated = PlannedMealRepository(db).get_rated_for_patient(patient_id)
        total = len(rated)

        by_type = OrderedDict((t, []) for t in MealType)
        by_recipe: "OrderedDict[str, List[int]]" = OrderedDict()
        for meal in rated:
            by_type[meal.meal_type].append(meal.rating)
            by_recipe.setdefault(meal.recipe_name, []).append(meal.rating)

        recipe_averages = [
            RecipeRating(
                recipe_name=name,
                average_rating=sum(ratings) / len(ratings),
                count=len(ratings),
            )
            for name, ratings in by_recipe.items()
        ]

        recent = [
            RecentRating(
                meal_id=m.id,
                recipe_name=m.recipe_name,
                meal_type=m.meal_type,
                rating=m.rating,
                feedback=m.feedback,
                rated_at=m.rated_at,
            )
            for m in reversed(rated[-RECENT_RATINGS_SIZE:])
        ]

        return MealPreferencesResponse(
            total_ratings=total,
            average_rating=sum(m.rating for m in rated) / total if total else 0,
            by_meal_type=[
                MealTypeRating(
                    meal_type=meal_type,
                    average_rating=sum(ratings) / len(ratings),
                    count=len(ratings),
                )
                for meal_type, ratings in by_type.items()
                if ratings
            ],
            top_rated=sorted(
                recipe_averages, key=lambda r: r.average_rating, reverse=True
            )[:PREFERENCE_LIST_SIZE],
            least_rated=sorted(recipe_averages, key=lambda r: r.average_rating)[
                :PREFERENCE_LIST_SIZE
            ],
            recent_ratings=recent,
        )

    # ------------------------------------------------------------------
    # Nutrition
    # ------------------------------------------------------------------

    @staticmethod
    def list_nutrition_logs(
        db: Session,
        patient_id: UUID,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> List[NutritionLogResponse]:
        logs = NutritionLogRepository(db).get_by_patient_id(
            patient_id, start=start_date, end=end_date
        )
        return [NutritionLogResponse.model_validate(log) for log in logs]

    @staticmethod
    def get_nutrition_summary(
        db: Session, patient_id: UUID, day: Optional[date] = None
    ) -> NutritionSummaryResponse:
        """
        Totals of the completed meals of the active plan on one day.

        Percentages are measured against the plan's targets, falling back to
        the defaults for unset targets. Without an active plan there are no
        targets and no percentages.
        """
        start, end = day_bounds(day or utcnow())
        plan = MealPlanRepository(db).get_active(patient_id)

        meals = []
        if plan:
            meals = PlannedMealRepository(db).get_by_plan_id(
                plan.id, start=start, end=end, completed_only=True
            )

        totals = {macro: sum(getattr(m, macro) or 0 for m in meals) for macro in MACROS}

        targets = percentages = None
        if plan:
            targets = {
                macro: getattr(plan, f"target_{macro}") or DEFAULT_TARGETS[macro]
                for macro in MACROS
            }
            percentages = MacroPercentages(
                **{
                    macro: round_half_up(totals[macro] / targets[macro] * 100)
                    for macro in MACROS
                }
            )
            targets = MacroTotals(**targets)

        return NutritionSummaryResponse(
            date=start,
            totals=MacroTotals(**totals),
            targets=targets,
            percentages=percentages,
            meals_completed=len(meals),
        )

    # ------------------------------------------------------------------
    # Recommendations
    # ------------------------------------------------------------------

    @staticmethod
    def get_recommended_recipes(db: Session, patient_id: UUID) -> List[RecipeResponse]:
        """Public recipes suited to the health conditions of the active plan"""
        plan = MealPlanRepository(db).get_active(patient_id)
        if not plan:
            return []

        conditions = set(plan.health_conditions or [])
        matches = [
            r
            for r in RecipeRepository(db).list_public()
            if conditions.intersection(r.good_for or [])
        ]

        logger.debug(
            f"recipes_recommended patient_id={patient_id} "
            f"conditions={len(conditions)} matches={len(matches)}"
        )
        return [RecipeResponse.model_validate(r) for r in matches[:RECOMMENDATION_LIMIT]]
