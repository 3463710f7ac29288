"""
Heredibles models: recipes, meal plans, planned meals and nutrition logs.
"""

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    ForeignKey,
    Boolean,
    Integer,
    Float,
    JSON,
    Uuid,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import MealType, RecipeDifficulty


class Recipe(Base):
    """Culturally-tailored recipe in the Heredibles library"""

    __tablename__ = "recipe"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    description = Column(Text)
    prep_time = Column(Integer)  # minutes
    cook_time = Column(Integer)  # minutes
    servings = Column(Integer, default=1)
    difficulty = Column(SQLEnum(RecipeDifficulty, name="recipe_difficulty"))
    category = Column(SQLEnum(MealType, name="meal_type"), index=True)
    cuisine = Column(Text)
    dietary_tags = Column(JSON, nullable=False, default=list)
    calories = Column(Integer, nullable=False, default=0)
    protein = Column(Float, nullable=False, default=0)
    carbs = Column(Float, nullable=False, default=0)
    fat = Column(Float, nullable=False, default=0)
    fiber = Column(Float)
    sugar = Column(Float)
    sodium = Column(Float)
    good_for = Column(JSON, nullable=False, default=list)  # health conditions
    ingredients = Column(JSON, nullable=False, default=list)  # [{name, amount, unit}]
    instructions = Column(JSON, nullable=False, default=list)
    tips = Column(Text)
    image_url = Column(Text)
    rating = Column(Float, nullable=False, default=0)
    review_count = Column(Integer, nullable=False, default=0)
    is_public = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class MealPlan(Base):
    """Patient meal plan with daily macro targets"""

    __tablename__ = "meal_plan"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    patient_id = Column(
        Uuid, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    patient_name = Column(Text)
    plan_name = Column(Text, nullable=False)
    start_date = Column(TIMESTAMP(timezone=True))
    end_date = Column(TIMESTAMP(timezone=True))
    is_active = Column(Boolean, nullable=False, default=True)
    target_calories = Column(Integer)
    target_protein = Column(Float)
    target_carbs = Column(Float)
    target_fat = Column(Float)
    diet_type = Column(Text)
    restrictions = Column(JSON, nullable=False, default=list)
    health_conditions = Column(JSON, nullable=False, default=list)
    notes = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    patient = relationship("User", back_populates="meal_plans")
    meals = relationship(
        "PlannedMeal",
        back_populates="meal_plan",
        cascade="all, delete-orphan",
        order_by="PlannedMeal.date",
    )


class PlannedMeal(Base):
    """Individual meal in a meal plan"""

    __tablename__ = "planned_meal"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    meal_plan_id = Column(
        Uuid, ForeignKey("meal_plan.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date = Column(TIMESTAMP(timezone=True), nullable=False, index=True)
    meal_type = Column(SQLEnum(MealType, name="meal_type"), nullable=False)
    recipe_id = Column(Uuid, ForeignKey("recipe.id", ondelete="SET NULL"))
    recipe_name = Column(Text, nullable=False)
    calories = Column(Integer, nullable=False, default=0)
    protein = Column(Float, nullable=False, default=0)
    carbs = Column(Float, nullable=False, default=0)
    fat = Column(Float, nullable=False, default=0)

    # Completion
    is_completed = Column(Boolean, nullable=False, default=False)
    completed_at = Column(TIMESTAMP(timezone=True))
    notes = Column(Text)

    # Photo proof
    photo_url = Column(Text)
    photo_taken_by = Column(Uuid)
    photo_taken_at = Column(TIMESTAMP(timezone=True))

    # Feedback
    rating = Column(Integer)
    rated_by = Column(Uuid)
    rated_at = Column(TIMESTAMP(timezone=True))
    feedback = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    meal_plan = relationship("MealPlan", back_populates="meals")


class NutritionLog(Base):
    """Daily nutrition intake recorded for a patient"""

    __tablename__ = "nutrition_log"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    patient_id = Column(
        Uuid, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date = Column(TIMESTAMP(timezone=True), nullable=False, index=True)
    calories = Column(Integer, nullable=False, default=0)
    protein = Column(Float, nullable=False, default=0)
    carbs = Column(Float, nullable=False, default=0)
    fat = Column(Float, nullable=False, default=0)
    water_intake_ml = Column(Integer)
    notes = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
