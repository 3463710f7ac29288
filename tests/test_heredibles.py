"""
Tests for the Heredibles nutrition module.

Covers:
- Recipe browsing filters (calories bound, any-of dietary tags, visibility)
- Meal plans and the active plan lookup
- Meal tracking: completion with photo proof, photos and ratings
- Preference analytics over rated meals
- Daily nutrition summary against plan targets
- Recommendations by health condition
"""

import uuid
from datetime import date

import pytest

from app.exceptions import NotFoundError, ServiceValidationError
from domain.enums import MealType, RecipeDifficulty, UserRole
from services import HerediblesService
from test_fixtures import (
    auth_headers,
    client,
    create_user,
    make_meal_plan,
    make_nutrition_log,
    make_planned_meal,
    make_recipe,
    make_user,
    utc,
)


@pytest.fixture
def patient(db_session):
    return create_user(db_session, UserRole.PATIENT)


@pytest.fixture
def caregiver(db_session):
    return create_user(db_session, UserRole.CAREGIVER)


@pytest.fixture
def recipe_library(db_session):
    return {
        "quinoa": make_recipe(
            db_session,
            name="Quinoa Power Bowl",
            calories=300,
            dietary_tags=["vegan", "gluten-free"],
            category=MealType.LUNCH,
            difficulty=RecipeDifficulty.EASY,
            rating=4.8,
        ),
        "eggs": make_recipe(
            db_session,
            name="Spinach Egg Muffins",
            calories=500,
            dietary_tags=["keto"],
            category=MealType.BREAKFAST,
            rating=4.2,
        ),
        "lasagna": make_recipe(
            db_session,
            name="Beef Lasagna",
            calories=650,
            dietary_tags=[],
            rating=3.9,
        ),
        "private": make_recipe(
            db_session,
            name="Family Secret Curry",
            calories=200,
            dietary_tags=["vegan"],
            rating=5.0,
            is_public=False,
        ),
    }


# =============================================================================
# RECIPES
# =============================================================================


def test_recipes_highest_rated_first_and_public_only(db_session, recipe_library):
    result = HerediblesService.list_recipes(db_session)

    assert [r.name for r in result] == [
        "Quinoa Power Bowl",
        "Spinach Egg Muffins",
        "Beef Lasagna",
    ]


def test_max_calories_is_inclusive(db_session, recipe_library):
    result = HerediblesService.list_recipes(db_session, max_calories=500)

    assert all(r.calories <= 500 for r in result)
    assert [r.name for r in result] == ["Quinoa Power Bowl", "Spinach Egg Muffins"]


def test_dietary_tags_match_any(db_session, recipe_library):
    result = HerediblesService.list_recipes(db_session, dietary_tags="vegan, keto")

    assert {r.name for r in result} == {"Quinoa Power Bowl", "Spinach Egg Muffins"}
    for recipe in result:
        assert {"vegan", "keto"} & set(recipe.dietary_tags)


def test_dietary_tags_without_match(db_session, recipe_library):
    assert HerediblesService.list_recipes(db_session, dietary_tags="paleo") == []


def test_category_and_difficulty_filters(db_session, recipe_library):
    lunch = HerediblesService.list_recipes(db_session, category=MealType.LUNCH)
    easy = HerediblesService.list_recipes(db_session, difficulty=RecipeDifficulty.EASY)

    assert [r.name for r in lunch] == ["Quinoa Power Bowl"]
    assert [r.name for r in easy] == ["Quinoa Power Bowl"]


def test_recipes_endpoint_needs_no_auth(db_client, recipe_library):
    resp = db_client.get("/api/heredibles/recipes", params={"max_calories": 400})

    assert resp.status_code == 200
    assert [r["name"] for r in resp.json()] == ["Quinoa Power Bowl"]


def test_recipes_endpoint_passes_filters(monkeypatch):
    captured = {}

    def fake_list(db, **kwargs):
        captured.update(kwargs)
        return []

    monkeypatch.setattr(HerediblesService, "list_recipes", staticmethod(fake_list))

    resp = client.get(
        "/api/heredibles/recipes",
        params={"category": "DINNER", "dietary_tags": "vegan,gluten-free"},
    )

    assert resp.status_code == 200
    assert captured["category"] == MealType.DINNER
    assert captured["dietary_tags"] == "vegan,gluten-free"
    assert captured["max_calories"] is None


def test_get_recipe_and_missing_recipe(db_client, recipe_library):
    found = db_client.get(f"/api/heredibles/recipes/{recipe_library['eggs'].id}")
    missing = db_client.get(f"/api/heredibles/recipes/{uuid.uuid4()}")

    assert found.status_code == 200
    assert found.json()["ingredients"][0]["name"] == "chicken thighs"
    assert missing.status_code == 404
    assert missing.json() == {"error": "Recipe not found"}


# =============================================================================
# MEAL PLANS
# =============================================================================


def test_meal_plans_newest_first(db_session, patient):
    older = make_meal_plan(db_session, patient, created_at=utc(2025, 1, 1))
    newer = make_meal_plan(
        db_session, patient, plan_name="Low Carb Month", created_at=utc(2025, 2, 1)
    )

    result = HerediblesService.list_meal_plans(db_session, patient.id)

    assert [p.id for p in result] == [newer.id, older.id]


def test_active_plan_includes_meals_in_date_order(db_session, patient):
    make_meal_plan(
        db_session, patient, is_active=False, created_at=utc(2025, 3, 5)
    )
    active = make_meal_plan(db_session, patient, created_at=utc(2025, 3, 1))
    make_planned_meal(db_session, active, date=utc(2025, 3, 10, 19), meal_type=MealType.DINNER)
    make_planned_meal(db_session, active, date=utc(2025, 3, 10, 8))

    result = HerediblesService.get_active_meal_plan(db_session, patient.id)

    assert result.id == active.id
    assert [m.meal_type for m in result.meals] == [MealType.BREAKFAST, MealType.DINNER]


def test_active_plan_endpoint_returns_null(db_client, patient):
    resp = db_client.get("/api/heredibles/meal-plans/active", headers=auth_headers(patient))

    assert resp.status_code == 200
    assert resp.json() is None


def test_planned_meals_require_plan_id(db_client, patient):
    resp = db_client.get("/api/heredibles/planned-meals", headers=auth_headers(patient))

    assert resp.status_code == 400
    assert resp.json() == {"error": "Meal plan ID is required"}


def test_planned_meals_window(db_session, patient):
    plan = make_meal_plan(db_session, patient)
    inside = make_planned_meal(db_session, plan, date=utc(2025, 3, 10, 8))
    make_planned_meal(db_session, plan, date=utc(2025, 3, 20, 8))

    result = HerediblesService.list_planned_meals(
        db_session, plan.id, start_date=utc(2025, 3, 9), end_date=utc(2025, 3, 11)
    )

    assert [m.id for m in result] == [inside.id]


# =============================================================================
# MEAL TRACKING
# =============================================================================


def test_complete_meal_with_photo(db_client, db_session, patient, caregiver):
    plan = make_meal_plan(db_session, patient)
    meal = make_planned_meal(db_session, plan)

    resp = db_client.patch(
        f"/api/heredibles/planned-meals/{meal.id}/complete",
        headers=auth_headers(caregiver),
        json={"notes": "Ate everything", "photo_url": "https://img.example.com/1.jpg"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["is_completed"] is True
    assert body["completed_at"] is not None
    assert body["notes"] == "Ate everything"
    assert body["photo_url"] == "https://img.example.com/1.jpg"
    assert body["photo_taken_by"] == str(caregiver.id)
    assert body["photo_taken_at"] is not None


def test_complete_meal_without_photo_clears_previous(db_session, patient):
    plan = make_meal_plan(db_session, patient)
    meal = make_planned_meal(
        db_session,
        plan,
        photo_url="https://img.example.com/old.jpg",
        photo_taken_by=patient.id,
        photo_taken_at=utc(2025, 3, 10, 8, 5),
    )

    result = HerediblesService.complete_meal(db_session, patient, meal.id)

    assert result.is_completed is True
    assert result.photo_url is None
    assert result.photo_taken_by is None
    assert result.photo_taken_at is None


def test_complete_missing_meal(db_session, patient):
    with pytest.raises(NotFoundError, match="Planned meal not found"):
        HerediblesService.complete_meal(db_session, patient, uuid.uuid4())


def test_add_photo_requires_url(db_client, db_session, patient):
    plan = make_meal_plan(db_session, patient)
    meal = make_planned_meal(db_session, plan)

    resp = db_client.patch(
        f"/api/heredibles/planned-meals/{meal.id}/photo",
        headers=auth_headers(patient),
        json={},
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "Photo URL is required"}


def test_add_photo(db_session, patient, caregiver):
    plan = make_meal_plan(db_session, patient)
    meal = make_planned_meal(db_session, plan)

    result = HerediblesService.add_meal_photo(
        db_session, caregiver, meal.id, "https://img.example.com/2.jpg"
    )

    assert result.photo_url == "https://img.example.com/2.jpg"
    assert result.photo_taken_by == caregiver.id
    assert result.is_completed is False


@pytest.mark.parametrize("rating", [0, 6])
def test_rating_out_of_range_is_rejected(db_client, db_session, patient, rating):
    plan = make_meal_plan(db_session, patient)
    meal = make_planned_meal(db_session, plan)

    resp = db_client.patch(
        f"/api/heredibles/planned-meals/{meal.id}/rate",
        headers=auth_headers(patient),
        json={"rating": rating},
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "Rating must be between 1 and 5"}


def test_missing_rating_is_rejected(db_session, patient):
    with pytest.raises(ServiceValidationError):
        HerediblesService.rate_meal(db_session, patient, uuid.uuid4(), None)


def test_rate_meal(db_client, db_session, patient):
    plan = make_meal_plan(db_session, patient)
    meal = make_planned_meal(db_session, plan)

    resp = db_client.patch(
        f"/api/heredibles/planned-meals/{meal.id}/rate",
        headers=auth_headers(patient),
        json={"rating": 4, "feedback": "A bit bland"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["rating"] == 4
    assert body["feedback"] == "A bit bland"
    assert body["rated_by"] == str(patient.id)
    assert body["rated_at"] is not None


# =============================================================================
# PREFERENCES
# =============================================================================


def test_meal_preferences(db_session, patient):
    plan = make_meal_plan(db_session, patient)
    oats_1 = make_planned_meal(db_session, plan, rating=5, rated_at=utc(2025, 3, 1, 9))
    oats_2 = make_planned_meal(db_session, plan, rating=3, rated_at=utc(2025, 3, 2, 9))
    salmon = make_planned_meal(
        db_session,
        plan,
        meal_type=MealType.DINNER,
        recipe_name="Grilled Salmon",
        rating=4,
        rated_at=utc(2025, 3, 3, 19),
    )
    soup = make_planned_meal(
        db_session,
        plan,
        meal_type=MealType.LUNCH,
        recipe_name="Lentil Soup",
        rating=2,
        feedback="Too salty",
        rated_at=utc(2025, 3, 4, 13),
    )
    make_planned_meal(db_session, plan, recipe_name="Unrated Toast")

    other = create_user(db_session, UserRole.PATIENT, name="Ken Ito")
    make_planned_meal(db_session, make_meal_plan(db_session, other), rating=1)

    prefs = HerediblesService.get_meal_preferences(db_session, patient.id)

    assert prefs.total_ratings == 4
    assert prefs.average_rating == pytest.approx(3.5)
    assert [(t.meal_type, t.average_rating, t.count) for t in prefs.by_meal_type] == [
        (MealType.BREAKFAST, 4.0, 2),
        (MealType.LUNCH, 2.0, 1),
        (MealType.DINNER, 4.0, 1),
    ]
    assert [r.recipe_name for r in prefs.top_rated] == [
        "Oatmeal with Berries",
        "Grilled Salmon",
        "Lentil Soup",
    ]
    assert prefs.least_rated[0].recipe_name == "Lentil Soup"
    assert [r.meal_id for r in prefs.recent_ratings] == [
        soup.id,
        salmon.id,
        oats_2.id,
        oats_1.id,
    ]
    assert prefs.recent_ratings[0].feedback == "Too salty"


def test_meal_preferences_without_ratings(db_session, patient):
    prefs = HerediblesService.get_meal_preferences(db_session, patient.id)

    assert prefs.total_ratings == 0
    assert prefs.average_rating == 0
    assert prefs.by_meal_type == []
    assert prefs.top_rated == []
    assert prefs.recent_ratings == []


# =============================================================================
# NUTRITION
# =============================================================================


def test_nutrition_summary_against_plan_targets(db_session, patient):
    plan = make_meal_plan(db_session, patient)
    make_planned_meal(db_session, plan, is_completed=True)
    make_planned_meal(
        db_session,
        plan,
        date=utc(2025, 3, 10, 19),
        meal_type=MealType.DINNER,
        recipe_name="Grilled Salmon",
        calories=600,
        protein=40.0,
        carbs=70.0,
        fat=20.0,
        is_completed=True,
    )
    # not eaten, and eaten on another day
    make_planned_meal(db_session, plan, date=utc(2025, 3, 10, 13), calories=700)
    make_planned_meal(db_session, plan, date=utc(2025, 3, 11, 8), is_completed=True)

    summary = HerediblesService.get_nutrition_summary(
        db_session, patient.id, date(2025, 3, 10)
    )

    assert summary.meals_completed == 2
    assert summary.totals.calories == 950
    assert summary.totals.protein == pytest.approx(52)
    assert summary.totals.carbs == pytest.approx(125)
    assert summary.totals.fat == pytest.approx(28)
    assert summary.targets.calories == 1800
    assert summary.percentages.calories == 53
    assert summary.percentages.protein == 58
    assert summary.percentages.carbs == 63
    assert summary.percentages.fat == 47


def test_nutrition_summary_uses_default_targets(db_session, patient):
    plan = make_meal_plan(
        db_session,
        patient,
        target_calories=None,
        target_protein=None,
        target_carbs=None,
        target_fat=None,
    )
    make_planned_meal(
        db_session,
        plan,
        calories=500,
        protein=25.0,
        carbs=125.0,
        fat=35.0,
        is_completed=True,
    )

    summary = HerediblesService.get_nutrition_summary(
        db_session, patient.id, date(2025, 3, 10)
    )

    assert summary.targets.calories == 2000
    assert summary.targets.fat == 70
    assert summary.percentages.calories == 25
    assert summary.percentages.protein == 25
    assert summary.percentages.carbs == 50
    assert summary.percentages.fat == 50


def test_nutrition_summary_without_plan(db_client, patient):
    resp = db_client.get(
        "/api/heredibles/nutrition-summary",
        params={"date": "2025-03-10"},
        headers=auth_headers(patient),
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["targets"] is None
    assert body["percentages"] is None
    assert body["meals_completed"] == 0
    assert body["totals"]["calories"] == 0
    assert body["date"].startswith("2025-03-10T00:00:00")


def test_nutrition_logs_newest_first(db_session, patient):
    early = make_nutrition_log(db_session, patient, date=utc(2025, 3, 1))
    late = make_nutrition_log(db_session, patient, date=utc(2025, 3, 5))

    result = HerediblesService.list_nutrition_logs(db_session, patient.id)
    windowed = HerediblesService.list_nutrition_logs(
        db_session, patient.id, start_date=utc(2025, 3, 4), end_date=utc(2025, 3, 6)
    )

    assert [log.id for log in result] == [late.id, early.id]
    assert [log.id for log in windowed] == [late.id]


# =============================================================================
# RECOMMENDATIONS
# =============================================================================


def test_recommended_recipes_match_plan_conditions(db_session, patient):
    make_meal_plan(db_session, patient, health_conditions=["hypertension", "diabetes"])
    make_recipe(db_session, name="Berry Chia Pudding", good_for=["diabetes"], rating=4.9)
    make_recipe(db_session, name="Herb Roasted Fish", good_for=["hypertension"], rating=4.1)
    make_recipe(db_session, name="Rice Crackers", good_for=["celiac"], rating=4.7)

    result = HerediblesService.get_recommended_recipes(db_session, patient.id)

    assert [r.name for r in result] == ["Berry Chia Pudding", "Herb Roasted Fish"]


def test_recommended_recipes_without_plan(db_session, patient):
    make_recipe(db_session)

    assert HerediblesService.get_recommended_recipes(db_session, patient.id) == []


def test_patient_id_defaults_to_caller(monkeypatch, as_user):
    patient = as_user(make_user(UserRole.PATIENT))
    seen = []

    def fake_recommend(db, patient_id):
        seen.append(patient_id)
        return []

    monkeypatch.setattr(
        HerediblesService, "get_recommended_recipes", staticmethod(fake_recommend)
    )

    resp = client.get("/api/heredibles/recommended-recipes")

    assert resp.status_code == 200
    assert seen == [patient.id]
