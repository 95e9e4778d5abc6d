"""HTTP endpoints for foods, recipes, meals, weights and profiles.

Callers are authenticated upstream; requests carry the shared ``X-Api-Token``
and the authenticated ``X-User-Id``.
"""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from calorie_planner.api.models import (
    IngredientRequest,
    InitialProfileRequest,
    ManualMealRequest,
    MasterMealRequest,
    MetabolismRequest,
    ProfileRequest,
    RecipeRequest,
    WeightRequest,
)
from calorie_planner.containers import AppContainer
from calorie_planner.domain.profiles import BodyMetrics
from calorie_planner.services.recipes import parse_recipe_line

router = APIRouter(prefix="/api")


def _get_container(request: Request) -> AppContainer:
    return request.app.state.container


async def require_token(
    x_api_token: str | None = Header(default=None),
    container: AppContainer = Depends(_get_container),
) -> None:
    """Ensure requests include the shared API token."""
    if not x_api_token or x_api_token != container.settings.api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


async def current_user(x_user_id: UUID = Header()) -> UUID:
    """Return the authenticated user id forwarded by the gateway."""
    return x_user_id


_guard = [Depends(require_token)]


@router.get("/foods", dependencies=_guard)
async def list_foods(
    user_id: UUID = Depends(current_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Return the foods the user can pick from."""
    return {"foods": container.food_catalog.list_available(user_id)}


@router.post("/foods", dependencies=_guard, status_code=status.HTTP_201_CREATED)
async def create_food(
    payload: IngredientRequest,
    user_id: UUID = Depends(current_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Create a user-owned ingredient."""
    food = container.food_catalog.create_ingredient(
        user_id, payload.name, payload.calories, payload.unit
    )
    return {"food": food}


@router.delete("/foods/{food_id}", dependencies=_guard)
async def delete_food(
    food_id: UUID,
    user_id: UUID = Depends(current_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, str]:
    """Remove one of the user's own foods."""
    container.food_catalog.remove(food_id, user_id)
    return {"status": "ok"}


@router.post("/recipes", dependencies=_guard, status_code=status.HTTP_201_CREATED)
async def create_recipe(
    payload: RecipeRequest,
    user_id: UUID = Depends(current_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Create a DISH or MEAL_SET from ingredient lines."""
    lines = [
        parse_recipe_line(ingredient.model_dump())
        for ingredient in payload.ingredients
    ]
    composite = container.recipe_composer.create_composite(
        user_id, payload.name, payload.kind, lines
    )
    return {"recipe": composite}


@router.get("/recipes/{food_id}", dependencies=_guard)
async def get_recipe(
    food_id: UUID,
    user_id: UUID = Depends(current_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Return a global or own composite food with its lines."""
    return {"recipe": container.recipe_composer.get_composite(food_id, user_id)}


@router.post(
    "/meals/master", dependencies=_guard, status_code=status.HTTP_201_CREATED
)
async def record_master_meal(
    payload: MasterMealRequest,
    user_id: UUID = Depends(current_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Log a catalog item and return the refreshed dashboard."""
    entry = container.meal_ledger.record_from_master(
        user_id, payload.food_item_id, payload.amount
    )
    return {"entry": entry, "dashboard": container.dashboard.today(user_id)}


@router.post(
    "/meals/manual", dependencies=_guard, status_code=status.HTTP_201_CREATED
)
async def record_manual_meal(
    payload: ManualMealRequest,
    user_id: UUID = Depends(current_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Log a hand-entered meal and return the refreshed dashboard."""
    entry = container.meal_ledger.record_manual(
        user_id, payload.name, payload.calories
    )
    return {"entry": entry, "dashboard": container.dashboard.today(user_id)}


@router.delete("/meals/{log_id}", dependencies=_guard)
async def delete_meal(
    log_id: UUID,
    user_id: UUID = Depends(current_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Delete one of the user's meal logs."""
    container.meal_ledger.delete(log_id, user_id)
    return {"dashboard": container.dashboard.today(user_id)}


@router.get("/dashboard", dependencies=_guard)
async def dashboard(
    user_id: UUID = Depends(current_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Return today's intake against the target."""
    return {"dashboard": container.dashboard.today(user_id)}


@router.post("/weights", dependencies=_guard)
async def record_weight(
    payload: WeightRequest,
    user_id: UUID = Depends(current_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Record the day's weight and return the refreshed profile."""
    profile = container.profile_coordinator.on_weight_recorded(
        user_id, payload.sample_date, payload.weight
    )
    return {"profile": profile}


@router.get("/weights", dependencies=_guard)
async def weight_history(
    user_id: UUID = Depends(current_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Return the weight history and chart series."""
    return {
        "history": container.weight_tracker.history(user_id),
        "chart": container.weight_tracker.chart(user_id),
    }


@router.get("/weights/{sample_date}", dependencies=_guard)
async def weight_on(
    sample_date: date,
    user_id: UUID = Depends(current_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Return the weight for one date, or null."""
    return {"weight": container.weight_tracker.by_date(user_id, sample_date)}


@router.get("/profile", dependencies=_guard)
async def get_profile(
    user_id: UUID = Depends(current_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Return the profile and whether setup is complete."""
    coordinator = container.profile_coordinator
    return {
        "profile": coordinator.get_profile(user_id),
        "completed": coordinator.is_profile_completed(user_id),
        "metabolism": coordinator.metabolism(user_id),
    }


@router.put("/profile", dependencies=_guard)
async def update_profile(
    payload: ProfileRequest,
    user_id: UUID = Depends(current_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Update body fields and the derived target."""
    profile = container.profile_coordinator.on_profile_saved(
        user_id,
        payload.height_cm,
        payload.age_years,
        payload.gender,
        payload.activity_level,
    )
    return {"profile": profile}


@router.post("/profile/init", dependencies=_guard)
async def init_profile(
    payload: InitialProfileRequest,
    user_id: UUID = Depends(current_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """First-time setup with today's weight."""
    profile = container.profile_coordinator.save_initial_profile(
        user_id,
        payload.height_cm,
        payload.weight_kg,
        payload.age_years,
        payload.gender,
        payload.activity_level,
    )
    return {"profile": profile}


@router.post("/metabolism", dependencies=_guard)
async def calculate_metabolism(
    payload: MetabolismRequest,
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Calculate BMR, TDEE and target calories without saving anything."""
    metrics = BodyMetrics(
        height_cm=payload.height_cm,
        weight_kg=payload.weight_kg,
        age_years=payload.age_years,
        gender=payload.gender,
        activity_level=payload.activity_level,
    )
    return {"result": container.metabolism_engine.compute(metrics)}
