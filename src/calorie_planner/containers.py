"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from calorie_planner.adapters.supabase_food_repository import SupabaseFoodRepository
from calorie_planner.adapters.supabase_meal_log_repository import (
    SupabaseMealLogRepository,
)
from calorie_planner.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from calorie_planner.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from calorie_planner.adapters.supabase_weight_repository import (
    SupabaseWeightRepository,
)
from calorie_planner.config import Settings
from calorie_planner.services.catalog import FoodCatalog
from calorie_planner.services.dashboard import DailyDashboard
from calorie_planner.services.meals import MealLedger
from calorie_planner.services.metabolism import MetabolismEngine
from calorie_planner.services.profiles import ProfileCoordinator
from calorie_planner.services.recipes import RecipeComposer
from calorie_planner.services.weights import WeightTracker


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_catalog: FoodCatalog
    recipe_composer: RecipeComposer
    meal_ledger: MealLedger
    weight_tracker: WeightTracker
    metabolism_engine: MetabolismEngine
    profile_coordinator: ProfileCoordinator
    dashboard: DailyDashboard


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_catalog = FoodCatalog(SupabaseFoodRepository(supabase_client))
    recipe_composer = RecipeComposer(
        catalog=food_catalog,
        repository=SupabaseRecipeRepository(supabase_client),
    )
    meal_ledger = MealLedger(
        catalog=food_catalog,
        repository=SupabaseMealLogRepository(supabase_client),
        timezone_name=resolved_settings.day_timezone,
    )
    weight_tracker = WeightTracker(SupabaseWeightRepository(supabase_client))
    metabolism_engine = MetabolismEngine(
        surplus_calories=resolved_settings.surplus_calories
    )
    profile_coordinator = ProfileCoordinator(
        repository=SupabaseProfileRepository(supabase_client),
        weight_tracker=weight_tracker,
        engine=metabolism_engine,
        default_target_calories=resolved_settings.default_target_calories,
        timezone_name=resolved_settings.day_timezone,
    )
    dashboard = DailyDashboard(
        meal_ledger=meal_ledger,
        profile_coordinator=profile_coordinator,
    )
    return AppContainer(
        settings=resolved_settings,
        food_catalog=food_catalog,
        recipe_composer=recipe_composer,
        meal_ledger=meal_ledger,
        weight_tracker=weight_tracker,
        metabolism_engine=metabolism_engine,
        profile_coordinator=profile_coordinator,
        dashboard=dashboard,
    )
