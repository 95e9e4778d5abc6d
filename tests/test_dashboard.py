"""Tests for the daily dashboard."""

from datetime import timedelta
from uuid import uuid4

from calorie_planner.services.dashboard import DailyDashboard


def _dashboard(ledger, coordinator) -> DailyDashboard:  # type: ignore[no-untyped-def]
    return DailyDashboard(meal_ledger=ledger, profile_coordinator=coordinator)


def test_today_against_default_target(ledger, coordinator) -> None:
    user_id = uuid4()
    ledger.record_manual(user_id, "Breakfast", 300)
    ledger.record_manual(user_id, "Lunch", 250)

    progress = _dashboard(ledger, coordinator).today(user_id)

    assert progress.target_calories == 2200
    assert progress.current_calories == 550
    assert progress.remaining_calories == 1650
    assert progress.progress_percent == 25
    assert len(progress.entries) == 2


def test_progress_is_capped_and_remaining_may_go_negative(
    ledger, coordinator
) -> None:
    user_id = uuid4()
    ledger.record_manual(user_id, "Feast", 2500)

    progress = _dashboard(ledger, coordinator).today(user_id)

    assert progress.remaining_calories == -300
    assert progress.progress_percent == 100


def test_zero_target_reports_zero_progress(
    ledger, coordinator, profile_repository
) -> None:
    user_id = uuid4()
    profile_repository.create_profile(user_id, 0)
    ledger.record_manual(user_id, "Snack", 100)

    progress = _dashboard(ledger, coordinator).today(user_id)

    assert progress.progress_percent == 0


def test_yesterdays_meals_are_excluded(
    ledger, coordinator, meal_repository, clock
) -> None:
    user_id = uuid4()
    meal_repository.create_entry(
        user_id=user_id,
        food_item_id=None,
        name="Late dinner",
        calories=900,
        amount=1.0,
        eaten_at=clock.now - timedelta(days=1),
    )

    progress = _dashboard(ledger, coordinator).today(user_id)

    assert progress.current_calories == 0
    assert progress.entries == []
