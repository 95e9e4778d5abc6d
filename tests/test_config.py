"""Tests for settings loading."""

from calorie_planner.config import Settings


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", "service-key")
    monkeypatch.setenv("API_TOKEN", "token")
    monkeypatch.setenv("SURPLUS_CALORIES", "500")
    monkeypatch.setenv("DAY_TIMEZONE", "Asia/Tokyo")

    settings = Settings()

    assert settings.supabase_url == "https://project.supabase.co"
    assert settings.surplus_calories == 500
    assert settings.default_target_calories == 2200
    assert settings.day_timezone == "Asia/Tokyo"
