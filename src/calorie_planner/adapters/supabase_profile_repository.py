"""Supabase-backed profile repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from calorie_planner.domain.profiles import ActivityLevel, Gender, UserProfile
from calorie_planner.services.profiles import ProfileRepository

_COLUMNS = (
    "user_id, height_cm, age_years, gender, activity_level, target_calories, "
    "version"
)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for user profiles.

    Writes are compare-and-set on the ``version`` column, so two requests for
    the same user never both commit a target computed from the same snapshot.
    """

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile row for a user, if present."""
        response = (
            self.client.table("user_profiles")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def create_profile(self, user_id: UUID, target_calories: int) -> UserProfile:
        """Create an empty profile row, keeping one created concurrently."""
        response = (
            self.client.table("user_profiles")
            .upsert(
                {"user_id": str(user_id), "target_calories": target_calories},
                on_conflict="user_id",
                ignore_duplicates=True,
            )
            .execute()
        )
        if response.data:
            return _parse_profile(response.data[0])
        existing = self.get_profile(user_id)
        if existing is None:
            raise RuntimeError("Failed to create user profile")
        return existing

    def save_profile(self, profile: UserProfile) -> UserProfile | None:
        """Write body fields and target calories if the version still matches."""
        response = (
            self.client.table("user_profiles")
            .update(
                {
                    "height_cm": profile.height_cm,
                    "age_years": profile.age_years,
                    "gender": profile.gender.value if profile.gender else None,
                    "activity_level": (
                        profile.activity_level.value
                        if profile.activity_level
                        else None
                    ),
                    "target_calories": profile.target_calories,
                    "version": profile.version + 1,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .eq("user_id", str(profile.user_id))
            .eq("version", profile.version)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> UserProfile:
    height = row.get("height_cm")
    age = row.get("age_years")
    return UserProfile(
        user_id=UUID(str(row["user_id"])),
        height_cm=None if height is None else float(height),
        age_years=None if age is None else int(age),
        gender=Gender.parse(row.get("gender")),
        activity_level=ActivityLevel.parse(row.get("activity_level")),
        target_calories=int(row.get("target_calories") or 0),
        version=int(row.get("version") or 0),
    )
