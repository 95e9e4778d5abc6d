"""Supabase repository for weight samples."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from calorie_planner.domain.weights import WeightSample
from calorie_planner.services.weights import WeightRepository

_COLUMNS = "id, user_id, sample_date, weight"


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weight samples.

    ``weight_logs`` carries a unique ``(user_id, sample_date)`` constraint and
    writes go through an upsert on it.
    """

    client: Client

    def upsert_sample(
        self, user_id: UUID, sample_date: date, weight: float
    ) -> WeightSample:
        """Insert or overwrite the sample for the day."""
        response = (
            self.client.table("weight_logs")
            .upsert(
                {
                    "user_id": str(user_id),
                    "sample_date": sample_date.isoformat(),
                    "weight": weight,
                },
                on_conflict="user_id,sample_date",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save weight sample")
        return _parse_sample(response.data[0])

    def get_sample(self, user_id: UUID, sample_date: date) -> WeightSample | None:
        """Return the sample for an exact date."""
        response = (
            self.client.table("weight_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("sample_date", sample_date.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_sample(response.data[0])

    def get_latest(self, user_id: UUID) -> WeightSample | None:
        """Return the sample with the greatest date."""
        response = (
            self.client.table("weight_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("sample_date", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_sample(response.data[0])

    def list_samples(self, user_id: UUID) -> list[WeightSample]:
        """Return all samples ascending by date."""
        response = (
            self.client.table("weight_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("sample_date", desc=False)
            .execute()
        )
        return [_parse_sample(row) for row in response.data or []]


def _parse_sample(row: dict[str, object]) -> WeightSample:
    return WeightSample(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        sample_date=date.fromisoformat(str(row["sample_date"])),
        weight=float(row.get("weight") or 0.0),
    )
