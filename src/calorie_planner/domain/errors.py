"""Domain errors raised by the calorie planner services."""

from collections.abc import Iterable


class DomainError(Exception):
    """Base class for failures surfaced to callers."""


class NotFoundError(DomainError):
    """A referenced entity does not exist."""

    def __init__(self, entity: str, ids: Iterable[object]) -> None:
        self.entity = entity
        self.ids = list(ids)
        joined = ", ".join(str(value) for value in self.ids)
        super().__init__(f"{entity} not found: {joined}")


class ValidationError(DomainError):
    """Input that can never become a valid entity."""


class PermissionDeniedError(DomainError):
    """A user tried to mutate an entity they do not own."""

    def __init__(self, entity: str, entity_id: object, user_id: object) -> None:
        self.entity = entity
        self.entity_id = entity_id
        self.user_id = user_id
        super().__init__(f"User {user_id} cannot modify {entity} {entity_id}")


class InvalidStateError(DomainError):
    """An operation was invoked on data that is not ready for it."""


class ConcurrentUpdateError(DomainError):
    """A row kept changing underneath a read-modify-write cycle."""

    def __init__(self, entity: str, entity_id: object, attempts: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        self.attempts = attempts
        super().__init__(
            f"{entity} {entity_id} changed concurrently {attempts} times"
        )
