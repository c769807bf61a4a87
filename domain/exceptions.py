"""
Domain exceptions.

Every error raised by the domain and application layers derives from DomainError
so the HTTP layer can map it to a response in one place.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ViolationCode(str, Enum):
    REQUIRED_FIELD_MISSING = "RequiredFieldMissing"
    OUT_OF_RANGE = "OutOfRange"
    INVALID_ENUM = "InvalidEnum"
    EMPTY_COLLECTION = "EmptyCollection"
    INVALID_FORMAT = "InvalidFormat"


@dataclass(frozen=True)
class Violation:
    """A single field-level problem found while validating a payload."""
    field: str
    code: ViolationCode
    message: str

    def __str__(self) -> str:
        return self.message


class DomainError(Exception):
    """Base class for errors raised by the domain and application layers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(DomainError):
    """
    Raised when a payload breaks one or more record invariants.

    Carries the complete list of violations so callers can report every
    problem at once.
    """

    def __init__(self, violations: list[Violation], message: str = "Validation failed"):
        super().__init__(message)
        self.violations = list(violations)

    @property
    def errors(self) -> list[str]:
        return [v.message for v in self.violations]

    def fields(self) -> set[str]:
        return {v.field for v in self.violations}

    def codes(self) -> set[ViolationCode]:
        return {v.code for v in self.violations}


class NotFound(DomainError):
    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class InvalidIdentifier(DomainError):
    def __init__(self, entity: str, entity_id: Optional[str]):
        super().__init__(f"Invalid {entity.lower()} id: {entity_id!r}")
        self.entity = entity
        self.entity_id = entity_id


class ServerFault(DomainError):
    """Storage or infrastructure failure. Surfaced to callers as a 500."""
