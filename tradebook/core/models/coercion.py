"""Result type for per-field cell coercion."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CoercionStatus(str, Enum):
    """Outcome of coercing one cell."""

    ABSENT = "absent"
    VALID = "valid"
    INVALID = "invalid"


@dataclass(slots=True, frozen=True)
class Coerced:
    """Either a typed value, an absent cell, or a present-but-invalid cell."""

    status: CoercionStatus
    value: float | None = None

    @classmethod
    def absent(cls) -> Coerced:
        return cls(CoercionStatus.ABSENT)

    @classmethod
    def valid(cls, value: float) -> Coerced:
        return cls(CoercionStatus.VALID, value)

    @classmethod
    def invalid(cls) -> Coerced:
        return cls(CoercionStatus.INVALID)

    @property
    def is_absent(self) -> bool:
        return self.status is CoercionStatus.ABSENT

    @property
    def is_invalid(self) -> bool:
        return self.status is CoercionStatus.INVALID

    def as_field(self) -> float | None:
        """Map onto a record field: ``None`` when absent, ``NaN`` when invalid."""

        if self.status is CoercionStatus.VALID:
            return self.value
        if self.status is CoercionStatus.INVALID:
            return float("nan")
        return None


__all__ = ["Coerced", "CoercionStatus"]
