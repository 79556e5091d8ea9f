from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .errors import Outcome, error_for
from .hull import ConvexHull

THull = TypeVar("THull", bound=ConvexHull)


@dataclass(frozen=True)
class HullResult(Generic[THull]):
    """
    Outcome of one construction attempt.

    hull          -- the convex hull, present if and only if outcome is SUCCESS;
    outcome       -- Outcome classification;
    error_message -- diagnostic text, empty on success.

    Check `outcome` (or `ok`) before touching `hull`.
    """
    hull: Optional[THull]
    outcome: Outcome
    error_message: str = ""

    def __post_init__(self):
        if not isinstance(self.outcome, Outcome):
            raise TypeError(f"outcome must be an Outcome, got {self.outcome!r}")
        if (self.hull is not None) != (self.outcome is Outcome.SUCCESS):
            raise ValueError(f"hull must be present exactly when outcome is SUCCESS (outcome={self.outcome.name})")

    @classmethod
    def success(cls, hull: THull) -> "HullResult[THull]":
        return cls(hull, Outcome.SUCCESS, "")

    @classmethod
    def failure(cls, outcome: Outcome, message: str) -> "HullResult[THull]":
        return cls(None, outcome, message)

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> THull:
        """The hull, or raise the HullGenerationError matching the outcome."""
        if self.hull is None:
            raise error_for(self.outcome, self.error_message)
        return self.hull
