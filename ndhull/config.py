from __future__ import annotations
import enum
import math
import numbers
from dataclasses import dataclass, replace
from typing import Optional

from .errors import InvalidArgumentError
from .geom import EPS

DEFAULT_PLANE_DISTANCE_TOLERANCE = EPS
DEFAULT_TRANSLATION_RADIUS = 1e-8
BACKENDS = ("internal", "scipy")


class PointTranslation(enum.Enum):
    NONE = "none"
    TRANSLATE_INTERNAL = "translate_internal"  # move centroid to the origin
    RANDOM_SHIFT = "random_shift"              # joggle every coordinate


@dataclass(frozen=True)
class HullConfig:
    """
    Parameters of one hull computation.

    plane_distance_tolerance -- a point farther than this above a face plane is
        "outside"; also the threshold under which the input counts as degenerate.
    point_translation -- optional preconditioning of the coordinates; results are
        always reported in the caller's frame.
    translation_radius -- half-width of the RANDOM_SHIFT joggle.
    seed -- seed for the RANDOM_SHIFT generator (None: fresh entropy).
    backend -- "internal" (incremental Quickhull) or "scipy" (Qhull).
    """
    plane_distance_tolerance: float = DEFAULT_PLANE_DISTANCE_TOLERANCE
    point_translation: PointTranslation = PointTranslation.NONE
    translation_radius: float = DEFAULT_TRANSLATION_RADIUS
    seed: Optional[int] = 0
    backend: str = "internal"

    def with_tolerance(self, tolerance: float) -> "HullConfig":
        return replace(self, plane_distance_tolerance=tolerance)

    def validate(self) -> None:
        tol = self.plane_distance_tolerance
        if isinstance(tol, bool) or not isinstance(tol, numbers.Real) or not math.isfinite(tol) or tol <= 0:
            raise InvalidArgumentError(f"tolerance must be a positive finite number, got {tol!r}")
        if not isinstance(self.point_translation, PointTranslation):
            raise InvalidArgumentError(f"unknown point translation: {self.point_translation!r}")
        r = self.translation_radius
        if self.point_translation is PointTranslation.RANDOM_SHIFT and not (math.isfinite(r) and r > 0):
            raise InvalidArgumentError(f"translation_radius must be positive, got {r!r}")
        if self.backend not in BACKENDS:
            raise InvalidArgumentError(f"unknown backend {self.backend!r}, expected one of {BACKENDS}")


DEFAULT_CONFIG = HullConfig()
