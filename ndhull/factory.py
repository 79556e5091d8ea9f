"""
Public entry points for building convex hulls.

Every function returns a HullResult and never raises for a failed construction:
  create_hull        -- caller-chosen vertex and face types;
  create             -- caller-chosen vertex type, DefaultConvexFace faces;
  create_from_arrays -- raw coordinate sequences, wrapped into DefaultVertex.
"""

from __future__ import annotations
import logging
from typing import Iterable, Optional, Sequence, Type

from .config import DEFAULT_CONFIG, HullConfig
from .engine import get_convex_hull
from .errors import HullGenerationError, InvalidArgumentError, Outcome
from .faces import ConvexFace, DefaultConvexFace
from .geom import as_vertices
from .result import HullResult

logger = logging.getLogger(__name__)


def _resolve_config(tolerance: Optional[float], config: Optional[HullConfig]) -> HullConfig:
    config = DEFAULT_CONFIG if config is None else config
    if tolerance is not None:
        config = config.with_tolerance(tolerance)
    return config


def create_hull(
    data: Optional[Sequence],
    face_type: Type[ConvexFace],
    tolerance: Optional[float] = None,
    config: Optional[HullConfig] = None,
) -> HullResult:
    """
    Convex hull of `data` with faces of type `face_type`.

    data      -- vertices exposing a `position` of the same dimension D >= 2;
    face_type -- ConvexFace subclass with a no-argument constructor;
    tolerance -- plane-distance tolerance, overrides config.plane_distance_tolerance;
    config    -- HullConfig, defaults to HullConfig().
    """
    try:
        if data is None:
            raise InvalidArgumentError("data must not be None")
        hull = get_convex_hull(data, face_type, _resolve_config(tolerance, config))
    except HullGenerationError as e:
        logger.debug("hull construction failed (%s): %s", e.outcome.name, e.message)
        return HullResult.failure(e.outcome, e.message)
    except Exception as e:
        logger.warning("unexpected error during hull construction", exc_info=True)
        return HullResult.failure(Outcome.UNKNOWN_ERROR, str(e) or type(e).__name__)
    return HullResult.success(hull)


def create(
    data: Optional[Sequence],
    tolerance: Optional[float] = None,
    config: Optional[HullConfig] = None,
) -> HullResult:
    """Convex hull of `data` with DefaultConvexFace faces."""
    return create_hull(data, DefaultConvexFace, tolerance, config)


def create_from_arrays(
    data: Optional[Iterable[Sequence[float]]],
    tolerance: Optional[float] = None,
    config: Optional[HullConfig] = None,
) -> HullResult:
    """Convex hull of raw coordinate sequences; each one becomes a DefaultVertex."""
    if data is None:
        return create(None, tolerance, config)
    try:
        vertices = as_vertices(data)
    except (TypeError, ValueError) as e:
        return HullResult.failure(Outcome.INVALID_ARGUMENT, f"cannot read coordinates: {e}")
    except Exception as e:
        logger.warning("unexpected error while reading coordinates", exc_info=True)
        return HullResult.failure(Outcome.UNKNOWN_ERROR, str(e) or type(e).__name__)
    return create(vertices, tolerance, config)
