"""
ndhull: N-dimensional convex hulls with a result-based construction API.
Incremental Quickhull with a conflict graph, or Qhull through SciPy.
"""

__version__ = "0.1.0"

from ndhull.geom import EPS, DefaultVertex, HasPosition, unique_points
from ndhull.faces import ConvexFace, DefaultConvexFace
from ndhull.errors import (
    DegenerateInputError,
    DimensionError,
    HullGenerationError,
    InsufficientPointsError,
    InvalidArgumentError,
    NonFiniteCoordinatesError,
    Outcome,
    PrecisionError,
)
from ndhull.config import DEFAULT_PLANE_DISTANCE_TOLERANCE, HullConfig, PointTranslation
from ndhull.hull import ConvexHull
from ndhull.result import HullResult
from ndhull.factory import create, create_from_arrays, create_hull

__all__ = [
    "EPS", "DefaultVertex", "HasPosition", "unique_points",
    "ConvexFace", "DefaultConvexFace",
    "Outcome", "HullGenerationError", "InvalidArgumentError", "DimensionError",
    "NonFiniteCoordinatesError", "InsufficientPointsError", "DegenerateInputError", "PrecisionError",
    "DEFAULT_PLANE_DISTANCE_TOLERANCE", "HullConfig", "PointTranslation",
    "ConvexHull", "HullResult",
    "create", "create_from_arrays", "create_hull",
    "__version__",
]
