# ndhull/predicates.py
from __future__ import annotations
from typing import Optional, Tuple

import numpy as np

from .geom import EPS

Plane = Tuple[np.ndarray, float]  # (unit normal, offset): dot(n, x) + offset


def orient(simplex: np.ndarray, p: np.ndarray) -> float:
    """
    Orientation of p against the oriented (d-1)-simplex given by d rows of `simplex`.
    Generalises orient3d: determinant of [v1 - v0, ..., v(d-1) - v0, p - v0].
    """
    rows = np.vstack([simplex[1:] - simplex[0], p - simplex[0]])
    return float(np.linalg.det(rows))


def facet_plane(simplex: np.ndarray, eps: float = EPS) -> Optional[Plane]:
    """
    Hyperplane through the d points of `simplex` (shape (d, d)).
    Returns None when the points do not span a (d-1)-flat, i.e. the facet
    has (numerically) zero volume.
    """
    edges = simplex[1:] - simplex[0]
    _, s, vh = np.linalg.svd(edges, full_matrices=True)
    if s.size and s[-1] <= eps:
        return None
    normal = vh[-1]
    return normal, -float(normal @ simplex[0])


def signed_distance(plane: Plane, p: np.ndarray) -> float:
    normal, offset = plane
    return float(normal @ p + offset)


def signed_distances(plane: Plane, pts: np.ndarray) -> np.ndarray:
    normal, offset = plane
    return pts @ normal + offset


def visible_from_point(plane: Plane, p: np.ndarray, eps: float = EPS) -> bool:
    return signed_distance(plane, p) > eps


def distances_to_flat(origin: np.ndarray, basis: np.ndarray, pts: np.ndarray) -> np.ndarray:
    """
    Euclidean distances of `pts` to the affine flat origin + span(basis).
    `basis` rows must be orthonormal (may be empty: the flat is a single point).
    """
    rel = pts - origin
    if len(basis):
        rel = rel - (rel @ basis.T) @ basis
    return np.linalg.norm(rel, axis=1)
