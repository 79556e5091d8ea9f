from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple, Type

import numpy as np

from .config import DEFAULT_CONFIG, HullConfig, PointTranslation
from .errors import (
    DegenerateInputError,
    DimensionError,
    InsufficientPointsError,
    InvalidArgumentError,
    NonFiniteCoordinatesError,
    Outcome,
    PrecisionError,
)
from .faces import ConvexFace, DefaultConvexFace
from .geom import EPS, centroid
from .hull import ConvexHull
from .predicates import (
    Plane,
    distances_to_flat,
    facet_plane,
    orient,
    signed_distance,
    signed_distances,
    visible_from_point,
)

logger = logging.getLogger(__name__)

Ridge = Tuple[int, ...]  # sorted vertex indices of a (d-2)-face


@dataclass
class Face:
    """
    Working facet of the hull (indices into the point array).
    v: D vertex indices.
    plane: outward unit normal and offset.
    nbr[i]: neighbouring face across the ridge opposite v[i], or None.
    alive: whether the face is still part of the hull.
    conflict: indices of points that see this face (Quickhull conflict set).
    """
    v: Tuple[int, ...]
    plane: Plane
    nbr: List[Optional[int]]
    alive: bool = True
    conflict: Set[int] = field(default_factory=set)

    def ridge(self, i: int) -> Tuple[int, ...]:
        return self.v[:i] + self.v[i + 1:]


# ---------------- Input preparation ----------------
def prepare_points(data: Sequence) -> np.ndarray:
    """
    Read `position` of every vertex into an (n, D) float array.
    Raises a classified HullGenerationError for unusable input.
    """
    positions = [v.position for v in data]
    if not positions:
        raise InsufficientPointsError("no points given")
    dims = {len(p) for p in positions}
    if len(dims) > 1:
        raise DimensionError(
            f"positions have different dimensions: {sorted(dims)}",
            Outcome.INCONSISTENT_DIMENSIONS,
        )
    d = dims.pop()
    if d < 2:
        raise DimensionError(f"dimension must be at least 2, got {d}")

    pts = np.asarray(positions, dtype=float)
    if not np.isfinite(pts).all():
        bad = int(np.flatnonzero(~np.isfinite(pts).all(axis=1))[0])
        raise NonFiniteCoordinatesError(f"point {bad} has a non-finite coordinate")
    n = len(pts)
    if n < d + 1:
        raise InsufficientPointsError(f"a {d}-dimensional hull needs at least {d + 1} points, got {n}")
    return pts


def translate_points(pts: np.ndarray, config: HullConfig) -> np.ndarray:
    """Working copy of the coordinates after the configured translation."""
    if config.point_translation is PointTranslation.TRANSLATE_INTERNAL:
        return pts - centroid(pts)
    if config.point_translation is PointTranslation.RANDOM_SHIFT:
        rng = np.random.default_rng(config.seed)
        r = config.translation_radius
        return pts + rng.uniform(-r, r, size=pts.shape)
    return pts.copy()


def initial_simplex(pts: np.ndarray, eps: float = EPS) -> List[int]:
    """
    Greedy search for D + 1 affinely independent points:
      - start from the lowest point along the first axis;
      - repeatedly take the point farthest from the affine span of those chosen.
    Raises DegenerateInputError when no point is farther than eps from the span.
    """
    n, d = pts.shape
    i0 = int(np.argmin(pts[:, 0]))
    chosen = [i0]
    origin = pts[i0]
    basis = np.empty((0, d))
    for k in range(d):
        dist = distances_to_flat(origin, basis, pts)
        j = int(np.argmax(dist))
        if dist[j] <= eps:
            if k == 0:
                raise DegenerateInputError("all points coincide")
            raise DegenerateInputError(
                f"points lie in a {k}-dimensional affine subspace; a {d}-dimensional hull is impossible"
            )
        w = pts[j] - origin
        if len(basis):
            w = w - (w @ basis.T) @ basis
        basis = np.vstack([basis, w / np.linalg.norm(w)])
        chosen.append(j)
    return chosen


# ---------------- Internal engine: incremental Quickhull ----------------
class QuickHull:
    """
    Incremental N-dimensional Quickhull with a conflict graph.

    Input: (n, D) array, at least D + 1 points spanning D dimensions.
    Output: faces() returns the live faces; the walk is deterministic.
    """

    def __init__(self, pts: np.ndarray, eps: float = EPS):
        self.P = pts
        self.eps = eps
        self.d = pts.shape[1]
        self.faces_list: List[Face] = []

        # 1) starting simplex and a point strictly inside it
        simplex = initial_simplex(pts, eps)
        self.interior = centroid(pts[simplex])
        base_faces = self._build_initial_simplex(simplex)
        self._init_conflicts(base_faces, simplex)

        # 2) main loop while outside points remain
        self._expand_until_done()
        self._check_topology()

    def faces(self) -> Dict[int, Face]:
        """Live faces keyed by their id (the ids used in `nbr`)."""
        return {fid: f for fid, f in enumerate(self.faces_list) if f.alive}

    def _add_face(self, v: Tuple[int, ...]) -> int:
        """Create a face with an outward plane; fixes the vertex order so the interior is on the negative side."""
        if orient(self.P[list(v)], self.interior) > 0:
            v = (v[1], v[0]) + v[2:]
        plane = facet_plane(self.P[list(v)], self.eps)
        if plane is None:
            raise PrecisionError(f"facet {v} is degenerate: no supporting hyperplane")
        normal, offset = plane
        side = signed_distance(plane, self.interior)
        if side > 0:
            normal, offset, side = -normal, -offset, -side
        if side >= -self.eps:
            raise PrecisionError(f"facet {v} passes through the interior point")
        fid = len(self.faces_list)
        self.faces_list.append(Face(v, (normal, offset), [None] * self.d))
        return fid

    def _link_by_ridges(self, fids: List[int], ridges: Dict[Ridge, Tuple[int, int]]) -> None:
        """Glue faces that share a ridge; unmatched ridges stay in `ridges`."""
        for fid in fids:
            f = self.faces_list[fid]
            for i in range(self.d):
                if f.nbr[i] is not None:
                    continue
                key = tuple(sorted(f.ridge(i)))
                if key in ridges:
                    ofid, oi = ridges.pop(key)
                    f.nbr[i] = ofid
                    self.faces_list[ofid].nbr[oi] = fid
                else:
                    ridges[key] = (fid, i)

    def _build_initial_simplex(self, simplex: List[int]) -> List[int]:
        fids = [self._add_face(tuple(simplex[:k] + simplex[k + 1:])) for k in range(self.d + 1)]
        self._link_by_ridges(fids, {})
        return fids

    def _init_conflicts(self, base_faces: List[int], simplex: List[int]) -> None:
        """Initial conflict graph: which remaining points see which faces."""
        rest = np.setdiff1d(np.arange(len(self.P)), simplex)
        self._assign_conflicts(base_faces, rest)

    def _assign_conflicts(self, fids: List[int], candidates: np.ndarray) -> None:
        if len(candidates) == 0:
            return
        pts = self.P[candidates]
        for fid in fids:
            f = self.faces_list[fid]
            mask = signed_distances(f.plane, pts) > self.eps
            f.conflict.update(int(i) for i in candidates[mask])

    def _pick_face_with_conflict(self) -> Optional[int]:
        for fid, f in enumerate(self.faces_list):
            if f.alive and f.conflict:
                return fid
        return None

    def _pick_farthest_point(self, fid: int) -> int:
        """Farthest point of the face's conflict set (Quickhull heuristic)."""
        f = self.faces_list[fid]
        cands = np.array(sorted(f.conflict))
        dist = signed_distances(f.plane, self.P[cands])
        return int(cands[int(np.argmax(dist))])

    def _collect_visible_region(self, seed_fid: int, p_idx: int) -> Tuple[Set[int], List[Tuple[Tuple[int, ...], int]]]:
        """
        Walk the faces visible from p_idx starting at seed_fid.
        A face counts as visible when p_idx is in its conflict set or lies in front of its plane.
        Returns:
          visible -- ids of visible faces,
          horizon -- (ridge, opp_fid) pairs where opp_fid is the non-visible face across the ridge.
        """
        p = self.P[p_idx]
        visible: Set[int] = set()
        stack = [seed_fid]
        while stack:
            fid = stack.pop()
            if fid in visible:
                continue
            f = self.faces_list[fid]
            if not f.alive:
                continue
            if p_idx not in f.conflict and not visible_from_point(f.plane, p, self.eps):
                continue
            visible.add(fid)
            for nb in f.nbr:
                if nb is not None and nb not in visible:
                    stack.append(nb)

        horizon: List[Tuple[Tuple[int, ...], int]] = []
        for fid in sorted(visible):
            f = self.faces_list[fid]
            for i, nb in enumerate(f.nbr):
                if nb is None:
                    raise PrecisionError(f"face {fid} lost its neighbour across ridge {f.ridge(i)}")
                if nb not in visible:
                    horizon.append((f.ridge(i), nb))
        return visible, horizon

    def _add_point_and_update(self, p_idx: int, seed_fid: int) -> None:
        """
        Add p_idx to the hull:
          1) find the visible cap and its horizon,
          2) retire the visible faces,
          3) build the cone of new faces over the horizon,
          4) redistribute the orphaned conflict points.
        """
        visible, horizon = self._collect_visible_region(seed_fid, p_idx)

        conflict_points: Set[int] = set()
        for fid in visible:
            f = self.faces_list[fid]
            conflict_points.update(f.conflict)
            f.alive = False
            f.conflict.clear()

        new_fids: List[int] = []
        for ridge, opp_fid in horizon:
            nf = self._add_face(ridge + (p_idx,))
            new_fids.append(nf)
            face = self.faces_list[nf]
            face.nbr[face.v.index(p_idx)] = opp_fid
            opp = self.faces_list[opp_fid]
            ridge_set = set(ridge)
            for j, u in enumerate(opp.v):
                if u not in ridge_set:
                    opp.nbr[j] = nf
                    break

        # cone faces meet along ridges through p_idx
        self._link_by_ridges(new_fids, {})

        # a point that sees a cone face saw the retired face or the kept face across the horizon ridge
        for _, opp_fid in horizon:
            conflict_points.update(self.faces_list[opp_fid].conflict)
        conflict_points.discard(p_idx)
        self._assign_conflicts(new_fids, np.array(sorted(conflict_points), dtype=int))

    def _expand_until_done(self) -> None:
        while True:
            fid = self._pick_face_with_conflict()
            if fid is None:
                break
            p_idx = self._pick_farthest_point(fid)
            self._add_point_and_update(p_idx, fid)

    def _check_topology(self) -> None:
        for fid, f in enumerate(self.faces_list):
            if not f.alive:
                continue
            for nb in f.nbr:
                if nb is None or not self.faces_list[nb].alive:
                    raise PrecisionError(f"face {fid} has an open ridge after construction")


# ---------------- scipy backend ----------------
def qhull_faces(pts: np.ndarray) -> Dict[int, Face]:
    """Facets from scipy.spatial.ConvexHull (Qhull), triangulated (option Qt)."""
    try:
        from scipy.spatial import ConvexHull as QhullHull, QhullError
    except ImportError as e:
        raise RuntimeError("backend='scipy' needs SciPy installed; use backend='internal' instead") from e

    try:
        qh = QhullHull(pts, qhull_options="Qt")
    except QhullError as e:
        raise PrecisionError(f"Qhull failed: {e}") from e

    faces: List[Face] = []
    for simplex, nbrs, eq in zip(qh.simplices, qh.neighbors, qh.equations):
        nbr = [int(n) if n >= 0 else None for n in nbrs]
        faces.append(Face(tuple(int(i) for i in simplex), (eq[:-1].copy(), float(eq[-1])), nbr))
    return dict(enumerate(faces))




# ---------------- Export to caller types ----------------
def build_hull(data: Sequence, pts: np.ndarray, faces: Dict[int, Face], face_type: Type[ConvexFace]) -> ConvexHull:
    """
    Map working faces back to the caller's vertices and face type.
    Offsets are recomputed from the caller's coordinates so translations never leak out.
    """
    order = sorted(faces)
    slot = {fid: k for k, fid in enumerate(order)}
    objs = [face_type() for _ in order]
    for fid, obj in zip(order, objs):
        f = faces[fid]
        normal = np.asarray(f.plane[0], dtype=float)
        obj.vertices = tuple(data[i] for i in f.v)
        obj.normal = tuple(float(c) for c in normal)
        obj.offset = -float(np.mean(pts[list(f.v)] @ normal))
        obj.adjacency = tuple(objs[slot[nb]] for nb in f.nbr)

    used = sorted({i for f in faces.values() for i in f.v})
    return ConvexHull._new([data[i] for i in used], objs)


def get_convex_hull(
    data: Sequence,
    face_type: Type[ConvexFace] = DefaultConvexFace,
    config: Optional[HullConfig] = None,
) -> ConvexHull:
    """
    Compute the convex hull of `data` (vertices exposing `position`).

    Raises a HullGenerationError subclass for every classified failure; anything
    else raised here is a bug or a broken input object.
    """
    config = DEFAULT_CONFIG if config is None else config
    config.validate()
    if not (isinstance(face_type, type) and issubclass(face_type, ConvexFace)):
        raise InvalidArgumentError(f"face type must be a ConvexFace subclass, got {face_type!r}")
    try:
        face_type()
    except TypeError as e:
        raise InvalidArgumentError(f"face type {face_type.__name__} must be constructible with no arguments: {e}") from e

    data = list(data)
    pts = prepare_points(data)
    work = translate_points(pts, config)
    eps = config.plane_distance_tolerance
    n, d = work.shape
    logger.debug("hull of %d points in %d dimensions (backend=%s, tolerance=%g)", n, d, config.backend, eps)

    if config.backend == "scipy":
        initial_simplex(work, eps)  # same degeneracy classification as the internal engine
        faces = qhull_faces(work)
    else:
        faces = QuickHull(work, eps).faces()

    hull = build_hull(data, pts, faces, face_type)
    logger.debug("hull built: %d vertices, %d faces", len(hull.points), len(hull.faces))
    return hull
