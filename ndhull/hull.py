from __future__ import annotations
from typing import Dict, Generic, List, Sequence, Tuple, TypeVar

from .faces import ConvexFace
from .geom import EPS

TVertex = TypeVar("TVertex")
TFace = TypeVar("TFace", bound=ConvexFace)

_CREATE_KEY = object()  # only the engine may build hulls


class ConvexHull(Generic[TVertex, TFace]):
    """
    Convex hull of a point set: the vertices on its boundary and the faces bounding it.

    Not constructible by callers; use ndhull.create / create_hull / create_from_arrays.
    """

    def __init__(self, points: Sequence[TVertex], faces: Sequence[TFace], *, _key: object = None):
        if _key is not _CREATE_KEY:
            raise TypeError("ConvexHull can only be created through the ndhull factory functions")
        self._points: Tuple[TVertex, ...] = tuple(points)
        self._faces: Tuple[TFace, ...] = tuple(faces)

    @classmethod
    def _new(cls, points: Sequence[TVertex], faces: Sequence[TFace]) -> "ConvexHull[TVertex, TFace]":
        return cls(points, faces, _key=_CREATE_KEY)

    @property
    def points(self) -> Tuple[TVertex, ...]:
        """Vertices of the hull boundary, in input order."""
        return self._points

    @property
    def faces(self) -> Tuple[TFace, ...]:
        """Facets bounding the hull."""
        return self._faces

    @property
    def dimension(self) -> int:
        return self._faces[0].dimension if self._faces else 0

    def __repr__(self) -> str:
        return f"ConvexHull(dimension={self.dimension}, points={len(self._points)}, faces={len(self._faces)})"

    # ---------------- Diagnostics ----------------
    def validate(self, eps: float = EPS) -> dict:
        """
        Consistency check of the hull:
          - every ridge (face minus one vertex) is shared by exactly 2 faces;
          - adjacency is symmetric and matches the shared ridge;
          - every hull vertex lies on or behind every face plane (within eps, scaled);
          - face vertices are members of points.
        Returns a report; empty lists mean everything is fine.
        """
        ids = {id(v) for v in self._points}
        face_index = {id(f): i for i, f in enumerate(self._faces)}

        # 1) ridge multiplicity
        ridge_count: Dict[frozenset, int] = {}
        for f in self._faces:
            for i in range(len(f.vertices)):
                key = frozenset(id(v) for j, v in enumerate(f.vertices) if j != i)
                ridge_count[key] = ridge_count.get(key, 0) + 1
        bad_ridges = [k for k, n in ridge_count.items() if n != 2]

        # 2) adjacency symmetry
        bad_nbr: List[Tuple[int, int, str]] = []
        for fi, f in enumerate(self._faces):
            if len(f.adjacency) != len(f.vertices):
                bad_nbr.append((fi, -1, "adjacency_size"))
                continue
            for i, nb in enumerate(f.adjacency):
                if nb is None or id(nb) not in face_index:
                    bad_nbr.append((fi, i, "missing_neighbor"))
                    continue
                ridge = {id(v) for j, v in enumerate(f.vertices) if j != i}
                if not ridge <= {id(v) for v in nb.vertices} or not any(a is f for a in nb.adjacency):
                    bad_nbr.append((fi, i, f"no_backlink_to_{face_index[id(nb)]}"))

        # 3) convexity: nothing in front of any face
        scale = max((abs(c) for v in self._points for c in v.position), default=1.0) or 1.0
        bad_convex: List[int] = []
        for fi, f in enumerate(self._faces):
            if any(f.signed_distance(v.position) > eps * scale * 1e3 for v in self._points):
                bad_convex.append(fi)

        # 4) no dangling vertices
        dangling = [fi for fi, f in enumerate(self._faces) if any(id(v) not in ids for v in f.vertices)]

        return {
            "faces": len(self._faces),
            "vertices": len(self._points),
            "bad_ridges": bad_ridges,
            "bad_neighbors": bad_nbr,
            "bad_convexity_faces": bad_convex,
            "dangling_vertex_faces": dangling,
        }
