from __future__ import annotations
from typing import Generic, Tuple, TypeVar

TVertex = TypeVar("TVertex")
TFace = TypeVar("TFace", bound="ConvexFace")


class ConvexFace(Generic[TVertex]):
    """
    One facet of a convex hull in D dimensions.

    Instances are created with no arguments and filled in by the engine:
      vertices  -- the D vertices bounding the facet;
      normal    -- unit outward normal (D floats);
      offset    -- plane offset, so dot(normal, x) + offset is the signed distance of x;
      adjacency -- adjacency[i] is the face across the ridge opposite vertices[i].

    Subclass it to attach payload; subclasses must keep a no-argument constructor.
    """

    def __init__(self):
        self.vertices: Tuple[TVertex, ...] = ()
        self.normal: Tuple[float, ...] = ()
        self.offset: float = 0.0
        self.adjacency: Tuple["ConvexFace[TVertex]", ...] = ()

    @property
    def dimension(self) -> int:
        return len(self.normal)

    def signed_distance(self, position) -> float:
        return sum(n * c for n, c in zip(self.normal, position)) + self.offset

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.vertices!r}, normal={self.normal!r})"


class DefaultConvexFace(ConvexFace[TVertex]):
    """Face type used when the caller needs no custom facet data."""
