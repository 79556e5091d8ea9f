from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Protocol, Sequence, Tuple, runtime_checkable

import numpy as np

EPS = 1e-10  # default plane-distance tolerance


@runtime_checkable
class HasPosition(Protocol):
    """Anything that can be fed to the hull: exposes a D-dimensional position."""

    @property
    def position(self) -> Sequence[float]: ...


@dataclass(frozen=True)
class DefaultVertex:
    position: Tuple[float, ...]

    def __post_init__(self):
        object.__setattr__(self, "position", tuple(float(c) for c in self.position))

    def __iter__(self):
        yield from self.position

    def __len__(self) -> int:
        return len(self.position)


def as_vertices(coords: Iterable[Sequence[float]]) -> List[DefaultVertex]:
    """Wrap raw coordinate sequences one-to-one, keeping order."""
    return [DefaultVertex(tuple(c)) for c in coords]


def centroid(points: np.ndarray) -> np.ndarray:
    if len(points) == 0:
        raise ValueError("empty set")
    return points.mean(axis=0)


def unique_points(points: Iterable[Sequence[float]], scale: float = 1e9) -> List[DefaultVertex]:
    """
    Coarse de-duplication by quantising coordinates.
    `scale=1e9` is roughly 1e-9 per coordinate.
    """
    seen: dict[Tuple[int, ...], DefaultVertex] = {}
    for p in points:
        key = tuple(int(round(c * scale)) for c in p)
        if key not in seen:
            seen[key] = DefaultVertex(tuple(p))
    return list(seen.values())
