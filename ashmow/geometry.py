"""Planar geometry: points, segments, bounding boxes and polygons."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union

_POINT_EPS = 1e-9
_PARALLEL_EPS = 1e-10


@dataclass(frozen=True, eq=False)
class Point2D:
    """An immutable 2D point or vector, compared with a small tolerance."""

    x: float = 0.0
    y: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return abs(self.x - other.x) < _POINT_EPS and abs(self.y - other.y) < _POINT_EPS

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Point2D) -> Point2D:
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        return Point2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point2D:
        return Point2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def dot(self, other: Point2D) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point2D) -> float:
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Point2D:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0:
            return Point2D(0.0, 0.0)
        return Point2D(self.x / length, self.y / length)


class SegmentType(Enum):
    PATH = "path"
    CONNECTION = "connection"


@dataclass
class LineSegment:
    start: Point2D
    end: Point2D
    type: SegmentType = SegmentType.PATH

    def length_squared(self) -> float:
        return (self.end - self.start).length_squared()

    def length(self) -> float:
        return math.sqrt(self.length_squared())


@dataclass
class AABB:
    """Axis-aligned bounding box."""

    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0

    @classmethod
    def from_points(cls, p1: Point2D, p2: Point2D) -> AABB:
        return cls(
            min_x=min(p1.x, p2.x),
            max_x=max(p1.x, p2.x),
            min_y=min(p1.y, p2.y),
            max_y=max(p1.y, p2.y),
        )

    def expand_to_include(self, point: Point2D) -> None:
        self.min_x = min(self.min_x, point.x)
        self.max_x = max(self.max_x, point.x)
        self.min_y = min(self.min_y, point.y)
        self.max_y = max(self.max_y, point.y)

    def excludes(self, point: Point2D) -> bool:
        return (
            point.x < self.min_x
            or point.x > self.max_x
            or point.y < self.min_y
            or point.y > self.max_y
        )


class ContainmentMode(Enum):
    INCLUSIVE = "inclusive"
    STRICT = "strict"


class OpenPolygonError(RuntimeError):
    """Raised when containment is tested on a polygon that was never closed."""


def segments_intersect(
    p1: Point2D, p2: Point2D, q1: Point2D, q2: Point2D
) -> Optional[Point2D]:
    """Return the intersection point of segments p1-p2 and q1-q2, or None.

    Parallel and colinear segments are reported as not intersecting.
    """
    r = p2 - p1
    s = q2 - q1
    rxs = r.cross(s)
    qp = q1 - p1
    if abs(rxs) < _PARALLEL_EPS:
        return None
    t = qp.cross(s) / rxs
    u = qp.cross(r) / rxs
    if 0 <= t <= 1 and 0 <= u <= 1:
        return p1 + r * t
    return None


def point_on_segment(p: Point2D, a: Point2D, b: Point2D) -> bool:
    """Whether p lies on segment a-b, within a small tolerance."""
    cross = (b.x - a.x) * (p.y - a.y) - (b.y - a.y) * (p.x - a.x)
    if abs(cross) > _POINT_EPS:
        return False
    dot = (p.x - a.x) * (b.x - a.x) + (p.y - a.y) * (b.y - a.y)
    length_sq = (b.x - a.x) ** 2 + (b.y - a.y) ** 2
    return -_POINT_EPS <= dot <= length_sq + _POINT_EPS


class Polygon:
    """A polygon built point by point, closed before containment tests."""

    def __init__(self) -> None:
        self._vertices: List[Point2D] = []
        self._bounding_box = AABB()
        self._closed = False
        self.containment_mode = ContainmentMode.INCLUSIVE

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Polygon(vertices={self._vertices!r}, closed={self._closed})"

    @property
    def vertices(self) -> List[Point2D]:
        return list(self._vertices)

    @property
    def bounding_box(self) -> AABB:
        return self._bounding_box

    @property
    def is_closed(self) -> bool:
        return self._closed

    def add_point(self, x: Union[Point2D, float], y: Optional[float] = None) -> None:
        """Append a vertex, given either as a Point2D or as x and y."""
        if isinstance(x, Point2D):
            point = x
        else:
            if y is None:
                raise TypeError("add_point needs a Point2D or both x and y")
            point = Point2D(float(x), float(y))
        self._vertices.append(point)
        if len(self._vertices) == 1:
            self._bounding_box = AABB.from_points(point, point)
        else:
            self._bounding_box.expand_to_include(point)

    def close(self) -> None:
        self._closed = True

    def edges(self) -> Iterator[Tuple[Point2D, Point2D]]:
        """Yield each edge, including the one from the last vertex to the first."""
        vertices = self._vertices
        return zip(vertices, vertices[1:] + vertices[:1])

    def contains(
        self, point: Point2D, mode: ContainmentMode = ContainmentMode.INCLUSIVE
    ) -> bool:
        if not self._closed:
            raise OpenPolygonError("Cannot test containment on an open polygon.")

        if self._bounding_box.excludes(point):
            return False

        if mode is ContainmentMode.INCLUSIVE and any(
            point_on_segment(point, a, b) for a, b in self.edges()
        ):
            return True

        crossings = sum(
            1
            for a, b in self.edges()
            if (a.y > point.y) != (b.y > point.y)
            and point.x < (b.x - a.x) * (point.y - a.y) / (b.y - a.y + 1e-12) + a.x
        )
        return crossings % 2 == 1

    def line_intersections(self, p1: Point2D, p2: Point2D) -> List[Point2D]:
        """Points where segment p1-p2 crosses the polygon's edges."""
        hits = (segments_intersect(p1, p2, a, b) for a, b in self.edges())
        return [hit for hit in hits if hit is not None]

    def intersects_segment(self, a: Point2D, b: Point2D) -> bool:
        return any(
            segments_intersect(a, b, p1, p2) is not None for p1, p2 in self.edges()
        )