"""Two-dimensional points, distances and convex hulls."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence


@dataclass(frozen=True)
class Point:
    """A point, or a vector from the origin, in the plane."""

    x: Any = 0
    y: Any = 0

    def scaled(self, f: Any) -> "Point":
        return Point(self.x * f, self.y * f)

    def norm(self) -> float:
        """Distance from the origin."""
        return math.hypot(self.x, self.y)

    def norm2(self) -> Any:
        """Squared distance from the origin."""
        return self.x * self.x + self.y * self.y

    def dist(self, p: "Point") -> float:
        return math.hypot(self.x - p.x, self.y - p.y)

    def dist2(self, p: "Point") -> Any:
        dx, dy = self.x - p.x, self.y - p.y
        return dx * dx + dy * dy

    def dot(self, p: "Point") -> Any:
        return self.x * p.x + self.y * p.y

    def cross(self, p: "Point") -> Any:
        """The z component of ``(x, y, 0) x (p.x, p.y, 0)``."""
        return self.x * p.y - self.y * p.x

    def angle(self, p: Optional["Point"] = None) -> float:
        """Polar angle of this vector, or the angle between it and ``p``."""
        if p is None:
            return math.atan2(self.y, self.x)
        denom = self.norm() * p.norm()
        if denom == 0:
            raise ValueError("angle with a zero vector is undefined")
        return math.acos(max(-1.0, min(1.0, self.dot(p) / denom)))

    def dist_to_segment(self, a: "Point", b: "Point") -> float:
        """Distance to the segment with endpoints ``a`` and ``b``."""
        if a == b or self == a or self == b:
            return min(self.dist(a), self.dist(b))
        ta = (self - a).angle(b - a)
        tb = (self - b).angle(a - b)
        if ta * 2 <= math.pi and tb * 2 <= math.pi:
            return math.sin(ta) * self.dist(a)
        return min(self.dist(a), self.dist(b))

    def inside_convex(self, polygon: Sequence["Point"], clockwise: bool,
                      include_edges: bool = True) -> bool:
        """Whether this point lies in a convex polygon given in order."""
        vertices = list(polygon)
        for cur, nxt in zip(vertices, vertices[1:] + vertices[:1]):
            v = (nxt - cur).cross(self - cur)
            if (v > 0 and clockwise) or (v < 0 and not clockwise) \
                    or (v == 0 and not include_edges):
                return False
        return True

    def __add__(self, p: "Point") -> "Point":
        return Point(self.x + p.x, self.y + p.y)

    def __sub__(self, p: "Point") -> "Point":
        return Point(self.x - p.x, self.y - p.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __pos__(self) -> "Point":
        return Point(self.x, self.y)

    def __str__(self) -> str:
        return f"{self.x} {self.y}"


def _cw(s1: Point, s2: Point, include_collinear: bool) -> bool:
    o = s1.cross(s2)
    return o < 0 or (include_collinear and o == 0)


def _ccw(s1: Point, s2: Point, include_collinear: bool) -> bool:
    o = s1.cross(s2)
    return o > 0 or (include_collinear and o == 0)


def convex_hull_indices(points: Iterable[Point],
                        include_collinear: bool = False) -> list[int]:
    """Indices of the points forming the convex hull, in boundary order."""
    pts = list(points)
    if len(pts) <= 1:
        return list(range(len(pts)))
    order = sorted(range(len(pts)), key=lambda i: (pts[i].x, pts[i].y))
    p1 = pts[order[0]]
    mid = pts[order[-1]] - p1
    last = order[-1]
    up = [order[0]]
    down = [order[0]]
    for i in order[1:]:
        pt = pts[i]
        final = i == last
        if final or _cw(pt - p1, mid, include_collinear):
            while len(up) >= 2 and not _cw(pts[up[-1]] - pts[up[-2]],
                                           pt - pts[up[-2]], include_collinear):
                up.pop()
            up.append(i)
        if final or _ccw(pt - p1, mid, include_collinear):
            while len(down) >= 2 and not _ccw(pts[down[-1]] - pts[down[-2]],
                                              pt - pts[down[-2]], include_collinear):
                down.pop()
            down.append(i)
    if include_collinear and len(up) == len(pts):
        return order[::-1]
    return up + down[-2:0:-1]


def convex_hull(points: Iterable[Point], include_collinear: bool = False) -> list[Point]:
    """The points forming the convex hull, in boundary order."""
    pts = list(points)
    return [pts[i] for i in convex_hull_indices(pts, include_collinear)]