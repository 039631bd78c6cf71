from PySide6.QtCore import QPointF, QRectF
from transform2d import Transform2D
from geometry import (
    points_coincide,
    point_in_polygon,
    point_on_segment,
    segments_intersect,
    turn_direction,
)

import logging

log = logging.getLogger(__name__)

class Polygon:
    """Polygon given by an ordered list of vertices.

    A single point and a single segment are polygons too. Edges are not
    stored: they join consecutive vertices and, from three vertices on, the
    last vertex back to the first. Self-intersection points of the edges are
    kept in a cache that is rebuilt every time the vertices change.

    Accessors hand out copies, the lists themselves never leave the object.
    """

    def __init__(self, x: float, y: float):
        self._vertices: list[QPointF] = [QPointF(x, y)]
        self._intersections: list[QPointF] = []

    @classmethod
    def from_pos(cls, pos: QPointF) -> "Polygon":
        return cls(pos.x(), pos.y())

    @property
    def vertices(self) -> list[QPointF]:
        return [QPointF(v) for v in self._vertices]

    @property
    def intersections(self) -> list[QPointF]:
        return [QPointF(p) for p in self._intersections]

    def __len__(self):
        return len(self._vertices)

    def __eq__(self, other):
        if not isinstance(other, Polygon):
            return NotImplemented
        return [(v.x(), v.y()) for v in self._vertices] == \
               [(v.x(), v.y()) for v in other._vertices]

    def __repr__(self):
        points = ", ".join(f"({v.x():g}, {v.y():g})" for v in self._vertices)
        return f"Polygon([{points}])"

    def copy(self) -> "Polygon":
        clone = Polygon.__new__(Polygon)
        clone._vertices = self.vertices
        clone._intersections = self.intersections
        return clone

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, x: float, y: float) -> None:
        self._vertices.append(QPointF(x, y))
        self.update_intersections()

    def add_vertex_pos(self, pos: QPointF) -> None:
        self.add_vertex(pos.x(), pos.y())

    def apply_transform(self, transform: Transform2D) -> None:
        """Map every vertex and cached intersection with transform.apply().

        Any object with an apply(QPointF) -> QPointF method is accepted.
        """
        # Map everything first so that a failure leaves the polygon as it was
        vertices = [transform.apply(v) for v in self._vertices]
        intersections = [transform.apply(p) for p in self._intersections]
        self._vertices = vertices
        self._intersections = intersections
        log.debug("Applied %r to %d vertices", transform, len(vertices))

    def transformed(self, transform: Transform2D) -> "Polygon":
        result = self.copy()
        result.apply_transform(transform)
        return result

    def update_intersections(self) -> None:
        """Rebuild the self-intersection cache from the current vertices."""
        self._intersections.clear()

        n = len(self._vertices)
        # Two non-adjacent edges exist only from four vertices on
        if n < 4:
            return

        for i in range(n):
            a = self._vertices[i]
            b = self._vertices[(i + 1) % n]
            for j in range(i + 2, n):
                # Last edge is adjacent to the first one
                if (j + 1) % n == i:
                    continue
                c = self._vertices[j]
                d = self._vertices[(j + 1) % n]
                p = segments_intersect(a, b, c, d)
                if p is None:
                    continue
                if not any(points_coincide(q, p) for q in self._intersections):
                    self._intersections.append(p)

        log.debug("Polygon with %d vertices has %d self-intersections",
                  n, len(self._intersections))

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def is_vertex(self) -> bool:
        return len(self._vertices) == 1

    def is_edge(self) -> bool:
        return len(self._vertices) == 2

    def is_convex(self) -> bool:
        """True if every turn along the boundary goes the same way.

        Collinear triples do not count as a turn in either direction.
        """
        n = len(self._vertices)
        if n < 3:
            return False

        sign = 0
        for i in range(n):
            current = turn_direction(self._vertices[i],
                                     self._vertices[(i + 1) % n],
                                     self._vertices[(i + 2) % n])
            if current == 0:
                continue
            if sign == 0:
                sign = current
            elif sign != current:
                return False
        return True

    def contains(self, x: float, y: float) -> bool:
        n = len(self._vertices)
        if n == 0:
            return False
        if n == 1:
            return points_coincide(self._vertices[0], QPointF(x, y))
        if n == 2:
            return point_on_segment(QPointF(x, y), self._vertices[0], self._vertices[1])
        return point_in_polygon(x, y, self._vertices)

    def contains_pos(self, pos: QPointF) -> bool:
        return self.contains(pos.x(), pos.y())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def get_center(self) -> QPointF:
        # Mean of the vertices, not the centroid of the area
        n = len(self._vertices)
        x = sum(v.x() for v in self._vertices)
        y = sum(v.y() for v in self._vertices)
        return QPointF(x / n, y / n)

    def edges(self):
        n = len(self._vertices)
        if n < 2:
            return
        count = n if n >= 3 else 1
        for i in range(count):
            yield QPointF(self._vertices[i]), QPointF(self._vertices[(i + 1) % n])

    def bounding_rect(self) -> QRectF:
        minx = min(v.x() for v in self._vertices)
        miny = min(v.y() for v in self._vertices)
        maxx = max(v.x() for v in self._vertices)
        maxy = max(v.y() for v in self._vertices)
        return QRectF(QPointF(minx, miny), QPointF(maxx, maxy))
