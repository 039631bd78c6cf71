from PySide6.QtCore import QPointF
from config import POINT_EPSILON, PARALLEL_EPSILON

def rot90_ccw(vx: float, vy: float) -> tuple[float, float]:
    return (-vy, vx)

def dot(ax: float, ay: float, bx: float, by: float) -> float:
    return ax * bx + ay * by

def cross(ax: float, ay: float, bx: float, by: float) -> float:
    # z component of the 3D cross product of (ax, ay, 0) and (bx, by, 0)
    return ax * by - ay * bx

def points_coincide(p: QPointF, q: QPointF) -> bool:
    return (abs(p.x() - q.x()) < POINT_EPSILON
            and abs(p.y() - q.y()) < POINT_EPSILON)

def segments_intersect(a: QPointF, b: QPointF, c: QPointF, d: QPointF) -> QPointF | None:
    """Intersection point of the closed segments ab and cd.

    Returns None when the segments do not meet, and also when they are
    parallel, collinear or one of them has zero length (overlaps are not
    reported). Both ends of both segments are inclusive, so two segments
    sharing an endpoint report that endpoint.
    """
    abx, aby = b.x() - a.x(), b.y() - a.y()
    cdx, cdy = d.x() - c.x(), d.y() - c.y()

    # Normal of cd
    nx, ny = rot90_ccw(cdx, cdy)

    denominator = dot(nx, ny, abx, aby)
    if abs(denominator) < PARALLEL_EPSILON:
        return None

    t = -dot(nx, ny, a.x() - c.x(), a.y() - c.y()) / denominator
    if t < 0.0 or t > 1.0:
        return None

    px = a.x() + t * abx
    py = a.y() + t * aby

    # Position of p along cd
    cd_len2 = dot(cdx, cdy, cdx, cdy)
    if cd_len2 < PARALLEL_EPSILON:
        return None
    s = dot(px - c.x(), py - c.y(), cdx, cdy) / cd_len2
    if s < 0.0 or s > 1.0:
        return None

    return QPointF(px, py)

def point_on_segment(p: QPointF, a: QPointF, b: QPointF) -> bool:
    """True if p lies on the closed segment ab (within POINT_EPSILON of its line)."""
    abx, aby = b.x() - a.x(), b.y() - a.y()
    apx, apy = p.x() - a.x(), p.y() - a.y()
    if abs(cross(abx, aby, apx, apy)) > POINT_EPSILON:
        return False
    projection = dot(apx, apy, abx, aby)
    return 0.0 <= projection <= dot(abx, aby, abx, aby)

def point_in_polygon(x: float, y: float, points: list[QPointF]) -> bool:
    # Even-odd rule: count crossings of the ray going from (x, y) towards +x
    inside = False
    n = len(points)
    for i in range(n):
        vi = points[i]
        vj = points[(i + 1) % n]
        if (vi.y() > y) != (vj.y() > y):
            x_cross = (vj.x() - vi.x()) * (y - vi.y()) / (vj.y() - vi.y()) + vi.x()
            if x < x_cross:
                inside = not inside
    return inside

def turn_direction(p1: QPointF, p2: QPointF, p3: QPointF) -> int:
    """Sign of the turn p1 -> p2 -> p3: 1 for left, -1 for right, 0 when collinear."""
    c = cross(p2.x() - p1.x(), p2.y() - p1.y(), p3.x() - p2.x(), p3.y() - p2.y())
    if c > 0.0:
        return 1
    if c < 0.0:
        return -1
    return 0
