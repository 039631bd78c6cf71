from PySide6.QtCore import QPointF
from PySide6.QtGui import QTransform
from config import PARALLEL_EPSILON

import math

class Transform2D:
    """Affine map of the plane, stored as a QTransform.

    Coefficients follow Qt's convention:
        x' = m11 * x + m21 * y + dx
        y' = m12 * x + m22 * y + dy
    Instances are never modified after construction; every operation
    returns a new Transform2D.
    """

    def __init__(self, m11: float = 1.0, m12: float = 0.0,
                 m21: float = 0.0, m22: float = 1.0,
                 dx: float = 0.0, dy: float = 0.0):
        self._matrix = QTransform(m11, m12, m21, m22, dx, dy)

    @classmethod
    def _from_qtransform(cls, matrix: QTransform) -> "Transform2D":
        return cls(matrix.m11(), matrix.m12(), matrix.m21(), matrix.m22(),
                   matrix.dx(), matrix.dy())

    @classmethod
    def identity(cls) -> "Transform2D":
        return cls()

    @classmethod
    def translation(cls, dx: float, dy: float) -> "Transform2D":
        return cls(dx=dx, dy=dy)

    @classmethod
    def rotation(cls, angle: float) -> "Transform2D":
        # Counter-clockwise when the y axis points up (clockwise on screen)
        c, s = math.cos(angle), math.sin(angle)
        return cls(c, s, -s, c)

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None) -> "Transform2D":
        if sy is None:
            sy = sx
        return cls(sx, 0.0, 0.0, sy)

    @classmethod
    def shear(cls, kx: float, ky: float) -> "Transform2D":
        return cls(1.0, ky, kx, 1.0)

    @classmethod
    def reflection_x(cls) -> "Transform2D":
        """Mirror across the x axis."""
        return cls.scaling(1.0, -1.0)

    @classmethod
    def reflection_y(cls) -> "Transform2D":
        """Mirror across the y axis."""
        return cls.scaling(-1.0, 1.0)

    @classmethod
    def rotation_around(cls, angle: float, center: QPointF) -> "Transform2D":
        return (cls.translation(-center.x(), -center.y())
                .then(cls.rotation(angle))
                .then(cls.translation(center.x(), center.y())))

    @classmethod
    def scaling_around(cls, sx: float, sy: float, center: QPointF) -> "Transform2D":
        return (cls.translation(-center.x(), -center.y())
                .then(cls.scaling(sx, sy))
                .then(cls.translation(center.x(), center.y())))

    def then(self, other: "Transform2D") -> "Transform2D":
        """Composition applying self first and other second."""
        # QTransform multiplication reads left to right in application order
        return Transform2D._from_qtransform(self._matrix * other._matrix)

    def determinant(self) -> float:
        return self._matrix.m11() * self._matrix.m22() - self._matrix.m12() * self._matrix.m21()

    def inverted(self) -> "Transform2D":
        if abs(self.determinant()) < PARALLEL_EPSILON:
            raise ValueError("singular transform has no inverse")
        inverse, _ = self._matrix.inverted()
        return Transform2D._from_qtransform(inverse)

    def apply(self, point: QPointF) -> QPointF:
        return self._matrix.map(QPointF(point))

    def apply_xy(self, x: float, y: float) -> QPointF:
        return self.apply(QPointF(x, y))

    def __eq__(self, other):
        if not isinstance(other, Transform2D):
            return NotImplemented
        a, b = self._matrix, other._matrix
        return (a.m11(), a.m12(), a.m21(), a.m22(), a.dx(), a.dy()) == \
               (b.m11(), b.m12(), b.m21(), b.m22(), b.dx(), b.dy())

    def __hash__(self):
        m = self._matrix
        return hash((m.m11(), m.m12(), m.m21(), m.m22(), m.dx(), m.dy()))

    def __repr__(self):
        m = self._matrix
        return (f"Transform2D(m11={m.m11()}, m12={m.m12()}, m21={m.m21()}, "
                f"m22={m.m22()}, dx={m.dx()}, dy={m.dy()})")
