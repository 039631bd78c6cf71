import math

import pytest
from PySide6.QtCore import QPointF

from transform2d import Transform2D


def xy(p):
    return (p.x(), p.y())


def test_identity_keeps_points():
    assert xy(Transform2D.identity().apply(QPointF(3, -4))) == pytest.approx((3, -4))


def test_translation():
    assert xy(Transform2D.translation(2, 5).apply_xy(1, 1)) == pytest.approx((3, 6))


def test_rotation_is_counter_clockwise():
    t = Transform2D.rotation(math.pi / 2)
    assert xy(t.apply_xy(1, 0)) == pytest.approx((0, 1), abs=1e-12)
    assert xy(t.apply_xy(0, 1)) == pytest.approx((-1, 0), abs=1e-12)


def test_scaling():
    assert xy(Transform2D.scaling(2).apply_xy(1, 3)) == pytest.approx((2, 6))
    assert xy(Transform2D.scaling(2, -1).apply_xy(1, 3)) == pytest.approx((2, -3))


def test_shear_and_reflections():
    assert xy(Transform2D.shear(1, 0).apply_xy(1, 2)) == pytest.approx((3, 2))
    assert xy(Transform2D.shear(0, 1).apply_xy(1, 2)) == pytest.approx((1, 3))
    assert xy(Transform2D.reflection_x().apply_xy(1, 2)) == pytest.approx((1, -2))
    assert xy(Transform2D.reflection_y().apply_xy(1, 2)) == pytest.approx((-1, 2))


def test_then_applies_left_operand_first():
    t = Transform2D.translation(1, 0).then(Transform2D.scaling(2))
    assert xy(t.apply_xy(1, 0)) == pytest.approx((4, 0))

    t = Transform2D.scaling(2).then(Transform2D.translation(1, 0))
    assert xy(t.apply_xy(1, 0)) == pytest.approx((3, 0))


def test_rotation_around_keeps_center_fixed():
    center = QPointF(2, 3)
    t = Transform2D.rotation_around(math.pi, center)
    assert xy(t.apply(center)) == pytest.approx((2, 3))
    assert xy(t.apply_xy(3, 3)) == pytest.approx((1, 3))


def test_scaling_around_keeps_center_fixed():
    t = Transform2D.scaling_around(3, 2, QPointF(1, 1))
    assert xy(t.apply_xy(1, 1)) == pytest.approx((1, 1))
    assert xy(t.apply_xy(2, 2)) == pytest.approx((4, 3))


def test_inverted_undoes_transform():
    t = (Transform2D.rotation(0.7)
         .then(Transform2D.scaling(2, 3))
         .then(Transform2D.translation(-4, 1)))
    p = t.inverted().apply(t.apply_xy(5, -2))
    assert xy(p) == pytest.approx((5, -2))


def test_singular_transform_cannot_be_inverted():
    with pytest.raises(ValueError):
        Transform2D.scaling(0, 1).inverted()


def test_apply_returns_new_point():
    p = QPointF(1, 1)
    q = Transform2D.translation(1, 1).apply(p)
    assert xy(p) == (1, 1)
    assert xy(q) == pytest.approx((2, 2))


def test_equality():
    assert Transform2D.translation(1, 2) == Transform2D(dx=1, dy=2)
    assert Transform2D.translation(1, 2) != Transform2D.translation(2, 1)
