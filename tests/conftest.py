import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from model import Polygon


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


def make_polygon(points):
    first, *rest = points
    polygon = Polygon(*first)
    for x, y in rest:
        polygon.add_vertex(x, y)
    return polygon


@pytest.fixture
def build():
    return make_polygon
