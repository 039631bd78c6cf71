from PySide6.QtWidgets import QApplication, QMainWindow, QGraphicsScene, QGraphicsView
from PySide6.QtGui import QPainter
from PySide6.QtCore import QPointF
from polygon_renderer import PolygonRenderer
from transform2d import Transform2D
from model import Polygon
from config import WINDOW_WIDTH, WINDOW_HEIGHT

import logging
import math
import os
import sys

log = logging.getLogger(__name__)

def sample_polygons() -> list[Polygon]:
    square = Polygon(40, 40)
    for x, y in [(200, 40), (200, 200), (40, 200)]:
        square.add_vertex(x, y)

    # Self-intersecting star
    star = Polygon(0, -90)
    for k in range(1, 5):
        angle = -math.pi / 2 + k * 4 * math.pi / 5
        star.add_vertex(90 * math.cos(angle), 90 * math.sin(angle))
    star.apply_transform(Transform2D.translation(420, 130))

    edge = Polygon(600, 60)
    edge.add_vertex(760, 200)

    point = Polygon.from_pos(QPointF(700, 320))

    l_shape = Polygon(60, 300)
    for x, y in [(240, 300), (240, 360), (120, 360), (120, 480), (60, 480)]:
        l_shape.add_vertex(x, y)
    l_shape.apply_transform(Transform2D.rotation_around(math.radians(15), l_shape.get_center()))

    return [square, star, edge, point, l_shape]

class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Polygons")
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        # Setting up scene
        self.scene = QGraphicsScene(self)
        self.graphicsView = QGraphicsView(self.scene, self)
        self.graphicsView.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self.setCentralWidget(self.graphicsView)
        self.scene.setSceneRect(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT)

        self.renderer = PolygonRenderer(self.scene)
        self.polygon_items = []
        for polygon in sample_polygons():
            item = self.renderer.render(polygon, selected=polygon.is_convex())
            self.polygon_items.append(item)
            log.info("%r: convex=%s, %d self-intersections",
                     polygon, polygon.is_convex(), len(polygon.intersections))


if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("POLYGON_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
