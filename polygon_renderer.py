from model import Polygon
from graphics.polygon_item import PolygonItem, PolygonStyle
from PySide6.QtWidgets import QGraphicsScene

class PolygonRenderer:
    def __init__(self, scene: QGraphicsScene):
        self.scene = scene

    def render(self, polygon: Polygon, selected: bool = False) -> PolygonItem:
        style = PolygonStyle.selected() if selected else PolygonStyle.standard()
        polygon_item = PolygonItem(polygon, style)
        # Vertices are stored in scene coordinates, so the item itself
        # stays at the scene origin
        polygon_item.setPos(0, 0)
        self.scene.addItem(polygon_item)
        return polygon_item

    def set_selected(self, polygon_item: PolygonItem, selected: bool) -> None:
        polygon_item.set_style(PolygonStyle.selected() if selected else PolygonStyle.standard())

    def clear(self) -> None:
        self.scene.clear()
