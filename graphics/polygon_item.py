from model import Polygon
from config import *
from PySide6.QtWidgets import QGraphicsItem
from PySide6.QtGui import (
    QBrush,
    QColor,
    QPainter,
    QPainterPath,
    QPainterPathStroker,
    QPen,
    QPolygonF,
)
from PySide6.QtCore import QPointF, QRectF, Qt

class PolygonStyle:
    def __init__(self, vertex_color: QColor, vertex_radius: float,
                 edge_color: QColor, edge_width: float,
                 intersection_color: QColor | None = None,
                 intersection_radius: float = INTERSECTION_DIAMETER / 2):
        self.vertex_color = vertex_color
        self.vertex_radius = vertex_radius
        self.edge_color = edge_color
        self.edge_width = edge_width
        if intersection_color is None:
            intersection_color = QColor(INTERSECTION_COLOR)
        self.intersection_color = intersection_color
        self.intersection_radius = intersection_radius

    @classmethod
    def standard(cls) -> "PolygonStyle":
        return cls(QColor(VERTEX_COLOR), VERTEX_DIAMETER / 2,
                   QColor(EDGE_COLOR), EDGE_WIDTH)

    @classmethod
    def selected(cls) -> "PolygonStyle":
        return cls(QColor(SELECTED_COLOR), SELECTED_VERTEX_DIAMETER / 2,
                   QColor(SELECTED_COLOR), SELECTED_EDGE_WIDTH)

    def margin(self) -> float:
        # How far the drawing can reach outside of the vertices' bounding box
        return max(self.vertex_radius, self.edge_width / 2, self.intersection_radius)


class PolygonItem(QGraphicsItem):
    """Draws a Polygon: edges first, vertices on top, then intersection markers.

    The item only reads the polygon. After mutating the polygon call
    refresh() so the scene picks up the new geometry.
    """

    def __init__(self, polygon: Polygon, style: PolygonStyle | None = None, parent=None):
        super().__init__(parent)
        self.polygon = polygon
        self.style = style if style is not None else PolygonStyle.standard()
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, False)
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsSelectable, False)

    def set_style(self, style: PolygonStyle) -> None:
        self.prepareGeometryChange()
        self.style = style
        self.update()

    def refresh(self) -> None:
        # Geometry may have grown, Qt needs to know before the next paint
        self.prepareGeometryChange()
        self.update()

    def boundingRect(self) -> QRectF:
        m = self.style.margin()
        return self.polygon.bounding_rect().adjusted(-m, -m, m, m)

    def edge_path(self) -> QPainterPath:
        path = QPainterPath()
        vertices = self.polygon.vertices
        if len(vertices) < 2:
            return path
        path.addPolygon(QPolygonF(vertices))
        # Two vertices make an open polyline, three or more a closed one
        if len(vertices) >= 3:
            path.closeSubpath()
        return path

    def shape(self) -> QPainterPath:
        # Union of the filled polygon, the stroked edges and the vertex markers
        edges = self.edge_path()
        stroker = QPainterPathStroker()
        stroker.setWidth(self.style.edge_width)
        path = stroker.createStroke(edges)
        if len(self.polygon) >= 3:
            path = path.united(edges)
        for v in self.polygon.vertices:
            marker = QPainterPath()
            marker.addEllipse(v, self.style.vertex_radius, self.style.vertex_radius)
            path = path.united(marker)
        return path

    def paint(self, painter, option, widget=None) -> None:
        style = self.style
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

        pen = QPen(style.edge_color, style.edge_width)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPath(self.edge_path())

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(style.vertex_color))
        for v in self.polygon.vertices:
            painter.drawEllipse(v, style.vertex_radius, style.vertex_radius)

        painter.setBrush(QBrush(style.intersection_color))
        for p in self.polygon.intersections:
            painter.drawEllipse(QPointF(p), style.intersection_radius, style.intersection_radius)

        painter.restore()
