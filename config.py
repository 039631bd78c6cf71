# Tolerances used by the geometry core. These values are part of the
# observable behaviour (dedup of intersections, containment of degenerate
# polygons) and must stay as they are.
POINT_EPSILON = 1e-6
PARALLEL_EPSILON = 1e-12

# Default polygon style
VERTEX_DIAMETER = 14.0
EDGE_WIDTH = 5.0
VERTEX_COLOR = "black"
EDGE_COLOR = "black"

# Style of the selected polygon
SELECTED_VERTEX_DIAMETER = 20.0
SELECTED_EDGE_WIDTH = 7.0
SELECTED_COLOR = "lightblue"

# Markers drawn at self-intersection points
INTERSECTION_DIAMETER = 10.0
INTERSECTION_COLOR = "red"

# Viewer window
WINDOW_WIDTH = 900
WINDOW_HEIGHT = 600
