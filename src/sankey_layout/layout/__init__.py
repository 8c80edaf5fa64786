"""Layout package: column assignment, coordinate assignment, and link routing."""

from sankey_layout.layout.columns import ColumnAssignment, assign_columns
from sankey_layout.layout.engine import compute_layout, layout_graph
from sankey_layout.layout.routing import route_link, route_links
from sankey_layout.layout.types import (
    COLUMN_PADDING,
    CURVATURE,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    MIN_NODE_HEIGHT,
    NODE_PADDING,
    NODE_WIDTH,
    LayoutConfig,
    LayoutLink,
    LayoutNode,
    LayoutResult,
    LinkPath,
    Point,
)

__all__ = [
    "COLUMN_PADDING",
    "CURVATURE",
    "DEFAULT_HEIGHT",
    "DEFAULT_WIDTH",
    "MIN_NODE_HEIGHT",
    "NODE_PADDING",
    "NODE_WIDTH",
    "ColumnAssignment",
    "LayoutConfig",
    "LayoutLink",
    "LayoutNode",
    "LayoutResult",
    "LinkPath",
    "Point",
    "assign_columns",
    "compute_layout",
    "layout_graph",
    "route_link",
    "route_links",
]
