"""sankey_layout: layout engine for Sankey-style money-flow diagrams."""

from sankey_layout.api import compute_layout, layout_payload
from sankey_layout.graph import FlowGraph, FlowLink
from sankey_layout.labels import LabelPlacement, fit_label, label_budget, place_label, truncate
from sankey_layout.layout import (
    LayoutConfig,
    LayoutLink,
    LayoutNode,
    LayoutResult,
    LinkPath,
    Point,
    assign_columns,
    route_link,
    route_links,
)
from sankey_layout.zones import Zone, classify_link, classify_node

__version__ = "0.1.0"

__all__ = [
    "FlowGraph",
    "FlowLink",
    "LabelPlacement",
    "LayoutConfig",
    "LayoutLink",
    "LayoutNode",
    "LayoutResult",
    "LinkPath",
    "Point",
    "Zone",
    "assign_columns",
    "classify_link",
    "classify_node",
    "compute_layout",
    "fit_label",
    "label_budget",
    "layout_payload",
    "place_label",
    "route_link",
    "route_links",
    "truncate",
]
