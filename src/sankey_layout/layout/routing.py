"""Link routing: connect positioned nodes with filled S-curve ribbons."""

from __future__ import annotations

from sankey_layout.layout.types import CURVATURE, LayoutNode, LayoutResult, LinkPath, Point


def route_link(
    source: LayoutNode,
    target: LayoutNode,
    value: float,
    curvature: float = CURVATURE,
) -> LinkPath:
    """Route a single link from ``source``'s right edge to ``target``'s left edge.

    Both control points sit ``curvature * dx`` in from their anchor at the
    anchor's own height, so the curve is a symmetric S. The ribbon covers the
    full height of each node, whatever share of that node's traffic the link
    carries.
    """
    sx = source.x + source.width
    sy = source.y
    tx = target.x
    ty = target.y
    dx = tx - sx

    return LinkPath(
        source_anchor=Point(x=sx, y=sy),
        c1=Point(x=sx + curvature * dx, y=sy),
        c2=Point(x=tx - curvature * dx, y=ty),
        target_anchor=Point(x=tx, y=ty),
        source_height=source.height,
        target_height=target.height,
        value=value,
    )


def route_links(result: LayoutResult, curvature: float = CURVATURE) -> list[LinkPath]:
    """Route every link of a layout, in the layout's link order."""
    return [route_link(link.source, link.target, link.value, curvature) for link in result.links]
