"""Layout engine: turn a flow graph into positioned, proportionally sized nodes.

Pipeline:
  1. Column assignment (columns.py)
  2. Node values: total traffic through each node
  3. Per-column ordering: value descending, input index as tie-break
  4. Coordinate assignment: each column scaled independently to the canvas height
  5. Link resolution: surviving links bound to their positioned endpoints
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sankey_layout.graph import FlowGraph
from sankey_layout.layout.columns import ColumnAssignment
from sankey_layout.layout.types import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    LayoutConfig,
    LayoutLink,
    LayoutNode,
    LayoutResult,
)

logger = logging.getLogger(__name__)


# ─── Column Grouping ──────────────────────────────────────────────────────────


def group_by_column(columns: dict[int, int], values: dict[int, float], column_count: int) -> list[list[int]]:
    """Group node indices per column, largest value first.

    Equal values keep input index order, so re-renders of unchanged data
    stack nodes identically.
    """
    grouped: list[list[int]] = [[] for _ in range(column_count)]
    for node_id in sorted(columns):
        grouped[columns[node_id]].append(node_id)
    for members in grouped:
        members.sort(key=lambda n: -values.get(n, 0.0))
    return grouped


# ─── Coordinate Assignment ────────────────────────────────────────────────────


def column_width(width: float, column_count: int, config: LayoutConfig) -> float:
    """Width of one column band once the inter-column padding is taken out."""
    if column_count == 0:
        return 0.0
    available = width - (column_count - 1) * config.column_padding
    return available / column_count


def column_scale(member_values: Sequence[float], height: float, config: LayoutConfig) -> float:
    """Pixels per unit of value for one column.

    The column's total value is floored at the height its nodes would need
    at minimum size, so a column of tiny flows never scales up past the
    canvas. A zero budget scales by 1.
    """
    count = len(member_values)
    total_value = sum(member_values)
    min_total_height = config.min_node_height * count + config.node_padding * max(count - 1, 0)
    effective = max(total_value, min_total_height)
    if effective == 0:
        return 1.0
    return (height - config.node_padding * (count + 1)) / effective


def assign_coordinates(
    fg: FlowGraph,
    ca: ColumnAssignment,
    values: dict[int, float],
    width: float,
    height: float,
    config: LayoutConfig,
) -> list[LayoutNode]:
    """Position every node, column by column, top to bottom.

    Returns nodes in column-major order, value-descending within a column.
    """
    ordering = group_by_column(ca.columns, values, ca.column_count)
    band = column_width(width, ca.column_count, config)

    nodes: list[LayoutNode] = []
    for column, members in enumerate(ordering):
        scale = column_scale([values[n] for n in members], height, config)
        x = column * (band + config.column_padding) + (band - config.node_width) / 2
        y = config.node_padding
        for node_id in members:
            node_height = max(values[node_id] * scale, config.min_node_height)
            nodes.append(
                LayoutNode(
                    id=node_id,
                    label=fg.labels[node_id],
                    value=values[node_id],
                    column=column,
                    x=x,
                    y=y,
                    width=config.node_width,
                    height=node_height,
                )
            )
            y += node_height + config.node_padding

    return nodes


# ─── Full Layout Pipeline ─────────────────────────────────────────────────────


def layout_graph(
    fg: FlowGraph,
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    config: LayoutConfig | None = None,
) -> LayoutResult:
    """Run the full layout pipeline on an already-ingested flow graph."""
    config = config or LayoutConfig()

    if fg.node_count == 0:
        return LayoutResult(nodes=[], links=[], width=width, height=height)

    ca = ColumnAssignment.assign(fg)
    values = fg.node_values()
    nodes = assign_coordinates(fg, ca, values, width, height, config)

    by_id: dict[int, LayoutNode] = {n.id: n for n in nodes}
    links = [
        LayoutLink(index=link.index, source=by_id[link.source], target=by_id[link.target], value=link.value)
        for link in fg.links
    ]

    logger.debug(
        "laid out %d nodes, %d links in %d columns (%gx%g)",
        len(nodes),
        len(links),
        ca.column_count,
        width,
        height,
    )
    return LayoutResult(nodes=nodes, links=links, width=width, height=height)


def compute_layout(
    node_labels: Sequence[Any],
    link_sources: Sequence[Any],
    link_targets: Sequence[Any],
    link_values: Sequence[Any] | None,
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    config: LayoutConfig | None = None,
) -> LayoutResult:
    """Lay out a flow graph given as parallel arrays.

    Pure: identical arguments always give an equal result, and nothing is
    kept between calls. Malformed links are dropped, absent values count as
    zero, and no input shape that parses raises.
    """
    fg = FlowGraph.from_arrays(node_labels, link_sources, link_targets, link_values)
    return layout_graph(fg, width, height, config)
