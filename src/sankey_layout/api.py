"""Public API: one-shot layout of a flow graph."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sankey_layout.graph import FlowGraph
from sankey_layout.layout.engine import compute_layout, layout_graph
from sankey_layout.layout.types import DEFAULT_HEIGHT, DEFAULT_WIDTH, LayoutConfig, LayoutResult

__all__ = ["compute_layout", "layout_payload"]


def layout_payload(
    payload: Mapping[str, Any],
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    config: LayoutConfig | None = None,
) -> LayoutResult:
    """Lay out a chart payload of the form ``{"node": {...}, "link": {...}}``."""
    return layout_graph(FlowGraph.from_payload(payload), width, height, config)
