"""Label fitting and placement for positioned nodes."""

from __future__ import annotations

from dataclasses import dataclass

from sankey_layout.layout.types import LayoutNode

ELLIPSIS = "..."

# (exclusive upper bound on chart width, character budget); widest band last.
WIDTH_BANDS: tuple[tuple[float, int], ...] = (
    (600.0, 12),
    (1000.0, 18),
    (float("inf"), 25),
)

LABEL_GAP: float = 5.0  # distance between a node edge and its label


def label_budget(chart_width: float) -> int:
    """Character budget for labels on a chart of the given width."""
    for upper, budget in WIDTH_BANDS:
        if chart_width < upper:
            return budget
    return WIDTH_BANDS[-1][1]


def truncate(label: str, max_length: int) -> str:
    """Cut ``label`` to ``max_length`` characters, the last three being an ellipsis.

    Labels at or under the budget come back unchanged.
    """
    if len(label) <= max_length:
        return label
    return label[: max(max_length - len(ELLIPSIS), 0)] + ELLIPSIS


def fit_label(label: str, chart_width: float) -> str:
    return truncate(label, label_budget(chart_width))


@dataclass(frozen=True)
class LabelPlacement:
    """Where and how to draw a node's label. ``anchor`` is an SVG text-anchor value."""

    x: float
    y: float
    anchor: str
    text: str


def place_label(node: LayoutNode, chart_width: float) -> LabelPlacement:
    """Place a node's label beside it, vertically centred.

    Labels in the first column sit to the node's left, anchored at their end.
    All other labels sit to the right.
    """
    y = node.y + node.height / 2
    text = fit_label(node.label, chart_width)
    if node.column == 0:
        return LabelPlacement(x=node.x - LABEL_GAP, y=y, anchor="end", text=text)
    return LabelPlacement(x=node.x + node.width + LABEL_GAP, y=y, anchor="start", text=text)
