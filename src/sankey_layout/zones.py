"""Zone classification: map column positions to a semantic palette zone.

Renderers pick colours per zone, so the layout never needs a theme.
"""

from __future__ import annotations

from enum import Enum


class Zone(str, Enum):
    SOURCE = "source"
    PIVOT = "pivot"
    SINK = "sink"
    OTHER = "other"


def classify_node(column: int, max_column: int) -> Zone:
    """Column 0 is the source, the middle column the pivot, and columns right of the middle the sink."""
    if column == 0:
        return Zone.SOURCE
    if column == max_column // 2:
        return Zone.PIVOT
    if column > max_column / 2:
        return Zone.SINK
    return Zone.OTHER


def classify_link(source_column: int, target_column: int, max_column: int) -> Zone:
    """Source if both ends lie left of the midpoint; sink if either end lies right of it."""
    midpoint = max_column / 2
    if source_column > midpoint or target_column > midpoint:
        return Zone.SINK
    if source_column < midpoint and target_column < midpoint:
        return Zone.SOURCE
    return Zone.OTHER
