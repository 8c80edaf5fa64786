"""Tests for labels.py: width-band truncation and label placement."""

from __future__ import annotations

import pytest

from sankey_layout.labels import (
    ELLIPSIS,
    LABEL_GAP,
    LabelPlacement,
    fit_label,
    label_budget,
    place_label,
    truncate,
)
from sankey_layout.layout.types import LayoutNode

LONG_LABEL = "Groceries and Household Supplies (Misc.)"  # 40 characters


class TestLabelBudget:
    @pytest.mark.parametrize(
        "width,budget",
        [(320, 12), (599.9, 12), (600, 18), (999, 18), (1000, 25), (1920, 25)],
    )
    def test_bands(self, width: float, budget: int):
        assert label_budget(width) == budget


class TestTruncate:
    def test_short_label_unchanged(self):
        assert truncate("Rent", 12) == "Rent"

    def test_exact_budget_unchanged(self):
        assert truncate("x" * 12, 12) == "x" * 12

    def test_long_label_cut_with_ellipsis(self):
        assert truncate("Entertainment", 12) == "Entertain..."
        assert len(truncate("Entertainment", 12)) == 12

    def test_empty_label(self):
        assert truncate("", 12) == ""

    def test_tiny_budget(self):
        """A budget below the ellipsis length keeps no characters."""
        assert truncate("Salary", 2) == ELLIPSIS


class TestFitLabel:
    def test_label_is_forty_chars(self):
        assert len(LONG_LABEL) == 40

    @pytest.mark.parametrize("width,budget", [(500, 12), (800, 18), (1200, 25)])
    def test_width_band_truncation(self, width: float, budget: int):
        """The same 40-character label keeps budget - 3 characters plus the ellipsis."""
        fitted = fit_label(LONG_LABEL, width)
        assert fitted == LONG_LABEL[: budget - 3] + ELLIPSIS
        assert len(fitted) == budget


class TestPlaceLabel:
    def _node(self, column: int, label: str = "Salary") -> LayoutNode:
        return LayoutNode(id=0, label=label, value=10, column=column, x=100, y=40, width=20, height=60)

    def test_first_column_left_of_node(self):
        placement = place_label(self._node(0), 800)
        assert placement == LabelPlacement(x=100 - LABEL_GAP, y=70, anchor="end", text="Salary")

    def test_later_columns_right_of_node(self):
        placement = place_label(self._node(2), 800)
        assert placement == LabelPlacement(x=120 + LABEL_GAP, y=70, anchor="start", text="Salary")

    def test_text_is_fitted(self):
        placement = place_label(self._node(1, LONG_LABEL), 500)
        assert placement.text == LONG_LABEL[:9] + ELLIPSIS
