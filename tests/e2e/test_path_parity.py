"""Tests that laid-out ribbon paths match known-good path strings."""

from __future__ import annotations

from typing import Any

import pytest

from sankey_layout import layout_payload, route_links

PATH_CASES: list[tuple[str, dict[str, Any], list[str]]] = [
    (
        "chain",
        {
            "node": {"label": ["A", "B", "C"]},
            "link": {"source": [0, 1], "target": [1, 2], "value": [10, 10]},
        },
        [
            "M 130 10 C 260 10 260 10 390 10 L 390 590 C 260 590 260 300 130 300 Z",
            "M 410 10 C 540 10 540 10 670 10 L 670 300 C 540 300 540 590 410 590 Z",
        ],
    ),
    (
        "fan_out",
        {
            "node": {"label": ["Salary", "Rent", "Food"]},
            "link": {"source": [0, 0], "target": [1, 2], "value": [60, 40]},
        },
        [
            "M 200 10 C 400 10 400 10 600 10 L 600 352 C 400 352 400 590 200 590 Z",
            "M 200 10 C 400 10 400 362 600 362 L 600 590 C 400 590 400 590 200 590 Z",
        ],
    ),
]


@pytest.mark.parametrize("name,payload,expected", PATH_CASES, ids=[c[0] for c in PATH_CASES])
def test_paths_match_expected(name: str, payload: dict[str, Any], expected: list[str]) -> None:
    """Lay out a payload on the default 800 × 600 canvas and compare every ribbon path."""
    result = layout_payload(payload)
    actual = [p.svg_path() for p in route_links(result)]
    assert actual == expected, f"ribbon paths for {name} differ from expected"
