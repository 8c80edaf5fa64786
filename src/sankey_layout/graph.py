"""Flow graph IR: the validated, default-filled form of the caller's parallel arrays.

This is the only place where input is coerced. Downstream stages can assume:
  - every label is a string;
  - every link value is a float (absent or NaN values are 0.0);
  - every link references two existing node indices.
Links that reference a missing node are dropped here, never raised on.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import Any

import networkx as nx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlowLink:
    """A single surviving link. ``index`` is its position in the input arrays."""

    index: int
    source: int
    target: int
    value: float


@dataclass
class FlowGraph:
    """Node labels, surviving links, and the directed graph built from them.

    ``digraph`` is derived from ``labels`` and ``links`` on construction: one
    node per label index (0..N-1) and one edge per distinct (source, target)
    pair. Parallel links collapse into one edge there but stay separate in
    ``links``. Links whose endpoints fall outside the label range are dropped.
    """

    labels: list[str]
    links: list[FlowLink] = field(default_factory=list)
    digraph: nx.DiGraph = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        node_count = len(self.labels)
        kept = [link for link in self.links if 0 <= link.source < node_count and 0 <= link.target < node_count]
        if len(kept) != len(self.links):
            logger.debug("dropping %d link(s) outside a %d-node graph", len(self.links) - len(kept), node_count)
            self.links = kept

        self.digraph = nx.DiGraph()
        self.digraph.add_nodes_from(range(node_count))
        self.digraph.add_edges_from((link.source, link.target) for link in self.links)

    @property
    def node_count(self) -> int:
        return len(self.labels)

    @classmethod
    def from_arrays(
        cls,
        node_labels: Sequence[Any],
        link_sources: Sequence[Any],
        link_targets: Sequence[Any],
        link_values: Sequence[Any] | None = None,
    ) -> FlowGraph:
        """Build a FlowGraph from parallel link arrays.

        The link count is the longer of ``link_sources`` / ``link_targets``;
        an index missing from the shorter one makes that link malformed.
        ``link_values`` may be shorter (or omitted); missing values are 0.
        """
        labels = ["" if label is None else str(label) for label in node_labels]
        values = list(link_values) if link_values is not None else []
        node_count = len(labels)

        links: list[FlowLink] = []
        link_count = max(len(link_sources), len(link_targets))
        for i in range(link_count):
            raw_src = link_sources[i] if i < len(link_sources) else None
            raw_tgt = link_targets[i] if i < len(link_targets) else None
            src = _as_index(raw_src, node_count)
            tgt = _as_index(raw_tgt, node_count)
            if src is None or tgt is None:
                logger.debug(
                    "dropping link %d: malformed reference (%r -> %r) in %d-node graph",
                    i,
                    raw_src,
                    raw_tgt,
                    node_count,
                )
                continue
            value = coerce_value(values[i] if i < len(values) else None)
            links.append(FlowLink(index=i, source=src, target=tgt, value=value))

        return cls(labels=labels, links=links)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> FlowGraph:
        """Build a FlowGraph from a chart payload.

        Expected shape::

            {"node": {"label": [...]},
             "link": {"source": [...], "target": [...], "value": [...]}}

        Missing sections or keys are treated as empty arrays.
        """
        node = payload.get("node") or {}
        link = payload.get("link") or {}
        return cls.from_arrays(
            node.get("label") or [],
            link.get("source") or [],
            link.get("target") or [],
            link.get("value") or [],
        )

    def node_values(self) -> dict[int, float]:
        """Total traffic per node: every link adds its value to both endpoints."""
        totals: dict[int, float] = {i: 0.0 for i in range(self.node_count)}
        for link in self.links:
            totals[link.source] += link.value
            totals[link.target] += link.value
        return totals


def coerce_value(value: Any) -> float:
    """Absent values (None or NaN) count as zero; everything else goes through ``float()``."""
    if value is None:
        return 0.0
    result = float(value)
    if math.isnan(result):
        return 0.0
    return result


def _as_index(ref: Any, node_count: int) -> int | None:
    """Return ``ref`` as a node index, or None if it names no node."""
    if ref is None or isinstance(ref, bool):
        return None
    if isinstance(ref, Integral):
        idx = int(ref)
    elif isinstance(ref, Real) and float(ref).is_integer():
        idx = int(ref)
    else:
        return None
    if 0 <= idx < node_count:
        return idx
    return None
