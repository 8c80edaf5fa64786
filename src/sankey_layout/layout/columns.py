"""Column assignment: rank every node of the flow graph by layered BFS from its roots."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence
from typing import Any

import networkx as nx

from sankey_layout.graph import FlowGraph

logger = logging.getLogger(__name__)


class ColumnAssignment:
    """Result of column assignment: each node is assigned a column (rank).

    Column 0 is the leftmost column and holds the graph's roots.

    Attributes:
        columns: Maps node index → column.
        max_column: Largest column in ``columns`` (0 for an empty graph).
        unreached: Nodes placed by the fallback rule rather than the traversal,
            in index order.
    """

    def __init__(self, columns: dict[int, int], max_column: int, unreached: list[int]) -> None:
        self.columns = columns
        self.max_column = max_column
        self.unreached = unreached

    @property
    def column_count(self) -> int:
        return self.max_column + 1 if self.columns else 0

    @classmethod
    def assign(cls, fg: FlowGraph) -> ColumnAssignment:
        """Assign columns by FIFO breadth-first traversal from the roots.

        Roots are nodes with no incoming link and at least one outgoing link.
        A node reached along several paths keeps the largest column it was
        reached with. When a node's column grows, the growth is pushed on
        along edges that leave its strongly connected component, so acyclic
        graphs end up with longest-path columns. Inside a cycle, a node is
        only pushed to targets not yet visited.

        Nodes the traversal never reaches are placed afterwards. Sinks go one
        column past the deepest reached node; the rest (cycle members with no
        entry root) go in the deepest column itself.
        """
        graph = fg.digraph

        if graph.number_of_nodes() == 0:
            return cls(columns={}, max_column=0, unreached=[])

        # Nothing to traverse: every node is a root.
        if graph.number_of_edges() == 0:
            return cls(columns={n: 0 for n in graph.nodes}, max_column=0, unreached=[])

        component = _component_index(graph)
        roots = [n for n in graph.nodes if graph.in_degree(n) == 0 and graph.out_degree(n) > 0]

        columns: dict[int, int] = {}
        queue: deque[tuple[int, int]] = deque((root, 0) for root in roots)

        while queue:
            node, column = queue.popleft()
            recorded = columns.get(node)
            if recorded is not None and column <= recorded:
                continue
            columns[node] = column

            for target in graph.successors(node):
                if target not in columns:
                    queue.append((target, column + 1))
                elif component[target] != component[node] and columns[target] < column + 1:
                    queue.append((target, column + 1))

        max_column = max(columns.values(), default=0)
        unreached = [n for n in graph.nodes if n not in columns]
        for node in unreached:
            is_sink = graph.out_degree(node) == 0
            columns[node] = max_column + 1 if is_sink else max_column
            logger.debug(
                "node %d unreachable from any root; placed at column %d (%s)",
                node,
                columns[node],
                "terminal" if is_sink else "deepest",
            )

        return cls(
            columns=columns,
            max_column=max(columns.values(), default=0),
            unreached=unreached,
        )


def _component_index(graph: nx.DiGraph) -> dict[int, int]:
    """Map each node to the id of its strongly connected component."""
    index: dict[int, int] = {}
    for comp_id, members in enumerate(nx.strongly_connected_components(graph)):
        for node in members:
            index[node] = comp_id
    return index


def assign_columns(
    node_labels: Sequence[Any],
    link_sources: Sequence[Any],
    link_targets: Sequence[Any],
) -> dict[int, int]:
    """Map every node index to its column. See ``ColumnAssignment.assign``."""
    fg = FlowGraph.from_arrays(node_labels, link_sources, link_targets)
    return ColumnAssignment.assign(fg).columns
