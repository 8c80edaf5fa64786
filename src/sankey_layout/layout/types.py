"""Layout IR types: positioned nodes, links, link paths, and geometry constants."""

from __future__ import annotations

from dataclasses import dataclass, field

# ─── Geometry Constants ───────────────────────────────────────────────────────

NODE_WIDTH: float = 20.0  # fixed width of every node rectangle
NODE_PADDING: float = 10.0  # vertical gap between stacked nodes (and above the first)
MIN_NODE_HEIGHT: float = 20.0  # height floor for every node
COLUMN_PADDING: float = 40.0  # horizontal gap between adjacent column bands
CURVATURE: float = 0.5  # control-point offset as a fraction of the horizontal span

DEFAULT_WIDTH: float = 800.0
DEFAULT_HEIGHT: float = 600.0


@dataclass(frozen=True)
class LayoutConfig:
    """Per-call overrides for the geometry constants."""

    node_width: float = NODE_WIDTH
    node_padding: float = NODE_PADDING
    min_node_height: float = MIN_NODE_HEIGHT
    column_padding: float = COLUMN_PADDING


# ─── Layout IR ────────────────────────────────────────────────────────────────


@dataclass
class LayoutNode:
    """A positioned node.

    ``value`` is the total traffic through the node: the sum of every link
    touching it, incoming and outgoing alike.
    """

    id: int
    label: str
    value: float
    column: int
    x: float
    y: float
    width: float
    height: float

    @property
    def key(self) -> str:
        """Stable element key for renderers."""
        return f"node-{self.id}"


@dataclass
class LayoutLink:
    """A link between two positioned nodes.

    ``source`` and ``target`` refer to nodes of the same LayoutResult.
    ``index`` is the link's position in the caller's input arrays.
    """

    index: int
    source: LayoutNode
    target: LayoutNode
    value: float


@dataclass
class LayoutResult:
    """Complete layout: nodes in column-major, value-descending order; links in input order."""

    nodes: list[LayoutNode] = field(default_factory=list)
    links: list[LayoutLink] = field(default_factory=list)
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT

    @property
    def max_column(self) -> int:
        return max((n.column for n in self.nodes), default=0)

    @property
    def column_count(self) -> int:
        return self.max_column + 1 if self.nodes else 0

    def node(self, node_id: int) -> LayoutNode | None:
        """Look up a node by its input index."""
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None


# ─── Link Paths ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Point:
    """A 2D point in layout units."""

    x: float
    y: float


@dataclass(frozen=True)
class LinkPath:
    """Curve descriptor for a single link ribbon.

    The upper edge is the cubic curve ``source_anchor → c1 → c2 → target_anchor``.
    The lower edge is the same curve shifted down by each side's height. The
    ribbon spans the full height of both nodes.
    """

    source_anchor: Point
    c1: Point
    c2: Point
    target_anchor: Point
    source_height: float
    target_height: float
    value: float

    def svg_path(self) -> str:
        """Closed SVG path: top curve, right edge, bottom curve (reversed), close."""
        s, t = self.source_anchor, self.target_anchor
        sb = s.y + self.source_height
        tb = t.y + self.target_height
        return (
            f"M {_fmt(s.x)} {_fmt(s.y)} "
            f"C {_fmt(self.c1.x)} {_fmt(self.c1.y)} {_fmt(self.c2.x)} {_fmt(self.c2.y)} {_fmt(t.x)} {_fmt(t.y)} "
            f"L {_fmt(t.x)} {_fmt(tb)} "
            f"C {_fmt(self.c2.x)} {_fmt(tb)} {_fmt(self.c1.x)} {_fmt(sb)} {_fmt(s.x)} {_fmt(sb)} "
            "Z"
        )


def _fmt(v: float) -> str:
    # Integral floats print without the trailing ".0".
    return str(int(v)) if float(v).is_integer() else f"{v:.4f}".rstrip("0").rstrip(".")
