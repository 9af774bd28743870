"""effectgraph - script graph nodes for an AR effects host."""

from importlib.metadata import version as _version

from effectgraph.exceptions import EffectGraphError
from effectgraph.nodes import ClampNode, NodeKind, NodeRegistry, PullNode, PushNode, RectOverlapNode
from effectgraph.types import EffectHost, Rect, rects_overlap
from . import settings

__version__: str = _version("effectgraph")

__all__ = [
    "ClampNode",
    "EffectGraphError",
    "EffectHost",
    "NodeKind",
    "NodeRegistry",
    "PullNode",
    "PushNode",
    "Rect",
    "RectOverlapNode",
    "rects_overlap",
    "settings",
]
