"""
Register every node class found in this directory.

Any ``*_node.py`` module defining a class with a ``node_type`` and a
``NodeKind`` is registered under that ``node_type``, so the host graph
engine can look it up without explicit registration calls elsewhere.
"""

import importlib
import inspect
import os

from effectgraph.exceptions import NodeRegistrationError
from effectgraph.utilities.logging import get_logger

from .base import NodeKind, PullNode, PushNode, fire, read_input
from .node_registry import NodeRegistry

logger = get_logger("nodes")


def _is_node_class(obj, module) -> bool:
    return (
        inspect.isclass(obj)
        and obj.__module__ == module.__name__
        and isinstance(getattr(obj, "kind", None), NodeKind)
        and isinstance(getattr(obj, "node_type", None), str)
    )


def autoload_nodes() -> None:
    nodes_dir = os.path.dirname(__file__)
    for filename in sorted(os.listdir(nodes_dir)):
        if not filename.endswith("_node.py"):
            continue
        module = importlib.import_module(f".{filename[:-3]}", package=__name__)
        for _, obj in inspect.getmembers(module, lambda o: _is_node_class(o, module)):
            if NodeRegistry.get(obj.node_type) is obj:
                continue
            try:
                NodeRegistry.register(obj.node_type, obj)
            except NodeRegistrationError as e:
                logger.warning("Skipping node registration for %s from %s: %s", obj.node_type, filename, e)


autoload_nodes()

from .clamp_node import ClampNode  # noqa: E402
from .rect_overlap_node import RectOverlapNode  # noqa: E402

__all__ = [
    "ClampNode",
    "NodeKind",
    "NodeRegistry",
    "PullNode",
    "PushNode",
    "RectOverlapNode",
    "autoload_nodes",
    "fire",
    "read_input",
]
