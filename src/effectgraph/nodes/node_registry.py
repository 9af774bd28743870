"""
Node Registry for effectgraph

Central registry the host graph engine uses to discover node types and
instantiate them at graph-load time. Node classes are registered under
their ``node_type`` name.
"""

from typing import Any, Dict, List, Optional, Type

from effectgraph.exceptions import NodeNotFoundError, NodeRegistrationError
from effectgraph.nodes.base import NodeKind
from effectgraph.types import EffectHost
from effectgraph.utilities.logging import get_logger

logger = get_logger("nodes.registry")


class NodeRegistry:
    """
    Central registry for node types.
    """
    _registry: Dict[str, Type[Any]] = {}

    @classmethod
    def register(cls, node_type: str, node_cls: Type[Any]) -> None:
        """
        Register a node class with a unique type identifier.

        Args:
            node_type (str): Unique identifier for the node type.
            node_cls: The node class to register.

        Raises:
            NodeRegistrationError: If the node_type is already registered, or the
                class does not declare a node kind and an ``evaluate`` method.
        """
        if node_type in cls._registry:
            raise NodeRegistrationError(
                f"Node type '{node_type}' is already registered.",
                details={"node_type": node_type},
            )
        kind = getattr(node_cls, "kind", None)
        if not isinstance(kind, NodeKind) or not callable(getattr(node_cls, "evaluate", None)):
            raise NodeRegistrationError(
                f"{node_cls.__name__} is not a pull or push node.",
                details={"node_type": node_type},
            )
        cls._registry[node_type] = node_cls
        logger.debug("Registered node type %s (%s)", node_type, kind.value)

    @classmethod
    def unregister(cls, node_type: str) -> None:
        cls._registry.pop(node_type, None)

    @classmethod
    def get(cls, node_type: str) -> Optional[Type[Any]]:
        """
        Retrieve a node class by its type identifier.

        Returns:
            The node class if found, else None.
        """
        return cls._registry.get(node_type)

    @classmethod
    def list_types(cls) -> List[str]:
        return list(cls._registry.keys())

    @classmethod
    def create(cls, node_type: str, host: Optional[EffectHost] = None) -> Any:
        """
        Instantiate a node by its type identifier.

        Args:
            node_type (str): The type identifier of the node.
            host: The host effect runtime handed to the node.

        Raises:
            NodeNotFoundError: If the node_type is not registered.
        """
        node_cls = cls.get(node_type)
        if node_cls is None:
            raise NodeNotFoundError(
                f"Node type '{node_type}' is not registered.",
                details={"node_type": node_type},
            )
        return node_cls(host=host)

    @classmethod
    def describe(cls) -> List[Dict[str, Any]]:
        """Summaries of every registered node type, sorted by name."""
        return [
            {
                "node_type": node_type,
                "kind": node_cls.kind.value,
                "inputs": getattr(node_cls, "input_arity", 0),
                "branches": getattr(node_cls, "branch_count", 0),
                "description": getattr(node_cls, "description", None) or (node_cls.__doc__ or "").strip(),
            }
            for node_type, node_cls in sorted(cls._registry.items())
        ]
