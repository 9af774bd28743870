"""
Node capability interfaces and wiring helpers.

Nodes do not share a base class. A node is any class that satisfies one
of the two structural protocols below:

- PullNode: the engine calls ``evaluate()`` when a downstream node asks
  for the value on its output pin.
- PushNode: the engine calls ``evaluate()`` when control flow reaches the
  node; the node then fires zero or one of its ``nexts``.

The engine owns ``inputs`` and ``nexts`` and assigns them after
construction. Nodes only read them.
"""

from enum import Enum, unique
from typing import Any, ClassVar, List, Optional, Protocol, Sequence, runtime_checkable

from effectgraph.types import Continuation, EffectHost, Producer


@unique
class NodeKind(str, Enum):
    """How the engine drives a node."""
    PULL = "pull"
    PUSH = "push"


@runtime_checkable
class PullNode(Protocol):
    node_type: ClassVar[str]
    kind: ClassVar[NodeKind]
    host: Optional[EffectHost]
    inputs: List[Optional[Producer]]

    def evaluate(self, index: int = 0) -> Any:
        ...


@runtime_checkable
class PushNode(Protocol):
    node_type: ClassVar[str]
    kind: ClassVar[NodeKind]
    host: Optional[EffectHost]
    inputs: List[Optional[Producer]]
    nexts: List[Optional[Continuation]]

    def evaluate(self) -> None:
        ...


def read_input(inputs: Sequence[Optional[Producer]], index: int) -> Any:
    """Evaluate the producer wired to ``index``; unwired slots read as None."""
    if index >= len(inputs):
        return None
    producer = inputs[index]
    if producer is None:
        return None
    return producer()


def fire(nexts: Sequence[Optional[Continuation]], index: int) -> bool:
    """Invoke the continuation wired to ``index``, if any. Returns whether one ran."""
    if index >= len(nexts):
        return False
    continuation = nexts[index]
    if continuation is None:
        return False
    continuation()
    return True
