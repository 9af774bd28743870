from typing import ClassVar, List, Optional

from effectgraph.nodes.base import NodeKind, read_input
from effectgraph.types import EffectHost, Producer, Scalar
from effectgraph.utilities.logging import get_logger

logger = get_logger("nodes.clamp")

VALUE_SLOT = 0
BOUND_A_SLOT = 1
BOUND_B_SLOT = 2


class ClampNode:
    """
    Pull node that limits a value to the range spanned by two bounds.

    The bounds may be wired in either order.
    """
    node_type: ClassVar[str] = "Clamp"
    kind: ClassVar[NodeKind] = NodeKind.PULL
    description: ClassVar[str] = "Clamp a value between two bounds"
    input_arity: ClassVar[int] = 3
    branch_count: ClassVar[int] = 0

    def __init__(self, host: Optional[EffectHost] = None) -> None:
        self.host = host
        self.inputs: List[Optional[Producer]] = [None] * self.input_arity

    def evaluate(self, index: int = 0) -> Scalar:
        # Single output pin; index is accepted for the engine's getOutput(index) call
        value = read_input(self.inputs, VALUE_SLOT)
        bound_a = read_input(self.inputs, BOUND_A_SLOT)
        bound_b = read_input(self.inputs, BOUND_B_SLOT)

        if value is None or bound_a is None or bound_b is None:
            logger.debug(
                "Clamp aborted: unset input (value=%r, bound_a=%r, bound_b=%r)",
                value, bound_a, bound_b,
            )
            return None

        return clamp(value, bound_a, bound_b)


def clamp(value, bound_a, bound_b):
    low = min(bound_a, bound_b)
    high = max(bound_a, bound_b)
    if value <= low:
        return low
    if value >= high:
        return high
    return value
