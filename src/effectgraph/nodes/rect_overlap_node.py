"""
RectOverlapNode: branch control flow on whether two rectangles intersect.

Input slot 0 is the incoming execution pin and is never read here.
Slots 1 and 2 carry the rectangles. Continuation slot 0 runs on overlap,
slot 1 runs otherwise.
"""

from typing import ClassVar, List, Optional

from effectgraph.nodes.base import NodeKind, fire, read_input
from effectgraph.types import Continuation, EffectHost, Producer, Rect, rects_overlap
from effectgraph.utilities.logging import get_logger

logger = get_logger("nodes.rect_overlap")

RECT_A_SLOT = 1
RECT_B_SLOT = 2

OVERLAP_BRANCH = 0
NO_OVERLAP_BRANCH = 1


class RectOverlapNode:
    """Push node that tests two axis-aligned rectangles for intersection."""
    node_type: ClassVar[str] = "RectOverlap"
    kind: ClassVar[NodeKind] = NodeKind.PUSH
    description: ClassVar[str] = "Branch on whether two rectangles overlap"
    input_arity: ClassVar[int] = 3
    branch_count: ClassVar[int] = 2

    def __init__(self, host: Optional[EffectHost] = None) -> None:
        self.host = host
        self.inputs: List[Optional[Producer]] = [None] * self.input_arity
        self.nexts: List[Optional[Continuation]] = [None] * self.branch_count

    def evaluate(self) -> None:
        rect_a = Rect.coerce(read_input(self.inputs, RECT_A_SLOT))
        rect_b = Rect.coerce(read_input(self.inputs, RECT_B_SLOT))

        if rect_a is None or rect_b is None:
            logger.debug("RectOverlap aborted: rectangle unset")
            return
        if not (rect_a.is_complete and rect_b.is_complete):
            logger.debug("RectOverlap aborted: incomplete rectangle (a=%r, b=%r)", rect_a, rect_b)
            return

        if rects_overlap(rect_a, rect_b):
            fire(self.nexts, OVERLAP_BRANCH)
        else:
            fire(self.nexts, NO_OVERLAP_BRANCH)
