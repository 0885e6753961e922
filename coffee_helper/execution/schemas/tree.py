"""
Render Tree - Nested Presentation of the Troubleshooting Graph

Type definitions produced by the tree renderer.
CYCLE and MISSING nodes are terminal: they never have children.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from ...domain.models import Guide, Step


class NodeKind(str, Enum):
    CONTENT = "CONTENT"  # A step that exists; children follow its options
    CYCLE = "CYCLE"  # The step is already an ancestor on this path
    MISSING = "MISSING"  # No step with this id in the store


@dataclass
class RenderNode:
    """
    Attributes:
        kind: NodeKind
        step_id: Id this node was reached with.
        step: The step, for CONTENT nodes.
        guide: Guide resolved for a Solution's guide_id, if any.
        option_text: Text of the parent's option leading here (None at the root).
        children: One node per option of a Question, in option order.
    """
    kind: NodeKind
    step_id: str
    step: Optional[Step] = None
    guide: Optional[Guide] = None
    option_text: Optional[str] = None
    children: List["RenderNode"] = field(default_factory=list)

    @property
    def is_terminal(self) -> bool:
        return self.kind != NodeKind.CONTENT

    def iter_nodes(self) -> Iterator["RenderNode"]:
        """Pre-order walk over this node and its descendants."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()
