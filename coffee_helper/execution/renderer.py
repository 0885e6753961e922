"""
Tree Renderer.

Walks the step graph from a root id and produces a nested RenderNode tree
for the admin tree view. The walk carries the set of ancestor ids on the
current path; meeting one of them again yields a CYCLE node instead of
recursing, so rendering terminates on any graph.

Each branch gets its own copy of the path: siblings never see each other's
ancestors, so a step reachable from two branches renders in both.
"""

from typing import Dict, FrozenSet, Optional

from ..domain.models import Question, Solution, Step
from ..repositories.guide import GuideRepository
from ..repositories.step import StepRepository
from ..state.models import MachineSelection
from .resolver import resolve_guide
from .schemas.tree import NodeKind, RenderNode


def render(
    store: StepRepository,
    root_id: str,
    guide_catalog: Optional[GuideRepository] = None,
    selected_machine: Optional[MachineSelection] = None,
) -> RenderNode:
    """
    Render the subtree under root_id. Pure: reads a store snapshot, keeps no cache.

    Args:
        store: The step store.
        root_id: Where to start (usually the store's entry point).
        guide_catalog: When given, Solution nodes carry their resolved guide.
        selected_machine: Machine used to pick the most specific guide.
    """
    steps = store.snapshot()
    return _render_node(
        steps, root_id, frozenset(), None, guide_catalog, selected_machine
    )


def _render_node(
    steps: Dict[str, Step],
    step_id: str,
    path: FrozenSet[str],
    option_text: Optional[str],
    guide_catalog: Optional[GuideRepository],
    selected_machine: Optional[MachineSelection],
) -> RenderNode:
    if step_id in path:
        return RenderNode(kind=NodeKind.CYCLE, step_id=step_id, option_text=option_text)

    step = steps.get(step_id)
    if step is None:
        return RenderNode(kind=NodeKind.MISSING, step_id=step_id, option_text=option_text)

    node = RenderNode(
        kind=NodeKind.CONTENT, step_id=step_id, step=step, option_text=option_text
    )

    if isinstance(step, Solution) and step.guide_id and guide_catalog is not None:
        node.guide = resolve_guide(step.guide_id, selected_machine, guide_catalog)

    if isinstance(step, Question):
        child_path = path | {step_id}
        node.children = [
            _render_node(
                steps,
                option.next_step_id,
                child_path,
                option.text,
                guide_catalog,
                selected_machine,
            )
            for option in step.options
        ]

    return node
