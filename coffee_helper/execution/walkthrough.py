"""
Walkthrough Engine - Interactive Troubleshooting State Machine

The WalkthroughEngine moves a session through the troubleshooting tree as
the user answers questions. It is deterministic and stateless: all state
lives on the SessionState it is handed, which only holds step ids.

States: the session is always "at" one step id (a Question, a Solution or,
if the store changed underneath it, an id that no longer resolves).
Transitions:
    answer(i)  -> ADVANCE along option i of the current Question
    back()     -> BACK to the previous step
    restart()  -> RESTART at the entry point
Anything else is a HOLD. There is no final state; a Solution is simply a
resting point.
"""

import logging
from typing import Optional

from ..domain.models import Question, Solution, Step
from ..repositories.guide import GuideRepository
from ..repositories.step import StepRepository
from ..state.models import MachineSelection, SessionState
from .resolver import resolve_guide
from .schemas.state_machine import (
    WalkthroughStatus,
    WalkthroughTransition,
    WalkthroughView,
)

logger = logging.getLogger(__name__)


class WalkthroughEngine:
    def __init__(self, store: StepRepository, guide_catalog: GuideRepository):
        self.store = store
        self.guide_catalog = guide_catalog

    # ==========================================================================
    # Transitions
    # ==========================================================================

    def start(self, session: SessionState) -> WalkthroughTransition:
        """Positions a fresh session on the entry point."""
        return self.restart(session)

    def answer(self, session: SessionState, option_index: int) -> WalkthroughTransition:
        """
        Follows option `option_index` of the current Question.
        Out-of-range indices, Solutions and unresolved steps are no-ops.
        """
        step = self.store.get(session.current_step_id)
        if not isinstance(step, Question):
            logger.debug(
                f"Session {session.session_id}: ignored answer on non-question '{session.current_step_id}'"
            )
            return WalkthroughTransition.HOLD

        if not 0 <= option_index < len(step.options):
            logger.debug(
                f"Session {session.session_id}: ignored out-of-range option {option_index} on '{step.id}'"
            )
            return WalkthroughTransition.HOLD

        next_step_id = step.options[option_index].next_step_id
        session.history.append(step.id)
        session.current_step_id = next_step_id
        logger.info(f"Session {session.session_id}: '{step.id}' -> '{next_step_id}'")
        return WalkthroughTransition.ADVANCE

    def back(self, session: SessionState) -> WalkthroughTransition:
        """
        Returns to the previously visited step.
        No-op on an empty history, or when the current step no longer resolves
        (restart is the only way out of that state).
        """
        if not session.history or self.store.get(session.current_step_id) is None:
            return WalkthroughTransition.HOLD

        session.current_step_id = session.history.pop()
        return WalkthroughTransition.BACK

    def restart(self, session: SessionState) -> WalkthroughTransition:
        """Back to the entry point with an empty history. Keeps the machine selection."""
        session.current_step_id = self.store.entry_point_id
        session.history.clear()
        return WalkthroughTransition.RESTART

    def select_machine(
        self, session: SessionState, selection: Optional[MachineSelection]
    ) -> None:
        """Sets (or clears, with None) the machine used to pick guides."""
        session.selected_machine = selection
        if selection:
            logger.info(f"Session {session.session_id}: selected {selection.label}")

    # ==========================================================================
    # Presentation
    # ==========================================================================

    def view(self, session: SessionState) -> WalkthroughView:
        step = self.store.get(session.current_step_id)

        if step is None:
            logger.warning(
                f"Session {session.session_id}: step '{session.current_step_id}' not found"
            )
            return WalkthroughView(
                status=WalkthroughStatus.STEP_NOT_FOUND,
                step_id=session.current_step_id,
            )

        return WalkthroughView(
            status=self._status_for(step),
            step_id=step.id,
            step=step,
            guide=self._guide_for(step, session.selected_machine),
            can_go_back=session.can_go_back,
        )

    def _status_for(self, step: Step) -> WalkthroughStatus:
        if isinstance(step, Question):
            return WalkthroughStatus.AT_QUESTION
        return WalkthroughStatus.AT_SOLUTION

    def _guide_for(self, step: Step, machine: Optional[MachineSelection]):
        if not isinstance(step, Solution):
            return None
        return resolve_guide(step.guide_id, machine, self.guide_catalog)
