"""
Troubleshooting Service - Application Orchestration Layer

This service is the entry point for walkthrough operations. It orchestrates
the interaction between the Data Layer (Repositories), the Logic Layer
(WalkthroughEngine) and the API. It ensures that sessions are loaded,
advanced, and saved correctly.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..execution.schemas.state_machine import WalkthroughTransition, WalkthroughView
from ..execution.walkthrough import WalkthroughEngine
from ..repositories.machine import MachineRepository
from ..repositories.session import SessionRepository
from ..state.models import MachineSelection, SessionState
from .exceptions import MachineNotFoundError, SessionNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class WalkthroughTurn:
    """Result of one user action: the saved session, what happened, what to show."""
    session: SessionState
    transition: WalkthroughTransition
    view: WalkthroughView


class TroubleshootingService:
    def __init__(
        self,
        session_repository: SessionRepository,
        engine: WalkthroughEngine,
        machine_repository: MachineRepository,
    ):
        self.session_repo = session_repository
        self.engine = engine
        self.machine_repo = machine_repository

    def create_session(self) -> SessionState:
        """Creates a new session positioned on the entry point."""
        session = self.session_repo.create(self.engine.store.entry_point_id)
        logger.info(f"Started walkthrough session {session.session_id}")
        return session

    def get_session(self, session_id: str) -> Optional[SessionState]:
        return self.session_repo.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        return self.session_repo.delete(session_id)

    def view(self, session_id: str) -> WalkthroughTurn:
        session = self._load(session_id)
        return WalkthroughTurn(
            session=session,
            transition=WalkthroughTransition.HOLD,
            view=self.engine.view(session),
        )

    def answer(self, session_id: str, option_index: int) -> WalkthroughTurn:
        session = self._load(session_id)
        transition = self.engine.answer(session, option_index)
        return self._finish_turn(session, transition)

    def back(self, session_id: str) -> WalkthroughTurn:
        session = self._load(session_id)
        transition = self.engine.back(session)
        return self._finish_turn(session, transition)

    def restart(self, session_id: str) -> WalkthroughTurn:
        session = self._load(session_id)
        transition = self.engine.restart(session)
        return self._finish_turn(session, transition)

    def select_machine(self, session_id: str, machine_id: Optional[str]) -> WalkthroughTurn:
        """
        Selects a machine from the machine list (None clears the selection).
        The current view is re-resolved so the guide matches the new machine.
        """
        session = self._load(session_id)

        selection = None
        if machine_id is not None:
            machine = self.machine_repo.get_machine(machine_id)
            if machine is None:
                raise MachineNotFoundError(machine_id)
            selection = MachineSelection(brand=machine.brand, model=machine.model)

        self.engine.select_machine(session, selection)
        return self._finish_turn(session, WalkthroughTransition.HOLD)

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _load(self, session_id: str) -> SessionState:
        session = self.session_repo.get(session_id)
        if not session:
            raise SessionNotFoundError(session_id)
        return session

    def _finish_turn(
        self, session: SessionState, transition: WalkthroughTransition
    ) -> WalkthroughTurn:
        self.session_repo.save(session)
        return WalkthroughTurn(
            session=session,
            transition=transition,
            view=self.engine.view(session),
        )
