import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Optional

from ..state.models import SessionState


class SessionRepository(ABC):
    """
    Defines how the application accesses walkthrough sessions.
    This allows us change how data is accessed (Memory -> SQL -> API) later
    without changing the TroubleshootingService code.
    """

    @abstractmethod
    def create(self, start_step_id: str) -> SessionState:
        """Creates a new session positioned on start_step_id."""
        pass

    @abstractmethod
    def get(self, session_id: str) -> Optional[SessionState]:
        """Retrieves a session by ID."""
        pass

    @abstractmethod
    def save(self, session: SessionState):
        """Persists the session state."""
        pass

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """Deletes a session. Returns True if found and deleted."""
        pass


class InMemorySessionRepository(SessionRepository):
    """
    Uses in-memory dictionary for session storage.
    """

    def __init__(self):
        self._store: Dict[str, SessionState] = {}

    def create(self, start_step_id: str) -> SessionState:
        new_id = str(uuid.uuid4())
        session = SessionState(session_id=new_id, current_step_id=start_step_id)
        self._store[new_id] = session
        return session

    def get(self, session_id: str) -> Optional[SessionState]:
        return self._store.get(session_id)

    def save(self, session: SessionState):
        if session.session_id not in self._store:
            raise ValueError(f"Session {session.session_id} does not exist.")
        session.updated_at = datetime.utcnow()
        self._store[session.session_id] = session

    def delete(self, session_id: str) -> bool:
        if session_id in self._store:
            del self._store[session_id]
            return True
        return False
