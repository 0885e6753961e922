"""
Service Layer Exceptions

Custom exceptions for the TroubleshootingService and related
orchestration logic.
"""


class SessionNotFoundError(Exception):
    """Raised when a walkthrough session id is unknown."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session {session_id} not found")


class MachineNotFoundError(Exception):
    """Raised when selecting a machine id that is not in the machine list."""

    def __init__(self, machine_id: str):
        self.machine_id = machine_id
        super().__init__(f"Machine {machine_id} not found")
