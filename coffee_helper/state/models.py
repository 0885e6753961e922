"""
State Layer - Runtime Data Models

This module defines the runtime state of an interactive troubleshooting
walkthrough: where the user currently is in the tree, how they got there
(the back-navigation stack) and which machine they said they own.
Sessions only hold step ids; they never own Step data.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class Message(BaseModel):
    """One turn of the guide assistant conversation."""
    role: Literal["user", "assistant"]
    content: str


class MachineSelection(BaseModel):
    """
    The machine the user is troubleshooting. None on the session means
    "no selection".
    """
    brand: str
    model: str

    @property
    def label(self) -> str:
        return f"{self.brand} {self.model}"


class SessionState(BaseModel):
    """
    The state of a single walkthrough session.
    """
    session_id: str
    current_step_id: str

    # Previously visited step ids, most recent last
    history: List[str] = Field(default_factory=list)

    selected_machine: Optional[MachineSelection] = None
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def can_go_back(self) -> bool:
        return bool(self.history)
