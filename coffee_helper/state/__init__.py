"""
State Layer - Runtime Data Models

Defines the runtime state model that tracks a user's progress through
the troubleshooting tree, and the assistant's conversation turns.
"""

from coffee_helper.state.models import (
    MachineSelection,
    Message,
    SessionState,
)

__all__ = [
    "MachineSelection",
    "Message",
    "SessionState",
]
