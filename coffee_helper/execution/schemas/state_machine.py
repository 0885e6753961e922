"""
Walkthrough Types - FSM State Transition Definitions

Type definitions for the interactive walkthrough state machine.
Used by the engine (to classify transitions) and the service/API layer
(to present the current position).
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from ...domain.models import Guide, Step


class WalkthroughTransition(Enum):
    """
    Strict State Machine terminology describing what happened to the step pointer.
    """

    HOLD = auto()  # The pointer remains on the current step (invalid or no-op input).
    ADVANCE = auto()  # The pointer moved along an option; the old step was pushed.
    BACK = auto()  # The pointer returned to the step on top of the history.
    RESTART = auto()  # The pointer was reset to the entry point; history cleared.


class WalkthroughStatus(str, Enum):
    """
    AT_QUESTION: Waiting for the user to pick an option.
    AT_SOLUTION: Resting on a solution; the user may go back or restart.
    STEP_NOT_FOUND: The current id no longer resolves (e.g., deleted by an admin).
        Recoverable only by restarting.
    """
    AT_QUESTION = "AT_QUESTION"
    AT_SOLUTION = "AT_SOLUTION"
    STEP_NOT_FOUND = "STEP_NOT_FOUND"


@dataclass
class WalkthroughView:
    """
    What the user currently sees.
    """

    status: WalkthroughStatus
    step_id: str
    step: Optional[Step] = None
    guide: Optional[Guide] = None
    can_go_back: bool = False
