"""
CoffeeHelper Troubleshooting

Coffee-machine troubleshooting assistant: an editable decision tree of
questions and solutions, integrity checks and a tree view for authors, an
interactive walkthrough for users, and machine-aware instruction guides.
"""

from coffee_helper.domain import (
    GENERIC,
    Guide,
    GuideStep,
    Machine,
    Option,
    Question,
    Solution,
    Step,
)
from coffee_helper.state import (
    MachineSelection,
    Message,
    SessionState,
)
from coffee_helper.schemas.assistant import AssistantReply
from coffee_helper.execution import (
    WalkthroughEngine,
    render,
    resolve_guide,
    validate,
)

__all__ = [
    # Domain Layer
    "GENERIC",
    "Guide",
    "GuideStep",
    "Machine",
    "Option",
    "Question",
    "Solution",
    "Step",
    # State Layer
    "MachineSelection",
    "Message",
    "SessionState",
    # Schemas
    "AssistantReply",
    # Execution Layer
    "WalkthroughEngine",
    "render",
    "resolve_guide",
    "validate",
]
