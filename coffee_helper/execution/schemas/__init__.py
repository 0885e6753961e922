"""
Execution Schemas

Result types of the execution layer: validation reports, render trees and
walkthrough states.
"""

from coffee_helper.execution.schemas.state_machine import (
    WalkthroughStatus,
    WalkthroughTransition,
    WalkthroughView,
)
from coffee_helper.execution.schemas.tree import NodeKind, RenderNode
from coffee_helper.execution.schemas.validation import (
    IssueCode,
    Severity,
    ValidationIssue,
    ValidationReport,
)

__all__ = [
    "IssueCode",
    "NodeKind",
    "RenderNode",
    "Severity",
    "ValidationIssue",
    "ValidationReport",
    "WalkthroughStatus",
    "WalkthroughTransition",
    "WalkthroughView",
]
