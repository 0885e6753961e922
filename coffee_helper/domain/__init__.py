"""
Domain Layer - Static Data Models

Defines the troubleshooting tree (Questions, Solutions, Options), the
instruction Guides and Machines, and the errors raised by the step store.
"""

from coffee_helper.domain.exceptions import (
    DependencyConflict,
    ImmutableFieldViolation,
    ProtectedEntryPoint,
    StepAlreadyExists,
    StepNotFoundError,
    StepStoreError,
)
from coffee_helper.domain.models import (
    GENERIC,
    Guide,
    GuideCategory,
    GuideStep,
    Machine,
    Option,
    Question,
    Solution,
    Step,
    StepKind,
)

__all__ = [
    "GENERIC",
    "Guide",
    "GuideCategory",
    "GuideStep",
    "Machine",
    "Option",
    "Question",
    "Solution",
    "Step",
    "StepKind",
    # Exceptions
    "DependencyConflict",
    "ImmutableFieldViolation",
    "ProtectedEntryPoint",
    "StepAlreadyExists",
    "StepNotFoundError",
    "StepStoreError",
]
