"""
Domain Layer Exceptions

Raised by the Step Graph Store when an edit would break one of its rules.
Integrity problems of the graph itself (dangling links, orphans) are not
exceptions; the validator reports them as data.
"""

from typing import List


class StepStoreError(Exception):
    """Base class for rejected Step Graph Store mutations."""
    pass


class StepNotFoundError(StepStoreError):
    """Raised when a mutation targets a step id that is not in the store."""

    def __init__(self, step_id: str):
        self.step_id = step_id
        super().__init__(f"Step '{step_id}' not found.")


class StepAlreadyExists(StepStoreError):
    """Raised when creating a step whose id is already taken."""

    def __init__(self, step_id: str):
        self.step_id = step_id
        super().__init__(f"Step '{step_id}' already exists.")


class ImmutableFieldViolation(StepStoreError):
    """Raised when an update tries to change a step's id or kind."""

    def __init__(self, step_id: str, field: str, old_value: str, new_value: str):
        self.step_id = step_id
        self.field = field
        self.old_value = old_value
        self.new_value = new_value
        super().__init__(
            f"Cannot change '{field}' of step '{step_id}' "
            f"from '{old_value}' to '{new_value}'."
        )


class DependencyConflict(StepStoreError):
    """Raised when deleting a step that other Questions still point to."""

    def __init__(self, step_id: str, referencing_ids: List[str]):
        self.step_id = step_id
        self.referencing_ids = referencing_ids
        super().__init__(
            f"Step '{step_id}' is still referenced by: {', '.join(referencing_ids)}."
        )


class ProtectedEntryPoint(StepStoreError):
    """Raised when deleting the entry point while other steps exist."""

    def __init__(self, step_id: str):
        self.step_id = step_id
        super().__init__(
            f"Step '{step_id}' is the entry point and cannot be deleted while other steps exist."
        )
