import copy
import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from ..config import settings
from ..domain.exceptions import (
    DependencyConflict,
    ImmutableFieldViolation,
    ProtectedEntryPoint,
    StepAlreadyExists,
    StepNotFoundError,
)
from ..domain.models import Question, Step

logger = logging.getLogger(__name__)


# The Interface
class StepRepository(ABC):
    """
    The Step Graph Store: every Question and Solution of the troubleshooting
    tree, keyed by id.
    This allows us change how data is accessed (Memory -> SQL -> API) later
    without changing the validator, renderer or walkthrough code.

    The store tolerates an inconsistent graph (dangling option targets, a
    missing entry point) so authors can edit incrementally; only the edits
    below are refused.
    """

    @property
    @abstractmethod
    def entry_point_id(self) -> str:
        """Id of the step every walkthrough starts from."""
        pass

    @abstractmethod
    def get(self, step_id: str) -> Optional[Step]:
        """Returns the step, or None if absent."""
        pass

    @abstractmethod
    def create(self, step: Step) -> Step:
        """
        Inserts a new step.
        Raises StepAlreadyExists if the id is taken.
        """
        pass

    @abstractmethod
    def upsert(self, step: Step) -> Step:
        """
        Inserts the step if its id is new, replaces it otherwise.
        Raises ImmutableFieldViolation if the replacement changes the kind.
        """
        pass

    @abstractmethod
    def update(self, step_id: str, step: Step) -> Step:
        """
        Replaces the step stored under step_id.
        Raises StepNotFoundError or ImmutableFieldViolation (id or kind changed).
        """
        pass

    @abstractmethod
    def delete(self, step_id: str) -> None:
        """
        Removes a step.
        Raises StepNotFoundError, DependencyConflict or ProtectedEntryPoint.
        """
        pass

    @abstractmethod
    def list_all(self) -> List[Step]:
        """All steps in insertion order."""
        pass

    @abstractmethod
    def snapshot(self) -> Dict[str, Step]:
        """A consistent id -> step copy (insertion order) for read-only passes."""
        pass

    def references_to(self, step_id: str) -> List[str]:
        """Ids of the Questions with an option pointing at step_id (itself included)."""
        return find_references(self.snapshot().values(), step_id)

    def search(self, term: str) -> List[Step]:
        """Case-insensitive match on id, question text or solution title."""
        needle = term.strip().lower()
        if not needle:
            return self.list_all()
        matches = []
        for step in self.list_all():
            label = step.text if isinstance(step, Question) else step.title
            if needle in step.id.lower() or needle in label.lower():
                matches.append(step)
        return matches

    def __len__(self) -> int:
        return len(self.list_all())


def find_references(steps: Iterable[Step], step_id: str) -> List[str]:
    referencing_ids = []
    for step in steps:
        if not isinstance(step, Question):
            continue
        # A Question looping to itself counts too
        if any(opt.next_step_id == step_id for opt in step.options):
            referencing_ids.append(step.id)
    return referencing_ids


class InMemoryStepRepository(StepRepository):
    """
    Keeps steps in an insertion-ordered dictionary.

    Every read and write holds one lock, so readers always see a whole
    mutation or none of it, and two mutations never interleave.
    Steps are copied on the way in and on the way out: callers never hold
    a reference into the store.
    """

    def __init__(
        self,
        steps: Optional[Iterable[Step]] = None,
        entry_point_id: str = settings.ENTRY_POINT_ID,
    ):
        self._entry_point_id = entry_point_id
        self._lock = threading.RLock()
        self._steps: Dict[str, Step] = {}
        for step in steps or []:
            self._steps[step.id] = copy.deepcopy(step)

    @property
    def entry_point_id(self) -> str:
        return self._entry_point_id

    def get(self, step_id: str) -> Optional[Step]:
        with self._lock:
            step = self._steps.get(step_id)
            return copy.deepcopy(step) if step is not None else None

    def create(self, step: Step) -> Step:
        with self._lock:
            if step.id in self._steps:
                logger.warning(f"Refused to create duplicate step '{step.id}'")
                raise StepAlreadyExists(step.id)
            self._steps[step.id] = copy.deepcopy(step)
        logger.info(f"Created {step.kind} '{step.id}'")
        return step

    def upsert(self, step: Step) -> Step:
        with self._lock:
            existing = self._steps.get(step.id)
            if existing is not None:
                self._check_kind(existing, step)
            # Replacing an existing key keeps its position in the dict
            self._steps[step.id] = copy.deepcopy(step)
        logger.info(f"{'Updated' if existing else 'Created'} {step.kind} '{step.id}'")
        return step

    def update(self, step_id: str, step: Step) -> Step:
        with self._lock:
            existing = self._steps.get(step_id)
            if existing is None:
                raise StepNotFoundError(step_id)
            if step.id != step_id:
                logger.warning(f"Refused to rename step '{step_id}' to '{step.id}'")
                raise ImmutableFieldViolation(step_id, "id", step_id, step.id)
            self._check_kind(existing, step)
            self._steps[step_id] = copy.deepcopy(step)
        logger.info(f"Updated {step.kind} '{step_id}'")
        return step

    def delete(self, step_id: str) -> None:
        with self._lock:
            if step_id not in self._steps:
                raise StepNotFoundError(step_id)

            referencing_ids = find_references(self._steps.values(), step_id)
            if referencing_ids:
                logger.warning(
                    f"Refused to delete '{step_id}': referenced by {referencing_ids}"
                )
                raise DependencyConflict(step_id, referencing_ids)

            if step_id == self._entry_point_id and len(self._steps) > 1:
                logger.warning(f"Refused to delete entry point '{step_id}'")
                raise ProtectedEntryPoint(step_id)

            del self._steps[step_id]
        logger.info(f"Deleted step '{step_id}'")

    def list_all(self) -> List[Step]:
        with self._lock:
            return copy.deepcopy(list(self._steps.values()))

    def snapshot(self) -> Dict[str, Step]:
        with self._lock:
            return copy.deepcopy(self._steps)

    def __len__(self) -> int:
        with self._lock:
            return len(self._steps)

    def _check_kind(self, existing: Step, replacement: Step):
        if existing.kind != replacement.kind:
            logger.warning(
                f"Refused to change kind of '{existing.id}' from {existing.kind} to {replacement.kind}"
            )
            raise ImmutableFieldViolation(
                existing.id, "kind", existing.kind, replacement.kind
            )
