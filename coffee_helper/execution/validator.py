"""
Graph Validator.

Runs every integrity check over a snapshot of the step store and collects
the findings into one report. No check short-circuits another, and the
store is never modified.

Checks, in report order:
1. Entry point exists (error)
2. Every option target exists (error)
3. Every Solution guide link exists in the catalog (warning)
4. Every step is reachable from the entry point (warning)

Cycles are neither errors nor warnings.
"""

import logging
from collections import deque
from typing import Dict, List, Set

from ..domain.models import Question, Solution, Step
from ..repositories.guide import GuideRepository
from ..repositories.step import StepRepository
from .schemas.validation import (
    IssueCode,
    Severity,
    ValidationIssue,
    ValidationReport,
)

logger = logging.getLogger(__name__)


def validate(store: StepRepository, guide_catalog: GuideRepository) -> ValidationReport:
    steps = store.snapshot()
    entry_point_id = store.entry_point_id

    if not steps:
        return ValidationReport(
            issues=[
                ValidationIssue(
                    severity=Severity.INFO,
                    code=IssueCode.NOTHING_TO_VALIDATE,
                    message="There are no troubleshooting steps to validate.",
                )
            ]
        )

    issues: List[ValidationIssue] = []
    issues.extend(_check_entry_point(steps, entry_point_id))
    issues.extend(_check_option_targets(steps))
    issues.extend(_check_guide_links(steps, guide_catalog))
    issues.extend(_check_reachability(steps, entry_point_id))

    report = ValidationReport(issues=issues)
    logger.info(
        f"Validated {len(steps)} steps: {len(report.errors)} errors, "
        f"{len(report.warnings)} warnings"
    )
    return report


def reachable_from(steps: Dict[str, Step], entry_point_id: str) -> Set[str]:
    """
    Breadth-first walk over Question options, starting at the entry point.
    Solutions are leaves. Only ids present in the store are returned.
    """
    if entry_point_id not in steps:
        return set()

    visited = {entry_point_id}
    queue = deque([entry_point_id])
    while queue:
        step = steps.get(queue.popleft())
        if not isinstance(step, Question):
            continue
        for option in step.options:
            target = option.next_step_id
            if target in steps and target not in visited:
                visited.add(target)
                queue.append(target)
    return visited


def _check_entry_point(steps: Dict[str, Step], entry_point_id: str) -> List[ValidationIssue]:
    if entry_point_id in steps:
        return []
    return [
        ValidationIssue(
            severity=Severity.ERROR,
            code=IssueCode.MISSING_ENTRY_POINT,
            message=f"Entry point '{entry_point_id}' does not exist.",
            target_id=entry_point_id,
        )
    ]


def _check_option_targets(steps: Dict[str, Step]) -> List[ValidationIssue]:
    issues = []
    for step in steps.values():
        if not isinstance(step, Question):
            continue
        for index, option in enumerate(step.options):
            if option.next_step_id in steps:
                continue
            issues.append(
                ValidationIssue(
                    severity=Severity.ERROR,
                    code=IssueCode.DANGLING_OPTION,
                    message=(
                        f"Question '{step.id}' option {index + 1} (\"{option.text}\") "
                        f"leads to missing step '{option.next_step_id}'."
                    ),
                    step_id=step.id,
                    target_id=option.next_step_id,
                    option_index=index,
                )
            )
    return issues


def _check_guide_links(
    steps: Dict[str, Step], guide_catalog: GuideRepository
) -> List[ValidationIssue]:
    issues = []
    for step in steps.values():
        if not isinstance(step, Solution) or not step.guide_id:
            continue
        if guide_catalog.has_guide(step.guide_id):
            continue
        issues.append(
            ValidationIssue(
                severity=Severity.WARNING,
                code=IssueCode.DANGLING_GUIDE,
                message=f"Solution '{step.id}' links to unknown guide '{step.guide_id}'.",
                step_id=step.id,
                target_id=step.guide_id,
            )
        )
    return issues


def _check_reachability(steps: Dict[str, Step], entry_point_id: str) -> List[ValidationIssue]:
    reachable = reachable_from(steps, entry_point_id)
    return [
        ValidationIssue(
            severity=Severity.WARNING,
            code=IssueCode.UNREACHABLE_STEP,
            message=f"Step '{step_id}' cannot be reached from '{entry_point_id}'.",
            step_id=step_id,
        )
        for step_id in steps
        if step_id not in reachable
    ]
