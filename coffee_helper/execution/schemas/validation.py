"""
Validation Report - Graph Integrity Findings

Models returned by the graph validator. Findings are data, not exceptions:
a report is always produced, whatever state the graph is in.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Severity(str, Enum):
    """
    ERROR: The walkthrough would break (missing entry point, dangling option).
    WARNING: Suspicious but legitimate mid-edit (orphan step, unknown guide).
    INFO: Nothing is wrong; e.g. there is nothing to validate yet.
    """
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


class IssueCode(str, Enum):
    NOTHING_TO_VALIDATE = "NOTHING_TO_VALIDATE"
    MISSING_ENTRY_POINT = "MISSING_ENTRY_POINT"
    DANGLING_OPTION = "DANGLING_OPTION"
    DANGLING_GUIDE = "DANGLING_GUIDE"
    UNREACHABLE_STEP = "UNREACHABLE_STEP"


class ValidationIssue(BaseModel):
    severity: Severity
    code: IssueCode
    message: str
    step_id: Optional[str] = Field(
        None, description="The step the finding is about (the Question, for dangling options)."
    )
    target_id: Optional[str] = Field(
        None, description="The unresolved step or guide id, when there is one."
    )
    option_index: Optional[int] = None


class ValidationReport(BaseModel):
    issues: List[ValidationIssue] = Field(default_factory=list)

    @property
    def errors(self) -> List[ValidationIssue]:
        return self._of(Severity.ERROR)

    @property
    def warnings(self) -> List[ValidationIssue]:
        return self._of(Severity.WARNING)

    @property
    def infos(self) -> List[ValidationIssue]:
        return self._of(Severity.INFO)

    @property
    def is_valid(self) -> bool:
        """True when there are no errors; warnings do not block."""
        return not self.errors

    def with_code(self, code: IssueCode) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.code == code]

    def _of(self, severity: Severity) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == severity]
