"""
API Layer - Request/Response Schemas

Pydantic models for API request and response validation.
Write models carry the authoring rules (id format, minimum lengths);
read models mirror the domain without constraints so that any stored
step can be returned.
"""

from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator

from ..domain.models import GuideCategory, Option, Question, Solution, Step
from ..execution.schemas.tree import RenderNode
from ..execution.schemas.validation import ValidationIssue, ValidationReport
from ..state.models import MachineSelection

STEP_ID_PATTERN = r"^[a-z0-9-]+$"


# --- Steps ---

class OptionSchema(BaseModel):
    text: str = Field(..., min_length=1)
    next_step_id: str = Field(..., min_length=1)


class QuestionWrite(BaseModel):
    kind: Literal["question"] = "question"
    id: str = Field(..., min_length=3, pattern=STEP_ID_PATTERN)
    text: str = Field(..., min_length=5)
    options: List[OptionSchema] = Field(..., min_length=1)

    @model_validator(mode="after")
    def check_no_self_reference(self) -> "QuestionWrite":
        if any(o.next_step_id == self.id for o in self.options):
            raise ValueError(f"An option of '{self.id}' cannot lead back to '{self.id}'.")
        return self

    def to_domain(self) -> Question:
        return Question(
            id=self.id,
            text=self.text,
            options=[Option(text=o.text, next_step_id=o.next_step_id) for o in self.options],
        )


class SolutionWrite(BaseModel):
    kind: Literal["solution"] = "solution"
    id: str = Field(..., min_length=3, pattern=STEP_ID_PATTERN)
    title: str = Field(..., min_length=5)
    description: str = Field(..., min_length=10)
    guide_id: Optional[str] = None
    professional_help: bool = False

    def to_domain(self) -> Solution:
        return Solution(
            id=self.id,
            title=self.title,
            description=self.description,
            # Empty string from a form means "no guide"
            guide_id=self.guide_id or None,
            professional_help=self.professional_help,
        )


class StepWrite(RootModel[Annotated[Union[QuestionWrite, SolutionWrite], Field(discriminator="kind")]]):
    """Either a question or a solution, picked by `kind`."""

    def to_domain(self) -> Step:
        return self.root.to_domain()


class OptionRead(BaseModel):
    text: str
    next_step_id: str


class StepRead(BaseModel):
    id: str
    kind: Literal["question", "solution"]
    # Question fields
    text: Optional[str] = None
    options: Optional[List[OptionRead]] = None
    # Solution fields
    title: Optional[str] = None
    description: Optional[str] = None
    guide_id: Optional[str] = None
    professional_help: Optional[bool] = None

    @classmethod
    def from_domain(cls, step: Step) -> "StepRead":
        if isinstance(step, Question):
            return cls(
                id=step.id,
                kind=step.kind,
                text=step.text,
                options=[OptionRead(text=o.text, next_step_id=o.next_step_id) for o in step.options],
            )
        return cls(
            id=step.id,
            kind=step.kind,
            title=step.title,
            description=step.description,
            guide_id=step.guide_id,
            professional_help=step.professional_help,
        )


# --- Guides & Machines ---

class GuideStepRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    description: str
    image_url: Optional[str] = None
    video_url: Optional[str] = None


class GuideRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    category: GuideCategory
    machine_brand: str
    machine_model: str
    summary: str
    steps: List[GuideStepRead] = Field(default_factory=list)
    tools: List[str] = Field(default_factory=list)
    safety_alerts: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None


class MachineRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    brand: str
    model: str
    image_url: Optional[str] = None


# --- Tree & Validation ---

class TreeNodeRead(BaseModel):
    kind: Literal["CONTENT", "CYCLE", "MISSING"]
    step_id: str
    option_text: Optional[str] = None
    step: Optional[StepRead] = None
    guide: Optional[GuideRead] = None
    children: List["TreeNodeRead"] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, node: RenderNode) -> "TreeNodeRead":
        return cls(
            kind=node.kind.value,
            step_id=node.step_id,
            option_text=node.option_text,
            step=StepRead.from_domain(node.step) if node.step else None,
            guide=GuideRead.model_validate(node.guide) if node.guide else None,
            children=[cls.from_domain(child) for child in node.children],
        )


class ValidationReportRead(BaseModel):
    is_valid: bool
    error_count: int
    warning_count: int
    issues: List[ValidationIssue]

    @classmethod
    def from_domain(cls, report: ValidationReport) -> "ValidationReportRead":
        return cls(
            is_valid=report.is_valid,
            error_count=len(report.errors),
            warning_count=len(report.warnings),
            issues=report.issues,
        )


# --- Walkthrough Sessions ---

class CreateSessionResponse(BaseModel):
    session_id: str


class AnswerRequest(BaseModel):
    option_index: int


class MachineSelectRequest(BaseModel):
    # None clears the selection
    machine_id: Optional[str] = None


class SessionRead(BaseModel):
    session_id: str
    status: str
    current_step_id: str
    step: Optional[StepRead] = None
    guide: Optional[GuideRead] = None
    can_go_back: bool
    history: List[str]
    selected_machine: Optional[MachineSelection] = None
    transition: Optional[str] = None
    updated_at: datetime


# --- Guide Assistant ---

class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class AssistantRequest(BaseModel):
    message: Optional[str] = None
    image_uri: Optional[str] = Field(
        None,
        pattern=r"^data:[\w/+.-]+;base64,",
        description="Image for this turn as 'data:<mimetype>;base64,<encoded_data>'.",
    )
    history: List[ChatMessage] = Field(default_factory=list)
    selected_machine: Optional[MachineSelection] = None


class AssistantResponse(BaseModel):
    assistant_response: str
    suggested_guide_ids: List[str]
    suggested_guides: List[GuideRead]


# --- Smart Plugs ---

class PlugStatusRead(BaseModel):
    device_id: str
    is_on: bool
    on_time_seconds: int
    on_time_display: str
    poll_interval_seconds: int


class PowerRequest(BaseModel):
    is_on: bool
