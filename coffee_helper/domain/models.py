"""
Domain Layer - Static Data Models

This module defines the core domain model of the troubleshooting assistant:
the decision tree of Questions and Solutions that an admin authors, and the
instruction Guides and Machines that Solutions point users towards.
"""

from dataclasses import dataclass, field
from typing import ClassVar, List, Literal, Optional, Union

"""
StepKind is the discriminant of the Step tagged union:
- question: Decision point; each Option leads to another step
- solution: Leaf of the tree; a recommended fix, optionally linked to a Guide
"""
StepKind = Literal["question", "solution"]

GuideCategory = Literal["Maintenance", "Repair", "Cleaning"]

# Brand/model wildcard meaning "applies to any machine".
GENERIC = "Generic"


@dataclass
class Option:
    """
    One answer to a Question.

    Attributes:
        text: Answer label shown to the user (e.g., "Machine is leaking water").
        next_step_id: Step to move to when this answer is picked. It does not
            have to exist yet; dangling targets are reported by the validator.
    """
    text: str
    next_step_id: str


@dataclass
class Question:
    """
    Decision point in the troubleshooting tree.

    Attributes:
        id: Unique step identifier (lowercase, digits and hyphens).
        text: Prompt shown to the user.
        options: Answers in display order.
    """
    kind: ClassVar[StepKind] = "question"

    id: str
    text: str
    options: List[Option] = field(default_factory=list)


@dataclass
class Solution:
    """
    Leaf of the troubleshooting tree.

    Attributes:
        id: Unique step identifier.
        title: Short name of the fix.
        description: What the user should do.
        guide_id: Optional link to an instruction Guide.
        professional_help: True when the fix likely needs a technician.
    """
    kind: ClassVar[StepKind] = "solution"

    id: str
    title: str
    description: str
    guide_id: Optional[str] = None
    professional_help: bool = False


Step = Union[Question, Solution]


@dataclass
class GuideStep:
    title: str
    description: str
    image_url: Optional[str] = None
    video_url: Optional[str] = None


@dataclass
class Guide:
    """
    Instruction guide for one machine (or for any machine, via GENERIC).

    Attributes:
        id: Unique guide identifier (e.g., "guide-003").
        category: Maintenance, Repair or Cleaning. The Guide Resolver only
            substitutes guides of the same category.
        machine_brand: Brand the guide was written for, or GENERIC.
        machine_model: Model the guide was written for, or GENERIC.
        steps: Ordered instructions.
        tools: Optional list of tools needed.
        safety_alerts: Optional list of safety warnings.
    """
    id: str
    title: str
    category: GuideCategory
    machine_brand: str
    machine_model: str
    summary: str
    steps: List[GuideStep] = field(default_factory=list)
    tools: List[str] = field(default_factory=list)
    safety_alerts: List[str] = field(default_factory=list)
    image_url: Optional[str] = None

    def matches_machine(self, brand: str, model: str) -> bool:
        return self.machine_brand == brand and self.machine_model == model


@dataclass
class Machine:
    """A coffee machine the user can pick from."""
    id: str
    brand: str
    model: str
    image_url: Optional[str] = None
