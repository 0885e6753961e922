import pytest

from coffee_helper.data.sample_data import INSTRUCTION_GUIDES, TROUBLESHOOT_STEPS
from coffee_helper.domain.models import GENERIC, Guide, Option, Question, Solution
from coffee_helper.llm.interface import LLMProvider
from coffee_helper.repositories.guide import StaticGuideRepository
from coffee_helper.repositories.step import InMemoryStepRepository


class FakeLLMProvider(LLMProvider):
    """Records the messages it is sent and returns a canned reply (or raises)."""

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def generate_structured_output(self, messages, response_model, temperature=0.0):
        self.calls.append(messages)
        if self.error:
            raise self.error
        return self.reply


def _question(step_id, *targets):
    return Question(
        id=step_id,
        text=f"Question {step_id}?",
        options=[Option(text=f"to {t}", next_step_id=t) for t in targets],
    )


def _solution(step_id, guide_id=None):
    return Solution(
        id=step_id,
        title=f"Solution {step_id}",
        description="Do the thing.",
        guide_id=guide_id,
    )


def _guide(guide_id, brand, model, category="Repair"):
    return Guide(
        id=guide_id,
        title=f"{brand} {model} {category}",
        category=category,
        machine_brand=brand,
        machine_model=model,
        summary=f"{category} guide for {brand} {model}.",
    )


# Common test fixtures
@pytest.fixture
def question():
    """Factory: question(id, *target_ids)."""
    return _question


@pytest.fixture
def solution():
    """Factory: solution(id, guide_id=None)."""
    return _solution


@pytest.fixture
def guide():
    """Factory: guide(id, brand, model, category='Repair')."""
    return _guide


@pytest.fixture
def sample_store():
    """A fresh copy of the shipped troubleshooting tree."""
    return InMemoryStepRepository(TROUBLESHOOT_STEPS)


@pytest.fixture
def sample_catalog():
    return StaticGuideRepository(INSTRUCTION_GUIDES)


@pytest.fixture
def fallback_catalog():
    """Repair guides at every specificity level, plus one Cleaning guide."""
    return StaticGuideRepository(
        [
            _guide("gaggia-classic-repair", "Gaggia", "Classic Pro"),
            _guide("gaggia-generic-repair", "Gaggia", GENERIC),
            _guide("generic-repair", GENERIC, GENERIC),
            _guide("breville-express-repair", "Breville", "Barista Express"),
            _guide("generic-cleaning", GENERIC, GENERIC, category="Cleaning"),
        ]
    )


@pytest.fixture
def fake_llm():
    """Factory: fake_llm(reply=None, error=None)."""
    return FakeLLMProvider
