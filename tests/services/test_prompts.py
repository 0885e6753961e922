"""
Tests for services.prompts

Test Coverage:
- Template registry: every name has a file
- snippet filter
- render(): strict variables, empty catalog wording
"""
import pytest
from jinja2 import UndefinedError

from coffee_helper.services.prompts import Template, render
from coffee_helper.services.prompts.loader import TEMPLATES_DIR, snippet


def test_every_template_has_a_file():
    assert Template.names() == ["guide_assistant"]
    assert (TEMPLATES_DIR / Template.filename(Template.GUIDE_ASSISTANT)).exists()


def test_snippet():
    assert snippet("Descale monthly", 7) == "Descale..."
    assert snippet("Short", 100) == "Short..."


def test_empty_catalog():
    prompt = render(
        Template.GUIDE_ASSISTANT,
        machine_label="DeLonghi Magnifica",
        has_image=False,
        guides=[],
        snippet_length=100,
        max_suggestions=2,
    )

    assert "No specific instruction guides available." in prompt
    assert "DeLonghi Magnifica" in prompt
    assert "Do not suggest more than 2 guides" in prompt
    assert "Guide ID:" not in prompt


def test_missing_variable_is_an_error():
    with pytest.raises(UndefinedError):
        render(Template.GUIDE_ASSISTANT, machine_label=None, has_image=False)
