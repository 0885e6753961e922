"""
Prompt template loader.

Renders the assistant's jinja2 templates. Templates are plain text (no
HTML escaping) and strict: a variable missing from the context is an error
rather than an empty string.

Filters available to templates:
    snippet(length): the first `length` characters of a text, followed by "..."
"""

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .templates import Template

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _check_templates_exist():
    """Every Template name must have a file. Fails fast at import."""
    missing = [
        name for name in Template.names()
        if not (TEMPLATES_DIR / Template.filename(name)).exists()
    ]
    if missing:
        raise FileNotFoundError(f"Prompt templates missing in {TEMPLATES_DIR}: {missing}")


_check_templates_exist()


def snippet(text: str, length: int) -> str:
    return f"{text[:length]}..."


@lru_cache(maxsize=1)
def _get_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=False,
    )
    env.filters["snippet"] = snippet
    return env


def render(template_name: str, **context) -> str:
    """
    Render a prompt template.

    Args:
        template_name: A Template constant (no file extension).
        **context: Template variables; all referenced variables are required.
    """
    template = _get_environment().get_template(Template.filename(template_name))
    return template.render(**context).strip()
