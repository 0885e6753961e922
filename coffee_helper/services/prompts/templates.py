"""
Prompt template names.

Each name maps to `<name>.jinja2` in the templates directory.
"""

from typing import List

TEMPLATE_SUFFIX = ".jinja2"


class Template:
    """Template name constants. Use these instead of raw strings."""

    # System prompt for the guide assistant chat
    GUIDE_ASSISTANT = "guide_assistant"

    @classmethod
    def names(cls) -> List[str]:
        return [
            value
            for key, value in vars(cls).items()
            if key.isupper() and isinstance(value, str)
        ]

    @staticmethod
    def filename(name: str) -> str:
        return f"{name}{TEMPLATE_SUFFIX}"
