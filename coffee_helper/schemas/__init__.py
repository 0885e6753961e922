"""
Schemas - Structured Output Models for LLM Responses

Defines Pydantic models used for structured LLM outputs, ensuring
predictable and parseable results from the GuideAssistant.
"""

from coffee_helper.schemas.assistant import AssistantReply

__all__ = [
    "AssistantReply",
]
