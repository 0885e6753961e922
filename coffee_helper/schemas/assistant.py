"""
Schemas - Structured Output Models for LLM Responses

This module defines Pydantic models used for structured LLM outputs.
These schemas enforce strict JSON formatting on LLM responses, ensuring
predictable and parseable results from the GuideAssistant.
"""
from typing import List
from pydantic import BaseModel, Field

class AssistantReply(BaseModel):
    """
    The strict JSON structure the LLM must generate for every chat turn.
    """
    assistant_response: str = Field(
        ...,
        description="The natural language response to show the user. Be helpful, clear, and safe."
    )
    suggested_guide_ids: List[str] = Field(
        default_factory=list,
        description="IDs of highly relevant instruction guides. Every ID must exist in the provided guide list."
    )
