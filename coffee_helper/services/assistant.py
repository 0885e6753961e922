"""
Guide Assistant - LLM-backed Troubleshooting Chat

A thin prompt-templating wrapper around the LLM. The assistant sees the
whole guide catalog (id, title, category, machine, summary snippet), the
conversation so far, the user's machine and their latest message (text
and/or image), and answers with free text plus suggested guide ids.

Suggested ids that are not in the catalog are dropped before the reply
leaves this service.
"""

import logging
from typing import List, Optional, Sequence

from ..config import settings
from ..llm.interface import LLMProvider
from ..repositories.guide import GuideRepository
from ..schemas.assistant import AssistantReply
from ..state.models import MachineSelection, Message
from .prompts import Template, render

logger = logging.getLogger(__name__)

FALLBACK_REPLY = (
    "I'm sorry, I couldn't process that request. "
    "Could you try rephrasing or providing more details?"
)


class GuideAssistant:
    def __init__(
        self,
        llm_provider: LLMProvider,
        guide_catalog: GuideRepository,
        max_suggestions: int = settings.ASSISTANT_MAX_SUGGESTED_GUIDES,
        snippet_length: int = settings.GUIDE_SUMMARY_SNIPPET_LENGTH,
    ):
        self.llm = llm_provider
        self.guide_catalog = guide_catalog
        self.max_suggestions = max_suggestions
        self.snippet_length = snippet_length

    async def reply(
        self,
        message: Optional[str] = None,
        image_uri: Optional[str] = None,
        history: Sequence[Message] = (),
        machine: Optional[MachineSelection] = None,
    ) -> AssistantReply:
        """
        Runs one chat turn.

        Args:
            message: The user's latest text.
            image_uri: Optional 'data:<mimetype>;base64,<data>' image for this turn.
            history: Earlier turns, oldest first.
            machine: The user's machine, if known.

        Raises:
            ValueError: if neither a message nor an image is given.
        """
        if not message and not image_uri:
            raise ValueError("A message or an image is required.")

        messages = [{"role": "system", "content": self._build_system_prompt(machine, bool(image_uri))}]
        for msg in history:
            messages.append({"role": msg.role, "content": msg.content})
        messages.append({"role": "user", "content": self._build_user_content(message, image_uri)})

        try:
            raw = await self.llm.generate_structured_output(
                messages=messages,
                response_model=AssistantReply,
                temperature=settings.LLM_TEMPERATURE,
            )
        except Exception as e:
            logger.error(f"Guide assistant LLM call failed: {e}")
            return AssistantReply(assistant_response=FALLBACK_REPLY, suggested_guide_ids=[])

        return AssistantReply(
            assistant_response=raw.assistant_response,
            suggested_guide_ids=self.filter_guide_ids(raw.suggested_guide_ids),
        )

    def filter_guide_ids(self, guide_ids: Sequence[str]) -> List[str]:
        """Known ids only, in first occurrence order. The count is limited by the prompt."""
        kept: List[str] = []
        for guide_id in guide_ids:
            if guide_id in kept:
                continue
            if not self.guide_catalog.has_guide(guide_id):
                logger.debug(f"Dropped unknown suggested guide '{guide_id}'")
                continue
            kept.append(guide_id)
        return kept

    def _build_system_prompt(self, machine: Optional[MachineSelection], has_image: bool) -> str:
        prompt = render(
            Template.GUIDE_ASSISTANT,
            machine_label=machine.label if machine else None,
            has_image=has_image,
            guides=self.guide_catalog.list_guides(),
            snippet_length=self.snippet_length,
            max_suggestions=self.max_suggestions,
        )
        logger.debug("Built guide assistant system prompt")
        return prompt

    def _build_user_content(self, message: Optional[str], image_uri: Optional[str]):
        if not image_uri:
            return message
        parts = []
        if message:
            parts.append({"type": "text", "text": message})
        parts.append({"type": "image_url", "image_url": {"url": image_uri}})
        return parts
