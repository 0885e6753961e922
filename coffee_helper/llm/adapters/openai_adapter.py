import logging
from typing import List, Type, TypeVar

from openai import AsyncOpenAI
from pydantic import BaseModel

from ..interface import LLMProvider
from ...config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

class OpenAIAdapter(LLMProvider):
    """
    Structured output through OpenAI's parse endpoint. Supports image
    content parts, so the model must be vision-capable (gpt-4o by default).
    """

    def __init__(self, api_key: str, model_name: str = settings.OPENAI_MODEL):
        self.client = AsyncOpenAI(api_key=api_key)
        self.model_name = model_name

    async def generate_structured_output(
        self,
        messages: List[dict],
        response_model: Type[T],
        temperature: float = 0.0
    ) -> T:
        logger.debug(
            f"Requesting {response_model.__name__} from {self.model_name} "
            f"({len(messages)} messages)"
        )
        completion = await self.client.beta.chat.completions.parse(
            model=self.model_name,
            messages=messages,
            response_format=response_model,
            temperature=temperature,
        )

        message = completion.choices[0].message
        if message.parsed is None:
            # Refusals come back as text instead of a parsed object
            logger.warning(f"{self.model_name} returned no structured output: {message.refusal}")
            raise ValueError(f"No structured output returned by {self.model_name}.")
        return message.parsed
