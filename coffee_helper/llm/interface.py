from abc import ABC, abstractmethod
from typing import List, Type, TypeVar

from pydantic import BaseModel

# Generic type variable for the Pydantic model expected in structured responses.
T = TypeVar("T", bound=BaseModel)

class LLMProvider(ABC):
    """
    Abstract Base Class interface that defines the contract for any LLM provider
    (OpenAI, Gemini, Local LLaMA, etc.)
    """

    @abstractmethod
    async def generate_structured_output(
        self,
        messages: List[dict],
        response_model: Type[T],
        temperature: float = 0.0
    ) -> T:
        """
        Generates a response from the LLM strictly matching the Pydantic 'response_model'.

        Messages use the OpenAI chat format; a message's content may be a list
        of parts (text and image_url) for multimodal input.
        """
        pass
