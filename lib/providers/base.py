"""Base class for AI providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional


class ProviderError(Exception):
    """Raised when the model API fails or returns an unusable response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class GenerationConfig:
    """Per-request options: structured output schema and system instruction."""
    schema: Optional[dict] = None
    system_instruction: Optional[str] = None


@dataclass
class GenerationResult:
    """Result from a generation request."""
    text: str
    model: str
    provider: str
    usage: dict = field(default_factory=dict)


class AIProvider(ABC):
    """Abstract base class for AI providers."""

    PROVIDER_NAME: str = "base"

    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key
        self._client = None

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        config: Optional[GenerationConfig] = None,
    ) -> GenerationResult:
        """
        Generate text from a single text prompt.

        Args:
            prompt: The text prompt
            config: Optional generation configuration

        Returns:
            GenerationResult with the response
        """
        pass

    @abstractmethod
    async def generate_with_parts(
        self,
        parts: list[dict],
        config: Optional[GenerationConfig] = None,
    ) -> GenerationResult:
        """
        Generate text from a multipart user message.

        Args:
            parts: Ordered list of {"text": ...} and {"inline_data": ...} parts
            config: Optional generation configuration

        Returns:
            GenerationResult with the response
        """
        pass

    @abstractmethod
    async def generate_chat(
        self,
        history: list[dict],
        config: Optional[GenerationConfig] = None,
    ) -> GenerationResult:
        """
        Generate the next model turn for a conversation.

        Args:
            history: Turns as {"role": "user" | "model", "parts": [...]},
                ending with the user turn to answer
            config: Optional generation configuration

        Returns:
            GenerationResult with the response
        """
        pass

    @abstractmethod
    async def close(self):
        """Close any open connections."""
        pass
