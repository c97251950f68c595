"""
Gemini API Proxy - Forwards raw prompts to Google's Gemini API.

Backs the /api/generate-content endpoint: the literal prompt is sent with no
system instruction, no schema and no file parts.
"""

from typing import Optional

from lib.providers import AIProvider, GoogleProvider


class GeminiProxy:
    """Proxy for plain-text Gemini generation requests."""

    DEFAULT_MODEL = "gemini-pro"

    def __init__(self, provider: AIProvider):
        """
        Initialize the Gemini proxy.

        Args:
            provider: Provider used for every forwarded prompt
        """
        self.provider = provider

    @classmethod
    def create(
        cls,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        timeout: float = 60.0,
    ) -> "GeminiProxy":
        """Build a proxy backed by its own GoogleProvider."""
        return cls(GoogleProvider(api_key=api_key, model=model, timeout=timeout))

    async def generate_content(self, prompt: str) -> str:
        """
        Generate content for a prompt.

        Args:
            prompt: The text prompt to send

        Returns:
            Generated text response

        Raises:
            ProviderError: If the API returns an error or no text
            httpx.HTTPError: On transport failures
        """
        result = await self.provider.generate(prompt)
        return result.text

    async def close(self):
        """Close the underlying provider."""
        await self.provider.close()
