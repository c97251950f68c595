"""Google Gemini provider implementation."""

import logging
import httpx
from typing import Optional

from .base import AIProvider, GenerationConfig, GenerationResult, ProviderError

logger = logging.getLogger(__name__)


class GoogleProvider(AIProvider):
    """Provider for Google's Gemini models over the REST API."""

    PROVIDER_NAME = "google"

    BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"

    # Retired or shorthand model names mapped to live API model IDs
    MODEL_MAP = {
        "gemini-pro": "gemini-2.5-pro",
        "gemini-flash": "gemini-2.5-flash",
        "gemini-2.5-pro": "gemini-2.5-pro",
        "gemini-2.5-flash": "gemini-2.5-flash",
    }

    DEFAULT_MODEL = "gemini-2.5-flash"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        timeout: float = 60.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(api_key)
        self.model = self.MODEL_MAP.get(model, model)
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def generate(
        self,
        prompt: str,
        config: Optional[GenerationConfig] = None,
    ) -> GenerationResult:
        """Generate text from a plain prompt."""
        return await self.generate_with_parts([{"text": prompt}], config)

    async def generate_with_parts(
        self,
        parts: list[dict],
        config: Optional[GenerationConfig] = None,
    ) -> GenerationResult:
        """Generate text from text and inline file parts."""
        return await self._post([{"role": "user", "parts": parts}], config)

    async def generate_chat(
        self,
        history: list[dict],
        config: Optional[GenerationConfig] = None,
    ) -> GenerationResult:
        """Generate the next model turn for a conversation history."""
        return await self._post(history, config)

    async def _post(
        self,
        contents: list[dict],
        config: Optional[GenerationConfig],
    ) -> GenerationResult:
        if not self.api_key:
            raise ValueError("API_KEY not configured")

        config = config or GenerationConfig()
        url = f"{self.BASE_URL}/{self.model}:generateContent"

        request_body = self._build_request_body(contents=contents, config=config)

        response = await self._client.post(
            url,
            params={"key": self.api_key},
            json=request_body,
            headers={"Content-Type": "application/json"},
        )

        text, usage = self._parse_response(response)
        return GenerationResult(
            text=text,
            model=self.model,
            provider=self.PROVIDER_NAME,
            usage=usage,
        )

    def _build_request_body(
        self,
        contents: list[dict],
        config: GenerationConfig,
    ) -> dict:
        """Build the Gemini API request body."""
        body = {"contents": contents}

        if config.schema:
            body["generationConfig"] = {
                "responseMimeType": "application/json",
                "responseSchema": config.schema,
            }

        if config.system_instruction:
            body["systemInstruction"] = {"parts": [{"text": config.system_instruction}]}

        return body

    def _parse_response(self, response: httpx.Response) -> tuple[str, dict]:
        """Parse Gemini API response and extract text plus usage metadata."""
        if response.status_code != 200:
            message = f"Gemini API returned HTTP {response.status_code}"
            try:
                error_data = response.json()
            except ValueError:
                error_data = None
            if isinstance(error_data, dict) and isinstance(error_data.get("error"), dict):
                message = f"Gemini API error: {error_data['error'].get('message', 'Unknown error')}"
            logger.warning(message)
            raise ProviderError(message, status_code=response.status_code)

        data = response.json()

        if "error" in data:
            error = data["error"]
            detail = error.get("message", "Unknown error") if isinstance(error, dict) else error
            raise ProviderError(f"Gemini API error: {detail}")

        candidates = data.get("candidates", [])
        if not candidates:
            raise ProviderError("Gemini API returned no candidates")

        parts = candidates[0].get("content", {}).get("parts", [])
        if not parts:
            raise ProviderError("Gemini API returned no content")

        texts = [part["text"] for part in parts if part.get("text") is not None]
        if not texts:
            raise ProviderError("Gemini API returned no text")

        return "".join(texts), data.get("usageMetadata", {})

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
