"""Test doubles for the model provider."""

import asyncio
from typing import Optional, Union

from lib.providers import AIProvider, GenerationConfig, GenerationResult


class FakeProvider(AIProvider):
    """Provider that replays scripted replies and records every call.

    Each reply is either the text to return or an exception to raise.
    """

    PROVIDER_NAME = "fake"

    def __init__(self, replies: Optional[list[Union[str, Exception]]] = None):
        super().__init__(api_key="test-key")
        self.model = "fake-model"
        self.replies = list(replies or [])
        self.calls: list[dict] = []
        self.closed = False

    async def _next(self, method: str, payload, config: Optional[GenerationConfig]) -> GenerationResult:
        # Yield once so concurrent callers interleave like real network calls
        await asyncio.sleep(0)
        self.calls.append({"method": method, "payload": payload, "config": config or GenerationConfig()})
        if not self.replies:
            raise AssertionError(f"Unexpected {method} call")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return GenerationResult(text=reply, model=self.model, provider=self.PROVIDER_NAME)

    async def generate(self, prompt, config=None):
        return await self._next("generate", prompt, config)

    async def generate_with_parts(self, parts, config=None):
        return await self._next("generate_with_parts", parts, config)

    async def generate_chat(self, history, config=None):
        return await self._next("generate_chat", history, config)

    async def close(self):
        self.closed = True
