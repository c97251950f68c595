"""Document-grounded chat sessions and their in-memory registry."""

import asyncio
import logging
import uuid
from collections import OrderedDict
from typing import Optional, Protocol

from lib.models.chat import ChatTurn, TurnRole
from lib.providers import AIProvider, GenerationConfig

logger = logging.getLogger(__name__)


class ChatHandle(Protocol):
    """Anything that can answer a chat message."""

    async def send_message(self, text: str) -> str:
        ...


class ChatSession:
    """
    A conversation seeded with priming turns and a system instruction.

    The full history is sent on every turn. A user turn is only recorded once
    the model has answered it, so a failed call leaves the history unchanged.
    Messages on one session are answered one at a time, in arrival order.
    """

    def __init__(
        self,
        provider: AIProvider,
        history: list[ChatTurn],
        system_instruction: Optional[str] = None,
    ):
        self.provider = provider
        self.history = list(history)
        self.system_instruction = system_instruction
        self._lock = asyncio.Lock()

    async def send_message(self, text: str) -> str:
        """
        Send a user message and return the model's reply.

        Raises:
            ProviderError: If the model call fails
            httpx.HTTPError: On transport failures
        """
        user_turn = ChatTurn(role=TurnRole.USER, parts=[{"text": text}])

        async with self._lock:
            contents = [turn.to_content() for turn in self.history]
            contents.append(user_turn.to_content())

            result = await self.provider.generate_chat(
                contents,
                GenerationConfig(system_instruction=self.system_instruction),
            )

            self.history.append(user_turn)
            self.history.append(ChatTurn(role=TurnRole.MODEL, parts=[{"text": result.text}]))
        return result.text


class ChatSessionStore:
    """In-memory chat sessions keyed by id; the oldest is evicted past max_sessions."""

    def __init__(self, max_sessions: int = 1000):
        self._sessions: OrderedDict[str, ChatHandle] = OrderedDict()
        self.max_sessions = max_sessions

    def add(self, session: ChatHandle) -> str:
        """Register a session and return its id."""
        session_id = uuid.uuid4().hex
        self._sessions[session_id] = session
        while len(self._sessions) > self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("Evicted chat session %s", evicted)
        return session_id

    def get(self, session_id: str) -> Optional[ChatHandle]:
        return self._sessions.get(session_id)

    def remove(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)
