"""Models for document-grounded chat."""

from enum import Enum
from pydantic import BaseModel, Field


class TurnRole(str, Enum):
    """Role of a turn in the model's conversation history."""
    USER = "user"
    MODEL = "model"


class ChatTurn(BaseModel):
    """One turn of chat history in Gemini's content format."""
    role: TurnRole = Field(..., description="Who produced the turn")
    parts: list[dict] = Field(..., description="Text and inline_data parts")

    def to_content(self) -> dict:
        """Render as a Gemini ``contents`` entry."""
        return {"role": self.role.value, "parts": self.parts}


class ChatStartResponse(BaseModel):
    """Response from starting a chat session."""
    session_id: str = Field(..., description="Identifier for follow-up messages")


class ChatMessageRequest(BaseModel):
    """Request body for sending a chat message."""
    message: str = Field(..., min_length=1, description="User's message")


class ChatMessageResponse(BaseModel):
    """Response to a chat message."""
    reply: str = Field(..., description="Model's answer")
