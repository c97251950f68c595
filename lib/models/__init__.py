"""Pydantic models for the study assistant and proxy endpoints."""

from .common import SummaryLength, UploadedFile, TextContext, FileContext, ContentContext
from .outcome import Outcome
from .quiz import (
    QuizType,
    QuizQuestion,
    QuizResponse,
    QUIZ_ITEM_SCHEMAS,
    quiz_response_schema,
)
from .flashcard import Flashcard, FlashcardResponse, flashcard_response_schema
from .chat import TurnRole, ChatTurn, ChatStartResponse, ChatMessageRequest, ChatMessageResponse
from .generate import GenerateResponse, SummaryResponse

__all__ = [
    # Common
    "SummaryLength",
    "UploadedFile",
    "TextContext",
    "FileContext",
    "ContentContext",
    "Outcome",
    # Quiz
    "QuizType",
    "QuizQuestion",
    "QuizResponse",
    "QUIZ_ITEM_SCHEMAS",
    "quiz_response_schema",
    # Flashcards
    "Flashcard",
    "FlashcardResponse",
    "flashcard_response_schema",
    # Chat
    "TurnRole",
    "ChatTurn",
    "ChatStartResponse",
    "ChatMessageRequest",
    "ChatMessageResponse",
    # Proxy / summary
    "GenerateResponse",
    "SummaryResponse",
]
