"""Models and response schemas for quiz generation."""

from enum import Enum
from typing import Callable, Optional
from pydantic import BaseModel, Field


class QuizType(str, Enum):
    """Types of quiz questions."""
    MULTIPLE_CHOICE = "multiple_choice"
    FILL_BLANK = "fill_blank"
    SHORT_ANSWER = "short_answer"

    @property
    def label(self) -> str:
        """Human-readable name used inside prompts."""
        return QUIZ_TYPE_LABELS[self]


QUIZ_TYPE_LABELS = {
    QuizType.MULTIPLE_CHOICE: "Multiple-Choice",
    QuizType.FILL_BLANK: "Fill-in-the-Blanks",
    QuizType.SHORT_ANSWER: "Short Answer",
}

MULTIPLE_CHOICE_OPTION_COUNT = 4
BLANK_MARKER = "_____"


class QuizQuestion(BaseModel):
    """A generated quiz question."""
    question: str = Field(..., description="The question text")
    options: Optional[list[str]] = Field(None, description="Answer choices for multiple choice")
    answer: str = Field(..., description="The correct answer")
    type: QuizType = Field(..., description="Question type")


class QuizResponse(BaseModel):
    """Response from /api/study/quiz."""
    questions: list[QuizQuestion] = Field(..., description="Generated questions")
    degraded: bool = Field(False, description="True when questions are a fallback result")


# ---------------------------------------------------------------------------
# Structured output schemas
# ---------------------------------------------------------------------------

def _base_properties() -> dict:
    return {
        "question": {"type": "string", "description": "The question."},
        "answer": {"type": "string", "description": "The correct answer."},
    }


def multiple_choice_item_schema() -> dict:
    """Schema for one multiple choice question: question, 4 options, answer."""
    properties = _base_properties()
    properties["options"] = {
        "type": "array",
        "description": f"An array of {MULTIPLE_CHOICE_OPTION_COUNT} multiple choice options.",
        "items": {"type": "string"},
    }
    return {
        "type": "object",
        "properties": properties,
        "required": ["question", "options", "answer"],
    }


def fill_blank_item_schema() -> dict:
    """Schema for one fill-in-the-blank question."""
    properties = _base_properties()
    properties["question"]["description"] = f'The question, with "{BLANK_MARKER}" marking the blank.'
    return {
        "type": "object",
        "properties": properties,
        "required": ["question", "answer"],
    }


def short_answer_item_schema() -> dict:
    """Schema for one short answer question."""
    return {
        "type": "object",
        "properties": _base_properties(),
        "required": ["question", "answer"],
    }


QUIZ_ITEM_SCHEMAS: dict[QuizType, Callable[[], dict]] = {
    QuizType.MULTIPLE_CHOICE: multiple_choice_item_schema,
    QuizType.FILL_BLANK: fill_blank_item_schema,
    QuizType.SHORT_ANSWER: short_answer_item_schema,
}


def quiz_response_schema(quiz_type: QuizType, count: int) -> dict:
    """Array schema requesting ``count`` questions of ``quiz_type``."""
    return {
        "type": "array",
        "description": f"An array of {count} quiz questions.",
        "items": QUIZ_ITEM_SCHEMAS[quiz_type](),
    }
