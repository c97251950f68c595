"""Models and response schema for flashcard generation."""

from pydantic import BaseModel, Field


class Flashcard(BaseModel):
    """A term/definition pair."""
    term: str = Field(..., description="Key term or concept for the front of the card")
    definition: str = Field(..., description="Explanation for the back of the card")


class FlashcardResponse(BaseModel):
    """Response from /api/study/flashcards."""
    flashcards: list[Flashcard] = Field(..., description="Generated flashcards")
    degraded: bool = Field(False, description="True when flashcards are a fallback result")


def flashcard_response_schema(count: int) -> dict:
    """Array schema requesting ``count`` term/definition objects."""
    return {
        "type": "array",
        "description": f"An array of {count} flashcards, each with a term and a definition.",
        "items": {
            "type": "object",
            "properties": {
                "term": {
                    "type": "string",
                    "description": "The key term or concept for the front of the flashcard.",
                },
                "definition": {
                    "type": "string",
                    "description": "The definition or explanation for the back of the flashcard.",
                },
            },
            "required": ["term", "definition"],
        },
    }
