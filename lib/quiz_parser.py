"""Parsing of model output into quiz questions and flashcards."""

import json
import logging
import re

from pydantic import ValidationError

from lib.models.flashcard import Flashcard
from lib.models.quiz import QuizQuestion, QuizType, BLANK_MARKER, MULTIPLE_CHOICE_OPTION_COUNT

logger = logging.getLogger(__name__)

NO_ANSWER_FOUND = "No answer found"


class ParseError(ValueError):
    """Raised when model output does not match the expected structure."""


def strip_code_fences(raw: str) -> str:
    """Remove a surrounding ```json ... ``` fence if the model added one."""
    return re.sub(r"^```(?:json)?\s*|\s*```$", "", raw.strip())


def _load_json_array(raw: str) -> list:
    try:
        data = json.loads(strip_code_fences(raw))
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise ParseError(f"Expected a JSON array, got {type(data).__name__}")
    return data


def parse_structured_quiz(raw: str, quiz_type: QuizType) -> list[QuizQuestion]:
    """
    Parse a schema-constrained JSON quiz response.

    Every item is tagged with ``quiz_type``. Multiple choice items must carry
    exactly four string options.

    Raises:
        ParseError: If the JSON is malformed, empty, or an item is missing fields
    """
    items = _load_json_array(raw)
    if not items:
        raise ParseError("Quiz response contained no questions")

    questions = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ParseError(f"Question {index} is not an object")

        options = item.get("options")
        if quiz_type == QuizType.MULTIPLE_CHOICE:
            if not isinstance(options, list) or len(options) != MULTIPLE_CHOICE_OPTION_COUNT:
                raise ParseError(
                    f"Question {index} needs {MULTIPLE_CHOICE_OPTION_COUNT} options, "
                    f"got {len(options) if isinstance(options, list) else 'none'}"
                )
        else:
            options = None

        try:
            question = QuizQuestion(
                question=item.get("question"),
                options=options,
                answer=item.get("answer"),
                type=quiz_type,
            )
        except ValidationError as e:
            raise ParseError(f"Question {index} is malformed: {e}") from e

        if quiz_type == QuizType.FILL_BLANK and BLANK_MARKER not in question.question:
            logger.warning("Fill-in-the-blank question %d has no blank marker", index)

        questions.append(question)

    return questions


def parse_free_text_quiz(raw: str) -> list[QuizQuestion]:
    """
    Best-effort parse of a plain-text quiz.

    Blocks are separated by blank lines. In each block the line starting with
    "Question:" (else the first line) is the question and the line starting
    with "Answer:" is the answer. Everything parsed here is short answer.
    """
    questions = []
    for block in raw.split("\n\n"):
        lines = block.split("\n")
        question_line = next((line for line in lines if line.startswith("Question:")), lines[0])
        answer_line = next((line for line in lines if line.startswith("Answer:")), NO_ANSWER_FOUND)

        question_text = question_line.replace("Question:", "", 1).strip()
        if not question_text:
            continue

        questions.append(QuizQuestion(
            question=question_text,
            answer=answer_line.replace("Answer:", "", 1).strip(),
            type=QuizType.SHORT_ANSWER,
        ))

    return questions


def parse_flashcards(raw: str) -> list[Flashcard]:
    """
    Parse a schema-constrained JSON flashcard response.

    Raises:
        ParseError: If the JSON is malformed or a card is missing fields
    """
    try:
        return [Flashcard.model_validate(item) for item in _load_json_array(raw)]
    except ValidationError as e:
        raise ParseError(f"Malformed flashcard: {e}") from e
