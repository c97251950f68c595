"""Prompt templates for the study assistant."""

from typing import Union

from lib.file_encoding import encode_file
from lib.models.common import SummaryLength, TextContext, FileContext
from lib.models.quiz import QuizType, BLANK_MARKER, MULTIPLE_CHOICE_OPTION_COUNT


SUMMARY_LENGTH_PHRASES = {
    SummaryLength.SHORT: "a short summary of 2-3 sentences",
    SummaryLength.MEDIUM: "a medium-length summary of one or two paragraphs",
    SummaryLength.DETAILED: "a detailed summary covering every major section",
}

CHAT_SYSTEM_INSTRUCTION = (
    "You are an AI study assistant. Your knowledge is strictly limited to the document "
    "provided in the initial history. Answer all subsequent user questions based only on "
    "that document. Do not use external knowledge."
)

CHAT_DOCUMENT_INTRO = "Use the following document for this chat session:"
CHAT_ACKNOWLEDGEMENT = "Okay, I have the document. Ask me anything about it."

QUIZ_FREE_TEXT_SUFFIX = "Return the response as a simple text string, not JSON. I will parse it myself."


def build_summary_prompt(length: SummaryLength) -> str:
    """Instruction prefix for a summary of the requested length."""
    return (
        f"You are an expert summarizer. Based on the following content, provide "
        f"{SUMMARY_LENGTH_PHRASES[length]}. Focus on the key points and main ideas."
    )


def build_quiz_prompt(quiz_type: QuizType, count: int) -> str:
    """Instruction prefix for a quiz of ``count`` questions of one type."""
    return f"""Based on the following content, generate a quiz with exactly {count} {quiz_type.label} questions.
- For Multiple-Choice, provide {MULTIPLE_CHOICE_OPTION_COUNT} options.
- For Fill-in-the-Blanks, use "{BLANK_MARKER}" to indicate the blank.
- For all types, provide the correct answer."""


def build_quiz_free_text_prompt(quiz_type: QuizType, count: int) -> str:
    """Quiz prefix for the unstructured retry, asking for plain text."""
    return f"{build_quiz_prompt(quiz_type, count)}\n\n{QUIZ_FREE_TEXT_SUFFIX}"


def build_flashcard_prompt(count: int) -> str:
    """Instruction prefix for ``count`` term/definition flashcards."""
    return (
        f"Based on the following content, generate exactly {count} flashcards. "
        "Each flashcard should have a 'term' (a key concept or name) and a 'definition' "
        "(a concise explanation of the term)."
    )


def build_contents(
    context: Union[TextContext, FileContext],
    prefix: str,
) -> Union[str, list[dict]]:
    """
    Attach the source material to an instruction prefix.

    Returns:
        A single prompt string for text, or [prefix part, file part] for files
    """
    if isinstance(context, TextContext):
        return f'{prefix} Text: "{context.content}"'
    return [{"text": prefix}, encode_file(context.file)]


def build_chat_seed_parts(context: Union[TextContext, FileContext]) -> list[dict]:
    """Parts of the priming user turn that hands the document to the model."""
    if isinstance(context, TextContext):
        return [{"text": f"{CHAT_DOCUMENT_INTRO}\n\n{context.content}"}]
    return [{"text": CHAT_DOCUMENT_INTRO}, encode_file(context.file)]
