"""
Study assistant - summaries, chat, quizzes and flashcards over user content.

Each operation shapes a prompt around the user's text or file, calls the
model provider and turns the reply into an Outcome. Model failures are logged
and replaced by placeholder values rather than raised, except for chat
session creation.
"""

import logging
from typing import Optional

from lib.chat_session import ChatSession
from lib.config import load_settings
from lib.models.chat import ChatTurn, TurnRole
from lib.models.common import ContentContext, SummaryLength
from lib.models.flashcard import Flashcard, flashcard_response_schema
from lib.models.outcome import Outcome
from lib.models.quiz import QuizQuestion, QuizType, quiz_response_schema
from lib.prompt_templates import (
    CHAT_ACKNOWLEDGEMENT,
    CHAT_SYSTEM_INSTRUCTION,
    build_chat_seed_parts,
    build_contents,
    build_flashcard_prompt,
    build_quiz_free_text_prompt,
    build_quiz_prompt,
    build_summary_prompt,
)
from lib.providers import AIProvider, GenerationConfig, GenerationResult, GoogleProvider
from lib.quiz_parser import parse_flashcards, parse_free_text_quiz, parse_structured_quiz

logger = logging.getLogger(__name__)

# None means no content was supplied
Context = Optional[ContentContext]

NO_CONTENT_SUMMARY = "Please provide some content to summarize."
SUMMARY_FAILED = "Sorry, I couldn't generate a summary. Please try again."
QUIZ_FAILED = "Failed to generate quiz questions. The AI might be busy. Please try again later."
FLASHCARDS_FAILED = "Failed to generate flashcards. The AI might be busy. Please try again."


class StudyAssistant:
    """Prompt orchestration for the four study operations."""

    def __init__(self, provider: AIProvider):
        """
        Args:
            provider: Shared model provider used by every operation
        """
        self.provider = provider

    @classmethod
    def from_env(cls) -> "StudyAssistant":
        """
        Build an assistant backed by Gemini using environment settings.

        Raises:
            ConfigError: If API_KEY is not set
        """
        settings = load_settings()
        return cls(GoogleProvider(
            api_key=settings.api_key,
            model=settings.study_model,
            timeout=settings.request_timeout,
        ))

    async def _request(
        self,
        context: ContentContext,
        prefix: str,
        config: Optional[GenerationConfig] = None,
    ) -> GenerationResult:
        contents = build_contents(context, prefix)
        if isinstance(contents, str):
            return await self.provider.generate(contents, config)
        return await self.provider.generate_with_parts(contents, config)

    async def summarize(self, context: Context, length: SummaryLength) -> Outcome[str]:
        """Summarize the content at the requested length."""
        if context is None:
            return Outcome.fallback(NO_CONTENT_SUMMARY)

        try:
            result = await self._request(context, build_summary_prompt(length))
            return Outcome.ok(result.text)
        except Exception as e:
            logger.exception("Error generating summary")
            return Outcome.fallback(SUMMARY_FAILED, error=str(e))

    async def init_chat(self, context: Context) -> Optional[ChatSession]:
        """
        Start a chat session grounded in the content.

        Returns None when no content is supplied. Errors are not caught.
        """
        if context is None:
            return None

        history = [
            ChatTurn(role=TurnRole.USER, parts=build_chat_seed_parts(context)),
            ChatTurn(role=TurnRole.MODEL, parts=[{"text": CHAT_ACKNOWLEDGEMENT}]),
        ]
        return ChatSession(self.provider, history, system_instruction=CHAT_SYSTEM_INSTRUCTION)

    async def generate_quiz(
        self,
        context: Context,
        quiz_type: QuizType,
        count: int,
    ) -> Outcome[list[QuizQuestion]]:
        """
        Generate ``count`` questions of ``quiz_type``.

        Tries a schema-constrained request first, then a plain-text request
        parsed heuristically, and finally returns a single sentinel question.
        The result is never empty when content is supplied.
        """
        if context is None:
            return Outcome.fallback([])

        config = GenerationConfig(schema=quiz_response_schema(quiz_type, count))
        try:
            result = await self._request(context, build_quiz_prompt(quiz_type, count), config)
            return Outcome.ok(parse_structured_quiz(result.text, quiz_type))
        except Exception as e:
            logger.exception("Error generating quiz")
            error = str(e)

        try:
            result = await self._request(context, build_quiz_free_text_prompt(quiz_type, count))
            questions = parse_free_text_quiz(result.text)
            if questions:
                return Outcome.fallback(questions, error=error)
            logger.warning("Fallback quiz generation returned no parsable questions")
        except Exception as e:
            logger.exception("Fallback quiz generation failed")
            error = str(e)

        sentinel = QuizQuestion(question=QUIZ_FAILED, answer="", type=quiz_type)
        return Outcome.fallback([sentinel], error=error)

    async def generate_flashcards(self, context: Context, count: int) -> Outcome[list[Flashcard]]:
        """Generate ``count`` term/definition flashcards."""
        if context is None:
            return Outcome.fallback([])

        config = GenerationConfig(schema=flashcard_response_schema(count))
        try:
            result = await self._request(context, build_flashcard_prompt(count), config)
            return Outcome.ok(parse_flashcards(result.text))
        except Exception as e:
            logger.exception("Error generating flashcards")
            return Outcome.fallback([Flashcard(term="Error", definition=FLASHCARDS_FAILED)], error=str(e))

    async def close(self):
        await self.provider.close()
