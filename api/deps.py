"""FastAPI dependencies resolving the shared clients built at start-up."""

from fastapi import Request

from lib.chat_session import ChatSessionStore
from lib.gemini_proxy import GeminiProxy
from lib.study_service import StudyAssistant


def get_proxy(request: Request) -> GeminiProxy:
    return request.app.state.proxy


def get_assistant(request: Request) -> StudyAssistant:
    return request.app.state.assistant


def get_chat_store(request: Request) -> ChatSessionStore:
    return request.app.state.chat_store
