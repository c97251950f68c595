"""Study endpoints: summaries, quizzes, flashcards and document chat.

Each endpoint accepts the source material as a multipart form with either a
``text`` field or an uploaded ``file``.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from fastapi.responses import JSONResponse

from api.deps import get_assistant, get_chat_store
from lib.chat_session import ChatSessionStore
from lib.file_encoding import read_upload
from lib.models import (
    ChatMessageRequest,
    ChatMessageResponse,
    ChatStartResponse,
    FileContext,
    FlashcardResponse,
    QuizResponse,
    QuizType,
    SummaryLength,
    SummaryResponse,
    TextContext,
)
from lib.study_service import Context, StudyAssistant

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/study", tags=["study"])

MAX_ITEMS = 50


async def _build_context(text: Optional[str], file: Optional[UploadFile]) -> Context:
    """File wins over text; blank text and no file means no content."""
    if file is not None and file.filename:
        return FileContext(file=await read_upload(file))
    if text and text.strip():
        return TextContext(content=text)
    return None


@router.post("/summarize", response_model=SummaryResponse)
async def summarize(
    text: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    length: SummaryLength = Form(SummaryLength.MEDIUM),
    assistant: StudyAssistant = Depends(get_assistant),
):
    """Summarize the supplied content."""
    context = await _build_context(text, file)
    outcome = await assistant.summarize(context, length)
    return SummaryResponse(summary=outcome.value, degraded=outcome.degraded)


@router.post("/quiz", response_model=QuizResponse)
async def quiz(
    quiz_type: QuizType = Form(...),
    count: int = Form(5, ge=1, le=MAX_ITEMS),
    text: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    assistant: StudyAssistant = Depends(get_assistant),
):
    """Generate quiz questions of one type."""
    context = await _build_context(text, file)
    outcome = await assistant.generate_quiz(context, quiz_type, count)
    return QuizResponse(questions=outcome.value, degraded=outcome.degraded)


@router.post("/flashcards", response_model=FlashcardResponse)
async def flashcards(
    count: int = Form(10, ge=1, le=MAX_ITEMS),
    text: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    assistant: StudyAssistant = Depends(get_assistant),
):
    """Generate term/definition flashcards."""
    context = await _build_context(text, file)
    outcome = await assistant.generate_flashcards(context, count)
    return FlashcardResponse(flashcards=outcome.value, degraded=outcome.degraded)


@router.post("/chat", response_model=ChatStartResponse, status_code=201)
async def start_chat(
    text: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    assistant: StudyAssistant = Depends(get_assistant),
    store: ChatSessionStore = Depends(get_chat_store),
):
    """Start a chat session grounded in the supplied document."""
    context = await _build_context(text, file)
    session = await assistant.init_chat(context)
    if session is None:
        return JSONResponse(status_code=400, content={"error": "Content is required to start a chat"})

    return ChatStartResponse(session_id=store.add(session))


@router.post("/chat/{session_id}/messages", response_model=ChatMessageResponse)
async def send_chat_message(
    session_id: str,
    body: ChatMessageRequest,
    store: ChatSessionStore = Depends(get_chat_store),
):
    """Send a message to an existing chat session."""
    session = store.get(session_id)
    if session is None:
        return JSONResponse(status_code=404, content={"error": "Chat session not found"})

    try:
        reply = await session.send_message(body.message)
    except Exception:
        logger.exception("Error sending chat message for session %s", session_id)
        return JSONResponse(status_code=500, content={"error": "Failed to get a reply"})

    return ChatMessageResponse(reply=reply)


@router.delete("/chat/{session_id}", status_code=204)
async def end_chat(
    session_id: str,
    store: ChatSessionStore = Depends(get_chat_store),
):
    """Discard a chat session."""
    if not store.remove(session_id):
        return JSONResponse(status_code=404, content={"error": "Chat session not found"})
    return Response(status_code=204)
