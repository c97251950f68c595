"""
Study Assistant Server - FastAPI application fronting the Gemini API.

Provides:
- Prompt proxy (POST /api/generate-content)
- Summaries, quizzes, flashcards and document chat (/api/study/*)
- The pre-built browser UI, with index.html as the single-page-app fallback
"""

from contextlib import asynccontextmanager
from pathlib import Path
import logging
import os
import sys

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
import uvicorn

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from api import generate, study
from lib.chat_session import ChatSessionStore
from lib.config import ConfigError, load_settings
from lib.gemini_proxy import GeminiProxy
from lib.providers import GoogleProvider
from lib.study_service import StudyAssistant

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

SERVICE_NAME = "study-assistant"
VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared Gemini clients at startup and close them on shutdown."""
    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error(str(e))
        raise SystemExit(1)

    logging.getLogger().setLevel(settings.log_level)

    app.state.static_dir = settings.static_dir
    app.state.proxy = GeminiProxy.create(
        api_key=settings.api_key,
        model=settings.proxy_model,
        timeout=settings.request_timeout,
    )
    app.state.assistant = StudyAssistant(GoogleProvider(
        api_key=settings.api_key,
        model=settings.study_model,
        timeout=settings.request_timeout,
    ))
    app.state.chat_store = ChatSessionStore(max_sessions=settings.chat_session_limit)
    logger.info(
        "Ready (study model=%s, proxy model=%s, static dir=%s)",
        app.state.assistant.provider.model,
        app.state.proxy.provider.model,
        settings.static_dir,
    )

    yield

    logger.info("Shutting down...")
    await app.state.proxy.close()
    await app.state.assistant.close()


app = FastAPI(
    title="Study Assistant Server",
    description="Gemini-backed summaries, chat, quizzes and flashcards",
    version=VERSION,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(generate.router)
app.include_router(study.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": VERSION,
    }


def resolve_static_file(static_dir: Path, path: str) -> Path | None:
    """Return the file to serve for ``path``: the file itself, else index.html."""
    root = static_dir.resolve()
    candidate = (root / path).resolve()
    if path and candidate.is_relative_to(root) and candidate.is_file():
        return candidate

    index = root / "index.html"
    if index.is_file():
        return index
    return None


# Registered last so API routes take precedence
@app.get("/{full_path:path}", include_in_schema=False)
async def serve_static(full_path: str, request: Request):
    """Serve built UI assets, falling back to index.html for client-side routes."""
    static_dir = Path(getattr(request.app.state, "static_dir", os.getenv("STATIC_DIR", "dist")))
    file_path = resolve_static_file(static_dir, full_path)
    if file_path is None:
        return JSONResponse(status_code=404, content={"error": "Not found"})
    return FileResponse(file_path)


def main():
    """Run the server with uvicorn; exits with status 1 when API_KEY is missing."""
    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info("Server listening on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
