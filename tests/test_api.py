"""
Tests for Study Assistant Server API endpoints.

Uses pytest and FastAPI's TestClient; model calls are served by FakeProvider
through dependency overrides.
"""

import json
import pytest
from fastapi.testclient import TestClient
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from api.deps import get_assistant, get_chat_store, get_proxy
from api.index import app
from fakes import FakeProvider
from lib.chat_session import ChatSessionStore
from lib.gemini_proxy import GeminiProxy
from lib.providers import ProviderError
from lib.study_service import StudyAssistant


@pytest.fixture
def provider():
    """Scriptable provider shared by the proxy and the assistant."""
    return FakeProvider()


@pytest.fixture
def client(provider):
    """Create a test client with the Gemini clients replaced by FakeProvider."""
    store = ChatSessionStore(max_sessions=10)
    app.dependency_overrides[get_proxy] = lambda: GeminiProxy(provider)
    app.dependency_overrides[get_assistant] = lambda: StudyAssistant(provider)
    app.dependency_overrides[get_chat_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealthEndpoint:
    """Tests for /health endpoint."""

    def test_health_returns_200(self, client):
        """Health check should return 200 OK."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_returns_status(self, client):
        """Health check should return healthy status."""
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["service"] == "study-assistant"
        assert "version" in data


class TestGenerateContentEndpoint:
    """Tests for /api/generate-content endpoint."""

    def test_requires_prompt(self, client, provider):
        """Missing prompt should return 400 without calling the model."""
        response = client.post("/api/generate-content", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "Prompt is required"}
        assert provider.calls == []

    def test_rejects_empty_prompt(self, client):
        """Empty prompt should return 400."""
        response = client.post("/api/generate-content", json={"prompt": ""})
        assert response.status_code == 400

    def test_rejects_non_string_prompt(self, client, provider):
        """A prompt that is not a string gets the same 400 body."""
        response = client.post("/api/generate-content", json={"prompt": 5})
        assert response.status_code == 400
        assert response.json() == {"error": "Prompt is required"}
        assert provider.calls == []

    def test_rejects_malformed_json(self, client):
        """An unparsable body gets the same 400 body."""
        response = client.post(
            "/api/generate-content",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Prompt is required"}

    def test_rejects_non_object_body(self, client):
        """A JSON body that is not an object gets the same 400 body."""
        response = client.post("/api/generate-content", json=["x"])
        assert response.status_code == 400
        assert response.json() == {"error": "Prompt is required"}

    def test_returns_model_text(self, client, provider):
        """Successful generation returns the model text."""
        provider.replies.append("Hello from the model")
        response = client.post("/api/generate-content", json={"prompt": "x"})
        assert response.status_code == 200
        assert response.json() == {"text": "Hello from the model"}
        call = provider.calls[0]
        assert call["method"] == "generate"
        assert call["payload"] == "x"
        assert call["config"].schema is None
        assert call["config"].system_instruction is None

    def test_model_failure_returns_500(self, client, provider):
        """Model errors should map to a generic 500."""
        provider.replies.append(ProviderError("Gemini API returned HTTP 503", status_code=503))
        response = client.post("/api/generate-content", json={"prompt": "x"})
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate content"}


class TestSummarizeEndpoint:
    """Tests for /api/study/summarize endpoint."""

    def test_summarize_text(self, client, provider):
        provider.replies.append("Short summary.")
        response = client.post(
            "/api/study/summarize",
            data={"text": "Some lecture notes", "length": "short"},
        )
        assert response.status_code == 200
        assert response.json() == {"summary": "Short summary.", "degraded": False}

    def test_summarize_file(self, client, provider):
        provider.replies.append("File summary.")
        response = client.post(
            "/api/study/summarize",
            files={"file": ("notes.txt", b"plain notes", "text/plain")},
        )
        assert response.status_code == 200
        assert response.json()["summary"] == "File summary."
        call = provider.calls[0]
        assert call["method"] == "generate_with_parts"
        assert call["payload"][1]["inline_data"]["mime_type"] == "text/plain"

    def test_summarize_without_content(self, client, provider):
        response = client.post("/api/study/summarize", data={"text": "   "})
        assert response.status_code == 200
        data = response.json()
        assert data["degraded"] is True
        assert data["summary"] == "Please provide some content to summarize."
        assert provider.calls == []

    def test_summarize_invalid_length(self, client):
        response = client.post("/api/study/summarize", data={"text": "notes", "length": "epic"})
        assert response.status_code == 422


class TestQuizEndpoint:
    """Tests for /api/study/quiz endpoint."""

    def test_quiz_multiple_choice(self, client, provider):
        provider.replies.append(json.dumps([
            {"question": "Q1?", "options": ["a", "b", "c", "d"], "answer": "a"},
        ]))
        response = client.post(
            "/api/study/quiz",
            data={"text": "notes", "quiz_type": "multiple_choice", "count": "1"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["degraded"] is False
        assert data["questions"][0]["options"] == ["a", "b", "c", "d"]
        assert data["questions"][0]["type"] == "multiple_choice"

    def test_quiz_sentinel_on_failure(self, client, provider):
        provider.replies.extend([ProviderError("down"), ProviderError("down")])
        response = client.post(
            "/api/study/quiz",
            data={"text": "notes", "quiz_type": "short_answer", "count": "3"},
        )
        data = response.json()
        assert data["degraded"] is True
        assert len(data["questions"]) == 1
        assert data["questions"][0]["answer"] == ""

    def test_quiz_count_bounds(self, client):
        response = client.post(
            "/api/study/quiz",
            data={"text": "notes", "quiz_type": "short_answer", "count": "0"},
        )
        assert response.status_code == 422

    def test_quiz_requires_type(self, client):
        response = client.post("/api/study/quiz", data={"text": "notes"})
        assert response.status_code == 422


class TestFlashcardsEndpoint:
    """Tests for /api/study/flashcards endpoint."""

    def test_flashcards(self, client, provider):
        provider.replies.append(json.dumps([{"term": "Cell", "definition": "Basic unit of life."}]))
        response = client.post("/api/study/flashcards", data={"text": "notes", "count": "1"})
        assert response.status_code == 200
        assert response.json() == {
            "flashcards": [{"term": "Cell", "definition": "Basic unit of life."}],
            "degraded": False,
        }

    def test_flashcards_error_card(self, client, provider):
        provider.replies.append(ProviderError("down"))
        data = client.post("/api/study/flashcards", data={"text": "notes"}).json()
        assert data["degraded"] is True
        assert data["flashcards"][0]["term"] == "Error"


class TestChatEndpoints:
    """Tests for /api/study/chat endpoints."""

    def test_chat_round_trip(self, client, provider):
        response = client.post("/api/study/chat", data={"text": "The mitochondria is the powerhouse."})
        assert response.status_code == 201
        session_id = response.json()["session_id"]

        provider.replies.append("The mitochondria.")
        response = client.post(
            f"/api/study/chat/{session_id}/messages",
            json={"message": "What is the powerhouse?"},
        )
        assert response.status_code == 200
        assert response.json() == {"reply": "The mitochondria."}

    def test_chat_requires_content(self, client):
        response = client.post("/api/study/chat", data={})
        assert response.status_code == 400

    def test_unknown_session(self, client):
        response = client.post("/api/study/chat/missing/messages", json={"message": "hi"})
        assert response.status_code == 404

    def test_chat_model_failure(self, client, provider):
        session_id = client.post("/api/study/chat", data={"text": "doc"}).json()["session_id"]
        provider.replies.append(ProviderError("down"))
        response = client.post(f"/api/study/chat/{session_id}/messages", json={"message": "hi"})
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to get a reply"}

    def test_end_chat(self, client):
        session_id = client.post("/api/study/chat", data={"text": "doc"}).json()["session_id"]
        assert client.delete(f"/api/study/chat/{session_id}").status_code == 204
        assert client.delete(f"/api/study/chat/{session_id}").status_code == 404


class TestStaticFiles:
    """Tests for static asset serving with single-page-app fallback."""

    @pytest.fixture
    def static_dir(self, tmp_path):
        (tmp_path / "index.html").write_text("<html>app</html>")
        (tmp_path / "assets").mkdir()
        (tmp_path / "assets" / "app.js").write_text("console.log('hi')")
        app.state.static_dir = str(tmp_path)
        yield tmp_path
        del app.state.static_dir

    def test_serves_existing_asset(self, client, static_dir):
        response = client.get("/assets/app.js")
        assert response.status_code == 200
        assert "console.log" in response.text

    def test_unknown_route_falls_back_to_index(self, client, static_dir):
        response = client.get("/quiz/results")
        assert response.status_code == 200
        assert "<html>app</html>" in response.text

    def test_root_serves_index(self, client, static_dir):
        assert "<html>app</html>" in client.get("/").text

    def test_missing_index_returns_404(self, client, tmp_path):
        app.state.static_dir = str(tmp_path / "nowhere")
        try:
            response = client.get("/anything")
        finally:
            del app.state.static_dir
        assert response.status_code == 404
