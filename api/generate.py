"""Prompt proxy endpoint: forwards a raw prompt to Gemini and returns the text."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.deps import get_proxy
from lib.gemini_proxy import GeminiProxy
from lib.models import GenerateResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["generate"])


async def _read_prompt(request: Request):
    """Return the non-empty string prompt from the JSON body, or None."""
    try:
        body = await request.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    prompt = body.get("prompt")
    if not isinstance(prompt, str) or not prompt:
        return None
    return prompt


@router.post("/generate-content", response_model=GenerateResponse)
async def generate_content(
    request: Request,
    proxy: GeminiProxy = Depends(get_proxy),
):
    """Generate text for a prompt. 400 without a prompt, 500 on model failure."""
    prompt = await _read_prompt(request)
    if prompt is None:
        return JSONResponse(status_code=400, content={"error": "Prompt is required"})

    try:
        text = await proxy.generate_content(prompt)
    except Exception:
        logger.exception("Error calling Gemini API")
        return JSONResponse(status_code=500, content={"error": "Failed to generate content"})

    return GenerateResponse(text=text)
