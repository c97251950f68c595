"""Response models for the /api/generate-content proxy endpoint and summaries."""

from pydantic import BaseModel, Field


class GenerateResponse(BaseModel):
    """Response from the proxy endpoint."""
    text: str = Field(..., description="Generated text")


class SummaryResponse(BaseModel):
    """Response from /api/study/summarize."""
    summary: str = Field(..., description="Generated summary or apology text")
    degraded: bool = Field(False, description="True when summary is a fallback message")
