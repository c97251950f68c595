"""AI Provider abstraction layer for Gemini models."""

from .base import AIProvider, ProviderError, GenerationConfig, GenerationResult
from .google import GoogleProvider

__all__ = [
    "AIProvider",
    "ProviderError",
    "GenerationConfig",
    "GenerationResult",
    "GoogleProvider",
]
