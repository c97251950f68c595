"""Common models shared across the study endpoints."""

from enum import Enum
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field


class SummaryLength(str, Enum):
    """Requested summary length."""
    SHORT = "short"
    MEDIUM = "medium"
    DETAILED = "detailed"


class UploadedFile(BaseModel):
    """A user-uploaded file held fully in memory."""
    filename: Optional[str] = Field(None, description="Original filename, if known")
    mime_type: str = Field(..., description="Declared media type of the file")
    data: bytes = Field(..., description="Raw file bytes")


class TextContext(BaseModel):
    """Source material supplied as raw text."""
    type: Literal["text"] = "text"
    content: str = Field(..., description="The document text")


class FileContext(BaseModel):
    """Source material supplied as an uploaded file."""
    type: Literal["file"] = "file"
    file: UploadedFile


# "No content supplied" is represented by None, not by an empty context.
ContentContext = Annotated[Union[TextContext, FileContext], Field(discriminator="type")]
