"""Conversion of uploaded files into Gemini inline_data parts."""

import base64
import mimetypes
from typing import Optional

from fastapi import UploadFile

from lib.models.common import UploadedFile

DEFAULT_MIME_TYPE = "application/octet-stream"


def guess_mime_type(filename: Optional[str], declared: Optional[str] = None) -> str:
    """Prefer the declared media type, then a guess from the filename."""
    if declared:
        return declared
    if filename:
        guessed, _ = mimetypes.guess_type(filename)
        if guessed:
            return guessed
    return DEFAULT_MIME_TYPE


def encode_file(file: UploadedFile) -> dict:
    """
    Encode a file as an inline attachment part.

    Args:
        file: File with its full bytes and declared media type

    Returns:
        {"inline_data": {"mime_type": ..., "data": <base64>}}
    """
    return {
        "inline_data": {
            "mime_type": file.mime_type,
            "data": base64.b64encode(file.data).decode("ascii"),
        }
    }


def decode_part(part: dict) -> bytes:
    """Recover the raw bytes from an inline_data part."""
    return base64.b64decode(part["inline_data"]["data"])


async def read_upload(upload: UploadFile) -> UploadedFile:
    """Read an uploaded file fully into memory."""
    data = await upload.read()
    return UploadedFile(
        filename=upload.filename,
        mime_type=guess_mime_type(upload.filename, upload.content_type),
        data=data,
    )
