"""File helpers for tools that return file contents as MCP resources."""

from __future__ import annotations

import base64
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"

# Extension (without the dot, case-sensitive) -> MIME type.
MIME_TYPES: dict[str, str] = {
    # Images
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "svg": "image/svg+xml",
    # Source code
    "cpp": "text/x-c++src",
    "cxx": "text/x-c++src",
    "cc": "text/x-c++src",
    "c": "text/x-csrc",
    "h": "text/x-c++hdr",
    "hh": "text/x-c++hdr",
    "hpp": "text/x-c++hdr",
    "js": "text/javascript",
    "ts": "text/typescript",
    "py": "text/x-python",
    "java": "text/x-java",
    "rs": "text/x-rust",
    "go": "text/x-go",
    "html": "text/html",
    "css": "text/css",
    "xml": "text/xml",
    "json": "application/json",
    "md": "text/markdown",
    # Documents
    "txt": "text/plain",
    "pdf": "application/pdf",
}


def guess_mime_type(path: str | Path) -> str:
    """Map *path*'s extension through :data:`MIME_TYPES`."""
    extension = Path(path).suffix[1:]
    return MIME_TYPES.get(extension, DEFAULT_MIME_TYPE)


def is_text_mime_type(mime_type: str) -> bool:
    """True for types whose payload is sent as text rather than base64."""
    return mime_type.startswith("text/") or mime_type == "application/json"


def encode_file(path: str | Path) -> dict[str, Any] | None:
    """Read *path* and return a resource payload without the ``uri``.

    Returns ``{"mimeType", "text"}`` for text types and ``{"mimeType",
    "data"}`` (base64) otherwise, or ``None`` if the file cannot be read or
    is empty.
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        return None

    if not raw:
        return None

    mime_type = guess_mime_type(path)
    payload: dict[str, Any] = {"mimeType": mime_type}
    if is_text_mime_type(mime_type):
        payload["text"] = raw.decode("utf-8", errors="replace")
    else:
        payload["data"] = base64.b64encode(raw).decode("ascii")
    return payload
