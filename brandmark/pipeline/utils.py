"""Shared utilities for the pipeline."""

from __future__ import annotations

MEDIA_TYPE_EXTENSIONS = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/webp": "webp",
    "image/gif": "gif",
    "image/svg+xml": "svg",
}


def detect_media_type(data: bytes) -> str:
    """Detect image MIME type from file bytes (magic number). Defaults to PNG."""
    if data[:8] == b'\x89PNG\r\n\x1a\n':
        return "image/png"
    if data[:2] == b'\xff\xd8':
        return "image/jpeg"
    if data[:4] == b'RIFF' and data[8:12] == b'WEBP':
        return "image/webp"
    if data[:6] in (b'GIF87a', b'GIF89a'):
        return "image/gif"
    head = data[:256].lstrip()
    if head.startswith(b"<svg") or (head.startswith(b"<?xml") and b"<svg" in head):
        return "image/svg+xml"
    return "image/png"  # the generator's default output


def extension_for(media_type: str) -> str:
    return MEDIA_TYPE_EXTENSIONS.get(media_type, "png")
