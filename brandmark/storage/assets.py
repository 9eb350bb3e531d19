"""Asset storage on the local outputs directory, served under PUBLIC_BASE_URL."""

from __future__ import annotations

import base64
import binascii
import logging
import re
from pathlib import Path

from brandmark.config import OUTPUTS_DIR, PUBLIC_BASE_URL
from brandmark.exceptions import StorageError
from brandmark.pipeline.utils import detect_media_type, extension_for

logger = logging.getLogger(__name__)

_SAFE_SEGMENT = re.compile(r"[^A-Za-z0-9_.-]")


def _segment(value: str) -> str:
    """Make an ownership component safe to use as a single path segment."""
    cleaned = _SAFE_SEGMENT.sub("_", str(value)).strip(".")
    if not cleaned:
        raise StorageError("Invalid storage path component", details=repr(value))
    return cleaned


class LocalAssetStorage:
    """Stores assets at ``{user}/{brand}/{asset_type}/v{version}.{ext}``.

    Re-uploading the same version overwrites it.
    """

    def __init__(self, root: Path, public_base_url: str) -> None:
        self._root = root
        self._public_base_url = public_base_url.rstrip("/")

    def _write(
        self,
        data: bytes,
        extension: str,
        user_id: str,
        brand_id: str,
        asset_type: str,
        version: int,
    ) -> str:
        relative = Path(
            _segment(user_id),
            _segment(brand_id),
            _segment(asset_type),
            f"v{int(version)}.{extension}",
        )
        path = self._root / relative
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            raise StorageError("Failed to write asset", details=str(e)) from e

        logger.info("Stored asset %s (%d bytes)", relative.as_posix(), len(data))
        return f"{self._public_base_url}/{relative.as_posix()}"

    def upload_image(
        self,
        image_base64: str,
        user_id: str,
        brand_id: str,
        asset_type: str,
        version: int = 1,
    ) -> str:
        """Store base64 image bytes and return their public URL."""
        try:
            data = base64.b64decode(image_base64, validate=True)
        except (binascii.Error, ValueError) as e:
            raise StorageError("Image data is not valid base64", details=str(e)) from e
        if not data:
            raise StorageError("Image data is empty")

        extension = extension_for(detect_media_type(data))
        return self._write(data, extension, user_id, brand_id, asset_type, version)

    def upload_svg(
        self,
        svg_content: str,
        user_id: str,
        brand_id: str,
        asset_type: str,
        version: int = 1,
    ) -> str:
        """Store SVG text and return its public URL."""
        return self._write(svg_content.encode("utf-8"), "svg", user_id, brand_id, asset_type, version)


# Singleton
asset_storage = LocalAssetStorage(OUTPUTS_DIR, PUBLIC_BASE_URL)
