# scamcheck/utils/image_utils.py

"""
Pillow helpers for uploaded images.
"""

from __future__ import annotations

import io
from typing import Optional

from PIL import Image, UnidentifiedImageError

PIL_FORMAT_TO_MEDIA_TYPE = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "WEBP": "image/webp",
    "GIF": "image/gif",
}


def sniff_media_type(image_bytes: bytes) -> Optional[str]:
    """
    Return the media type Pillow detects for the bytes, or None when the
    bytes are not a readable image. Formats outside the supported set come
    back as "image/<format>" so callers can reject them by name.
    """
    try:
        with Image.open(io.BytesIO(image_bytes)) as img:
            fmt = (img.format or "").upper()
    except (UnidentifiedImageError, OSError):
        return None
    if not fmt:
        return None
    return PIL_FORMAT_TO_MEDIA_TYPE.get(fmt, f"image/{fmt.lower()}")
