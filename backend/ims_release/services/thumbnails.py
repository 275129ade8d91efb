"""
Thumbnail Generation
Downscales page images with Pillow
"""

import io
import logging

from PIL import Image, UnidentifiedImageError

from ims_release.errors import ImsReleaseError, StorageError
from ims_release.services.mime import MimeType

logger = logging.getLogger(__name__)

_PIL_FORMATS = {
    MimeType.PNG: "PNG",
    MimeType.JPG: "JPEG",
}


def make_thumbnail(data: bytes, mime: MimeType, max_width: int, max_height: int) -> bytes:
    """
    Shrink an image to fit max_width x max_height, keeping its aspect ratio

    Images already inside the bounds are re-encoded at their size.
    """
    pil_format = _PIL_FORMATS.get(mime)
    if pil_format is None:
        raise ImsReleaseError(f"Cannot build a thumbnail for {mime.value}.")

    try:
        with Image.open(io.BytesIO(data), formats=[pil_format]) as img:
            img.thumbnail((max_width, max_height), Image.Resampling.BILINEAR)
            if pil_format == "JPEG" and img.mode not in ("RGB", "L"):
                img = img.convert("RGB")
            output = io.BytesIO()
            img.save(output, format=pil_format)
    except (UnidentifiedImageError, OSError) as e:
        logger.error(f"Failed to build thumbnail: {e}")
        raise StorageError("Stored image could not be decoded.")

    return output.getvalue()
