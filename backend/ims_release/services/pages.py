"""
Page Rules
Name validation, upload decoding and blob key derivation for pages
"""

import base64
import binascii
import io
import logging

from PIL import Image, UnidentifiedImageError

from ims_release.errors import (
    BadImageDataError,
    PageNameEmptyError,
    PageNameInvalidError,
    PageNameTooLongError,
    UnsupportedMimeTypeError,
    WrongImageTypeError,
)
from ims_release.models.page import NAME_MAX_LENGTH
from ims_release.services.mime import MimeType, classify, parse_content_type

logger = logging.getLogger(__name__)


def generate_page_key(project_id: int, release_id: int, name: str) -> str:
    """Blob store location of a page"""
    return f"{project_id}/{release_id}/{name}"


def validate_page_name(name: str) -> MimeType:
    """
    Check a page name and return its MIME type

    Raises:
        PageNameEmptyError: empty name
        PageNameTooLongError: longer than 255 characters
        PageNameInvalidError: contains a path separator
        UnsupportedMimeTypeError: suffix is not .png or .jpg
    """
    if not name:
        raise PageNameEmptyError()
    if len(name) > NAME_MAX_LENGTH:
        raise PageNameTooLongError()
    if "/" in name or "\\" in name:
        raise PageNameInvalidError()

    mime = classify(name)
    if mime == MimeType.UNKNOWN:
        raise UnsupportedMimeTypeError()
    return mime


def decode_page_data(data: str) -> bytes:
    """Decode the base64 payload of a page upload"""
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        raise BadImageDataError()


def detect_image_type(data: bytes) -> MimeType:
    """Identify the real image format of the uploaded bytes"""
    try:
        with Image.open(io.BytesIO(data)) as img:
            img_format = img.format
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
        logger.debug(f"Uploaded bytes are not a readable image: {e}")
        return MimeType.UNKNOWN

    content_type = Image.MIME.get(img_format, "")
    return parse_content_type(content_type)


def verify_image_matches_name(name: str, data: bytes) -> MimeType:
    """
    Ensure the uploaded bytes are an image of the type the name claims

    Raises:
        WrongImageTypeError: bytes are not a PNG/JPEG or disagree with the suffix
    """
    expected = validate_page_name(name)
    actual = detect_image_type(data)
    if actual != expected:
        logger.info(f"Rejected page '{name}': expected {expected.value}, got {actual.value}")
        raise WrongImageTypeError()
    return expected
