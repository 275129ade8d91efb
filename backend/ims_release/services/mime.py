"""
Page MIME Classification
Maps page file names to image types by suffix
"""

import enum


class MimeType(str, enum.Enum):
    """Supported page image types; the value is the HTTP content type"""

    PNG = "image/png"
    JPG = "image/jpeg"
    UNKNOWN = "application/octet-stream"


# Suffix matching is case sensitive and .jpeg is not recognised
_SUFFIXES = {
    ".png": MimeType.PNG,
    ".jpg": MimeType.JPG,
}


def classify(name: str) -> MimeType:
    """Classify a page name by its suffix"""
    for suffix, mime in _SUFFIXES.items():
        if name.endswith(suffix):
            return mime
    return MimeType.UNKNOWN


def mime_to_content_type(mime: MimeType) -> str:
    return MimeType(mime).value


def parse_content_type(value: str) -> MimeType:
    """Inverse of mime_to_content_type; unknown strings give UNKNOWN"""
    try:
        return MimeType(value)
    except ValueError:
        return MimeType.UNKNOWN
