"""Icon listing and download domain exports."""

from .exceptions import (
    IconDirectoryError,
    IconError,
    IconGroupNotFoundError,
    IconNotFoundError,
    IconSourceError,
    InvalidIconRequestError,
    InvalidPatternError,
)
from .models import SUPPORTED_EXTENSION, SVG_MEDIA_TYPE, Icon, IconDownload
from .service import IconService, extract_dimensions

__all__ = [
    "Icon",
    "IconDownload",
    "IconService",
    "SUPPORTED_EXTENSION",
    "SVG_MEDIA_TYPE",
    "extract_dimensions",
    "IconError",
    "IconDirectoryError",
    "IconNotFoundError",
    "InvalidIconRequestError",
    "InvalidPatternError",
    "IconGroupNotFoundError",
    "IconSourceError",
]
