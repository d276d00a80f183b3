"""Icon domain specific exceptions."""


class IconError(Exception):
    """Base class for icon related errors.

    ``message`` is safe to show to API clients; ``status_code`` is the HTTP
    status the error maps to.
    """

    status_code = 500
    default_message = "Icon request failed"

    def __init__(self, message: str | None = None, *, detail: str | None = None) -> None:
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message if detail is None else f"{self.message}: {detail}")


class IconDirectoryError(IconError):
    """Raised when the icons directory cannot be read."""

    status_code = 500
    default_message = "Failed to read icons directory"


class IconNotFoundError(IconError):
    """Raised when the requested icon does not exist or cannot be read."""

    status_code = 404
    default_message = "Icon not found"


class InvalidIconRequestError(IconError):
    """Raised when a requested filename is not an acceptable SVG file name."""

    status_code = 400
    default_message = "Only SVG files are allowed"


class InvalidPatternError(IconError):
    """Raised when a regex search term does not compile."""

    status_code = 400
    default_message = "Invalid search pattern"


class IconGroupNotFoundError(IconError):
    """Raised when no icon group exists for a base name."""

    status_code = 404
    default_message = "Icon group not found"


class IconSourceError(IconError):
    """Raised when a remote icon listing cannot be fetched or decoded."""

    status_code = 502
    default_message = "Failed to load icons"
