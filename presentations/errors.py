CONNECTION_ERROR_MESSAGE = "Connection error. Make sure backend is running."
INVALID_PASSWORD_MESSAGE = "Invalid password"


class PresentationError(Exception):
    """Base error. ``str(err)`` is the message shown to the user."""

    def __init__(self, message: str, reason: str = "rejected"):
        super().__init__(message)
        self.message = message
        self.reason = reason


class AuthError(PresentationError):
    """Wrong password, or the auth endpoint could not be reached."""


class FetchError(PresentationError):
    """Listing request failed or returned malformed data."""


class UploadError(PresentationError):
    """A single file was too large, rejected by the backend, or lost in transit."""


class DeleteError(PresentationError):
    """Backend refused the delete or the request never completed."""
