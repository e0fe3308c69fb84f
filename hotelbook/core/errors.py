"""Error types rendered by the central error handler."""

from typing import Optional

DEFAULT_ERROR_MESSAGE = "Something went wrong"


class AppError(Exception):
    """Exception carrying the HTTP status code to render it with."""

    status_code: int = 500

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or DEFAULT_ERROR_MESSAGE
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class DuplicateAccountError(AppError):
    """Username or email already belongs to an account."""

    status_code = 409
