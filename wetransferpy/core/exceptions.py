"""
Custom exceptions for WeTransfer upload operations.

Pipeline aborts are reported as UploadOutcome values, not exceptions.
The classes below cover programming errors and undecodable responses.
"""
from typing import Optional


class WeTransferException(Exception):
    """Base exception for all WeTransfer-related errors."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            status_code: HTTP status code (if available)
        """
        self.status_code = status_code
        super().__init__(message)


class InvalidFileError(WeTransferException, ValueError):
    """Raised when a local file is missing, not a regular file or empty."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)


class MissingTokenError(WeTransferException):
    """Raised when an authenticated call is made without a valid token."""
    pass


class ResponseDecodeError(WeTransferException):
    """Raised when a successful response body is not valid JSON."""

    def __init__(
        self,
        message: str,
        request_url: Optional[str] = None,
        status_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            request_url: URL of the request whose response failed to decode
            status_code: HTTP status code of the response
        """
        self.request_url = request_url
        super().__init__(message, status_code)
