from __future__ import annotations
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    VALIDATION = 'validation'
    AUTHENTICATION = 'authentication'
    NETWORK = 'network'
    GENERIC = 'generic'


class PinataError(Exception):
    """Base error for every failure raised by the client."""
    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, status_code={self.status_code!r})"


class ValidationError(PinataError):
    """Missing configuration or parameters, detected before any request is sent."""
    kind = ErrorKind.VALIDATION


class AuthenticationError(PinataError):
    """The API rejected the credentials (401)."""
    kind = ErrorKind.AUTHENTICATION


class NetworkError(PinataError):
    """Non-2xx response not otherwise classified."""
    kind = ErrorKind.NETWORK


class GenericError(PinataError):
    """Any other failure: transport exception, malformed response."""
    kind = ErrorKind.GENERIC
