"""Identity errors."""

from .base import DomainException


class AuthenticationRequiredException(DomainException):
    """Raised when a request arrives without a user identity."""

    code = "AUTHENTICATION_REQUIRED"

    def __init__(self):
        super().__init__("Authentication required")
