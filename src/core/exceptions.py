"""
Custom Exceptions - Application-specific error classes.

This module defines a hierarchy of exceptions for clean error handling:
- Each exception has a status code
- The API layer renders each as the failure envelope
- No stack traces leaked to clients
"""
from typing import Optional


class BFHLException(Exception):
    """
    Base exception for all service errors.

    Subclass this for specific error types.
    """
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyBodyError(BFHLException):
    """Raised when the request body is missing or has no keys."""
    status_code = 400

    def __init__(self):
        super().__init__("Request body cannot be empty")


class InvalidJSONError(BFHLException):
    """Raised when the request body is not parseable JSON."""
    status_code = 400

    def __init__(self):
        super().__init__("Request body must be valid JSON")


class InvalidKeyError(BFHLException):
    """Raised when none of the recognized keys is present."""
    status_code = 400

    def __init__(self, keys: tuple = ("fibonacci", "prime", "lcm", "hcf", "AI")):
        super().__init__(f"Invalid key. Use one of: {', '.join(keys)}")


class OperandValidationError(BFHLException):
    """Raised when the operand of a recognized key has the wrong type or shape."""
    status_code = 422

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class EmptyOperandError(BFHLException):
    """Raised when LCM or HCF is asked to fold an empty array."""
    status_code = 422

    def __init__(self, message: str = "operand array must be non-empty"):
        super().__init__(message)


class AIConfigurationError(BFHLException):
    """Raised when the Gemini API key is missing."""
    status_code = 500

    def __init__(self, message: str = "GEMINI_API_KEY not found in environment"):
        super().__init__(message)


class AIProxyError(BFHLException):
    """
    Raised when the Gemini call fails.

    Covers transport errors, HTTP error statuses and responses that
    carry no answer text. The message is whatever the upstream said.
    """
    status_code = 500

    def __init__(self, message: str = "Invalid AI response from Gemini"):
        super().__init__(message)
