"""Custom exceptions for the dictionary lookup application"""

from typing import Any


class DictionaryLookupError(Exception):
    """Base exception class for all application errors"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class TransportError(DictionaryLookupError):
    """Raised when the dictionary API request fails (network, DNS, timeout, HTTP status)"""

    def __init__(
        self,
        url: str,
        reason: str,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(
            f"Request to {url} failed: {reason}",
            {
                "url": url,
                "status_code": status_code,
                "original_error": str(original_error) if original_error else None,
            },
        )
        self.url = url
        self.reason = reason
        self.status_code = status_code
        self.original_error = original_error


class DecodeError(DictionaryLookupError):
    """Raised when the response body does not match the expected entry shape"""

    def __init__(self, reason: str, payload: str = ""):
        super().__init__(
            f"Failed to decode dictionary response: {reason}",
            {
                "reason": reason,
                "payload": payload[:100] + "..." if len(payload) > 100 else payload,
            },
        )
        self.reason = reason
        self.payload = payload
