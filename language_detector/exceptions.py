"""
Custom Exception Classes for the language detector

Resolution itself never raises: unmatched input is a normal ``None``
result.  These exceptions cover table integrity checks and explicit
metadata lookups.
"""

from typing import Any

from fastapi import status


class LanguageDetectorException(Exception):
    """Base exception class; subclasses set ``status_code`` for HTTP mapping"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TableIntegrityError(LanguageDetectorException):
    """Raised when code-table values have no metadata entry"""

    def __init__(self, missing_keys: list[str]):
        super().__init__(
            f"Code tables reference unknown language keys: {', '.join(missing_keys)}",
            details={"missing_keys": missing_keys},
        )


class LanguageNotFoundError(LanguageDetectorException):
    """Raised when a language key has no metadata entry"""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, key: str):
        super().__init__(f"Language '{key}' not found", details={"key": key})
