"""
Custom exception classes for the seeder.
"""
from typing import Any, Dict, Optional


class SeederException(Exception):
    """Base exception class for the seeder."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class DatabaseUnavailableError(SeederException):
    """Raised when the document store cannot be reached."""

    def __init__(
        self,
        message: str = "Database unavailable",
        code: str = "DATABASE_UNAVAILABLE",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details)


class SeedOperationError(SeederException):
    """Raised when an existence check or insert fails."""

    def __init__(
        self,
        message: str = "Seed operation failed",
        code: str = "SEED_OPERATION_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details)
