"""
Custom exceptions for the college roster.
"""

from typing import Optional, Any, Dict


class CollegeError(Exception):
    """Base exception for all college roster errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(CollegeError):
    """Raised when record data fails validation."""
    pass


class DataFileError(CollegeError):
    """Raised when an input data file cannot be read."""
    pass


class ConfigurationError(CollegeError):
    """Raised when configuration is invalid."""
    pass


class ReportGenerationError(CollegeError):
    """Raised when one or more report tasks fail."""
    pass
