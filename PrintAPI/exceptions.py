"""
Consolidated PrintAPI Exception Hierarchy

All errors raised by the printer settings model and its JSON codec derive
from PrintApiException so callers can catch them in one place and turn
them into a consistent API error response.

Architecture:
- Base exception class carrying a message, details and an error code
- Construction-time errors (InvalidArgumentError)
- Decode-time errors (MalformedPayloadError)
- Configuration errors (ConfigurationError)
"""

from typing import Any, Dict, Optional, List


# =============================================================================
# Base Exception Classes
# =============================================================================


class PrintApiException(Exception):
    """Base exception for all PrintAPI-related errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.error_code = error_code

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {"error_code": self.error_code, "message": self.message, "details": self.details}


class InvalidArgumentError(PrintApiException, ValueError):
    """Raised when a printer settings descriptor is built without a required field."""

    def __init__(self, message: str, field_name: Optional[str] = None):
        super().__init__(message, error_code="INVALID_ARGUMENT")
        self.field_name = field_name

        if field_name:
            self.details.update({"field_name": field_name})


class MalformedPayloadError(PrintApiException, ValueError):
    """Raised when a JSON payload cannot be decoded into printer settings."""

    def __init__(self, message: str, fields: Optional[List[str]] = None, index: Optional[int] = None):
        super().__init__(message, error_code="MALFORMED_PAYLOAD")
        self.fields = fields or []
        self.index = index

        if fields:
            self.details.update({"fields": fields})
        if index is not None:
            self.details.update({"index": index})


class ConfigurationError(PrintApiException):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_field: Optional[str] = None, config_value: Optional[str] = None):
        super().__init__(message, error_code="CONFIGURATION_ERROR")
        self.config_field = config_field
        self.config_value = config_value

        if config_field or config_value:
            self.details.update({"config_field": config_field, "config_value": config_value})
