"""
Al-Bait Exception Hierarchy
===========================

Domain-specific exceptions for structured error handling across the backend.
The search engine itself never raises for weak input (a low confidence is
its failure signal); these cover the HTTP surface and configuration.

Usage::

    from core.exceptions import ValidationError, NotFoundError

    # In a view:
    raise ValidationError("Pesan tidak boleh kosong", field="message")

    # In a service:
    raise ConfigurationError("Catalog unreadable", setting="ASSISTANT_CATALOG_PATH")
"""

from rest_framework import status


# =============================================================================
# Base Exception
# =============================================================================

class AlbaitError(Exception):
    """Base exception for all Al-Bait application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "server_error"

    def __init__(self, message="An unexpected error occurred", **kwargs):
        self.message = message
        self.details = kwargs
        super().__init__(message)

    def to_dict(self):
        result = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["detail"] = self.details
        return result


# =============================================================================
# Client Errors
# =============================================================================

class ValidationError(AlbaitError):
    """Invalid input from the client."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"

    def __init__(self, message="Invalid request data", field=None, **kwargs):
        if field:
            kwargs["field"] = field
        super().__init__(message, **kwargs)


class NotFoundError(AlbaitError):
    """Requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"

    def __init__(self, message="Resource not found", resource=None, **kwargs):
        if resource:
            kwargs["resource"] = resource
        super().__init__(message, **kwargs)


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(AlbaitError):
    """Missing or invalid configuration (env vars, data files)."""

    error_code = "configuration_error"

    def __init__(self, message="Configuration error", setting=None, **kwargs):
        if setting:
            kwargs["setting"] = setting
        super().__init__(message, **kwargs)
