"""
PartsForm Exception Hierarchy
=============================

Domain-specific exceptions for structured error handling across the service.
Replaces bare ``except Exception`` with semantically meaningful error types.

Usage::

    from core.exceptions import LLMTimeoutError, ValidationError

    # In a service:
    raise LLMTimeoutError("Enhancer call exceeded 12s", timeout=12)

    # In a view:
    raise ValidationError("Query must be at least 2 characters long", field="q")
"""

from rest_framework import status


# =============================================================================
# Base Exception
# =============================================================================

class PartsFormError(Exception):
    """Base exception for all PartsForm application errors."""

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
# Service Errors (external dependencies)
# =============================================================================

class ServiceError(PartsFormError):
    """External service or API call failed."""

    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "service_error"

    def __init__(self, message="External service unavailable", service=None, **kwargs):
        if service:
            kwargs["service"] = service
        super().__init__(message, **kwargs)


class LLMServiceError(ServiceError):
    """Language-model call failed (transport, auth, quota)."""

    error_code = "llm_service_error"

    def __init__(self, message="Language model unavailable", **kwargs):
        kwargs.setdefault("service", "llm")
        super().__init__(message, **kwargs)


class LLMTimeoutError(LLMServiceError):
    """Language-model call did not settle within its time budget."""

    status_code = status.HTTP_504_GATEWAY_TIMEOUT
    error_code = "llm_timeout"


class LLMResponseError(LLMServiceError):
    """Language model answered, but not with a usable JSON object."""

    error_code = "llm_bad_response"


# =============================================================================
# Client Errors
# =============================================================================

class ValidationError(PartsFormError):
    """Invalid input from the client."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"

    def __init__(self, message="Invalid request data", field=None, **kwargs):
        if field:
            kwargs["field"] = field
        super().__init__(message, **kwargs)


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(PartsFormError):
    """Missing or invalid configuration (env vars, settings)."""

    error_code = "configuration_error"

    def __init__(self, message="Configuration error", setting=None, **kwargs):
        if setting:
            kwargs["setting"] = setting
        super().__init__(message, **kwargs)
