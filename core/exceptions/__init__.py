"""
core.exceptions: re-exports for convenient imports.

Usage::

    from core.exceptions import ValidationError, LLMTimeoutError
    from core.exceptions import partsform_exception_handler
"""

from .base import (
    PartsFormError,
    ServiceError,
    LLMServiceError,
    LLMTimeoutError,
    LLMResponseError,
    ValidationError,
    ConfigurationError,
)

from .handlers import partsform_exception_handler

__all__ = [
    # Base
    "PartsFormError",
    # Service / language model
    "ServiceError",
    "LLMServiceError",
    "LLMTimeoutError",
    "LLMResponseError",
    # Client
    "ValidationError",
    # Config
    "ConfigurationError",
    # Handler
    "partsform_exception_handler",
]
