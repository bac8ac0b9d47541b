"""Shared domain components.

This module exports shared exceptions and time helpers used across
domain boundaries.
"""

from userhub.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConcurrencyError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from userhub.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "ConflictError",
    "ConcurrencyError",
    # Utilities
    "ensure_tz_aware",
    "utc_now",
]
