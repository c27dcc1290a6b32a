"""Validation package for submission payloads."""

from .base import ValidationError, ValidationResult, Validator, WarningPolicyError
from .payload import OPTIONAL_FIELDS, REQUIRED_FIELDS, PayloadValidator

__all__ = [
    "OPTIONAL_FIELDS",
    "REQUIRED_FIELDS",
    "PayloadValidator",
    "ValidationError",
    "ValidationResult",
    "Validator",
    "WarningPolicyError",
]
