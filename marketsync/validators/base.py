"""Core validation data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol

from ..errors import ValidationError, WarningPolicyError
from ..models import SubmissionPayload


@dataclass
class ValidationResult:
    """Blocking errors and advisory warnings for one payload."""

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def raise_for_errors(self) -> None:
        if self.errors:
            raise ValidationError(self.errors)

    def raise_for_warnings(self) -> None:
        if self.warnings:
            raise WarningPolicyError(self.warnings)


class Validator(Protocol):
    """Protocol implemented by payload validators."""

    def validate(self, payload: SubmissionPayload) -> ValidationResult:
        """Return a fresh result for ``payload``."""


__all__ = ["ValidationError", "ValidationResult", "Validator", "WarningPolicyError"]
