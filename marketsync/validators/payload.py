"""Required/optional field checks for submission payloads."""

from __future__ import annotations

import re
from typing import Sequence

from ..models import SubmissionPayload
from .base import ValidationResult

REQUIRED_FIELDS = ("name", "version", "description", "category", "repository")
OPTIONAL_FIELDS = ("homepage", "long_description", "changelog", "license")

_SEMVER_PREFIX = re.compile(r"^\d+\.\d+")


class PayloadValidator:
    """Checks a payload before it is eligible for submission."""

    def __init__(
        self,
        required: Sequence[str] = REQUIRED_FIELDS,
        optional: Sequence[str] = OPTIONAL_FIELDS,
    ) -> None:
        self.required = tuple(required)
        self.optional = tuple(optional)

    def validate(self, payload: SubmissionPayload) -> ValidationResult:
        result = ValidationResult()

        for name in self.required:
            if _is_blank(getattr(payload, name, None)):
                result.errors.append(
                    f'Required field "{name}" is missing or empty. '
                    f'Provide it via the "{_input_name(name)}" action input '
                    "or add it to your package manifest."
                )

        for name in self.optional:
            if _is_blank(getattr(payload, name, None)):
                result.warnings.append(
                    f'Optional field "{name}" is not set; consider adding it for a better listing.'
                )

        version = payload.version
        if not _is_blank(version) and not _SEMVER_PREFIX.match(version):
            result.warnings.append(
                f'Version "{version}" doesn\'t look like semver (x.y.z). '
                "The marketplace prefers semantic versioning."
            )

        return result


def _is_blank(value: object) -> bool:
    return value is None or not str(value).strip()


def _input_name(field_name: str) -> str:
    return field_name.replace("_", "-")
