"""Domain errors – rejected input values."""

from __future__ import annotations

from typing import Any

from filteroption.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when input cannot be turned into a valid domain value."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidQueryParamError(ValidationError):
    """A list-query parameter could not be decoded."""

    default_code = "invalid_query_param"

    def __init__(self, param: str, value: object, reason: str) -> None:
        super().__init__(
            f"Query parameter '{param}' has invalid value {value!r}: {reason}",
            errors=[{"field": param, "value": value, "reason": reason}],
        )
        self.param = param
        self.value = value
        self.reason = reason


__all__ = [
    "DomainError",
    "InvalidQueryParamError",
    "ValidationError",
]
