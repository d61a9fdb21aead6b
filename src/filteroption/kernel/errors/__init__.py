"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       └── InvalidQueryParamError
    └── ApplicationError     (application.py)
        └── ConfigError      (filteroption.config.validation)
"""

from filteroption.kernel.errors.application import ApplicationError
from filteroption.kernel.errors.base import BaseError
from filteroption.kernel.errors.domain import (
    DomainError,
    InvalidQueryParamError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidQueryParamError",
    "ValidationError",
]
