"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                  (domain.py)
    │   └── ValidationError
    │       └── InvalidArgumentError
    └── ApplicationError             (application.py)
        └── UnsupportedCategoryError
"""

from callmemaybe.kernel.errors.application import ApplicationError, UnsupportedCategoryError
from callmemaybe.kernel.errors.base import BaseError
from callmemaybe.kernel.errors.domain import (
    DomainError,
    InvalidArgumentError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidArgumentError",
    "UnsupportedCategoryError",
    "ValidationError",
]
