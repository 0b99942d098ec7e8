"""Kernel – framework-agnostic building blocks shared by every layer."""

from callmemaybe.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidArgumentError,
    UnsupportedCategoryError,
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
