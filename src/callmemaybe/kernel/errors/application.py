"""Application-layer errors – requests the engine cannot serve."""

from __future__ import annotations

from typing import Any

from callmemaybe.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnsupportedCategoryError(ApplicationError):
    """A sort category has no total order (e.g. a multi-valued field)."""

    default_code = "unsupported_category"

    def __init__(
        self,
        category: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Cannot sort by '{category}': it has no ordering", **kwargs)
        self.category = category


__all__ = [
    "ApplicationError",
    "UnsupportedCategoryError",
]
