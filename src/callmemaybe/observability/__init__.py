"""Observability – structured logging for the query engine."""
from callmemaybe.observability.logging import (
    CONTACT_FIELDS,
    ContactFieldsFilter,
    JsonLoggerFactory,
    get_logger,
)

__all__ = ["CONTACT_FIELDS", "ContactFieldsFilter", "JsonLoggerFactory", "get_logger"]
