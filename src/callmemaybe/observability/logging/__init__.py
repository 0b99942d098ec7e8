"""Observability – structlog configuration and helpers."""
from callmemaybe.observability.logging.filters import CONTACT_FIELDS, ContactFieldsFilter
from callmemaybe.observability.logging.factory import JsonLoggerFactory
from callmemaybe.observability.logging.processors import get_logger

__all__ = [
    "CONTACT_FIELDS",
    "ContactFieldsFilter",
    "JsonLoggerFactory",
    "get_logger",
]
