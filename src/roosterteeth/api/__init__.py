"""Shared API client utilities."""

from roosterteeth.api.base import (
    AuthenticationError,
    BaseAPIClient,
    NotFoundError,
    RateLimitError,
    RoosterTeethConnectionError,
    RoosterTeethError,
    SchemaError,
    VideoUnavailable,
)
from roosterteeth.api.helpers import ORDERS, Order, channel_and_order, slug_path, validate_order

__all__ = [
    "RoosterTeethError",
    "RoosterTeethConnectionError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "SchemaError",
    "VideoUnavailable",
    "BaseAPIClient",
    "ORDERS",
    "Order",
    "channel_and_order",
    "slug_path",
    "validate_order",
]
