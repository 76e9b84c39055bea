"""Helper functions for building API requests."""

from __future__ import annotations

from typing import Literal, get_args
from urllib.parse import quote

Order = Literal["asc", "desc"]

ORDERS: tuple[str, ...] = get_args(Order)


def validate_order(order: str) -> str:
    """Check that an ordering is one the API understands.

    Args:
        order: "asc" or "desc".

    Returns:
        The order unchanged.

    Raises:
        ValueError: If the order is anything else.
    """
    if order not in ORDERS:
        raise ValueError(f"order must be one of {', '.join(ORDERS)}, got {order!r}")
    return order


def channel_and_order(
    channel: str | None,
    order: Order | None,
    default_order: Order = "desc",
) -> dict[str, str]:
    """Build the channel filter and ordering query parameters.

    The channel filter is only sent when given. The order always is, falling
    back to ``default_order``.

    Args:
        channel: Channel slug to restrict results to, or None for all channels.
        order: "asc" or "desc", or None for the default.
        default_order: Order used when ``order`` is None.

    Returns:
        Query parameters, channel first.
    """
    params: dict[str, str] = {}
    if channel is not None:
        params["channel_id"] = channel
    params["order"] = validate_order(order if order is not None else default_order)
    return params


def slug_path(template: str, slug: str) -> str:
    """Fill a path template with a URL-quoted slug."""
    if not slug:
        raise ValueError("slug must not be empty")
    return template.format(slug=quote(slug, safe=""))
