"""Base classes for the API client.

Provides the exception hierarchy and the response classification shared by
every endpoint of the Rooster Teeth API.
"""

from __future__ import annotations

from typing import Any, Self, cast

import httpx


class RoosterTeethError(Exception):
    """Base exception for all Rooster Teeth API errors."""

    pass


class RoosterTeethConnectionError(RoosterTeethError):
    """The request never produced an HTTP response (DNS, TLS, timeout...)."""

    pass


class AuthenticationError(RoosterTeethError):
    """Authentication failed (bad credentials or rejected token)."""

    pass


class NotFoundError(RoosterTeethError):
    """Resource not found (404), or a get endpoint returned no items."""

    pass


class RateLimitError(RoosterTeethError):
    """Rate limit exceeded (429).

    Attributes:
        retry_after: Suggested wait time in seconds, as sent by the server.
    """

    def __init__(self, retry_after: int | None = None, message: str | None = None) -> None:
        self.retry_after = retry_after
        if message is None:
            message = f"Rate limit exceeded. Retry after {retry_after}s"
        super().__init__(message)


class SchemaError(RoosterTeethError):
    """A JSON document did not match the expected record shape.

    Attributes:
        paths: Dotted paths of every offending field (e.g. "data.0.attributes.slug").
    """

    def __init__(self, message: str, paths: list[str] | None = None) -> None:
        self.paths = paths or []
        super().__init__(message)


class VideoUnavailable(RoosterTeethError):
    """The video for an episode cannot be watched with the current credentials.

    Only raised by the video endpoint. Usually means the episode is
    sponsor/member only (or not yet live for the public) and the client is
    anonymous or under-entitled.

    Attributes:
        slug: The episode slug that was requested.
        status_code: HTTP status returned by the API, or None when the API
            answered successfully but without any playable video.
    """

    def __init__(self, slug: str, status_code: int | None = None) -> None:
        self.slug = slug
        self.status_code = status_code
        message = f"Video '{slug}' is not (yet?) available for this account"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        super().__init__(message)


class BaseAPIClient:
    """Base class owning the HTTP client and the response classification."""

    _api_name: str = "Rooster Teeth"
    _error_message_key: str = "error"

    def __init__(self) -> None:
        self._client: httpx.Client | None = None

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _handle_response(self, response: httpx.Response) -> dict[str, Any]:
        """Handle API response and raise appropriate errors."""
        if response.is_success:
            try:
                return cast(dict[str, Any], response.json())
            except ValueError as e:
                raise SchemaError(f"{self._api_name} API returned invalid JSON: {e}") from e

        if response.status_code in (401, 403):
            raise AuthenticationError(f"Authentication failed ({response.status_code})")

        if response.status_code == 404:
            raise NotFoundError(f"Resource not found: {response.request.url.path}")

        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                int(retry_after) if retry_after and retry_after.isdigit() else None
            )

        raise RoosterTeethError(
            f"{self._api_name} API error ({response.status_code}): "
            f"{self._error_message(response)}"
        )

    def _error_message(self, response: httpx.Response) -> str:
        """Extract the upstream error message from a failed response."""
        try:
            error_data = response.json()
        except ValueError:
            return response.text or "Unknown error"
        if isinstance(error_data, dict):
            message = error_data.get(self._error_message_key) or error_data.get("message")
            if message:
                return str(message)
        return response.text or "Unknown error"
