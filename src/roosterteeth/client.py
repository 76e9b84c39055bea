"""Rooster Teeth VOD API client."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx

from roosterteeth._version import __version__
from roosterteeth.api import (
    BaseAPIClient,
    NotFoundError,
    Order,
    RoosterTeethConnectionError,
    RoosterTeethError,
    VideoUnavailable,
    channel_and_order,
    slug_path,
)
from roosterteeth.auth import AUTH_URL, CLIENT_ID, Anonymous, Credential, Login, request_token
from roosterteeth.models import (
    AccessToken,
    Channel,
    ChannelPage,
    Episode,
    EpisodePage,
    ResultPage,
    Season,
    SeasonPage,
    Series,
    SeriesPage,
    Video,
    VideoPage,
    decode,
)

logger = logging.getLogger(__name__)

API_URL = "https://svod-be.roosterteeth.com/api/v1"

USER_AGENT = f"Mozilla/5.0 roosterteeth/{__version__} httpx/{httpx.__version__}"

EPISODES_PER_PAGE = 100
SERIES_PER_PAGE = 1000

P = TypeVar("P", bound=ResultPage[Any])


class RoosterTeethClient(BaseAPIClient):
    """Client for the Rooster Teeth VOD API.

    Operations come in two flavours: ``list_*`` browse the catalog and take
    only optional filters, ``get_*`` look one thing up by its slug.

    With ``Login`` credentials the constructor logs in before returning and
    every request carries the Bearer token. The token is never refreshed;
    build a new client once it expires.
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        credential: Credential | None = None,
        *,
        base_url: str = API_URL,
        auth_url: str = AUTH_URL,
        client_id: str = CLIENT_ID,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            credential: ``Anonymous()`` (default) or ``Login(username, password)``.
            base_url: API root.
            auth_url: OAuth token endpoint, used with ``Login`` only.
            client_id: OAuth client identifier.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``).

        Raises:
            AuthenticationError: If the login is rejected.
            RoosterTeethError: If the login fails for any other reason.
        """
        super().__init__()
        if credential is None:
            credential = Anonymous()

        http = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            transport=transport,
        )

        self.token: AccessToken | None = None
        if isinstance(credential, Login):
            try:
                self.token = request_token(http, credential, auth_url=auth_url, client_id=client_id)
            except RoosterTeethError:
                http.close()
                raise
            http.headers["Authorization"] = f"Bearer {self.token.access_token}"

        self._client = http

    @property
    def is_authenticated(self) -> bool:
        """Check if requests carry a Bearer token."""
        return self.token is not None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            raise RoosterTeethError("Client is closed")
        return self._client

    def _request(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """Send a GET request, wrapping transport failures."""
        client = self._get_client()
        try:
            response = client.get(path, params=params)
        except httpx.RequestError as e:
            raise RoosterTeethConnectionError(f"Connection error: {e}") from e
        logger.debug("GET %s -> %s", response.request.url, response.status_code)
        return response

    def _fetch(self, page_type: type[P], path: str, params: dict[str, Any] | None = None) -> P:
        data = self._handle_response(self._request(path, params))
        return decode(page_type, data)

    @staticmethod
    def _first(page: ResultPage[Any], what: str, slug: str) -> Any:
        if not page.data:
            raise NotFoundError(f"No {what} found for '{slug}'")
        return page.data[0]

    def list_channels_page(self) -> ResultPage[Channel]:
        """Get the channel list with its pagination metadata."""
        return self._fetch(ChannelPage, "/channels")

    def list_channels(self) -> list[Channel]:
        """Get every channel the API knows about.

        Returns:
            All channels (the endpoint is not paginated in practice).
        """
        return self.list_channels_page().data

    def list_episodes_page(
        self,
        page: int,
        channel: str | None = None,
        order: Order | None = None,
    ) -> ResultPage[Episode]:
        """Get one page of the episode list with its pagination metadata.

        See ``list_episodes`` for the arguments.
        """
        if page < 1:
            raise ValueError(f"page numbers start at 1, got {page}")
        params: dict[str, Any] = {"per_page": EPISODES_PER_PAGE}
        params.update(channel_and_order(channel, order))
        params["page"] = page
        return self._fetch(EpisodePage, "/episodes", params)

    def list_episodes(
        self,
        page: int,
        channel: str | None = None,
        order: Order | None = None,
    ) -> list[Episode]:
        """Get up to 100 episodes.

        Args:
            page: 1-based page number.
            channel: Channel slug to restrict to (e.g. "achievement-hunter").
            order: "asc" or "desc" (default "desc", newest first).

        Returns:
            The episodes of that page.
        """
        return self.list_episodes_page(page, channel, order).data

    def list_series_page(
        self,
        channel: str | None = None,
        order: Order | None = None,
    ) -> ResultPage[Series]:
        """Get the series list with its pagination metadata."""
        params: dict[str, Any] = {"per_page": SERIES_PER_PAGE}
        params.update(channel_and_order(channel, order))
        params["page"] = 1
        return self._fetch(SeriesPage, "/shows", params)

    def list_series(
        self,
        channel: str | None = None,
        order: Order | None = None,
    ) -> list[Series]:
        """Get up to 1000 series.

        Args:
            channel: Channel slug to restrict to.
            order: "asc" or "desc" (default "desc").
        """
        return self.list_series_page(channel, order).data

    def get_seasons(self, series_slug: str, order: Order | None = None) -> list[Season]:
        """Get every season of a series.

        Args:
            series_slug: Slug of the series (e.g. "red-vs-blue").
            order: "asc" or "desc" (default "desc", latest season first).
        """
        params = channel_and_order(None, order, default_order="desc")
        path = slug_path("/shows/{slug}/seasons", series_slug)
        return self._fetch(SeasonPage, path, params).data

    def get_season_episodes(self, season_slug: str, order: Order | None = None) -> list[Episode]:
        """Get every episode of a season.

        Args:
            season_slug: Slug of the season (e.g. "red-vs-blue-season-1").
            order: "asc" or "desc". Defaults to "asc" so episodes read in
                broadcast order, unlike the other list operations.
        """
        params = channel_and_order(None, order, default_order="asc")
        path = slug_path("/seasons/{slug}/episodes", season_slug)
        return self._fetch(EpisodePage, path, params).data

    def get_series(self, slug: str) -> Series:
        """Get a series by its slug.

        Returns the same record as ``list_series``.

        Raises:
            NotFoundError: If no such series exists.
        """
        page = self._fetch(SeriesPage, slug_path("/shows/{slug}", slug))
        series: Series = self._first(page, "series", slug)
        return series

    def get_episode(self, slug: str) -> Episode:
        """Get an episode by its slug.

        Raises:
            NotFoundError: If no such episode exists.
        """
        page = self._fetch(EpisodePage, slug_path("/watch/{slug}", slug))
        episode: Episode = self._first(page, "episode", slug)
        return episode

    def get_video(self, slug: str) -> Video:
        """Get the playback information of an episode.

        Unlike the other operations, any HTTP error status here means the
        account is not entitled to the video, and is reported as
        ``VideoUnavailable`` so callers can branch on it (ask for a login,
        skip the episode...).

        Args:
            slug: Slug of the episode.

        Raises:
            VideoUnavailable: If the video cannot be watched with this client.
            RoosterTeethConnectionError: If the API cannot be reached.
            SchemaError: If the response does not decode.
        """
        response = self._request(slug_path("/watch/{slug}/videos", slug))
        if not response.is_success:
            raise VideoUnavailable(slug, response.status_code)

        page = decode(VideoPage, response.content)
        if not page.data:
            raise VideoUnavailable(slug)
        return page.data[0]
