"""Tests for the Rooster Teeth API client."""

from typing import get_args

import httpx
import pytest
from payloads import (
    RVB_UUID,
    FakeAPI,
    make_channel,
    make_episode,
    make_page,
    make_season,
    make_series,
    make_video,
)

from roosterteeth import (
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    RoosterTeethClient,
    RoosterTeethConnectionError,
    RoosterTeethError,
    SchemaError,
    VideoUnavailable,
    __version__,
)
from roosterteeth.api import ORDERS, Order, channel_and_order, slug_path, validate_order
from roosterteeth.client import USER_AGENT


class TestHelpers:
    """Tests for the request-building helpers."""

    def test_validate_order(self) -> None:
        """Test only asc and desc are accepted."""
        assert validate_order("asc") == "asc"
        assert validate_order("desc") == "desc"
        with pytest.raises(ValueError, match="order"):
            validate_order("newest")

    def test_orders_match_alias(self) -> None:
        """Test the runtime order list is the Order literal."""
        assert ORDERS == ("asc", "desc")
        assert get_args(Order) == ORDERS

    def test_channel_and_order_defaults(self) -> None:
        """Test the order falls back and the channel is omitted."""
        assert channel_and_order(None, None) == {"order": "desc"}
        assert channel_and_order(None, None, default_order="asc") == {"order": "asc"}

    def test_channel_and_order_with_channel(self) -> None:
        """Test the channel filter comes before the order."""
        params = channel_and_order("achievement-hunter", "asc")
        assert list(params) == ["channel_id", "order"]
        assert params["channel_id"] == "achievement-hunter"

    def test_slug_path_quotes(self) -> None:
        """Test slugs cannot escape their path segment."""
        assert slug_path("/watch/{slug}", "a/b c") == "/watch/a%2Fb%20c"

    def test_slug_path_empty(self) -> None:
        """Test an empty slug is rejected."""
        with pytest.raises(ValueError):
            slug_path("/watch/{slug}", "")


class TestClientSetup:
    """Tests for client construction and lifecycle."""

    def test_anonymous_by_default(self, client: RoosterTeethClient) -> None:
        """Test no token without credentials."""
        assert client.is_authenticated is False
        assert client.token is None

    def test_user_agent_header(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test every request identifies the library."""
        fake_api.route("/channels", make_page([make_channel()]))

        client.list_channels()

        request = fake_api.last_request
        assert request.headers["User-Agent"] == USER_AGENT
        assert "roosterteeth/" in USER_AGENT
        assert "Authorization" not in request.headers

    def test_user_agent_format(self) -> None:
        """Test the User-Agent names the library and httpx versions."""
        assert USER_AGENT == f"Mozilla/5.0 roosterteeth/{__version__} httpx/{httpx.__version__}"

    def test_base_url(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test requests go to the VOD backend."""
        fake_api.route("/channels", make_page([make_channel()]))

        client.list_channels()

        assert fake_api.last_request.url.host == "svod-be.roosterteeth.com"
        assert fake_api.last_request.url.scheme == "https"

    def test_closed_client(self, fake_api: FakeAPI) -> None:
        """Test using a closed client raises."""
        rt = RoosterTeethClient(transport=fake_api.transport())
        rt.close()

        with pytest.raises(RoosterTeethError, match="closed"):
            rt.list_channels()

    def test_close_twice(self, fake_api: FakeAPI) -> None:
        """Test closing is idempotent."""
        rt = RoosterTeethClient(transport=fake_api.transport())
        rt.close()
        rt.close()


class TestListOperations:
    """Tests for the catalog list operations."""

    def test_list_channels(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test listing channels."""
        fake_api.route(
            "/channels",
            make_page(
                [make_channel(1), make_channel(2, "Achievement Hunter", "achievement-hunter")]
            ),
        )

        channels = client.list_channels()

        assert [c.slug for c in channels] == ["rooster-teeth", "achievement-hunter"]
        assert channels[1].name == "Achievement Hunter"
        assert fake_api.last_request.url.path == "/api/v1/channels"

    def test_list_episodes_default_params(
        self, client: RoosterTeethClient, fake_api: FakeAPI
    ) -> None:
        """Test the episode list asks for 100 newest-first episodes."""
        fake_api.route("/episodes", make_page([make_episode(1), make_episode(2)]))

        episodes = client.list_episodes(1)

        assert len(episodes) == 2
        params = fake_api.last_request.url.params
        assert params["per_page"] == "100"
        assert params["order"] == "desc"
        assert params["page"] == "1"
        assert "channel_id" not in params

    def test_list_episodes_channel_and_order(
        self, client: RoosterTeethClient, fake_api: FakeAPI
    ) -> None:
        """Test the channel filter and explicit order are forwarded."""
        fake_api.route("/episodes", make_page([]))

        client.list_episodes(3, channel="achievement-hunter", order="asc")

        params = fake_api.last_request.url.params
        assert params["channel_id"] == "achievement-hunter"
        assert params["order"] == "asc"
        assert params["page"] == "3"

    def test_list_episodes_page_metadata(
        self, client: RoosterTeethClient, fake_api: FakeAPI
    ) -> None:
        """Test the page variant keeps pagination metadata."""
        fake_api.route("/episodes", make_page([make_episode()]))

        page = client.list_episodes_page(1)

        assert page.is_paginated is True
        assert page.has_next_page is True
        assert page.data[0].episode_code == "S01E01"

    @pytest.mark.parametrize("page", [0, -1])
    def test_list_episodes_invalid_page(
        self, client: RoosterTeethClient, fake_api: FakeAPI, page: int
    ) -> None:
        """Test page numbers below 1 are refused before any request."""
        with pytest.raises(ValueError, match="page"):
            client.list_episodes(page)

        assert fake_api.requests == []

    def test_invalid_order(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test an unknown order is refused before any request."""
        with pytest.raises(ValueError, match="order"):
            client.list_series(order="newest")

        assert fake_api.requests == []

    def test_list_series_params(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test the series list asks for everything on one page."""
        fake_api.route("/shows", make_page([make_series()], per_page=1000))

        series = client.list_series()

        assert series[0].title == "Red vs. Blue"
        params = fake_api.last_request.url.params
        assert params["per_page"] == "1000"
        assert params["page"] == "1"
        assert params["order"] == "desc"

    def test_list_series_channel(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test filtering series by channel."""
        fake_api.route("/shows", make_page([]))

        assert client.list_series(channel="rooster-teeth") == []
        assert fake_api.last_request.url.params["channel_id"] == "rooster-teeth"


class TestSlugOperations:
    """Tests for the lookups by slug."""

    def test_get_seasons(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test seasons default to latest first."""
        fake_api.route(
            "/shows/red-vs-blue/seasons",
            make_page([make_season(2), make_season(1)], paginated=False),
        )

        seasons = client.get_seasons("red-vs-blue")

        assert [s.number for s in seasons] == [2, 1]
        assert fake_api.last_request.url.params["order"] == "desc"

    def test_get_seasons_ascending(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test the season order can be flipped."""
        fake_api.route("/shows/red-vs-blue/seasons", make_page([make_season(1)]))

        client.get_seasons("red-vs-blue", order="asc")

        assert fake_api.last_request.url.params["order"] == "asc"

    def test_get_season_episodes(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test season episodes default to broadcast order."""
        fake_api.route(
            "/seasons/red-vs-blue-season-1/episodes",
            make_page([make_episode(1), make_episode(2, "Episode 2: Red Team")]),
        )

        episodes = client.get_season_episodes("red-vs-blue-season-1")

        assert [e.attributes.number for e in episodes] == [1, 2]
        assert fake_api.last_request.url.params["order"] == "asc"

    def test_get_series(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test looking up Red vs. Blue."""
        fake_api.route("/shows/red-vs-blue", make_page([make_series()], paginated=False))

        series = client.get_series("red-vs-blue")

        assert series.uuid == RVB_UUID
        assert series.attributes.category == "episodic"
        assert series.attributes.season_count == 17
        assert series.canonical_links.s1e1 == "/watch/red-vs-blue-season-1-episode-1"

    def test_get_series_empty(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test an empty result is reported as not found."""
        fake_api.route("/shows/nope", make_page([], paginated=False))

        with pytest.raises(NotFoundError, match="nope"):
            client.get_series("nope")

    def test_get_episode(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test looking up an episode."""
        slug = "red-vs-blue-season-1-episode-1"
        fake_api.route(f"/watch/{slug}", make_page([make_episode()], paginated=False))

        episode = client.get_episode(slug)

        assert episode.slug == slug
        assert episode.attributes.show_id == RVB_UUID
        assert episode.links.videos == f"/api/v1/watch/{slug}/videos"

    def test_get_episode_unknown(self, client: RoosterTeethClient) -> None:
        """Test a 404 becomes NotFoundError."""
        with pytest.raises(NotFoundError, match="/api/v1/watch/missing"):
            client.get_episode("missing")

    def test_empty_slug(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test empty slugs are refused before any request."""
        with pytest.raises(ValueError):
            client.get_episode("")

        assert fake_api.requests == []


class TestGetVideo:
    """Tests for the entitlement-gated video lookup."""

    SLUG = "red-vs-blue-season-1-episode-1"

    def test_get_video(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test a playable video decodes."""
        fake_api.route(f"/watch/{self.SLUG}/videos", make_page([make_video()], paginated=False))

        video = client.get_video(self.SLUG)

        assert video.url.endswith("/ts/index.m3u8")
        assert video.attributes.content_slug == self.SLUG
        assert fake_api.last_request.url.path == f"/api/v1/watch/{self.SLUG}/videos"

    @pytest.mark.parametrize("status", [401, 403, 404, 500])
    def test_error_status_is_unavailable(
        self, client: RoosterTeethClient, fake_api: FakeAPI, status: int
    ) -> None:
        """Test every error status is reported as an unavailable video."""
        fake_api.route(
            f"/watch/{self.SLUG}/videos",
            {"access": False, "message": "Content is sponsor only"},
            status=status,
        )

        with pytest.raises(VideoUnavailable) as exc_info:
            client.get_video(self.SLUG)

        assert exc_info.value.slug == self.SLUG
        assert exc_info.value.status_code == status

    def test_unavailable_is_distinct(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test VideoUnavailable is not confused with a generic auth error."""
        fake_api.route(f"/watch/{self.SLUG}/videos", {}, status=403)

        with pytest.raises(RoosterTeethError) as exc_info:
            client.get_video(self.SLUG)

        assert isinstance(exc_info.value, VideoUnavailable)
        assert not isinstance(exc_info.value, AuthenticationError)

    def test_empty_data_is_unavailable(
        self, client: RoosterTeethClient, fake_api: FakeAPI
    ) -> None:
        """Test a successful response without videos is unavailable too."""
        fake_api.route(f"/watch/{self.SLUG}/videos", make_page([], paginated=False))

        with pytest.raises(VideoUnavailable) as exc_info:
            client.get_video(self.SLUG)

        assert exc_info.value.status_code is None

    def test_connection_error_is_not_unavailable(
        self, client: RoosterTeethClient, fake_api: FakeAPI
    ) -> None:
        """Test network failures keep their own error type."""
        fake_api.route(f"/watch/{self.SLUG}/videos", httpx.ConnectError("refused"))

        with pytest.raises(RoosterTeethConnectionError):
            client.get_video(self.SLUG)

    def test_undecodable_video(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test a malformed video is a schema error."""
        video = make_video()
        del video["attributes"]["url"]
        fake_api.route(f"/watch/{self.SLUG}/videos", make_page([video]))

        with pytest.raises(SchemaError) as exc_info:
            client.get_video(self.SLUG)

        assert "data.0.attributes.url" in exc_info.value.paths


class TestErrorHandling:
    """Tests for response classification."""

    def test_unauthorized(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test 401 becomes AuthenticationError."""
        fake_api.route("/channels", {"error": "unauthorized"}, status=401)

        with pytest.raises(AuthenticationError):
            client.list_channels()

    def test_rate_limit(self) -> None:
        """Test 429 carries the Retry-After hint."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(429, headers={"Retry-After": "30"}, json={})

        with RoosterTeethClient(transport=httpx.MockTransport(handler)) as rt:
            with pytest.raises(RateLimitError) as exc_info:
                rt.list_channels()

        assert exc_info.value.retry_after == 30

    def test_rate_limit_without_hint(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test 429 without Retry-After."""
        fake_api.route("/episodes", {}, status=429)

        with pytest.raises(RateLimitError) as exc_info:
            client.list_episodes(1)

        assert exc_info.value.retry_after is None

    def test_server_error_message(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test other errors surface the upstream message."""
        fake_api.route("/shows", {"error": "Internal Server Error"}, status=500)

        with pytest.raises(RoosterTeethError, match="500.*Internal Server Error"):
            client.list_series()

    def test_connection_error(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test transport failures are wrapped."""
        fake_api.route("/channels", httpx.ConnectTimeout("timed out"))

        with pytest.raises(RoosterTeethConnectionError, match="timed out"):
            client.list_channels()

    def test_invalid_json(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test a non-JSON body is a schema error."""
        fake_api.route("/channels", "<html>maintenance</html>")

        with pytest.raises(SchemaError, match="invalid JSON"):
            client.list_channels()

    def test_schema_drift(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test a renamed upstream field fails loudly instead of defaulting."""
        channel = make_channel()
        channel["attributes"]["brand_colour"] = channel["attributes"].pop("brand_color")
        fake_api.route("/channels", make_page([channel]))

        with pytest.raises(SchemaError) as exc_info:
            client.list_channels()

        assert exc_info.value.paths == ["data.0.attributes.brand_color"]

    def test_all_errors_share_base(self) -> None:
        """Test every client error can be caught as RoosterTeethError."""
        for exc_type in (
            RoosterTeethConnectionError,
            AuthenticationError,
            NotFoundError,
            RateLimitError,
            SchemaError,
            VideoUnavailable,
        ):
            assert issubclass(exc_type, RoosterTeethError)


class TestRedVsBlueContract:
    """Contract tests against recorded Red vs. Blue responses."""

    def test_seasons_ascending(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test the first two seasons in ascending order."""
        fake_api.route(
            "/shows/red-vs-blue/seasons",
            make_page([make_season(1), make_season(2)], paginated=False),
        )

        seasons = client.get_seasons("red-vs-blue", order="asc")

        assert seasons[0].number == 1
        assert seasons[1].slug == "red-vs-blue-season-2"

    def test_season_one_episodes(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test the opening episodes of season 1."""
        fake_api.route(
            "/seasons/red-vs-blue-season-1/episodes",
            make_page([make_episode(1), make_episode(2, "Episode 2: Red Team Recon")]),
        )

        episodes = client.get_season_episodes("red-vs-blue-season-1")

        assert episodes[0].title == "Episode 1: Why Are We Here?"
        assert episodes[1].slug == "red-vs-blue-season-1-episode-2"

    def test_video_matches_episode(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test a public episode's video points back at the episode."""
        slug = "red-vs-blue-season-1-episode-1"
        fake_api.route(f"/watch/{slug}", make_page([make_episode()], paginated=False))
        fake_api.route(f"/watch/{slug}/videos", make_page([make_video()], paginated=False))

        episode = client.get_episode(slug)
        video = client.get_video(slug)

        assert video.attributes.content_id == episode.id
        assert video.is_for(episode)

    def test_page_size_bound(self, client: RoosterTeethClient, fake_api: FakeAPI) -> None:
        """Test a list page never exceeds the requested page size."""
        fake_api.route("/episodes", make_page([make_episode(n) for n in range(1, 101)]))

        page = client.list_episodes_page(1)

        assert page.per_page is not None
        assert len(page.data) <= page.per_page
        assert int(fake_api.last_request.url.params["per_page"]) == page.per_page
