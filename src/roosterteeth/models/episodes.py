"""Data models for the episodes endpoints.

The same record is returned by the episode list, the season episode list and
the single-episode (``/watch/{slug}``) endpoint.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import AwareDatetime

from roosterteeth.models.base import NonEmptyStr, RTModel
from roosterteeth.models.common import CastMember, Image, Tag
from roosterteeth.models.mixins import EpisodeCodeMixin, GoLiveMixin, Tier


class EpisodeAttributes(EpisodeCodeMixin, GoLiveMixin, RTModel):
    title: str
    slug: NonEmptyStr
    caption: str
    number: int
    description: str
    display_title: str
    length: int  # seconds

    advert_config: str
    advertising: bool
    # Only present on episodes that carry ad breaks
    ad_timestamps: str | None = None

    public_golive_at: AwareDatetime
    sponsor_golive_at: AwareDatetime
    member_golive_at: AwareDatetime
    original_air_date: AwareDatetime

    channel_id: str
    channel_slug: str
    season_id: str
    season_slug: str
    season_number: int

    show_title: str
    show_id: str
    show_slug: str
    is_sponsors_only: bool
    member_tier_i: int
    sort_number: int
    genres: list[str]

    is_live: bool
    is_schedulable: bool
    season_order: str
    episode_order: str
    downloadable: bool
    blacklisted_countries: list[str]
    upsell_next: bool


class EpisodeLinks(RTModel):
    reference: str
    show: str
    related_shows: str
    channel: str
    season: str
    related: str
    next: str
    videos: str
    products: str


class EpisodeCanonicalLinks(RTModel):
    reference: str


class EpisodeIncluded(RTModel):
    images: list[Image]
    tags: list[Tag]
    cast_members: list[CastMember] | None = None


class Episode(RTModel):
    """An episode of a season.

    This describes the episode itself. The playback URL lives on the
    separate ``Video`` record, which needs entitlement to fetch.
    """

    index: str
    sort: list[int] | None = None
    id: int
    kind: str
    uuid: NonEmptyStr
    attributes: EpisodeAttributes
    links: EpisodeLinks
    canonical_links: EpisodeCanonicalLinks
    included: EpisodeIncluded

    @property
    def slug(self) -> str:
        return self.attributes.slug

    @property
    def title(self) -> str:
        return self.attributes.title

    @property
    def episode_code(self) -> str:
        return self.attributes.episode_code

    @property
    def duration(self) -> timedelta:
        return timedelta(seconds=self.attributes.length)

    def is_live_for(self, tier: Tier, now: datetime | None = None) -> bool:
        """Check if the episode has gone live for "public", "sponsor" or "member"."""
        return self.attributes.is_live_for(tier, now)
