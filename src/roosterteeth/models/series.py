"""Data models for the shows endpoint."""

from __future__ import annotations

from pydantic import AwareDatetime

from roosterteeth.models.base import NonEmptyStr, RTModel
from roosterteeth.models.common import ImageSet


class SeriesAttributes(RTModel):
    title: str
    slug: NonEmptyStr
    genres: list[str]
    is_sponsors_only: bool

    updated_at: AwareDatetime
    published_at: AwareDatetime
    last_episode_golive_at: AwareDatetime

    summary: str
    category: str
    channel_id: str
    channel_slug: str
    season_count: int
    episode_count: int

    season_order: str
    episode_order: str

    blacklisted_countries: list[str]


class SeriesLinks(RTModel):
    reference: str
    seasons: str
    bonus_features: str
    related: str
    product_collections: str
    latest_episode: str
    s1e1: str
    # Not every show has a rich card
    rich_card_reference_url: str | None = None


class SeriesCanonicalLinks(RTModel):
    """Website (not API) links for a show."""

    reference: str
    s1e1: str


class Series(RTModel):
    """A show, e.g. Red vs. Blue."""

    index: str
    sort: list[int] | None = None
    id: int
    kind: str
    uuid: NonEmptyStr
    attributes: SeriesAttributes
    links: SeriesLinks
    canonical_links: SeriesCanonicalLinks
    included: ImageSet

    @property
    def slug(self) -> str:
        return self.attributes.slug

    @property
    def title(self) -> str:
        return self.attributes.title

    def is_blacklisted_in(self, country: str) -> bool:
        """Check if the show is blocked in a country (ISO 3166 alpha-2 code)."""
        return country.upper() in (c.upper() for c in self.attributes.blacklisted_countries)
