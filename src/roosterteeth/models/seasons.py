"""Data models for the seasons endpoint."""

from __future__ import annotations

from pydantic import AwareDatetime

from roosterteeth.models.base import NonEmptyStr, RTModel
from roosterteeth.models.common import ImageSet


class EpisodesAvailable(RTModel):
    """Which audience tiers can already watch episodes of a season."""

    sponsor: bool
    member: bool
    public: bool


class SeasonAttributes(RTModel):
    title: str
    description: str
    slug: NonEmptyStr
    number: int
    show_id: str
    show_slug: str
    episodes_available: EpisodesAvailable
    published_at: AwareDatetime


class SeasonLinks(RTModel):
    reference: str
    episodes: str


class Season(RTModel):
    """A season of exactly one show."""

    index: str
    sort: list[int] | None = None
    id: int
    kind: str
    uuid: NonEmptyStr
    attributes: SeasonAttributes
    links: SeasonLinks
    included: ImageSet

    @property
    def slug(self) -> str:
        return self.attributes.slug

    @property
    def number(self) -> int:
        return self.attributes.number
