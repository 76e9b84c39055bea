"""Data models for the channels endpoint."""

from __future__ import annotations

from roosterteeth.models.base import NonEmptyStr, RTModel
from roosterteeth.models.common import ImageSet


class ChannelAttributes(RTModel):
    name: str
    importance: int
    slug: NonEmptyStr
    brand_color: str


class ChannelLinks(RTModel):
    """Endpoints for the collections belonging to a channel."""

    reference: str
    shows: str
    movies: str
    product_collections: str
    featured_items: str
    episodes: str
    livestreams: str


class Channel(RTModel):
    """A content channel (Rooster Teeth, Achievement Hunter, ...).

    The channel slug is what the ``channel`` filter of the list
    operations expects.
    """

    index: str
    kind: str
    sort: list[int] | None = None
    id: int
    uuid: NonEmptyStr
    attributes: ChannelAttributes
    included: ImageSet
    links: ChannelLinks

    @property
    def slug(self) -> str:
        return self.attributes.slug

    @property
    def name(self) -> str:
        return self.attributes.name
