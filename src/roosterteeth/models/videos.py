"""Data models for the watch/videos endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import AwareDatetime

from roosterteeth.models.base import NonEmptyStr, RTModel
from roosterteeth.models.mixins import GoLiveMixin

if TYPE_CHECKING:
    from roosterteeth.models.episodes import Episode


class AdConfig(RTModel):
    """Ad network configuration for a video."""

    nw: str
    caid: str
    afid: str
    prof: str
    ad_timestamps: list[int] | None = None
    preroll: list[str]
    midroll: list[str]


class VideoAttributes(GoLiveMixin, RTModel):
    url: str
    content_id: int
    content_slug: str
    content_uuid: str

    public_golive_at: AwareDatetime
    sponsor_golive_at: AwareDatetime
    member_golive_at: AwareDatetime

    media_type: str
    member_tier: str
    embed: bool
    is_sponsors_only: bool
    # Missing on older uploads
    image_pattern_url: str | None = None
    bif_url: str | None = None
    ad_config: AdConfig | None = None


class VideoLinks(RTModel):
    reference: str
    content: str
    download: str


class Video(RTModel):
    """Playback descriptor (m3u8 URL and friends) for one episode."""

    index: str
    score: float
    id: int
    kind: str
    uuid: NonEmptyStr
    attributes: VideoAttributes
    links: VideoLinks

    @property
    def url(self) -> str:
        """The playlist URL."""
        return self.attributes.url

    def is_for(self, episode: Episode) -> bool:
        """Check if this video plays the given episode."""
        return (
            self.attributes.content_id == episode.id
            and self.attributes.content_uuid == episode.uuid
        )
