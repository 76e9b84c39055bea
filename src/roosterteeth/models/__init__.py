"""Typed records for Rooster Teeth API responses."""

from roosterteeth.models.auth import AccessToken
from roosterteeth.models.base import FIELD_RENAMES, NonEmptyStr, RTModel, decode, encode, wire_name
from roosterteeth.models.channels import Channel, ChannelAttributes, ChannelLinks
from roosterteeth.models.common import (
    CastMember,
    CastMemberAttributes,
    Image,
    ImageAttributes,
    ImageSet,
    ResultPage,
    Tag,
    TagAttributes,
)
from roosterteeth.models.episodes import (
    Episode,
    EpisodeAttributes,
    EpisodeCanonicalLinks,
    EpisodeIncluded,
    EpisodeLinks,
)
from roosterteeth.models.mixins import TIERS, EpisodeCodeMixin, GoLiveMixin, Tier
from roosterteeth.models.seasons import EpisodesAvailable, Season, SeasonAttributes, SeasonLinks
from roosterteeth.models.series import (
    Series,
    SeriesAttributes,
    SeriesCanonicalLinks,
    SeriesLinks,
)
from roosterteeth.models.videos import AdConfig, Video, VideoAttributes, VideoLinks

# Root shapes of the endpoints
ChannelPage = ResultPage[Channel]
EpisodePage = ResultPage[Episode]
SeasonPage = ResultPage[Season]
SeriesPage = ResultPage[Series]
VideoPage = ResultPage[Video]

__all__ = [
    "FIELD_RENAMES",
    "NonEmptyStr",
    "RTModel",
    "decode",
    "encode",
    "wire_name",
    "AccessToken",
    "AdConfig",
    "CastMember",
    "CastMemberAttributes",
    "Channel",
    "ChannelAttributes",
    "ChannelLinks",
    "ChannelPage",
    "Episode",
    "EpisodeAttributes",
    "EpisodeCanonicalLinks",
    "EpisodeCodeMixin",
    "EpisodeIncluded",
    "EpisodeLinks",
    "EpisodePage",
    "EpisodesAvailable",
    "GoLiveMixin",
    "Image",
    "ImageAttributes",
    "ImageSet",
    "ResultPage",
    "Season",
    "SeasonAttributes",
    "SeasonLinks",
    "SeasonPage",
    "Series",
    "SeriesAttributes",
    "SeriesCanonicalLinks",
    "SeriesLinks",
    "SeriesPage",
    "Tag",
    "TagAttributes",
    "TIERS",
    "Tier",
    "Video",
    "VideoAttributes",
    "VideoLinks",
    "VideoPage",
]
