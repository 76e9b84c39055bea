"""Mixin classes for Pydantic models.

Provides reusable properties for common model patterns.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal, get_args

Tier = Literal["public", "sponsor", "member"]

TIERS: tuple[str, ...] = get_args(Tier)


class EpisodeCodeMixin:
    """Mixin providing episode_code property.

    Requires the model to have season_number and number fields.

    Example:
        ```python
        class Attributes(EpisodeCodeMixin, RTModel):
            season_number: int
            number: int

        attrs = Attributes(season_number=1, number=5)
        print(attrs.episode_code)  # "S01E05"
        ```
    """

    season_number: int
    number: int

    @property
    def episode_code(self) -> str:
        """Get the episode code in S01E05 format."""
        return f"S{self.season_number:02d}E{self.number:02d}"


class GoLiveMixin:
    """Mixin for models carrying per-tier go-live timestamps.

    Requires public_golive_at, sponsor_golive_at and member_golive_at fields.
    The timestamps keep the offset the API sent them with; comparisons are
    done between aware datetimes, so the offset never needs normalizing.
    """

    public_golive_at: datetime
    sponsor_golive_at: datetime
    member_golive_at: datetime

    def golive_for(self, tier: Tier) -> datetime:
        """Get the moment the content becomes visible to a tier.

        Args:
            tier: "public", "sponsor" or "member".

        Raises:
            ValueError: For an unknown tier.
        """
        if tier not in TIERS:
            raise ValueError(f"tier must be one of {', '.join(TIERS)}, got {tier!r}")
        value: datetime = getattr(self, f"{tier}_golive_at")
        return value

    def is_live_for(self, tier: Tier, now: datetime | None = None) -> bool:
        """Check if the content has gone live for a tier.

        Args:
            tier: "public", "sponsor" or "member".
            now: Aware reference time. Defaults to the current UTC time.

        Returns:
            True if the tier's go-live timestamp is at or before ``now``.
        """
        if now is None:
            now = datetime.now(timezone.utc)
        return self.golive_for(tier) <= now
