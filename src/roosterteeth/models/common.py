"""Sub-structures shared by several record types."""

from __future__ import annotations

from typing import Generic, TypeVar

from roosterteeth.models.base import NonEmptyStr, RTModel

T = TypeVar("T")


class ImageAttributes(RTModel):
    """Size variants of an image."""

    thumb: str
    small: str
    medium: str
    large: str
    orientation: str
    image_type: str


class Image(RTModel):
    """An image attached to a channel, series, season or episode."""

    id: int
    uuid: NonEmptyStr
    kind: str
    attributes: ImageAttributes

    def url(self, size: str = "large") -> str:
        """Get the URL of one size variant (thumb, small, medium or large)."""
        if size not in ("thumb", "small", "medium", "large"):
            raise ValueError(f"Unknown image size: {size!r}")
        value: str = getattr(self.attributes, size)
        return value


class TagAttributes(RTModel):
    tag: str
    slug: str


class Tag(RTModel):
    """A free-form tag on an episode."""

    id: str
    uuid: NonEmptyStr
    kind: str
    attributes: TagAttributes


class CastMemberAttributes(RTModel):
    display_name: str


class CastMember(RTModel):
    """A person credited on an episode."""

    id: int
    uuid: NonEmptyStr
    kind: str
    attributes: CastMemberAttributes

    @property
    def name(self) -> str:
        return self.attributes.display_name


class ImageSet(RTModel):
    """The ``included`` block of channels, seasons and series."""

    images: list[Image]

    def by_type(self, image_type: str) -> list[Image]:
        """Get images of one kind (e.g. "poster", "cover", "title_card")."""
        return [img for img in self.images if img.attributes.image_type == image_type]


class ResultPage(RTModel, Generic[T]):
    """The envelope every endpoint wraps its records in.

    Pagination metadata is only filled by list endpoints; get endpoints
    omit it, so it decodes to None there.
    """

    data: list[T]
    page: int | None = None
    per_page: int | None = None
    total_pages: int | None = None
    total_results: int | None = None

    @property
    def is_paginated(self) -> bool:
        """Check if the response carried pagination metadata."""
        return self.page is not None and self.total_pages is not None

    @property
    def has_next_page(self) -> bool:
        """Check if a later page exists. Always False without metadata."""
        if self.page is None or self.total_pages is None:
            return False
        return self.page < self.total_pages
