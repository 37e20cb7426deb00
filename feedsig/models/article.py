"""
FeedSig Data Models
===================

Immutable Pydantic models for syndicated articles and their images.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from pydantic import BaseModel, Field, field_validator, AnyHttpUrl

# An article is considered new if it was posted within the last half hour.
NEW_ARTICLE_WINDOW = timedelta(seconds=1800)


def _as_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Image(BaseModel):
    """Image attached to an article or advertised by a feed."""
    url: AnyHttpUrl = Field(..., description="Image location")
    width: Optional[int] = Field(default=None, gt=0, description="Width in pixels")
    height: Optional[int] = Field(default=None, gt=0, description="Height in pixels")
    title: Optional[str] = Field(default=None, description="Alternative text or caption")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"Image({self.url})"


class Article(BaseModel):
    """Headline, text, metadata and images of a single syndicated article.

    Instances are immutable. ``images`` is stored as a tuple so the sequence
    cannot be changed by anyone holding a reference to it.
    """
    headline: str = Field(..., description="The title of the article")
    text: str = Field(
        ...,
        description="Article text included in the feed; typically a brief summary"
    )
    url: AnyHttpUrl = Field(..., description="Link to the full article")
    date: Optional[datetime] = Field(default=None, description="Publication date")
    images: Tuple[Image, ...] = Field(default=(), description="Images related to this article")
    feed_title: str = Field(default="", description="Name of the feed the article belongs to")
    feed_logo: Optional[Image] = Field(default=None, description="Full-size site logo of the feed")
    feed_icon: Optional[Image] = Field(default=None, description="Favicon of the feed")

    model_config = {"frozen": True}

    @field_validator('headline', 'text', 'feed_title', mode='before')
    @classmethod
    def absent_text_is_empty(cls, v):
        """Absent text contributes nothing rather than failing validation."""
        return "" if v is None else v

    @field_validator('images', mode='before')
    @classmethod
    def freeze_images(cls, v):
        if v is None:
            return ()
        return tuple(v)

    @field_validator('date')
    @classmethod
    def normalize_date(cls, v):
        return _as_utc(v) if v is not None else None

    def is_new(self, now: datetime, window: timedelta = NEW_ARTICLE_WINDOW) -> bool:
        """Check whether the article was published less than ``window`` before ``now``.

        Articles without a publication date are never new; a date after
        ``now`` counts as new.
        """
        if self.date is None:
            return False
        return _as_utc(now) - self.date < window

    def __str__(self) -> str:
        return f"Article({self.headline[:50]}...)"
