"""Content item schema - the candidate being gated.

A ContentItem is built fresh from catalog metadata for every gating
decision and is never mutated (the model is frozen). Optional fields
default to None and degrade to neutral score contributions.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

# Durations above this are treated as milliseconds
DURATION_MS_THRESHOLD = 100_000


class ContentItem(BaseModel):
    """One video or track to be judged.

    Attributes:
        id: Catalog identifier of the item.
        title: Display title.
        description: Optional long description.
        source_id: Creator/channel identifier.
        source_name: Creator/channel display name.
        duration: Length in seconds; values above 100000 are milliseconds.
        view_count: Total views.
        like_count: Optional like count.
        dislike_count: Optional dislike count.
        category: Optional catalog category (compared case-insensitively).
        thumbnail_url: Optional thumbnail URL, carried for callers.
        published_at: Optional publish time, carried for callers.
    """

    id: str = Field(..., min_length=1, description="Catalog item identifier")
    title: str = Field(..., description="Display title")
    description: Optional[str] = Field(None, description="Long description")
    source_id: str = Field("", description="Creator/channel identifier")
    source_name: str = Field("", description="Creator/channel display name")
    duration: int = Field(0, ge=0, description="Seconds, or milliseconds when > 100000")
    view_count: int = Field(0, ge=0)
    like_count: Optional[int] = Field(None, ge=0)
    dislike_count: Optional[int] = Field(None, ge=0)
    category: Optional[str] = None
    thumbnail_url: Optional[str] = None
    published_at: Optional[datetime] = None

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "dQw4w9WgXcQ",
                    "title": "Nursery Rhymes Collection",
                    "description": "Sing along with your favourite rhymes",
                    "source_id": "UCBnZ16ahKA2DZ_T5W0FPUXg",
                    "source_name": "Cocomelon - Nursery Rhymes",
                    "duration": 1820,
                    "view_count": 1200000,
                    "like_count": 9800,
                    "dislike_count": 120,
                    "category": "kids",
                }
            ]
        },
    }

    @property
    def text_content(self) -> str:
        """Lowercased title, source name and description joined by spaces."""
        return f"{self.title} {self.source_name} {self.description or ''}".lower()

    @property
    def like_ratio(self) -> Optional[float]:
        """likes / (likes + dislikes) when both counts are known and non-zero."""
        if self.like_count is None or self.dislike_count is None:
            return None
        total = self.like_count + self.dislike_count
        if total == 0:
            return None
        return self.like_count / total

    @property
    def duration_seconds(self) -> int:
        """Duration normalized to seconds."""
        if self.duration > DURATION_MS_THRESHOLD:
            return self.duration // 1000
        return self.duration
