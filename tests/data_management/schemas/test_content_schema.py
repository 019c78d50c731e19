"""Tests for the ContentItem schema.

Tests cover:
1. Required fields and validation errors
2. Derived text_content
3. like_ratio with missing or zero counts
4. Millisecond duration normalization
5. Immutability
"""

import pytest
from pydantic import ValidationError

from guardian_system.data_management.schemas import DURATION_MS_THRESHOLD, ContentItem


class TestContentItemValidation:
    """Tests for field validation."""

    def test_minimal_item(self):
        """Only id and title are required."""
        item = ContentItem(id="v1", title="Counting Song")

        assert item.description is None
        assert item.source_id == ""
        assert item.source_name == ""
        assert item.duration == 0
        assert item.category is None

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            ContentItem(id="", title="Counting Song")

    def test_missing_title_rejected(self):
        with pytest.raises(ValidationError):
            ContentItem(id="v1")

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError):
            ContentItem(id="v1", title="t", view_count=-1)
        with pytest.raises(ValidationError):
            ContentItem(id="v1", title="t", like_count=-5)

    def test_item_is_frozen(self):
        item = ContentItem(id="v1", title="Counting Song")
        with pytest.raises(ValidationError):
            item.title = "Changed"


class TestContentItemDerivedFields:
    """Tests for text_content, like_ratio and duration_seconds."""

    def test_text_content_is_lowercased_join(self):
        item = ContentItem(
            id="v1",
            title="ABC Song",
            source_name="Fun Channel",
            description="Sing ALONG",
        )
        assert item.text_content == "abc song fun channel sing along"

    def test_text_content_without_description(self):
        item = ContentItem(id="v1", title="ABC", source_name="Chan")
        assert item.text_content == "abc chan "

    def test_like_ratio_known(self):
        item = ContentItem(id="v1", title="t", like_count=90, dislike_count=10)
        assert item.like_ratio == pytest.approx(0.9)

    def test_like_ratio_missing_dislikes(self):
        item = ContentItem(id="v1", title="t", like_count=90)
        assert item.like_ratio is None

    def test_like_ratio_zero_votes(self):
        item = ContentItem(id="v1", title="t", like_count=0, dislike_count=0)
        assert item.like_ratio is None

    def test_duration_in_seconds_kept(self):
        item = ContentItem(id="v1", title="t", duration=DURATION_MS_THRESHOLD)
        assert item.duration_seconds == DURATION_MS_THRESHOLD

    def test_duration_in_milliseconds_normalized(self):
        item = ContentItem(id="v1", title="t", duration=300_500)
        assert item.duration_seconds == 300
