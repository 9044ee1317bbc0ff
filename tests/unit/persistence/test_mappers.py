"""Unit tests for row/model mappers and feed query helpers."""

from datetime import datetime, timezone
from uuid import uuid4

from sonic.domain.value import PostType, UserRole
from sonic.persistence.mappers import post_to_dict, row_to_post, row_to_user, user_to_dict
from sonic.persistence.repository.post import _like_pattern
from tests.conftest import make_campaign, make_user

NOW = datetime(2024, 5, 1, tzinfo=timezone.utc)


class TestMappers:
    """Tests for the mapper functions."""

    def test_enums_stored_as_names(self):
        user_row = user_to_dict(make_user(role=UserRole.ADMIN))
        post_row = post_to_dict(make_campaign())

        assert user_row["role"] == "Admin"
        assert post_row["type"] == "Campaign"

    def test_row_to_post_accepts_string_ids_and_null_tags(self):
        # Arrange
        post_id, author_id = uuid4(), uuid4()
        row = {
            "id": str(post_id),
            "type": "ModelGuide",
            "title": "Gain staging",
            "body": "Keep peaks under -6 dBFS.",
            "tags": None,
            "external_link": None,
            "author_id": str(author_id),
            "campaign_goal": None,
            "created_at": NOW,
            "updated_at": NOW,
            "is_deleted": False,
            "is_featured": True,
        }

        # Act
        post = row_to_post(row)

        # Assert
        assert post.id == post_id
        assert post.author_id == author_id
        assert post.type is PostType.MODEL_GUIDE
        assert post.tags == []
        assert post.is_featured is True

    def test_user_row_keeps_profile(self):
        # Arrange
        user = make_user().with_changes(interests=["Foley"], job_role="Mixer")

        # Act
        restored = row_to_user(user_to_dict(user))

        # Assert
        assert restored.interests == ["Foley"]
        assert restored.job_role == "Mixer"
        assert restored.role is UserRole.USER


class TestLikePattern:
    """Tests for the ILIKE search pattern."""

    def test_wraps_in_wildcards(self):
        assert _like_pattern("tape") == "%tape%"

    def test_escapes_wildcards_in_input(self):
        assert _like_pattern("100%_done") == "%100\\%\\_done%"

    def test_escapes_backslash(self):
        assert _like_pattern("a\\b") == "%a\\\\b%"
