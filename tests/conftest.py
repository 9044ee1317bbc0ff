"""Test configuration and fixtures."""

from uuid import uuid4

from sonic.config import Settings
from sonic.domain.model import Post, User
from sonic.domain.value import PostType, UserId, UserRole
from sonic.util.jwt import create_token
from sonic.util.password import hash_password

TEST_PASSWORD = "correct-horse-battery"


def make_user(
    email: str = "alice@example.com",
    display_name: str = "Alice",
    role: UserRole = UserRole.USER,
    password: str = TEST_PASSWORD,
) -> User:
    """Helper to build a user with a real password hash."""
    return User.create_new(
        email=email,
        password_hash=hash_password(password),
        display_name=display_name,
        role=role,
    )


def make_post(
    author_id: UserId | None = None,
    type: PostType = PostType.EXPERIENCE,
    title: str = "First session with the new synth",
    body: str = "Spent the evening patching and recording.",
    tags: list[str] | None = None,
    campaign_goal: str | None = None,
) -> Post:
    """Helper to build a post, with a random author unless one is given."""
    return Post.create_new(
        type=type,
        title=title,
        body=body,
        author_id=author_id or UserId(uuid4()),
        tags=tags,
        campaign_goal=campaign_goal,
    )


def make_campaign(author_id: UserId | None = None, **kwargs) -> Post:
    """Helper to build a campaign post."""
    return make_post(
        author_id=author_id,
        type=PostType.CAMPAIGN,
        title=kwargs.pop("title", "Record 30 songs in 30 days"),
        campaign_goal=kwargs.pop("campaign_goal", "Thirty finished demos"),
        **kwargs,
    )


def bearer(token: str) -> dict[str, str]:
    """Authorization header for an access token."""
    return {"Authorization": f"Bearer {token}"}


def register_user(
    client, email: str = "alice@example.com", display_name: str = "Alice"
) -> dict:
    """Register through the API and return the auth response body."""
    response = client.post(
        "/auth/register",
        json={"email": email, "password": TEST_PASSWORD, "displayName": display_name},
    )
    assert response.status_code == 201, response.text
    return response.json()


def admin_token(user_id: str | None = None) -> str:
    """Access token carrying the Admin role, signed with the default settings."""
    token, _ = create_token(
        user_id=user_id or str(uuid4()),
        email="admin@example.com",
        display_name="Admin",
        role=UserRole.ADMIN.value,
        settings=Settings().auth,
    )
    return token
