"""Shared fixtures: in-memory store, sessions and an HTTP client."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from backlog.core.config import Settings
from backlog.domain.catalog.entities import PlaylistType, Role, Session, Visibility
from backlog.infrastructure.catalog.database import Database, build_engine
from backlog.main import create_app
from backlog.shared.security.tokens import encode_session

TEST_SECRET = "test-secret-that-is-long-enough-for-hs256"


@pytest.fixture
def database():
    """Fresh in-memory SQLite store with every table created."""
    db = Database(build_engine("sqlite://"))
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def admin() -> Session:
    return Session(user_id="admin-1", role=Role.ADMIN)


@pytest.fixture
def user() -> Session:
    return Session(user_id="user-1", role=Role.USER)


@pytest.fixture
def other_user() -> Session:
    return Session(user_id="user-2", role=Role.USER)


@pytest.fixture
def franchise(database):
    return database.franchises.create(
        {"name": "Zelda", "description": "Adventure series", "background_image": "zelda.png"}
    )


@pytest.fixture
def publisher(database):
    return database.publishers.create(
        {"name": "Nintendo", "description": "Kyoto publisher", "cover_image": "nintendo.png"}
    )


@pytest.fixture
def make_game(database, franchise, publisher):
    """Factory inserting games attached to the shared franchise and publisher."""

    def _make(name: str = "Breath of the Wild"):
        return database.games.create(
            {
                "name": name,
                "description": f"{name} description",
                "cover_image": "cover.png",
                "background_image": "background.png",
                "release_date": date(2017, 3, 3),
                "franchise_id": franchise.id,
                "publisher_id": publisher.id,
            }
        )

    return _make


@pytest.fixture
def make_playlist(database):
    """Factory inserting playlists straight through the repository."""

    def _make(
        user_id: str = "user-1",
        visibility: Visibility = Visibility.PUBLIC,
        name: str = "Backlog",
    ):
        return database.playlists.create(
            {
                "name": name,
                "description": None,
                "type": PlaylistType.BACKLOG,
                "visibility": visibility,
                "user_id": user_id,
            }
        )

    return _make


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        auth_secret=TEST_SECRET,
        rate_limit_enabled=False,
    )


@pytest.fixture
def client(settings, database):
    app = create_app(settings=settings, database=database)
    with TestClient(app) as test_client:
        yield test_client


def bearer(session: Session, secret: str = TEST_SECRET) -> dict[str, str]:
    """Authorization header carrying a token for ``session``."""
    return {"Authorization": f"Bearer {encode_session(session, secret)}"}


@pytest.fixture
def admin_headers(admin):
    return bearer(admin)


@pytest.fixture
def user_headers(user):
    return bearer(user)


@pytest.fixture
def other_user_headers(other_user):
    return bearer(other_user)
