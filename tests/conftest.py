"""
tests/conftest.py

Test fixtures for API integration and unit tests.
Includes async clients, fake users, schema mock data, dependency overrides,
and an in-memory SQLite database for service-level tests.
"""
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# --- Imports ---
from collections.abc import AsyncGenerator, Generator
from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from main import app
from gighub.auth.schemas import ProfileData
from gighub.core.dependencies import get_current_user
from gighub.core.limiter import limiter
from gighub.core.security import get_password_hash
from gighub.database.base import Base
from gighub.database.enums import UserRole
from gighub.database.models import Profile, User
from gighub.database.session import enable_sqlite_foreign_keys, get_db
from gighub.gig.models import Gig
from gighub.gig.schemas import FreelancerInfo, GigRead

limiter.enabled = False

TEST_PASSWORD = "secret123"


# --- Core Test Fixtures ---


@pytest.fixture(scope="session")
def transport() -> ASGITransport:
    """Fixture for ASGI transport."""
    return ASGITransport(app=app)


@pytest_asyncio.fixture(scope="function")
async def async_client(transport: ASGITransport) -> AsyncGenerator[AsyncClient, None]:
    """Fixture for HTTP async client."""
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# --- Fake User Fixtures ---


def _fake_user(role: UserRole, name: str, email: str) -> User:
    return User(
        id=uuid4(),
        name=name,
        email=email,
        role=role,
        hashed_password="fakehashedpassword",
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
        profile=Profile(skills=["testing"], portfolio=[], bio="Test bio", location="Remote"),
        wishlist_items=[],
    )


@pytest.fixture
def fake_client_user() -> User:
    """Fixture for a fake client user."""
    return _fake_user(UserRole.CLIENT, "Client Test", "client.test@example.com")


@pytest.fixture
def fake_freelancer_user() -> User:
    """Fixture for a fake freelancer user."""
    return _fake_user(UserRole.FREELANCER, "Freelancer Test", "freelancer.test@example.com")


# --- Dependency Override Fixtures ---


@pytest_asyncio.fixture
async def override_get_db() -> AsyncGenerator[None, None]:
    """Override for the database dependency."""

    async def _override() -> AsyncGenerator[AsyncMock, None]:
        yield AsyncMock()

    app.dependency_overrides[get_db] = _override
    yield
    app.dependency_overrides.pop(get_db, None)


@pytest_asyncio.fixture
async def mock_current_client_user(fake_client_user: User) -> AsyncGenerator[User, None]:
    """Mock the current user as a client."""
    app.dependency_overrides[get_current_user] = lambda: fake_client_user
    yield fake_client_user
    app.dependency_overrides.pop(get_current_user, None)


@pytest_asyncio.fixture
async def mock_current_freelancer_user(fake_freelancer_user: User) -> AsyncGenerator[User, None]:
    """Mock the current user as a freelancer."""
    app.dependency_overrides[get_current_user] = lambda: fake_freelancer_user
    yield fake_freelancer_user
    app.dependency_overrides.pop(get_current_user, None)


# --- Fake Data Fixtures (Schema Instances) ---


@pytest.fixture
def fake_gig_read(fake_freelancer_user: User) -> GigRead:
    """Fixture for a fake GigRead."""
    now = datetime.now(timezone.utc)
    return GigRead(
        id=uuid4(),
        freelancer_id=fake_freelancer_user.id,
        freelancer=FreelancerInfo(
            id=fake_freelancer_user.id,
            name=fake_freelancer_user.name,
            profile=ProfileData(skills=["testing"]),
        ),
        title="Professional logo design",
        description="I will design a clean, modern logo for your brand with three revisions.",
        category="Design",
        price=50.0,
        delivery_time=3,
        tags=["logo", "branding"],
        images=[],
        is_active=True,
        views=0,
        average_rating=0.0,
        total_ratings=0,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def valid_gig_payload() -> dict:
    """Request body for a gig that passes every bound."""
    return {
        "title": "Logo design!",  # 12 characters
        "description": "A" * 60,
        "category": "Design",
        "price": 50,
        "deliveryTime": 3,
        "tags": ["logo"],
    }


# --- Database Fixtures ---


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory SQLite database with every table created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=db_engine, autoflush=False, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


async def create_user(
    session: AsyncSession, role: UserRole, name: str, email: str
) -> User:
    user = User(
        name=name,
        email=email,
        role=role,
        hashed_password=get_password_hash(TEST_PASSWORD),
        profile=Profile(skills=[], portfolio=[]),
        wishlist_items=[],
    )
    session.add(user)
    await session.commit()
    return user


async def create_gig(session: AsyncSession, freelancer: User, **overrides: object) -> Gig:
    fields: dict[str, object] = {
        "title": "Logo design!",
        "description": "A" * 60,
        "category": "Design",
        "price": 50.0,
        "delivery_time": 3,
        "tags": [],
        "images": [],
        "is_active": True,
        "views": 0,
        "average_rating": 0.0,
        "total_ratings": 0,
    }
    fields.update(overrides)
    gig = Gig(freelancer=freelancer, **fields)
    session.add(gig)
    await session.commit()
    return gig


@pytest_asyncio.fixture
async def freelancer(db_session: AsyncSession) -> User:
    return await create_user(db_session, UserRole.FREELANCER, "Fran Freelancer", "fran@example.com")


@pytest_asyncio.fixture
async def other_freelancer(db_session: AsyncSession) -> User:
    return await create_user(db_session, UserRole.FREELANCER, "Olli Other", "olli@example.com")


@pytest_asyncio.fixture
async def client_user(db_session: AsyncSession) -> User:
    return await create_user(db_session, UserRole.CLIENT, "Cory Client", "cory@example.com")


@pytest_asyncio.fixture
async def second_client(db_session: AsyncSession) -> User:
    return await create_user(db_session, UserRole.CLIENT, "Sam Second", "sam@example.com")


@pytest_asyncio.fixture
async def gig(db_session: AsyncSession, freelancer: User) -> Gig:
    return await create_gig(db_session, freelancer)


# --- Live Application Fixture ---


@pytest.fixture
def live_db(session_factory: async_sessionmaker[AsyncSession]) -> Generator[None, None, None]:
    """Routes every request to its own session on the in-memory database."""

    async def _override() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override
    yield
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def make_gig(db_session: AsyncSession):
    """Factory persisting extra gigs in the test database."""

    async def _make(owner: User, **overrides: object) -> Gig:
        return await create_gig(db_session, owner, **overrides)

    return _make


@pytest.fixture
def make_user(db_session: AsyncSession):
    """Factory persisting extra accounts in the test database."""

    async def _make(role: UserRole, name: str, email: str) -> User:
        return await create_user(db_session, role, name, email)

    return _make
