"""API test fixtures — FastAPI test client and seeded rows.

Invariants:
    - get_db dependency overridden to use the per-test in-memory DB
    - db_manager patched so the readiness probe sees the test engine
    - Seeded users get bcrypt hashes at the minimum cost factor
"""

import pytest
from httpx import ASGITransport, AsyncClient

from courses_api.infrastructure.database import DatabaseSessionManager, get_db
from courses_api.infrastructure.password_hasher import hash_secret
from courses_api.models.course import Course
from courses_api.models.user import User
import courses_api.infrastructure.database as db_module
from courses_api.main import app


ADA_EMAIL = "ada@example.com"
ADA_PASSWORD = "abc123"


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_user(test_db):
    """Ada, password abc123."""
    user = User(
        first_name="Ada", last_name="Lovelace", email_address=ADA_EMAIL,
        password=hash_secret(ADA_PASSWORD, rounds=4),
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def seed_course(test_db, seed_user):
    course = Course(
        title="Analytical Engines",
        description="Programming the difference engine.",
        estimated_time="6 hours",
        materials_needed=None,
        user_id=seed_user.id,
    )
    test_db.add(course)
    await test_db.commit()
    await test_db.refresh(course)
    return course


@pytest.fixture
def ada_auth():
    return (ADA_EMAIL, ADA_PASSWORD)
