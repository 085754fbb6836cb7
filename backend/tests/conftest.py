"""
Test Configuration Module
"""

import pytest
import pytest_asyncio
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from restapi.db.models import Base, LogLoginSuccess, User
from restapi.repositories.sqlalchemy import (
    SQLAlchemyLogLoginSuccessRepository,
    SQLAlchemyUserRepository,
)


# Use in-memory database for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def async_engine():
    """Create async database engine for testing"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
    )
    
    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    yield engine
    
    # Clean up
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for testing"""
    async_session = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    
    async with async_session() as session:
        yield session


@pytest.fixture
def user_repo(db_session) -> SQLAlchemyUserRepository:
    return SQLAlchemyUserRepository(db_session)


@pytest.fixture
def log_repo(db_session) -> SQLAlchemyLogLoginSuccessRepository:
    return SQLAlchemyLogLoginSuccessRepository(db_session)


@pytest_asyncio.fixture
async def users(db_session) -> dict[str, User]:
    """Three persisted users keyed by username"""
    data = [
        ("john", "John", "Doe", "john.doe@example.com"),
        ("jane", "Jane", "Doe", "jane.doe@example.com"),
        ("alice", "Alice", "Smith", "alice@example.org"),
    ]
    created = {}
    for username, first_name, last_name, email in data:
        user = User(
            username=username,
            first_name=first_name,
            last_name=last_name,
            email=email,
        )
        db_session.add(user)
        created[username] = user
    await db_session.commit()
    return created


@pytest_asyncio.fixture
async def login_logs(db_session, users) -> list[LogLoginSuccess]:
    """Login log rows: two for john, one for alice"""
    logs = [
        LogLoginSuccess(
            user=users["john"],
            ip="10.0.0.1",
            host="api.example.com",
            agent="Mozilla/5.0 (X11; Linux x86_64) Firefox/120.0",
            client_type="browser",
            client_name="Firefox",
            os_name="GNU/Linux",
        ),
        LogLoginSuccess(
            user=users["john"],
            ip="10.0.0.2",
            host="api.example.com",
            agent="curl/8.4.0",
            client_type="library",
            client_name="curl",
        ),
        LogLoginSuccess(
            user=users["alice"],
            ip="192.168.1.10",
            host="admin.example.com",
            agent="Mozilla/5.0 (Macintosh) Safari/605.1.15",
            client_type="browser",
            client_name="Safari",
            os_name="Mac",
        ),
    ]
    db_session.add_all(logs)
    await db_session.commit()
    return logs
