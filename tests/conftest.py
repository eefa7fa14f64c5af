"""Pytest configuration and shared fixtures"""

import os

# Settings are read at import time; point them at test resources first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-for-jwt-signing"
os.environ["ENVIRONMENT"] = "test"
os.environ["REDIS_URL"] = "redis://localhost:6379/15"
os.environ["SITE_BASE_URL"] = "https://www.galreforms.com"

from datetime import datetime, timedelta
from typing import AsyncGenerator
from unittest.mock import Mock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from portfolio_cms.database import Base, get_db
from portfolio_cms.main import app
from portfolio_cms.models import (
    Category,
    ContentBlock,
    ImageType,
    Project,
    ProjectImage,
    ProjectVideo,
    User,
    VideoType,
)
from portfolio_cms.services.auth_service import AuthService
from portfolio_cms.services.redis_service import RedisService
from portfolio_cms.services.storage_service import StorageService, get_storage_service

TEST_DATABASE_URL = "sqlite+aiosqlite://"
TEST_PASSWORD = "correct-horse-battery"


class FakeRedis:
    """In-memory stand-in for the redis.asyncio client (expiry is not simulated)"""

    def __init__(self):
        self.store = {}
        self.expirations = {}

    async def get(self, key):
        return self.store.get(key)

    async def setex(self, key, seconds, value):
        self.store[key] = value
        self.expirations[key] = seconds

    async def delete(self, key):
        self.store.pop(key, None)

    async def incr(self, key):
        self.store[key] = str(int(self.store.get(key, 0)) + 1)
        return int(self.store[key])

    async def expire(self, key, seconds):
        self.expirations[key] = seconds

    async def ping(self):
        return True

    async def aclose(self):
        pass


@pytest.fixture(autouse=True)
def fake_redis():
    """Every test gets an empty Redis"""
    client = FakeRedis()
    RedisService._client = client
    yield client
    RedisService._client = None


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """In-memory SQLite engine shared by every connection of one test"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for testing"""
    async_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
def mock_s3_client():
    """Mock boto3 S3 client"""
    with patch("boto3.client") as mock_client:
        mock_instance = Mock()
        mock_instance.delete_objects.side_effect = lambda Bucket, Delete: {
            "Deleted": [{"Key": obj["Key"]} for obj in Delete["Objects"]]
        }
        mock_client.return_value = mock_instance
        yield mock_instance


@pytest.fixture
def storage(mock_s3_client) -> StorageService:
    """Storage service backed by the mocked S3 client"""
    return StorageService()


@pytest_asyncio.fixture
async def async_client(db_session: AsyncSession, storage: StorageService):
    """Async test client with database and storage overrides"""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage_service] = lambda: storage

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


async def _create_user(db_session: AsyncSession, email: str, role: str) -> User:
    user = User(
        email=email,
        password_hash=AuthService.hash_password(TEST_PASSWORD),
        full_name=email.split("@")[0].title(),
        role=role,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def admin_user(db_session: AsyncSession) -> User:
    return await _create_user(db_session, "admin@galreforms.com", "admin")


@pytest_asyncio.fixture
async def regular_user(db_session: AsyncSession) -> User:
    return await _create_user(db_session, "visitor@example.com", "user")


def auth_headers_for(user: User) -> dict:
    token = AuthService.create_access_token(
        user_id=str(user.id),
        email=user.email,
        role=user.role,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(admin_user: User) -> dict:
    return auth_headers_for(admin_user)


@pytest.fixture
def user_headers(regular_user: User) -> dict:
    return auth_headers_for(regular_user)


@pytest_asyncio.fixture
async def sample_category(db_session: AsyncSession) -> Category:
    category = Category(name="Cozinhas e Banheiros", slug="cozinhas-e-banheiros")
    db_session.add(category)
    await db_session.commit()
    await db_session.refresh(category)
    return category


@pytest_asyncio.fixture
async def sample_project(db_session: AsyncSession, sample_category: Category) -> Project:
    """Published project in sample_category"""
    project = Project(
        title="Reforma de Cozinha",
        slug="reforma-cozinha",
        category=sample_category.name,
        category_id=sample_category.id,
        location="Valencia",
        materials={"Bancada": "Quartzo"},
        features=["Ilha central"],
        published=True,
    )
    db_session.add(project)
    await db_session.commit()
    await db_session.refresh(project)
    return project


@pytest_asyncio.fixture
async def draft_project(db_session: AsyncSession, sample_category: Category) -> Project:
    project = Project(
        title="Obra em Andamento",
        slug="obra-em-andamento",
        category=sample_category.name,
        category_id=sample_category.id,
        published=False,
        created_at=datetime.utcnow() - timedelta(days=3),
    )
    db_session.add(project)
    await db_session.commit()
    await db_session.refresh(project)
    return project



BUCKET_URL = "https://projects.s3.us-east-1.amazonaws.com"


@pytest.fixture
def make_images(db_session: AsyncSession):
    """Factory inserting one image per order_index value, in the given order"""

    async def _make(project, image_type, order_indexes):
        images = []
        for order_index in order_indexes:
            image = ProjectImage(
                project_id=project.id,
                image_url=f"{BUCKET_URL}/{project.id}/{image_type}/{image_type}-{order_index}.jpg",
                image_type=ImageType(image_type),
                order_index=order_index,
            )
            db_session.add(image)
            images.append(image)
        await db_session.commit()
        return images

    return _make


@pytest.fixture
def make_blocks(db_session: AsyncSession):
    """Factory inserting text blocks at positions 0..count-1"""

    async def _make(project, count):
        blocks = []
        for position in range(count):
            block = ContentBlock(
                project_id=project.id,
                block_type="text",
                content={"text": f"Paragraph {position}"},
                order_index=position,
            )
            db_session.add(block)
            blocks.append(block)
        await db_session.commit()
        return blocks

    return _make


@pytest.fixture
def make_videos(db_session: AsyncSession):
    """Factory inserting videos at positions 0..count-1"""

    async def _make(project, count, video_type=VideoType.YOUTUBE):
        videos = []
        for position in range(count):
            if video_type == VideoType.UPLOAD:
                url = f"{BUCKET_URL}/{project.id}/videos/video-{position}.mp4"
            else:
                url = f"https://www.youtube.com/embed/video{position}"
            video = ProjectVideo(
                project_id=project.id,
                video_url=url,
                video_type=video_type,
                order_index=position,
            )
            db_session.add(video)
            videos.append(video)
        await db_session.commit()
        return videos

    return _make
