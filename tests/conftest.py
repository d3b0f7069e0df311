"""
Configuracao de fixtures para pytest.

Os testes de endpoint usam um banco SQLite em memoria e um servidor de midia
falso que apenas registra o que foi enviado e removido.
"""
import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FILE", "logs/test.log")

from typing import AsyncGenerator, List, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.core.context import AppContext
from app.core.security import SecurityService, hash_password
from app.domain.entities.admin import AdminIdentity, UploadedImage
from app.infrastructure.database.models import AdminModel
from app.infrastructure.database.session import build_engine, build_session_factory, init_db
from app.infrastructure.media.base import MediaStorage


# URL do banco de teste
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "senha-forte"


class FakeMediaStorage(MediaStorage):
    """Servidor de midia em memoria."""

    def __init__(self, max_size_bytes: int = 5 * 1024 * 1024):
        super().__init__(max_size_bytes=max_size_bytes)
        self.stored: List[str] = []
        self.deleted: List[str] = []
        self.fail_store = False
        self.fail_destroy = False

    async def _store(
        self,
        content: bytes,
        object_name: str,
        content_type: Optional[str]
    ) -> UploadedImage:
        if self.fail_store:
            raise RuntimeError("cloudinary fora do ar")
        public_id = f"cultos/{object_name}"
        self.stored.append(public_id)
        return UploadedImage(
            url=f"https://res.cloudinary.com/test/image/upload/{public_id}.png",
            public_id=public_id,
        )

    async def _destroy(self, public_id: str) -> bool:
        if self.fail_destroy:
            raise RuntimeError("cloudinary fora do ar")
        self.deleted.append(public_id)
        return True


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        ENVIRONMENT="test",
        SECRET_KEY="test-secret-key",
        DATABASE_URL=TEST_DATABASE_URL,
        MAX_IMAGE_SIZE_MB=1,
    )


@pytest.fixture
def security(test_settings: Settings) -> SecurityService:
    return SecurityService(
        secret_key=test_settings.SECRET_KEY,
        algorithm=test_settings.ALGORITHM,
        expire_minutes=test_settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )


@pytest.fixture
def media(test_settings: Settings) -> FakeMediaStorage:
    return FakeMediaStorage(max_size_bytes=test_settings.max_image_size_bytes)


@pytest_asyncio.fixture
async def engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """
    Engine em memoria compartilhado por todas as sessoes do teste.
    StaticPool mantem a mesma conexao, senao cada sessao veria um banco vazio.
    """
    engine = build_engine(
        test_settings,
        url=TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def context(
    test_settings: Settings,
    engine: AsyncEngine,
    media: FakeMediaStorage,
    security: SecurityService,
) -> AppContext:
    session_factory = build_session_factory(engine)

    async with session_factory() as session:
        session.add(AdminModel(username=ADMIN_USERNAME, password_hash=hash_password(ADMIN_PASSWORD)))
        await session.commit()

    return AppContext(
        settings=test_settings,
        engine=engine,
        session_factory=session_factory,
        media=media,
        security=security,
    )


@pytest_asyncio.fixture
async def db_session(context: AppContext) -> AsyncGenerator[AsyncSession, None]:
    """Sessao avulsa para conferir o estado do banco."""
    async with context.session_factory() as session:
        yield session


@pytest.fixture
def app(context: AppContext):
    from main import create_application
    return create_application(context)


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def auth_headers(security: SecurityService) -> dict:
    token = security.create_access_token(AdminIdentity(id=1, username=ADMIN_USERNAME))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_credentials() -> dict:
    return {"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
