"""
Contexto da aplicacao.

Reune os recursos compartilhados pelos endpoints (engine do banco, fabrica de
sessoes, servidor de midia e servico de tokens). E construido uma unica vez no
startup e guardado em app.state.context.
"""
from dataclasses import dataclass
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.core.config import Settings
from app.core.security import SecurityService
from app.infrastructure.database.session import build_engine, build_session_factory, close_db
from app.infrastructure.media.base import MediaStorage
from app.infrastructure.media.cloudinary_storage import CloudinaryMediaStorage


@dataclass
class AppContext:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    media: MediaStorage
    security: SecurityService

    async def close(self) -> None:
        await close_db(self.engine)


def build_context(settings: Settings) -> AppContext:
    """
    Monta o contexto a partir da configuracao.
    Nao abre conexoes: o pool so conecta na primeira requisicao ou no check de startup.
    """
    engine = build_engine(settings)
    return AppContext(
        settings=settings,
        engine=engine,
        session_factory=build_session_factory(engine),
        media=CloudinaryMediaStorage(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_API_SECRET,
            folder=settings.CLOUDINARY_FOLDER,
            max_size_bytes=settings.max_image_size_bytes,
        ),
        security=SecurityService(
            secret_key=settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
            expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        ),
    )
