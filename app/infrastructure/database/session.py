"""
Gestao do engine e das sessoes de banco de dados.
"""
from typing import Optional
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    create_async_engine,
    async_sessionmaker
)
from sqlalchemy.orm import declarative_base

from app.core.config import Settings


# Base para os modelos SQLAlchemy
Base = declarative_base()


def _create_engine_args(settings: Settings, url: str) -> dict:
    """
    Monta os argumentos do engine conforme o tipo de banco.
    PostgreSQL/MySQL usam pool limitado; SQLite nao suporta essas opcoes.
    """
    args = {
        "echo": settings.DEBUG,
        "future": True,
    }

    if not url.startswith("sqlite"):
        args.update({
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
            "pool_pre_ping": True,
        })

    return args


def build_engine(settings: Settings, url: Optional[str] = None, **overrides) -> AsyncEngine:
    """
    Cria o engine assincrono.

    Args:
        settings: Configuracao da aplicacao
        url: URL alternativa (testes)
        overrides: Argumentos extras repassados ao create_async_engine

    Returns:
        AsyncEngine: Engine com pool de conexoes
    """
    url = url or settings.effective_database_url
    args = _create_engine_args(settings, url)
    args.update(overrides)
    return create_async_engine(url, **args)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Fabrica de sessoes ligada ao engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False
    )


async def check_connection(engine: AsyncEngine) -> None:
    """
    Verifica a conectividade com o banco executando SELECT 1.
    Propaga a excecao do driver em caso de falha.
    """
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def init_db(engine: AsyncEngine) -> None:
    """Cria as tabelas que ainda nao existem."""
    # Registra os modelos no metadata antes do create_all
    from app.infrastructure.database import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db(engine: AsyncEngine) -> None:
    """Fecha as conexoes do pool."""
    await engine.dispose()
