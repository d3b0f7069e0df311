"""
Dependencias de acesso ao contexto da aplicacao.
"""
from typing import AsyncGenerator
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.context import AppContext
from app.core.security import SecurityService
from app.infrastructure.media.base import MediaStorage


def get_context(request: Request) -> AppContext:
    """Contexto criado no startup (ou injetado nos testes)."""
    return request.app.state.context


async def get_db(
    context: AppContext = Depends(get_context)
) -> AsyncGenerator[AsyncSession, None]:
    """
    Sessao de banco por requisicao, obtida do pool do contexto.
    Os casos de uso fazem commit explicito; aqui so ha rollback em caso de erro.

    Yields:
        AsyncSession: Sessao de banco de dados
    """
    async with context.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


def get_media_storage(context: AppContext = Depends(get_context)) -> MediaStorage:
    return context.media


def get_security_service(context: AppContext = Depends(get_context)) -> SecurityService:
    return context.security
