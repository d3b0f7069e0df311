"""
Dependencias para injecao dos casos de uso.
"""
from fastapi import BackgroundTasks, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies.context_deps import get_db, get_media_storage, get_security_service
from app.application.use_cases.agenda_use_cases import AgendaUseCases
from app.application.use_cases.auth_use_cases import AuthUseCases
from app.application.use_cases.culto_use_cases import CultoUseCases
from app.core.security import SecurityService
from app.infrastructure.media.base import MediaStorage


def get_auth_use_cases(
    db: AsyncSession = Depends(get_db),
    security: SecurityService = Depends(get_security_service),
) -> AuthUseCases:
    return AuthUseCases(db, security)


def get_culto_use_cases(
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    media: MediaStorage = Depends(get_media_storage),
) -> CultoUseCases:
    """
    Casos de uso de cultos.

    As remocoes de imagem agendadas em background_tasks rodam depois do
    envio da resposta.
    """
    return CultoUseCases(db, media, background_tasks)


def get_agenda_use_cases(
    db: AsyncSession = Depends(get_db)
) -> AgendaUseCases:
    return AgendaUseCases(db)
