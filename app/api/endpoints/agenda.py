"""
Endpoints da agenda de eventos.
"""
from typing import List
from fastapi import APIRouter, Depends

from app.api.dependencies.auth_deps import get_current_admin
from app.api.dependencies.use_case_deps import get_agenda_use_cases
from app.application.dto.agenda_dto import (
    AgendaCreateDTO,
    AgendaResponseDTO,
    AgendaUpdateDTO,
)
from app.application.dto.culto_dto import StatusResponseDTO
from app.application.use_cases.agenda_use_cases import AgendaUseCases
from app.domain.entities.admin import AdminIdentity

router = APIRouter(prefix="/agenda", tags=["Agenda"])


@router.get("", response_model=List[AgendaResponseDTO])
async def list_eventos(
    use_cases: AgendaUseCases = Depends(get_agenda_use_cases)
):
    """
    Lista todos os eventos ordenados por data e horario.
    """
    return await use_cases.list_eventos()


@router.post("", response_model=StatusResponseDTO)
async def create_evento(
    dto: AgendaCreateDTO,
    admin: AdminIdentity = Depends(get_current_admin),
    use_cases: AgendaUseCases = Depends(get_agenda_use_cases)
):
    return await use_cases.create_evento(dto)


@router.put("/{evento_id}", response_model=StatusResponseDTO)
async def update_evento(
    evento_id: int,
    dto: AgendaUpdateDTO,
    admin: AdminIdentity = Depends(get_current_admin),
    use_cases: AgendaUseCases = Depends(get_agenda_use_cases)
):
    """
    Atualizacao parcial: apenas os campos enviados sao alterados.
    """
    return await use_cases.update_evento(evento_id, dto)


@router.delete("/{evento_id}", response_model=StatusResponseDTO)
async def delete_evento(
    evento_id: int,
    admin: AdminIdentity = Depends(get_current_admin),
    use_cases: AgendaUseCases = Depends(get_agenda_use_cases)
):
    return await use_cases.delete_evento(evento_id)
