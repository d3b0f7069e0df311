"""
Casos de uso da agenda de eventos.
"""
from typing import Dict, List
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dto.agenda_dto import (
    AgendaCreateDTO,
    AgendaResponseDTO,
    AgendaUpdateDTO,
)
from app.infrastructure.repositories.agenda_repository import AgendaRepository
from app.shared.exceptions.domain import EntityNotFoundException, StoreOperationException


class AgendaUseCases:
    """
    CRUD dos eventos da agenda.
    A validacao de formato (data, horario) ja chega feita pelos DTOs.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = AgendaRepository(db)

    async def list_eventos(self) -> List[AgendaResponseDTO]:
        """
        Lista os eventos ordenados por data e horario (mais proximos primeiro).
        """
        try:
            eventos = await self.repository.get_all()
        except SQLAlchemyError as e:
            logger.error(f"Erro ao buscar eventos: {e}")
            raise StoreOperationException("Erro ao buscar eventos")
        return [AgendaResponseDTO.model_validate(evento) for evento in eventos]

    async def create_evento(self, dto: AgendaCreateDTO) -> Dict[str, str]:
        try:
            evento = await self.repository.create(
                titulo=dto.titulo,
                data_evento=dto.data_evento,
                horario=dto.horario,
                local=dto.local
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Erro ao inserir evento: {e}")
            raise StoreOperationException("Erro ao cadastrar evento")

        logger.info(f"Evento {evento.id} adicionado: '{dto.titulo}' em {dto.data_evento} {dto.horario}")
        return {"status": "Evento adicionado com sucesso!"}

    async def update_evento(self, evento_id: int, dto: AgendaUpdateDTO) -> Dict[str, str]:
        """
        Atualiza somente os campos informados.

        Raises:
            EntityNotFoundException: Evento inexistente
        """
        fields = dto.changed_fields()
        try:
            affected = await self.repository.update_fields(evento_id, fields)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Erro ao atualizar evento {evento_id}: {e}")
            raise StoreOperationException("Erro ao atualizar evento")

        if affected == 0:
            raise EntityNotFoundException("Evento", evento_id)

        logger.info(f"Evento {evento_id} atualizado: {sorted(fields)}")
        return {"status": "Evento atualizado com sucesso"}

    async def delete_evento(self, evento_id: int) -> Dict[str, str]:
        try:
            affected = await self.repository.delete(evento_id)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Erro ao deletar evento {evento_id}: {e}")
            raise StoreOperationException("Erro ao deletar evento")

        if affected == 0:
            raise EntityNotFoundException("Evento", evento_id)

        logger.info(f"Evento {evento_id} removido")
        return {"status": "Evento deletado com sucesso"}
