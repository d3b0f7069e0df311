"""
Repositorio da agenda de eventos.
"""
from datetime import date
from typing import Any, Dict, List
from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database.models import AgendaModel


class AgendaRepository:
    """Repositorio para gerenciar eventos da agenda."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all(self) -> List[AgendaModel]:
        """Todos os eventos, do mais proximo ao mais distante (data, horario)."""
        result = await self.db.execute(
            select(AgendaModel).order_by(AgendaModel.data_evento, AgendaModel.horario)
        )
        return list(result.scalars().all())

    async def create(
        self,
        titulo: str,
        data_evento: date,
        horario: str,
        local: str
    ) -> AgendaModel:
        evento = AgendaModel(
            titulo=titulo,
            data_evento=data_evento,
            horario=horario,
            local=local
        )
        self.db.add(evento)
        await self.db.flush()
        return evento

    async def update_fields(self, evento_id: int, fields: Dict[str, Any]) -> int:
        result = await self.db.execute(
            update(AgendaModel).where(AgendaModel.id == evento_id).values(**fields)
        )
        return result.rowcount

    async def delete(self, evento_id: int) -> int:
        result = await self.db.execute(
            delete(AgendaModel).where(AgendaModel.id == evento_id)
        )
        return result.rowcount
