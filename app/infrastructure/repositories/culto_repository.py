"""
Repositorio de cultos.
Operacoes de banco para a entidade CultoModel; o commit fica com o caso de uso.
"""
from typing import Any, Dict, Optional
from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database.models import CultoModel


class CultoRepository:
    """Repositorio para gerenciar cultos no banco de dados."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, titulo: str, imagem_path: str, public_id: str) -> CultoModel:
        culto = CultoModel(titulo=titulo, imagem_path=imagem_path, public_id=public_id)
        self.db.add(culto)
        await self.db.flush()
        return culto

    async def get_latest(self) -> Optional[CultoModel]:
        """
        Retorna o culto mais recente.
        O id desempata registros criados no mesmo instante.
        """
        result = await self.db.execute(
            select(CultoModel)
            .order_by(CultoModel.criado_em.desc(), CultoModel.id.desc())
            .limit(1)
        )
        return result.scalars().first()

    async def get_public_id(self, culto_id: int) -> Optional[str]:
        """Retorna o identificador da imagem remota, ou None se o culto nao existe."""
        result = await self.db.execute(
            select(CultoModel.public_id).where(CultoModel.id == culto_id)
        )
        return result.scalar_one_or_none()

    async def update_fields(self, culto_id: int, fields: Dict[str, Any]) -> int:
        """
        Atualiza apenas as colunas informadas.

        Returns:
            int: Quantidade de linhas afetadas
        """
        result = await self.db.execute(
            update(CultoModel).where(CultoModel.id == culto_id).values(**fields)
        )
        return result.rowcount

    async def delete(self, culto_id: int) -> int:
        result = await self.db.execute(
            delete(CultoModel).where(CultoModel.id == culto_id)
        )
        return result.rowcount
