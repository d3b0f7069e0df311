"""
Repositorio de administradores (credenciais).
"""
from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database.models import AdminModel


class AdminRepository:
    """Acesso a tabela admins."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_username(self, username: str) -> Optional[AdminModel]:
        result = await self.db.execute(
            select(AdminModel).where(AdminModel.username == username)
        )
        return result.scalars().first()

    async def upsert(self, username: str, password_hash: str) -> AdminModel:
        """
        Cria o administrador ou atualiza o hash da senha se ja existir.
        Usado apenas pelo script de seed.
        """
        admin = await self.get_by_username(username)
        if admin:
            admin.password_hash = password_hash
        else:
            admin = AdminModel(username=username, password_hash=password_hash)
            self.db.add(admin)
        await self.db.flush()
        return admin
