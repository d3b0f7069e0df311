"""
Casos de uso de autenticacao.

Login do administrador: valida usuario/senha contra a tabela admins e
emite um token de acesso com validade de 1 hora.
"""
import asyncio

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import SecurityService, verify_password
from app.domain.entities.admin import AdminIdentity
from app.infrastructure.repositories.admin_repository import AdminRepository
from app.shared.exceptions.auth import InvalidCredentialsException
from app.shared.exceptions.domain import StoreOperationException


class AuthUseCases:
    def __init__(self, db: AsyncSession, security: SecurityService) -> None:
        self.repository = AdminRepository(db)
        self.security = security

    async def login(self, username: str, password: str) -> str:
        """
        Autentica o administrador.

        Usuario inexistente e senha errada falham com a mesma excecao.

        Returns:
            str: Token JWT

        Raises:
            InvalidCredentialsException: Credenciais invalidas
            StoreOperationException: Falha ao consultar o banco
        """
        try:
            admin = await self.repository.get_by_username(username)
        except SQLAlchemyError as e:
            logger.error(f"Erro ao buscar administrador: {e}")
            raise StoreOperationException("Erro no servidor")

        # bcrypt e lento; roda fora do event loop
        password_hash = admin.password_hash if admin else None
        if not await asyncio.to_thread(verify_password, password, password_hash):
            logger.warning(f"Tentativa de login inválida para '{username}'")
            raise InvalidCredentialsException()

        logger.info(f"Login realizado: '{admin.username}'")
        return self.security.create_access_token(
            AdminIdentity(id=admin.id, username=admin.username)
        )
