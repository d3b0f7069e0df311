"""
Cria (ou redefine a senha de) um administrador.

Uso:
    python -m scripts.create_admin --username admin --password 'senha'
    python -m scripts.create_admin --username admin          # pede a senha
    python -m scripts.create_admin --hash-only --password 'senha'

O script e idempotente: se o usuario ja existe, apenas o hash e atualizado.
Com --hash-only apenas imprime o hash bcrypt, sem acessar o banco.
"""
import argparse
import asyncio
import getpass
import sys

from loguru import logger

from app.core.config import settings
from app.core.security import hash_password
from app.infrastructure.database.session import (
    build_engine,
    build_session_factory,
    close_db,
    init_db,
)
from app.infrastructure.repositories.admin_repository import AdminRepository


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cria ou atualiza um administrador")
    parser.add_argument("--username", help="Nome de usuário do administrador")
    parser.add_argument("--password", help="Senha (se omitida, é solicitada no terminal)")
    parser.add_argument(
        "--hash-only",
        action="store_true",
        help="Apenas imprime o hash bcrypt da senha"
    )
    args = parser.parse_args(argv)
    if not args.hash_only and not args.username:
        parser.error("--username é obrigatório (exceto com --hash-only)")
    return args


async def create_admin(username: str, password: str) -> None:
    engine = build_engine(settings)
    session_factory = build_session_factory(engine)

    try:
        await init_db(engine)
        async with session_factory() as session:
            admin = await AdminRepository(session).upsert(username, hash_password(password))
            await session.commit()
            logger.success(f"Administrador '{admin.username}' salvo (id={admin.id})")
    finally:
        await close_db(engine)


def main(argv=None) -> int:
    args = parse_args(argv)
    password = args.password or getpass.getpass("Senha: ")
    if not password:
        logger.error("A senha não pode ser vazia")
        return 1

    if args.hash_only:
        print(hash_password(password))
        return 0

    asyncio.run(create_admin(args.username, password))
    return 0


if __name__ == "__main__":
    sys.exit(main())
