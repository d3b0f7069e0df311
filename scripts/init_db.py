"""
Script para criar as tabelas do banco de dados.

Uso:
    python -m scripts.init_db
"""
import asyncio
from loguru import logger

from app.core.config import settings
from app.infrastructure.database.session import build_engine, check_connection, close_db, init_db


async def main():
    logger.info("Inicializando banco de dados...")
    engine = build_engine(settings)

    try:
        await check_connection(engine)
        await init_db(engine)
        logger.success("Banco de dados inicializado")
    except Exception as e:
        logger.error(f"Erro ao inicializar banco de dados: {e}")
        raise
    finally:
        await close_db(engine)


if __name__ == "__main__":
    asyncio.run(main())
