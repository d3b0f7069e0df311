"""
Ciclo de vida da aplicacao (startup e shutdown).

Ordem do startup:
1. configuracao carregada (app.core.config);
2. contexto montado e conectividade com o banco verificada;
3. tabelas ausentes criadas;
4. servidor passa a aceitar requisicoes.

Se o banco nao responder no startup o processo e encerrado.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator
from fastapi import FastAPI
from loguru import logger

from app.core.config import settings
from app.core.context import AppContext, build_context
from app.infrastructure.database.session import check_connection, init_db
from app.infrastructure.media.cloudinary_storage import CloudinaryMediaStorage


async def startup(app: FastAPI) -> AppContext:
    """
    Inicializa os recursos e registra o contexto em app.state.

    Se um contexto ja foi injetado (testes), ele e reaproveitado.
    """
    logger.info(f"Iniciando {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Ambiente: {settings.ENVIRONMENT}")

    app.state.log_sink_id = logger.add(
        settings.LOG_FILE,
        rotation="500 MB",
        retention="10 days",
        level=settings.LOG_LEVEL
    )

    context = getattr(app.state, "context", None) or build_context(settings)
    _validate_config(context)

    try:
        await check_connection(context.engine)
    except Exception as e:
        logger.critical(f"Erro ao conectar ao banco de dados: {e}")
        await context.close()
        raise SystemExit(1)
    logger.info("Conectado ao banco de dados")

    await init_db(context.engine)
    logger.info("Tabelas verificadas")

    app.state.context = context
    logger.success(f"Servidor pronto na porta {settings.PORT}")
    return context


async def shutdown(app: FastAPI) -> None:
    """Libera os recursos ao encerrar a aplicacao."""
    logger.info("Encerrando aplicação...")
    context = getattr(app.state, "context", None)
    if context:
        await context.close()
        logger.info("Conexões do banco encerradas")
    logger.success("Aplicação encerrada")

    sink_id = getattr(app.state, "log_sink_id", None)
    if sink_id is not None:
        logger.remove(sink_id)
        app.state.log_sink_id = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)


def _validate_config(context: AppContext) -> None:
    """Avisa sobre configuracao critica ausente."""
    warnings = []

    if isinstance(context.media, CloudinaryMediaStorage) and not context.media.is_configured():
        warnings.append("Credenciais do Cloudinary não configuradas - uploads vão falhar")

    if context.settings.SECRET_KEY == "change-this-secret-key-in-production":
        warnings.append("SECRET_KEY padrão em uso - defina uma chave própria")

    for warning in warnings:
        logger.warning(f"CONFIG: {warning}")
