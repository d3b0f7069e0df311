"""
Ponto de entrada principal da aplicacao FastAPI.
Configura a aplicacao, middlewares, rotas e ciclo de vida.
"""
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings, get_cors_origins
from app.core.context import AppContext
from app.core.events import lifespan
from app.api.router import api_router
from app.api.middlewares.error_handler import ErrorHandlerMiddleware
from app.shared.exceptions.base import AppException


def _validation_message(exc: RequestValidationError) -> tuple[str, Optional[str]]:
    """
    Converte o primeiro erro de validacao em uma mensagem que cita o campo.
    """
    errors = exc.errors()
    if not errors:
        return "Dados inválidos", None

    error = errors[0]
    if error.get("type") == "json_invalid":
        return "JSON inválido", None

    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    field = loc[-1] if loc else None

    if error.get("type") == "missing":
        if field is None:
            return "Corpo da requisição ausente", None
        return f"Campo obrigatório: {field}", field
    ctx_error = (error.get("ctx") or {}).get("error")
    if ctx_error is not None:
        return str(ctx_error), field
    if field:
        return f"Campo inválido: {field}", field
    return error.get("msg", "Dados inválidos"), None


def create_application(context: Optional[AppContext] = None) -> FastAPI:
    """
    Factory que cria e configura a aplicacao FastAPI.

    Args:
        context: Contexto pronto (testes). Sem ele, o contexto e montado no startup.

    Returns:
        FastAPI: Aplicacao configurada
    """
    application = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Backend de conteúdo da igreja: cultos e agenda",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    if context is not None:
        application.state.context = context

    cors_origins = get_cors_origins(settings.CORS_ORIGINS)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_middleware(ErrorHandlerMiddleware)

    application.include_router(api_router)

    @application.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.error_code,
                "message": exc.message,
                "details": exc.details
            }
        )

    # Erros de validacao dos DTOs respondem 400 (e nao 422)
    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message, field = _validation_message(exc)
        return JSONResponse(
            status_code=400,
            content={
                "error": "VALIDATION_ERROR",
                "message": message,
                "details": {"field": field} if field else {}
            }
        )

    @application.get("/health", tags=["Health"])
    async def health_check():
        """Endpoint para verificar o estado da aplicacao."""
        return {
            "status": "healthy",
            "app_name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT
        }

    return application


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
