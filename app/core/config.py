"""
Configuracao central da aplicacao.
Le variaveis de ambiente (ou .env) e oferece valores padrao para desenvolvimento.

O banco pode ser configurado por componentes (DB_HOST, DB_PORT, ...) ou
por uma URL completa em DATABASE_URL, que tem prioridade.
"""
import json
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, computed_field


class Settings(BaseSettings):
    """
    Configuracao da aplicacao.
    Cada campo corresponde a uma variavel de ambiente de mesmo nome.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Aplicacao
    APP_NAME: str = Field(default="API Cultos e Agenda")
    APP_VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="production")

    # Servidor
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000)

    # Banco de dados - componentes separados
    DB_HOST: str = Field(default="localhost")
    DB_PORT: int = Field(default=5432)
    DB_USER: str = Field(default="igreja")
    DB_PASSWORD: str = Field(default="igreja")
    DB_NAME: str = Field(default="igreja")

    # Banco de dados - URL completa (sobrescreve os componentes)
    DATABASE_URL: str = Field(default="")
    DB_POOL_SIZE: int = Field(default=10)
    DB_MAX_OVERFLOW: int = Field(default=0)
    # None = espera sem limite na fila do pool
    DB_POOL_TIMEOUT: Optional[float] = Field(default=None)

    # Cloudinary (hospedagem das imagens dos cultos)
    CLOUDINARY_CLOUD_NAME: str = Field(default="")
    CLOUDINARY_API_KEY: str = Field(default="")
    CLOUDINARY_API_SECRET: str = Field(default="")
    CLOUDINARY_FOLDER: str = Field(default="cultos")
    MAX_IMAGE_SIZE_MB: int = Field(default=5)

    # Seguranca
    SECRET_KEY: str = Field(default="change-this-secret-key-in-production")
    ALGORITHM: str = Field(default="HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60)

    # CORS (lista JSON, lista separada por virgulas ou "*")
    CORS_ORIGINS: str = Field(default="*")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="logs/app.log")

    @computed_field
    @property
    def effective_database_url(self) -> str:
        """
        URL efetiva do banco.
        Usa DATABASE_URL quando definida; caso contrario monta a partir dos componentes.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @computed_field
    @property
    def max_image_size_bytes(self) -> int:
        return self.MAX_IMAGE_SIZE_MB * 1024 * 1024

    @computed_field
    @property
    def is_development(self) -> bool:
        """Indica se o ambiente e de desenvolvimento."""
        return self.ENVIRONMENT.lower() == "development"


def get_cors_origins(cors_string: str) -> List[str]:
    """
    Interpreta a configuracao de CORS.
    Aceita "*" para todas as origens ou uma lista JSON.
    """
    if cors_string == "*":
        return ["*"]
    try:
        return json.loads(cors_string)
    except json.JSONDecodeError:
        return [origin.strip() for origin in cors_string.split(",")]


# Instancia global de configuracao
settings = Settings()
