"""
DTOs dos cultos.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CultoResponseDTO(BaseModel):
    """Post de culto como retornado pela API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    titulo: str
    imagem_path: str = Field(..., description="URL pública da imagem")
    public_id: Optional[str] = Field(None, description="Identificador da imagem no Cloudinary")
    criado_em: datetime


class StatusResponseDTO(BaseModel):
    """Resposta simples das operacoes de escrita."""

    status: str
