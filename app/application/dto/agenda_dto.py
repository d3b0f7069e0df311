"""
DTOs da agenda de eventos.
Definem e validam a estrutura dos dados trocados pelos endpoints /agenda.
"""
import re
from datetime import date
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


HORARIO_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")
DATA_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_data_evento(value: Any) -> date:
    """
    Converte 'YYYY-MM-DD' em date, rejeitando datas inexistentes (ex: 2024-02-30).
    Formas compactas ou de semana ISO (20250301, 2025-W09-6) nao sao aceitas.
    """
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("Data do evento inválida, use o formato AAAA-MM-DD")
    value = value.strip()
    if not DATA_PATTERN.match(value):
        raise ValueError("Data do evento inválida, use o formato AAAA-MM-DD")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValueError("Data do evento inválida, use o formato AAAA-MM-DD")


def check_horario(value: str) -> str:
    """Aceita apenas HH:MM no formato 24 horas (00:00 a 23:59)."""
    value = value.strip()
    if not HORARIO_PATTERN.match(value):
        raise ValueError("Horário inválido, use o formato HH:MM (00:00 a 23:59)")
    return value


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class AgendaCreateDTO(BaseModel):
    """DTO para criacao de evento; todos os campos sao obrigatorios."""

    titulo: str = Field(..., min_length=1, description="Título do evento")
    data_evento: date = Field(..., description="Data do evento (AAAA-MM-DD)")
    horario: str = Field(..., description="Horário no formato HH:MM")
    local: str = Field(..., min_length=1, description="Local do evento")

    @field_validator("titulo", "local", mode="before")
    @classmethod
    def _strip_text(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("data_evento", mode="before")
    @classmethod
    def _validate_data(cls, value: Any) -> date:
        return parse_data_evento(value)

    @field_validator("horario")
    @classmethod
    def _validate_horario(cls, value: str) -> str:
        return check_horario(value)


class AgendaUpdateDTO(BaseModel):
    """
    DTO para atualizacao parcial.
    Campos ausentes ou em branco ficam inalterados; pelo menos um deve ser informado.
    """

    titulo: Optional[str] = None
    data_evento: Optional[date] = None
    horario: Optional[str] = None
    local: Optional[str] = None

    @field_validator("titulo", "local", mode="before")
    @classmethod
    def _strip_text(cls, value: Any) -> Any:
        value = _blank_to_none(value)
        return value.strip() if isinstance(value, str) else value

    @field_validator("data_evento", mode="before")
    @classmethod
    def _validate_data(cls, value: Any) -> Optional[date]:
        value = _blank_to_none(value)
        if value is None:
            return None
        return parse_data_evento(value)

    @field_validator("horario", mode="before")
    @classmethod
    def _validate_horario(cls, value: Any) -> Optional[str]:
        value = _blank_to_none(value)
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError("Horário inválido, use o formato HH:MM (00:00 a 23:59)")
        return check_horario(value)

    @model_validator(mode="after")
    def _require_any_field(self) -> "AgendaUpdateDTO":
        if not self.changed_fields():
            raise ValueError("Nenhum campo para atualizar")
        return self

    def changed_fields(self) -> Dict[str, Any]:
        """Somente os campos efetivamente informados."""
        return self.model_dump(exclude_none=True)


class AgendaResponseDTO(BaseModel):
    """Evento da agenda como retornado pela API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    titulo: str
    data_evento: date
    horario: str
    local: str
