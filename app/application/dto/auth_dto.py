"""
DTOs de autenticacao.
"""
from pydantic import BaseModel, Field


class LoginRequestDTO(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponseDTO(BaseModel):
    token: str
