"""
Data Transfer Objects (DTOs) da camada de aplicacao.
"""
from .auth_dto import LoginRequestDTO, LoginResponseDTO
from .culto_dto import CultoResponseDTO, StatusResponseDTO
from .agenda_dto import AgendaCreateDTO, AgendaUpdateDTO, AgendaResponseDTO

__all__ = [
    "LoginRequestDTO",
    "LoginResponseDTO",
    "CultoResponseDTO",
    "StatusResponseDTO",
    "AgendaCreateDTO",
    "AgendaUpdateDTO",
    "AgendaResponseDTO",
]
