"""
Casos de uso da aplicacao.
"""
from .auth_use_cases import AuthUseCases
from .culto_use_cases import CultoUseCases
from .agenda_use_cases import AgendaUseCases

__all__ = ["AuthUseCases", "CultoUseCases", "AgendaUseCases"]
