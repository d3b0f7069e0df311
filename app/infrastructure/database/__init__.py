"""
Configuracao do banco de dados.

Importa todos os modelos para que se registrem no Base
antes da criacao das tabelas.
"""
from app.infrastructure.database.models import (
    AdminModel,
    CultoModel,
    AgendaModel
)
