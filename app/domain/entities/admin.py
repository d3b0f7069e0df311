"""
Entidades de dominio: administrador autenticado e imagem hospedada.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class AdminIdentity:
    """
    Identidade do administrador extraida do token.
    Nao consulta o banco: id e username vem das claims.
    """

    id: int
    username: str

    def __post_init__(self):
        if not self.username:
            raise ValueError("O username do administrador não pode ser vazio")


@dataclass(frozen=True)
class UploadedImage:
    """Referencia estavel de uma imagem no servidor de midia."""

    url: str
    public_id: str
