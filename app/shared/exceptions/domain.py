"""
Excecoes da logica de dominio.
"""
from typing import Any, Optional

from app.shared.exceptions.base import AppException


class DomainException(AppException):
    """Excecao base para erros de dominio (400)."""

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR", details=None):
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details
        )


class ValidationException(DomainException):
    """Entrada ausente ou mal formatada."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else None
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details=details
        )


class EntityNotFoundException(DomainException):
    """Operacao de alteracao/remocao sobre um ID inexistente."""

    def __init__(self, entity_name: str, entity_id: Any):
        super().__init__(
            message=f"{entity_name} não encontrado",
            error_code="ENTITY_NOT_FOUND",
            details={"entity": entity_name, "id": str(entity_id)}
        )
        self.status_code = 404


class ImageTooLargeException(DomainException):
    """Imagem acima do tamanho maximo permitido."""

    def __init__(self, size_bytes: int, max_bytes: int):
        super().__init__(
            message=f"Imagem muito grande (máximo {max_bytes // (1024 * 1024)}MB)",
            error_code="IMAGE_TOO_LARGE",
            details={"size_bytes": size_bytes, "max_bytes": max_bytes}
        )


class ImageTypeNotAllowedException(DomainException):
    """Tipo de arquivo fora da lista de imagens aceitas."""

    def __init__(self, content_type: Optional[str], allowed: list[str]):
        super().__init__(
            message=f"Tipo de arquivo não permitido: {content_type or 'desconhecido'}",
            error_code="IMAGE_TYPE_NOT_ALLOWED",
            details={"content_type": content_type, "allowed_types": allowed}
        )


class StoreOperationException(AppException):
    """
    Falha no banco de dados.
    A causa fica no log do servidor; o cliente recebe apenas a mensagem generica.
    """

    def __init__(self, message: str):
        super().__init__(
            message=message,
            status_code=500,
            error_code="STORE_ERROR"
        )


class MediaUploadException(AppException):
    """Falha ao enviar a imagem para o servidor de midia."""

    def __init__(self):
        super().__init__(
            message="Erro ao enviar imagem",
            status_code=500,
            error_code="MEDIA_UPLOAD_ERROR"
        )
