"""
Contrato do armazenamento de imagens.

A validacao (tipo e tamanho) acontece aqui, antes de qualquer chamada remota;
as implementacoes concretas so precisam gravar e apagar o objeto.
"""
import re
import time
from abc import ABC, abstractmethod
from pathlib import PurePath
from typing import Optional

from loguru import logger

from app.domain.entities.admin import UploadedImage
from app.shared.exceptions.domain import (
    ImageTooLargeException,
    ImageTypeNotAllowedException,
    MediaUploadException,
)


ALLOWED_IMAGE_TYPES = ["image/jpeg", "image/png", "image/webp"]

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def build_object_name(filename: Optional[str], timestamp: Optional[float] = None) -> str:
    """
    Nome do objeto remoto: momento do upload em milissegundos + nome original
    sem extensao e sem caracteres nao alfanumericos.

    Example:
        build_object_name("Culto de Domingo!.png", 1714521600.0)
        -> "1714521600000-CultodeDomingo"
    """
    timestamp = time.time() if timestamp is None else timestamp
    stem = PurePath(filename or "").stem
    sanitized = _NON_ALNUM.sub("", stem) or "imagem"
    return f"{int(timestamp * 1000)}-{sanitized}"


class MediaStorage(ABC):
    """
    Servidor de midia para as imagens dos cultos.

    upload() valida e envia; delete() e uma acao compensatoria best-effort:
    falhas sao registradas no log e nunca propagadas nem repetidas.
    """

    def __init__(self, max_size_bytes: int, allowed_types: Optional[list[str]] = None):
        self.max_size_bytes = max_size_bytes
        self.allowed_types = allowed_types or list(ALLOWED_IMAGE_TYPES)

    def validate(self, size_bytes: int, content_type: Optional[str]) -> None:
        """
        Verifica tipo e tamanho da imagem.

        Raises:
            ImageTypeNotAllowedException: Tipo fora de jpeg/png/webp
            ImageTooLargeException: Tamanho acima do limite
        """
        if content_type not in self.allowed_types:
            raise ImageTypeNotAllowedException(content_type, self.allowed_types)
        if size_bytes > self.max_size_bytes:
            raise ImageTooLargeException(size_bytes, self.max_size_bytes)

    async def upload(
        self,
        content: bytes,
        filename: Optional[str],
        content_type: Optional[str]
    ) -> UploadedImage:
        """
        Valida e envia a imagem.

        Returns:
            UploadedImage: URL publica e identificador para remocao

        Raises:
            ImageTypeNotAllowedException, ImageTooLargeException: Entrada invalida
            MediaUploadException: Falha no servidor de midia
        """
        self.validate(len(content), content_type)
        object_name = build_object_name(filename)

        try:
            image = await self._store(content, object_name, content_type)
        except Exception as e:
            logger.error(f"Erro ao enviar imagem '{object_name}': {e}")
            raise MediaUploadException() from e

        logger.info(f"Imagem enviada: {image.public_id}")
        return image

    async def delete(self, public_id: Optional[str]) -> None:
        """Remove a imagem remota sem nunca lancar excecao."""
        if not public_id:
            return
        try:
            removed = await self._destroy(public_id)
        except Exception as e:
            logger.warning(f"Falha ao remover imagem '{public_id}': {e}")
            return

        if removed:
            logger.info(f"Imagem removida: {public_id}")
        else:
            logger.warning(f"Servidor de mídia não removeu a imagem '{public_id}'")

    @abstractmethod
    async def _store(
        self,
        content: bytes,
        object_name: str,
        content_type: Optional[str]
    ) -> UploadedImage:
        """Grava o objeto remoto e retorna sua referencia."""
        pass

    @abstractmethod
    async def _destroy(self, public_id: str) -> bool:
        """Apaga o objeto remoto; retorna True se o servidor confirmou."""
        pass
