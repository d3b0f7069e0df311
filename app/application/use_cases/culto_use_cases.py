"""
Casos de uso dos cultos.

Mantem a imagem remota sincronizada com a linha do banco:
- criar: envia a imagem e grava a linha; se a gravacao falhar, apaga a imagem nova;
- atualizar: grava a linha primeiro e so depois apaga a imagem antiga;
- remover: apaga a linha e depois a imagem.

Nos caminhos de sucesso as remocoes remotas sao agendadas em BackgroundTasks e
rodam depois da resposta. Nos caminhos de erro a imagem orfa e apagada antes
de lancar a excecao. Em ambos os casos a remocao nunca altera o status
retornado ao cliente.
"""
from typing import Any, Dict, Optional
from fastapi import BackgroundTasks, UploadFile
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dto.culto_dto import CultoResponseDTO
from app.domain.entities.admin import UploadedImage
from app.infrastructure.media.base import MediaStorage
from app.infrastructure.repositories.culto_repository import CultoRepository
from app.shared.exceptions.domain import (
    EntityNotFoundException,
    StoreOperationException,
    ValidationException,
)


def _has_file(imagem: Optional[UploadFile]) -> bool:
    return imagem is not None and bool(imagem.filename)


class CultoUseCases:
    """
    Casos de uso para publicacao de cultos com imagem.
    """

    def __init__(
        self,
        db: AsyncSession,
        media: MediaStorage,
        background_tasks: BackgroundTasks
    ):
        self.db = db
        self.media = media
        self.background_tasks = background_tasks
        self.repository = CultoRepository(db)

    async def get_latest(self) -> Optional[CultoResponseDTO]:
        """
        Retorna o culto mais recente ou None se nao houver nenhum.
        """
        try:
            culto = await self.repository.get_latest()
        except SQLAlchemyError as e:
            logger.error(f"Erro ao buscar culto: {e}")
            raise StoreOperationException("Erro ao buscar culto")

        return CultoResponseDTO.model_validate(culto) if culto else None

    async def create_culto(
        self,
        titulo: Optional[str],
        imagem: Optional[UploadFile]
    ) -> Dict[str, str]:
        """
        Publica um culto.

        Args:
            titulo: Titulo do culto
            imagem: Arquivo de imagem (jpeg, png ou webp)

        Returns:
            Dict[str, str]: Status da operacao

        Raises:
            ValidationException: Titulo ou imagem ausentes
            StoreOperationException: Falha ao gravar no banco
        """
        titulo = (titulo or "").strip()
        if not titulo or not _has_file(imagem):
            raise ValidationException("Faltando título ou imagem")

        image = await self._upload(imagem)

        try:
            await self.repository.create(titulo, image.url, image.public_id)
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Erro ao inserir culto: {e}")
            await self._discard_image(image.public_id, "inserção falhou")
            raise StoreOperationException("Erro ao salvar culto")

        logger.info(f"Culto publicado: '{titulo}' ({image.public_id})")
        return {"status": "Culto publicado com sucesso!"}

    async def update_culto(
        self,
        culto_id: int,
        titulo: Optional[str],
        imagem: Optional[UploadFile]
    ) -> Dict[str, str]:
        """
        Atualiza titulo e/ou imagem de um culto.

        A imagem antiga so e apagada depois que a linha nova foi gravada,
        para que uma falha no meio nunca deixe a linha apontando para uma
        imagem removida.

        Raises:
            ValidationException: Nenhum campo informado
            EntityNotFoundException: Culto inexistente
            StoreOperationException: Falha ao gravar no banco
        """
        titulo = (titulo or "").strip() or None
        has_image = _has_file(imagem)
        if titulo is None and not has_image:
            raise ValidationException("Informe um novo título ou uma nova imagem")

        fields: Dict[str, Any] = {}
        if titulo is not None:
            fields["titulo"] = titulo

        new_image: Optional[UploadedImage] = None
        if has_image:
            new_image = await self._upload(imagem)
            fields["imagem_path"] = new_image.url
            fields["public_id"] = new_image.public_id

        old_public_id: Optional[str] = None
        try:
            if new_image:
                old_public_id = await self.repository.get_public_id(culto_id)

            affected = await self.repository.update_fields(culto_id, fields)
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Erro ao atualizar culto {culto_id}: {e}")
            if new_image:
                await self._discard_image(new_image.public_id, "atualização falhou")
            raise StoreOperationException("Erro ao atualizar culto")

        if affected == 0:
            if new_image:
                await self._discard_image(new_image.public_id, "culto inexistente")
            raise EntityNotFoundException("Culto", culto_id)

        if new_image and old_public_id:
            self._schedule_image_delete(old_public_id, "substituída")

        logger.info(f"Culto {culto_id} atualizado: {sorted(fields)}")
        return {"status": "Culto atualizado com sucesso!"}

    async def delete_culto(self, culto_id: int) -> Dict[str, str]:
        """
        Remove o culto e, depois, a imagem remota.

        Raises:
            EntityNotFoundException: Culto inexistente
            StoreOperationException: Falha ao remover no banco
        """
        try:
            public_id = await self.repository.get_public_id(culto_id)
            affected = await self.repository.delete(culto_id)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Erro ao deletar culto {culto_id}: {e}")
            raise StoreOperationException("Erro ao deletar culto")

        if affected == 0:
            raise EntityNotFoundException("Culto", culto_id)

        if public_id:
            self._schedule_image_delete(public_id, "culto removido")

        logger.info(f"Culto {culto_id} removido")
        return {"status": "Culto deletado com sucesso"}

    async def _upload(self, imagem: UploadFile) -> UploadedImage:
        """
        Valida tipo e tamanho declarados antes de ler o arquivo.
        A leitura e limitada a max_size_bytes + 1, o bastante para o upload
        rejeitar um arquivo sem tamanho declarado que passe do limite.
        """
        self.media.validate(imagem.size or 0, imagem.content_type)
        content = await imagem.read(self.media.max_size_bytes + 1)
        return await self.media.upload(content, imagem.filename, imagem.content_type)

    async def _discard_image(self, public_id: str, reason: str) -> None:
        """
        Remove na hora uma imagem que ficou sem linha.
        Usado nos caminhos de erro: a resposta de erro nao executa as BackgroundTasks.
        """
        logger.info(f"Descartando imagem '{public_id}' ({reason})")
        await self.media.delete(public_id)

    def _schedule_image_delete(self, public_id: str, reason: str) -> None:
        """Agenda a remocao best-effort da imagem para depois da resposta."""
        logger.info(f"Remoção da imagem '{public_id}' agendada ({reason})")
        self.background_tasks.add_task(self.media.delete, public_id)
