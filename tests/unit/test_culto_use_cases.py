"""
Tests unitarios dos casos de uso de cultos com repositorio e sessao mockados.

Foco na ordem das acoes compensatorias:
- falha ao gravar descarta a imagem recem enviada;
- a imagem antiga so e removida depois do commit;
- uma falha na atualizacao nunca remove a imagem antiga.
"""
from io import BytesIO
from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from fastapi import UploadFile
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import Headers

from app.application.use_cases.culto_use_cases import CultoUseCases
from app.infrastructure.media.cloudinary_storage import CloudinaryMediaStorage
from app.domain.entities.admin import UploadedImage
from app.shared.exceptions.domain import (
    EntityNotFoundException,
    ImageTooLargeException,
    ImageTypeNotAllowedException,
    StoreOperationException,
    ValidationException,
)


NEW_IMAGE = UploadedImage(url="https://cdn.test/cultos/nova.png", public_id="cultos/nova")


def _upload_file(
    filename: str = "nova.png",
    content_type: str = "image/png",
    size: Optional[int] = None,
) -> UploadFile:
    return UploadFile(
        file=BytesIO(b"\x89PNG"),
        size=size,
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


@pytest_asyncio.fixture
async def mock_db_session():
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def mock_media():
    media = MagicMock()
    media.max_size_bytes = 5 * 1024 * 1024
    media.upload = AsyncMock(return_value=NEW_IMAGE)
    media.delete = AsyncMock()
    return media


@pytest.fixture
def background_tasks():
    return MagicMock()


@pytest.fixture
def use_cases(mock_db_session, mock_media, background_tasks) -> CultoUseCases:
    uc = CultoUseCases(mock_db_session, mock_media, background_tasks)
    uc.repository = AsyncMock()
    return uc


@pytest.mark.asyncio
async def test_create_insert_failure_discards_uploaded_image(use_cases, mock_db_session, mock_media) -> None:
    use_cases.repository.create.side_effect = OperationalError("INSERT", {}, Exception("db down"))

    with pytest.raises(StoreOperationException):
        await use_cases.create_culto("Culto", _upload_file())

    mock_db_session.rollback.assert_awaited_once()
    mock_media.delete.assert_awaited_once_with("cultos/nova")


@pytest.mark.asyncio
async def test_create_commit_failure_discards_uploaded_image(use_cases, mock_db_session, mock_media) -> None:
    mock_db_session.commit.side_effect = OperationalError("COMMIT", {}, Exception("db down"))

    with pytest.raises(StoreOperationException):
        await use_cases.create_culto("Culto", _upload_file())

    mock_media.delete.assert_awaited_once_with("cultos/nova")


@pytest.mark.asyncio
async def test_create_requires_title_before_uploading(use_cases, mock_media) -> None:
    with pytest.raises(ValidationException):
        await use_cases.create_culto("   ", _upload_file())

    mock_media.upload.assert_not_called()
    use_cases.repository.create.assert_not_called()


@pytest.mark.asyncio
async def test_update_missing_culto_discards_new_image(use_cases, mock_media, background_tasks) -> None:
    use_cases.repository.get_public_id.return_value = None
    use_cases.repository.update_fields.return_value = 0

    with pytest.raises(EntityNotFoundException):
        await use_cases.update_culto(999, None, _upload_file())

    mock_media.delete.assert_awaited_once_with("cultos/nova")
    background_tasks.add_task.assert_not_called()


@pytest.mark.asyncio
async def test_update_image_schedules_old_delete_after_commit(
    use_cases,
    mock_db_session,
    mock_media,
    background_tasks,
) -> None:
    events = []
    use_cases.repository.get_public_id.return_value = "cultos/antiga"
    use_cases.repository.update_fields.return_value = 1
    mock_db_session.commit.side_effect = lambda: events.append("commit")
    background_tasks.add_task.side_effect = lambda func, public_id: events.append(("delete", public_id))

    result = await use_cases.update_culto(1, None, _upload_file())

    assert result == {"status": "Culto atualizado com sucesso!"}
    assert events == ["commit", ("delete", "cultos/antiga")]
    use_cases.repository.update_fields.assert_awaited_once_with(
        1,
        {"imagem_path": NEW_IMAGE.url, "public_id": NEW_IMAGE.public_id},
    )
    mock_media.delete.assert_not_called()


@pytest.mark.asyncio
async def test_update_failure_keeps_old_image(use_cases, mock_db_session, mock_media, background_tasks) -> None:
    use_cases.repository.get_public_id.return_value = "cultos/antiga"
    use_cases.repository.update_fields.side_effect = OperationalError("UPDATE", {}, Exception("db down"))

    with pytest.raises(StoreOperationException):
        await use_cases.update_culto(1, "Novo", _upload_file())

    mock_db_session.rollback.assert_awaited_once()
    mock_media.delete.assert_awaited_once_with("cultos/nova")
    background_tasks.add_task.assert_not_called()


@pytest.mark.asyncio
async def test_update_title_only_touches_title(use_cases, mock_media, background_tasks) -> None:
    use_cases.repository.update_fields.return_value = 1

    await use_cases.update_culto(1, "  Novo título  ", None)

    use_cases.repository.update_fields.assert_awaited_once_with(1, {"titulo": "Novo título"})
    use_cases.repository.get_public_id.assert_not_called()
    mock_media.upload.assert_not_called()
    background_tasks.add_task.assert_not_called()


@pytest.mark.asyncio
async def test_delete_schedules_remote_delete(use_cases, mock_media, background_tasks) -> None:
    use_cases.repository.get_public_id.return_value = "cultos/antiga"
    use_cases.repository.delete.return_value = 1

    await use_cases.delete_culto(1)

    background_tasks.add_task.assert_called_once_with(mock_media.delete, "cultos/antiga")


@pytest.mark.asyncio
async def test_delete_missing_culto_skips_remote_delete(use_cases, background_tasks) -> None:
    use_cases.repository.get_public_id.return_value = None
    use_cases.repository.delete.return_value = 0

    with pytest.raises(EntityNotFoundException):
        await use_cases.delete_culto(42)

    background_tasks.add_task.assert_not_called()


@pytest.fixture
def real_storage() -> CloudinaryMediaStorage:
    return CloudinaryMediaStorage(
        cloud_name="igreja",
        api_key="key",
        api_secret="secret",
        max_size_bytes=1024,
    )


@pytest.mark.asyncio
async def test_disallowed_type_is_rejected_without_reading(mock_db_session, real_storage, background_tasks) -> None:
    uc = CultoUseCases(mock_db_session, real_storage, background_tasks)
    uc.repository = AsyncMock()
    imagem = _upload_file("video.txt", "text/plain", size=50 * 1024 * 1024)
    imagem.read = AsyncMock(return_value=b"")

    with pytest.raises(ImageTypeNotAllowedException):
        await uc.create_culto("Culto", imagem)

    imagem.read.assert_not_called()
    uc.repository.create.assert_not_called()


@pytest.mark.asyncio
async def test_declared_oversize_is_rejected_without_reading(mock_db_session, real_storage, background_tasks) -> None:
    uc = CultoUseCases(mock_db_session, real_storage, background_tasks)
    uc.repository = AsyncMock()
    imagem = _upload_file("grande.png", "image/png", size=2048)
    imagem.read = AsyncMock(return_value=b"")

    with pytest.raises(ImageTooLargeException):
        await uc.update_culto(1, None, imagem)

    imagem.read.assert_not_called()
    uc.repository.update_fields.assert_not_called()


@pytest.mark.asyncio
async def test_read_is_capped_at_the_size_limit(mock_db_session, real_storage, background_tasks) -> None:
    uc = CultoUseCases(mock_db_session, real_storage, background_tasks)
    imagem = _upload_file("sem-tamanho.png")
    imagem.read = AsyncMock(return_value=b"0" * 1025)

    with pytest.raises(ImageTooLargeException):
        await uc.create_culto("Culto", imagem)

    imagem.read.assert_awaited_once_with(1025)
