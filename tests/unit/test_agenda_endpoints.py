"""
Tests dos endpoints /agenda.

Verifica o contrato HTTP:
- Cria eventos apenas com data e horario validos (400 caso contrario, sem gravar).
- Lista ordenada por data e horario.
- Atualizacao parcial e remocao retornam 404 para IDs inexistentes.
"""
import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database.models import AgendaModel


def _evento(**overrides) -> dict:
    evento = {
        "titulo": "Culto de Oração",
        "data_evento": "2025-03-01",
        "horario": "19:30",
        "local": "Templo",
    }
    evento.update(overrides)
    return evento


async def _count_eventos(db_session: AsyncSession) -> int:
    result = await db_session.execute(select(func.count()).select_from(AgendaModel))
    return result.scalar_one()


async def _create(client: AsyncClient, auth_headers: dict, **overrides) -> None:
    response = await client.post("/agenda", json=_evento(**overrides), headers=auth_headers)
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_create_and_list(client: AsyncClient, auth_headers: dict) -> None:
    response = await client.post("/agenda", json=_evento(), headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"status": "Evento adicionado com sucesso!"}

    eventos = (await client.get("/agenda")).json()
    assert len(eventos) == 1
    assert eventos[0]["titulo"] == "Culto de Oração"
    assert eventos[0]["data_evento"] == "2025-03-01"
    assert eventos[0]["horario"] == "19:30"


@pytest.mark.asyncio
async def test_list_is_ordered_by_date_then_time(client: AsyncClient, auth_headers: dict) -> None:
    await _create(client, auth_headers, titulo="C", data_evento="2025-03-01", horario="19:00")
    await _create(client, auth_headers, titulo="A", data_evento="2025-02-10", horario="09:00")
    await _create(client, auth_headers, titulo="B", data_evento="2025-03-01", horario="08:00")

    eventos = (await client.get("/agenda")).json()

    assert [e["titulo"] for e in eventos] == ["A", "B", "C"]


@pytest.mark.asyncio
async def test_empty_agenda_is_empty_list(client: AsyncClient) -> None:
    response = await client.get("/agenda")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_create_rejects_invalid_time(
    client: AsyncClient,
    auth_headers: dict,
    db_session: AsyncSession,
) -> None:
    response = await client.post("/agenda", json=_evento(horario="25:61"), headers=auth_headers)

    assert response.status_code == 400
    body = response.json()
    assert body["details"] == {"field": "horario"}
    assert "Horário inválido" in body["message"]
    assert await _count_eventos(db_session) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "data_evento",
    ["2025-02-30", "01/03/2025", "amanha", "20250301", "2025-W09-6", "2025-3-1"],
)
async def test_create_rejects_invalid_date(
    client: AsyncClient,
    auth_headers: dict,
    db_session: AsyncSession,
    data_evento: str,
) -> None:
    response = await client.post("/agenda", json=_evento(data_evento=data_evento), headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["details"] == {"field": "data_evento"}
    assert await _count_eventos(db_session) == 0


@pytest.mark.asyncio
async def test_create_requires_all_fields(client: AsyncClient, auth_headers: dict) -> None:
    evento = _evento()
    del evento["local"]

    response = await client.post("/agenda", json=evento, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Campo obrigatório: local"


@pytest.mark.asyncio
async def test_partial_update_changes_only_sent_fields(client: AsyncClient, auth_headers: dict) -> None:
    await _create(client, auth_headers)
    evento_id = (await client.get("/agenda")).json()[0]["id"]

    response = await client.put(
        f"/agenda/{evento_id}",
        json={"local": "Salão Social", "titulo": "  "},
        headers=auth_headers,
    )

    assert response.status_code == 200
    evento = (await client.get("/agenda")).json()[0]
    assert evento["local"] == "Salão Social"
    assert evento["titulo"] == "Culto de Oração"
    assert evento["horario"] == "19:30"


@pytest.mark.asyncio
async def test_update_revalidates_time(client: AsyncClient, auth_headers: dict) -> None:
    await _create(client, auth_headers)
    evento_id = (await client.get("/agenda")).json()[0]["id"]

    response = await client.put(f"/agenda/{evento_id}", json={"horario": "7:5"}, headers=auth_headers)

    assert response.status_code == 400
    assert (await client.get("/agenda")).json()[0]["horario"] == "19:30"


@pytest.mark.asyncio
async def test_update_without_fields_is_bad_request(client: AsyncClient, auth_headers: dict) -> None:
    response = await client.put("/agenda/1", json={}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Nenhum campo para atualizar"


@pytest.mark.asyncio
async def test_update_missing_evento_is_not_found(client: AsyncClient, auth_headers: dict) -> None:
    response = await client.put("/agenda/999", json={"titulo": "Novo"}, headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "Evento não encontrado"


@pytest.mark.asyncio
async def test_delete_twice(client: AsyncClient, auth_headers: dict) -> None:
    await _create(client, auth_headers)
    evento_id = (await client.get("/agenda")).json()[0]["id"]

    first = await client.delete(f"/agenda/{evento_id}", headers=auth_headers)
    second = await client.delete(f"/agenda/{evento_id}", headers=auth_headers)

    assert first.status_code == 200
    assert first.json() == {"status": "Evento deletado com sucesso"}
    assert second.status_code == 404
