"""
Endpoints dos cultos.
Escrita (POST/PUT/DELETE) exige token; a leitura do ultimo culto e publica.
"""
from typing import Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile

from app.api.dependencies.auth_deps import get_current_admin
from app.api.dependencies.use_case_deps import get_culto_use_cases
from app.application.dto.culto_dto import CultoResponseDTO, StatusResponseDTO
from app.application.use_cases.culto_use_cases import CultoUseCases
from app.domain.entities.admin import AdminIdentity

router = APIRouter(prefix="/cultos", tags=["Cultos"])


@router.post("", response_model=StatusResponseDTO)
async def create_culto(
    titulo: Optional[str] = Form(None),
    imagem: Optional[UploadFile] = File(None),
    admin: AdminIdentity = Depends(get_current_admin),
    use_cases: CultoUseCases = Depends(get_culto_use_cases),
):
    """
    Publica um culto com imagem (multipart: titulo, imagem).
    """
    return await use_cases.create_culto(titulo, imagem)


@router.get("/ultimo", response_model=Optional[CultoResponseDTO])
async def get_ultimo_culto(
    use_cases: CultoUseCases = Depends(get_culto_use_cases),
):
    """
    Culto mais recente, ou null se nenhum foi publicado.
    """
    return await use_cases.get_latest()


@router.put("/{culto_id}", response_model=StatusResponseDTO)
async def update_culto(
    culto_id: int,
    titulo: Optional[str] = Form(None),
    imagem: Optional[UploadFile] = File(None),
    admin: AdminIdentity = Depends(get_current_admin),
    use_cases: CultoUseCases = Depends(get_culto_use_cases),
):
    """
    Atualiza titulo e/ou imagem. A imagem antiga e removida depois da gravacao.
    """
    return await use_cases.update_culto(culto_id, titulo, imagem)


@router.delete("/{culto_id}", response_model=StatusResponseDTO)
async def delete_culto(
    culto_id: int,
    admin: AdminIdentity = Depends(get_current_admin),
    use_cases: CultoUseCases = Depends(get_culto_use_cases),
):
    return await use_cases.delete_culto(culto_id)
