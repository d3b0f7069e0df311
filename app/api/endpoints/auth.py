"""
Endpoint de login do administrador.
"""
from fastapi import APIRouter, Depends, status

from app.api.dependencies.use_case_deps import get_auth_use_cases
from app.application.dto.auth_dto import LoginRequestDTO, LoginResponseDTO
from app.application.use_cases.auth_use_cases import AuthUseCases


router = APIRouter(tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponseDTO,
    status_code=status.HTTP_200_OK,
    summary="Login do administrador",
)
async def login(
    dto: LoginRequestDTO,
    use_cases: AuthUseCases = Depends(get_auth_use_cases),
) -> LoginResponseDTO:
    """
    Valida usuario e senha e retorna um token Bearer valido por 1 hora.
    """
    token = await use_cases.login(dto.username, dto.password)
    return LoginResponseDTO(token=token)
