"""
Dependencia de autenticacao para rotas protegidas.

- sem header Authorization: Bearer -> 401
- token expirado -> 401 (mensagem pede novo login)
- token invalido -> 403
"""
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.api.dependencies.context_deps import get_security_service
from app.core.security import SecurityService
from app.domain.entities.admin import AdminIdentity
from app.shared.exceptions.auth import UnauthorizedException

# auto_error=False para devolver o 401 no formato de erro da aplicacao
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    security: SecurityService = Depends(get_security_service),
) -> AdminIdentity:
    """
    Valida o token Bearer e retorna o administrador autenticado.

    Raises:
        UnauthorizedException: Token ausente
        TokenExpiredException: Token expirado
        InvalidTokenException: Token malformado ou assinatura invalida
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException()
    return security.decode_access_token(credentials.credentials)
