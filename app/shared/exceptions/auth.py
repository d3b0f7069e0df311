"""
Excecoes de autenticacao e autorizacao.
"""
from app.shared.exceptions.base import AppException


class AuthException(AppException):
    """Excecao base para erros de autenticacao (401)."""

    def __init__(self, message: str, error_code: str = "AUTH_ERROR", details=None):
        super().__init__(
            message=message,
            status_code=401,
            error_code=error_code,
            details=details
        )


class InvalidCredentialsException(AuthException):
    """
    Usuario inexistente ou senha incorreta.
    A mensagem e a mesma nos dois casos para nao revelar quais usuarios existem.
    """

    def __init__(self):
        super().__init__(
            message="Usuário ou senha inválidos",
            error_code="INVALID_CREDENTIALS"
        )


class TokenExpiredException(AuthException):
    """Token com assinatura expirada."""

    def __init__(self):
        super().__init__(
            message="Token expirado, faça login novamente",
            error_code="TOKEN_EXPIRED"
        )


class UnauthorizedException(AuthException):
    """Requisicao sem token de acesso."""

    def __init__(self, message: str = "Token de acesso não fornecido"):
        super().__init__(
            message=message,
            error_code="UNAUTHORIZED"
        )


class InvalidTokenException(AppException):
    """Token malformado ou com assinatura invalida."""

    def __init__(self, message: str = "Token inválido"):
        super().__init__(
            message=message,
            status_code=403,
            error_code="FORBIDDEN"
        )
