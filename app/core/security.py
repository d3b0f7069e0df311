"""
Utilitarios de seguranca: hashing de senha e emissao/validacao de tokens JWT.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, ExpiredSignatureError, jwt
from passlib.context import CryptContext

from app.domain.entities.admin import AdminIdentity
from app.shared.exceptions.auth import InvalidTokenException, TokenExpiredException


# Contexto para hashing de senhas
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """
    Gera o hash bcrypt (com salt) de uma senha.

    Args:
        password: Senha em texto puro

    Returns:
        str: Hash da senha
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Compara uma senha com o hash armazenado em tempo constante.

    Sem hash (usuario inexistente) executa uma verificacao ficticia para que o
    tempo de resposta seja o mesmo de uma senha errada.

    Args:
        plain_password: Senha em texto puro
        hashed_password: Hash armazenado ou None

    Returns:
        bool: True se coincidem
    """
    if not hashed_password:
        pwd_context.dummy_verify()
        return False
    return pwd_context.verify(plain_password, hashed_password)


class SecurityService:
    """
    Emissao e validacao de tokens de acesso.

    O token e stateless: nao ha lista de revogacao, qualquer token assinado e
    nao expirado continua valido ate o fim da validade.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60
    ):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_delta = timedelta(minutes=expire_minutes)

    def create_access_token(
        self,
        identity: AdminIdentity,
        issued_at: Optional[datetime] = None
    ) -> str:
        """
        Cria um token JWT de acesso.

        Args:
            identity: Administrador autenticado
            issued_at: Momento de emissao (padrao: agora, UTC)

        Returns:
            str: Token JWT assinado
        """
        issued_at = issued_at or datetime.now(timezone.utc)
        to_encode: Dict[str, Any] = {
            "sub": str(identity.id),
            "username": identity.username,
            "iat": issued_at,
            "exp": issued_at + self._expire_delta,
        }
        return jwt.encode(to_encode, self._secret_key, algorithm=self._algorithm)

    def decode_access_token(self, token: str) -> AdminIdentity:
        """
        Decodifica e valida um token JWT.

        Args:
            token: Token JWT

        Returns:
            AdminIdentity: Identidade contida no token

        Raises:
            TokenExpiredException: Se a assinatura expirou
            InvalidTokenException: Se o token e invalido ou esta incompleto
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm]
            )
        except ExpiredSignatureError:
            raise TokenExpiredException()
        except JWTError:
            raise InvalidTokenException()

        try:
            return AdminIdentity(
                id=int(payload["sub"]),
                username=payload["username"]
            )
        except (KeyError, TypeError, ValueError):
            raise InvalidTokenException("Token sem identificação do usuário")
