"""
Excecao base para todas as excecoes da aplicacao.
"""
from typing import Optional, Dict, Any


class AppException(Exception):
    """
    Excecao base da aplicacao.
    Toda excecao personalizada deve herdar desta classe; o handler em main.py
    a converte em resposta JSON com o status_code informado.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Inicializa a excecao.

        Args:
            message: Mensagem de erro descritiva
            status_code: Codigo de status HTTP
            error_code: Codigo de erro da aplicacao
            details: Detalhes adicionais do erro
        """
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)
