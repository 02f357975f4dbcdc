"""
Exceções de domínio da API.

Cada exceção carrega o status HTTP que deve ser devolvido ao cliente.
O mapeamento para respostas é feito em app/errors.py.
"""

from typing import Any, Dict, List, Optional


class AppError(Exception):
    """Erro genérico da aplicação"""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def __str__(self):
        return self.message


class CustomErrorException(AppError):
    """Erro de negócio com status HTTP definido por quem levanta"""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message, status_code)


class RecordNotFoundError(CustomErrorException):
    """Registro não encontrado pelo id informado"""

    def __init__(self, model: str = None, record_id: Any = None, message: str = "Registro não encontrado"):
        self.model = model
        self.record_id = record_id
        super().__init__(message, 404)


class ValidationError(AppError):
    """Payload não satisfaz o schema do validator"""

    status_code = 422

    def __init__(self, errors: List[Dict[str, str]], message: str = "Dados inválidos"):
        self.errors = errors
        super().__init__(message)

    def fields(self) -> List[str]:
        return [error['field'] for error in self.errors]
