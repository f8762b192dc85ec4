# app/core/exceptions.py

from typing import Any, Dict, Optional


class AppException(Exception):
    """Base das exceções da aplicação. `status_code` vira o status HTTP."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppException):
    """Campo obrigatório ausente, grande demais ou corpo inválido."""

    status_code = 400


class NotFoundError(AppException):
    """Nenhuma linha encontrada para o id informado."""

    status_code = 404


class AuthError(AppException):
    """Login ou senha não conferem."""

    status_code = 401


class PersistenceError(AppException):
    """Falha ao executar a consulta; o detalhe fica só no log."""

    status_code = 500


class ConfigurationError(Exception):
    """Configuração obrigatória ausente. Impede a aplicação de subir."""
