# blog_api/core/errors.py
from __future__ import annotations

from typing import Any, Dict, Optional


class ExceptionCode:
    INVALID = "INVALID"
    NOT_EXIST = "NOT_EXIST"
    ALREADY_EXIST = "ALREADY_EXIST"
    INCORRECT_PASSWORD = "INCORRECT_PASSWORD"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    LOGIN_REQUIRED = "LOGIN_REQUIRED"


class AppError(Exception):
    """Erro de domínio convertido em resposta JSON ``{code, message, field}``."""

    status_code: int = 400
    code: str = ExceptionCode.INVALID

    def __init__(self, message: str, *, field: Optional[str] = None, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        if code is not None:
            self.code = code

    def to_payload(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "field": self.field}


class BadRequestError(AppError):
    status_code = 400
    code = ExceptionCode.INVALID


class NotFoundError(AppError):
    status_code = 404
    code = ExceptionCode.NOT_EXIST


class AlreadyExistsError(AppError):
    status_code = 409
    code = ExceptionCode.ALREADY_EXIST


class UnauthorizedError(AppError):
    status_code = 401
    code = ExceptionCode.INVALID_TOKEN


class InvalidTokenError(UnauthorizedError):
    code = ExceptionCode.INVALID_TOKEN

    def __init__(self, message: str = "Token inválido.") -> None:
        super().__init__(message)


class TokenExpiredError(UnauthorizedError):
    code = ExceptionCode.TOKEN_EXPIRED

    def __init__(self, message: str = "Token expirado.") -> None:
        super().__init__(message)


class LoginRequiredError(UnauthorizedError):
    code = ExceptionCode.LOGIN_REQUIRED

    def __init__(self, message: str = "Login necessário.") -> None:
        super().__init__(message)
