"""Error taxonomy for Escavador lookups.

Errors are carried as values (inside ``FetchResult`` / ``UseCaseResult``)
and only turned into a failure report by the use case that owns the
invocation.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    AUTHENTICATION = "authentication"
    QUOTA = "quota"
    NOT_FOUND = "not_found"
    HTTP = "http"
    UNEXPECTED = "unexpected"


MSG_TOKEN_INVALIDO = "Token de acesso inválido ou expirado"
MSG_SEM_CREDITO = "Você não possui saldo em crédito da API"
MSG_TOKEN_AUSENTE = "Token do Escavador não configurado"
MSG_PROCESSO_NAO_ENCONTRADO = "Processo não encontrado"
MSG_ADVOGADO_NAO_ENCONTRADO = "Advogado não encontrado"


class EscavadorError(Exception):
    """Base error: a classified, human-readable failure."""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class InvalidParamsError(EscavadorError):
    kind = ErrorKind.VALIDATION


class MissingTokenError(EscavadorError):
    kind = ErrorKind.CONFIGURATION

    def __init__(self, message: str = MSG_TOKEN_AUSENTE) -> None:
        super().__init__(message)


class InvalidTokenError(EscavadorError):
    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str = MSG_TOKEN_INVALIDO) -> None:
        super().__init__(message, status_code=401)


class InsufficientCreditError(EscavadorError):
    kind = ErrorKind.QUOTA

    def __init__(self, message: str = MSG_SEM_CREDITO) -> None:
        super().__init__(message, status_code=402)


class NotFoundError(EscavadorError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = MSG_PROCESSO_NAO_ENCONTRADO) -> None:
        super().__init__(message, status_code=404)


class HttpFailureError(EscavadorError):
    kind = ErrorKind.HTTP


class UnexpectedResponseError(EscavadorError):
    kind = ErrorKind.UNEXPECTED
