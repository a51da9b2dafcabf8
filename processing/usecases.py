"""Lookup use cases — one network fetch cycle per invocation.

Each run walks validating -> resolving credentials -> requesting ->
normalizing and reports exactly once to the result sink. Failures are
values until ``_finish`` turns them into the report; nothing escapes
``run``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar
from urllib.parse import quote

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from escavador.errors import (
    MSG_ADVOGADO_NAO_ENCONTRADO,
    MSG_PROCESSO_NAO_ENCONTRADO,
    EscavadorError,
    InvalidParamsError,
    MissingTokenError,
    UnexpectedResponseError,
)
from escavador.http import HttpFetcher
from escavador.query import build_query
from escavador.settings import EnvReader, resolve_base_url, resolve_token
from models.params import (
    BuscarAdvogadoParams,
    BuscarMovimentacoesParams,
    BuscarProcessoParams,
    ParamsSchema,
)
from models.raw.escavador_raw import (
    EscavadorAdvogadoProcessosResponse,
    EscavadorMovimentacoesResponse,
)

from processing.sinks import ResultSink
from processing.transformers import map_movimentacoes, normalize_processo

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=ParamsSchema)


@dataclass
class UseCaseResult:
    """Outcome of one invocation: a JSON-ready payload or the error."""

    success: bool
    payload: dict[str, Any] | None = None
    error: EscavadorError | None = None

    @classmethod
    def failure(cls, error: EscavadorError) -> UseCaseResult:
        return cls(success=False, error=error)

    @property
    def message(self) -> str | None:
        return self.error.message if self.error is not None else None


def _unwrap_params(params: Any) -> Any:
    """Hosts sometimes pass the params object wrapped in a one-element list."""
    if isinstance(params, list) and len(params) == 1 and isinstance(params[0], dict):
        return params[0]
    if params is None:
        return {}
    return params


class BaseUseCase(ABC, Generic[P]):
    """Template for the lookup use cases."""

    name: ClassVar[str]
    params_model: ClassVar[type[ParamsSchema]]
    # Reported when a required parameter is missing or blank.
    required_message: ClassVar[str]
    not_found_message: ClassVar[str] = MSG_PROCESSO_NAO_ENCONTRADO

    def __init__(
        self,
        env: EnvReader,
        sink: ResultSink,
        fetcher: HttpFetcher | None = None,
    ) -> None:
        self.env = env
        self.sink = sink
        self.fetcher = fetcher or HttpFetcher()

    async def run(self, params: Any) -> UseCaseResult:
        try:
            result = await self._execute(params)
        except Exception as exc:
            logger.exception("%s: unexpected failure", self.name)
            result = UseCaseResult.failure(UnexpectedResponseError(str(exc) or type(exc).__name__))
        return self._finish(result)

    async def _execute(self, params: Any) -> UseCaseResult:
        parsed = self.validate(params)
        if isinstance(parsed, EscavadorError):
            logger.warning("%s: invalid params: %s", self.name, parsed.message)
            return UseCaseResult.failure(parsed)

        token = resolve_token(self.env)
        if not token:
            return UseCaseResult.failure(MissingTokenError())

        url = self.build_url(resolve_base_url(self.env), parsed)
        fetched = await self.fetcher.get(url, token, not_found_message=self.not_found_message)
        if not fetched.ok:
            logger.warning("%s: request failed: %s", self.name, fetched.error.message)
            return UseCaseResult.failure(fetched.error)

        return UseCaseResult(success=True, payload=self.normalize(fetched.body, parsed))

    def _finish(self, result: UseCaseResult) -> UseCaseResult:
        if result.success:
            self.sink(True, result.payload)
        else:
            self.sink(False, None, result.message)
        return result

    def validate(self, params: Any) -> P | InvalidParamsError:
        try:
            return self.params_model.model_validate(_unwrap_params(params))
        except ValidationError as exc:
            return InvalidParamsError(self._validation_message(exc))

    def _validation_message(self, exc: ValidationError) -> str:
        required: set[str] = set()
        for field_name, info in self.params_model.model_fields.items():
            if info.is_required():
                required.update({field_name, info.alias or to_camel(field_name)})

        errors = exc.errors()
        if any(err["loc"] and err["loc"][0] in required for err in errors):
            return self.required_message
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'params'}: {err['msg']}"
            for err in errors
        )
        return f"Parâmetros inválidos: {details}"

    @abstractmethod
    def build_url(self, base_url: str, params: P) -> str:
        """Full request URL for ``params``."""

    @abstractmethod
    def normalize(self, body: Any, params: P) -> dict[str, Any]:
        """Turn the decoded response body into the JSON-ready payload."""


class ProcessoUseCase(BaseUseCase[BuscarProcessoParams]):
    """Look up a single proceeding by CNJ number."""

    name = "processo"
    params_model = BuscarProcessoParams
    required_message = "numeroProcesso vazio"

    def build_url(self, base_url: str, params: BuscarProcessoParams) -> str:
        return f"{base_url}/processos/numero_cnj/{quote(params.numero_processo, safe='')}"

    def normalize(self, body: Any, params: BuscarProcessoParams) -> dict[str, Any]:
        processo = normalize_processo(body, numero=params.numero_processo)
        logger.info("processo %s: %d partes", processo.numero, len(processo.partes))
        return {"processo": processo.model_dump(mode="json", by_alias=True)}


class AdvogadoUseCase(BaseUseCase[BuscarAdvogadoParams]):
    """List the proceedings of an attorney by OAB registration."""

    name = "advogado"
    params_model = BuscarAdvogadoParams
    required_message = "É necessário informar estado e número da OAB"
    not_found_message = MSG_ADVOGADO_NAO_ENCONTRADO

    def build_url(self, base_url: str, params: BuscarAdvogadoParams) -> str:
        query = build_query(
            params.model_dump(exclude={"oab_estado", "oab_numero"}),
            required=[("oab_estado", params.oab_estado), ("oab_numero", params.oab_numero)],
        )
        return f"{base_url}/advogado/processos?{query}"

    def normalize(self, body: Any, params: BuscarAdvogadoParams) -> dict[str, Any]:
        response = EscavadorAdvogadoProcessosResponse.model_validate(body)
        processos = [normalize_processo(item, include_cnpj=True) for item in response.items]
        logger.info(
            "advogado %s/%s: %d processos",
            params.oab_numero,
            params.oab_estado,
            len(processos),
        )
        return {
            "advogadoEncontrado": response.advogado_encontrado,
            "processos": [p.model_dump(mode="json", by_alias=True) for p in processos],
            "totalProcessos": len(processos),
            "links": response.links,
            "paginator": response.paginator,
        }


class MovimentacoesUseCase(BaseUseCase[BuscarMovimentacoesParams]):
    """List the docket movements of a proceeding."""

    name = "movimentacoes"
    params_model = BuscarMovimentacoesParams
    required_message = "É necessário informar o número do processo"

    def build_url(self, base_url: str, params: BuscarMovimentacoesParams) -> str:
        url = f"{base_url}/processos/numero_cnj/{quote(params.numero_processo, safe='')}/movimentacoes"
        query = build_query({"limit": params.limit})
        return f"{url}?{query}" if query else url

    def normalize(self, body: Any, params: BuscarMovimentacoesParams) -> dict[str, Any]:
        response = EscavadorMovimentacoesResponse.model_validate(body)
        movimentacoes = map_movimentacoes(response.items)
        logger.info(
            "processo %s: %d movimentacoes", params.numero_processo, len(movimentacoes)
        )
        return {
            "numeroProcesso": params.numero_processo,
            "movimentacoes": [m.model_dump(mode="json", by_alias=True) for m in movimentacoes],
            "totalMovimentacoes": len(movimentacoes),
            "links": response.links,
            "paginator": response.paginator,
        }


USE_CASE_REGISTRY: dict[str, type[BaseUseCase]] = {
    "processo": ProcessoUseCase,
    "advogado": AdvogadoUseCase,
    "movimentacoes": MovimentacoesUseCase,
}
