"""Escavador API v2 access layer: settings, query builder, fetcher, errors."""

from escavador.errors import (
    EscavadorError,
    ErrorKind,
    HttpFailureError,
    InsufficientCreditError,
    InvalidParamsError,
    InvalidTokenError,
    MissingTokenError,
    NotFoundError,
    UnexpectedResponseError,
)
from escavador.http import FetchResult, HttpFetcher
from escavador.query import build_query, query_pairs
from escavador.settings import DEFAULT_BASE_URL, EnvReader, resolve_base_url, resolve_token

__all__ = [
    "EscavadorError",
    "ErrorKind",
    "HttpFailureError",
    "InsufficientCreditError",
    "InvalidParamsError",
    "InvalidTokenError",
    "MissingTokenError",
    "NotFoundError",
    "UnexpectedResponseError",
    "FetchResult",
    "HttpFetcher",
    "build_query",
    "query_pairs",
    "DEFAULT_BASE_URL",
    "EnvReader",
    "resolve_base_url",
    "resolve_token",
]
