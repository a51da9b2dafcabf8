"""Credential and endpoint resolution from the host environment."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.escavador.com/api/v2"

# Checked in order; the camelCase name is what plugin hosts configure.
TOKEN_ENV_VARS = ("ESCAVADOR_TOKEN", "escavadorToken")
BASE_URL_ENV_VAR = "ESCAVADOR_BASE_URL"


class EnvReader(Protocol):
    """Key-value view of the environment. ``os.environ`` satisfies it."""

    def get(self, key: str) -> str | None: ...


def resolve_token(env: EnvReader) -> str | None:
    """Return the first non-empty token among ``TOKEN_ENV_VARS``."""
    for name in TOKEN_ENV_VARS:
        token = env.get(name)
        if token:
            logger.debug("Escavador token read from %s", name)
            return token
    logger.warning("Missing env vars %s", ", ".join(TOKEN_ENV_VARS))
    return None


def resolve_base_url(env: EnvReader) -> str:
    base_url = env.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL
    if base_url.endswith("/"):
        base_url = base_url[:-1]
    return base_url
