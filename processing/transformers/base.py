"""Shared helpers for the Escavador transformers."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


def first_present(*candidates: T | None, default: T) -> T:
    """Return the first truthy candidate, else ``default``.

    Strings are stripped first, so empty and whitespace-only values count
    as absent, matching how the provider leaves fields blank.
    """
    for candidate in candidates:
        if isinstance(candidate, str):
            candidate = candidate.strip()
        if candidate:
            return candidate
    return default


def as_raw(model: type[M], record: M | Mapping[str, Any]) -> M:
    """Accept either an already-validated raw model or the decoded JSON."""
    if isinstance(record, model):
        return record
    return model.model_validate(record)
