"""Result sinks — where a use case reports its single outcome."""

from __future__ import annotations

import json
import sys
from typing import Any, Protocol, TextIO


class ResultSink(Protocol):
    def __call__(
        self, success: bool, payload: dict[str, Any] | None, error: str | None = None
    ) -> None: ...


def envelope(success: bool, payload: dict[str, Any] | None, error: str | None = None) -> dict[str, Any]:
    return {"success": success, "data": payload, "error": error}


class JsonStdoutSink:
    """Print the result envelope as one JSON document."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def __call__(
        self, success: bool, payload: dict[str, Any] | None, error: str | None = None
    ) -> None:
        stream = self.stream or sys.stdout
        stream.write(json.dumps(envelope(success, payload, error), ensure_ascii=False) + "\n")
        stream.flush()
