"""Contexto de log por sessão."""

from __future__ import annotations

import contextlib
from collections.abc import Generator
from contextvars import ContextVar

_session_id: ContextVar[str] = ContextVar("session_id", default="")


def get_session_id() -> str:
    """Retorna o session_id corrente (ou vazio)."""

    return _session_id.get()


@contextlib.contextmanager
def bind_session_id(session_id: str) -> Generator[None, None, None]:
    """Propaga session_id para todos os logs emitidos dentro do bloco."""
    token = _session_id.set(session_id)
    try:
        yield
    finally:
        _session_id.reset(token)
