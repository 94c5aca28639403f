"""Configuração de logging (JSON estruturado ou texto simples)."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from pythonjsonlogger.json import JsonFormatter

from player_session.observability.context import get_session_id

LOG_FORMATS = frozenset({"json", "text"})


class SessionContextFilter(logging.Filter):
    """Insere session_id e service no record de log."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        # Preserve session_id passed explicitly via `extra` when present.
        existing = getattr(record, "session_id", None)
        record.session_id = existing if existing else get_session_id()
        record.service = self._service_name
        return True


def configure_logging(
    level: str,
    service_name: str,
    fmt: str = "json",
    stream: TextIO | None = None,
) -> None:
    """Configura o handler raiz com os campos padrão do serviço.

    `fmt="text"` imprime apenas a mensagem (saída de console da demo);
    `fmt="json"` usa JsonFormatter com session_id/service.
    """
    if fmt not in LOG_FORMATS:
        raise ValueError(f"Formato de log inválido: {fmt!r}. Válidos: {sorted(LOG_FORMATS)}")

    formatter: logging.Formatter
    if fmt == "json":
        formatter = JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s %(session_id)s %(service)s",
            rename_fields={"levelname": "level", "name": "logger"},
        )
    else:
        formatter = logging.Formatter("%(message)s")

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(SessionContextFilter(service_name))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger simples; o filtro injeta service/session_id."""

    return logging.getLogger(name)
