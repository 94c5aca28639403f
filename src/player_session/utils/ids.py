"""Geradores de identificadores."""

from __future__ import annotations

import uuid


def new_session_id() -> str:
    """Gera um session_id único."""

    return str(uuid.uuid4())
