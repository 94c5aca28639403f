from __future__ import annotations

import logging

import pytest

from player_session.application.player import PlayerSession
from player_session.config.settings import get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def restore_root_logging():
    """Restaura handlers/nível do logger raiz após configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture()
def session() -> PlayerSession:
    return PlayerSession(session_id="sessao-teste")
