"""Configurações centralizadas do player_session.

Uso típico:
    from player_session.config import get_settings
"""

from player_session.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
