"""Ações que o chamador pode solicitar à sessão.

Cada ação + estado atual → aceita (próximo estado) ou rejeitada (motivo).
O reset forçado não é uma ação da tabela; fica fora deste enum.
"""

from __future__ import annotations

from enum import StrEnum

from player_session.exceptions import UnknownActionError


class PlayerAction(StrEnum):
    """4 Ações verificadas pela tabela de transições."""

    GO_ONLINE = "GO_ONLINE"
    START_GAME = "START_GAME"
    PAUSE = "PAUSE"
    DISCONNECT = "DISCONNECT"

    @classmethod
    def parse(cls, name: PlayerAction | str) -> PlayerAction:
        """Converte `go_online`, `go-online` ou `GO_ONLINE` no membro do enum.

        Raises:
            UnknownActionError: nome não corresponde a nenhuma ação.
        """
        if isinstance(name, cls):
            return name
        normalized = str(name).strip().upper().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            raise UnknownActionError(str(name)) from None
