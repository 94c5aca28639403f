"""Estados canônicos da sessão de um jogador.

- Exatamente um estado ativo por sessão
- Estados não carregam dados da sessão (são singletons imutáveis)
- Nenhum estado é terminal: DISCONNECTED só sai via reset forçado
"""

from __future__ import annotations

from enum import StrEnum


class PlayerState(StrEnum):
    """5 Estados canônicos do jogador."""

    OFFLINE = "OFFLINE"
    """Jogador fora do serviço (estado inicial)."""

    ONLINE = "ONLINE"
    """Conectado, fora de partida."""

    IN_GAME = "IN_GAME"
    """Em partida."""

    PAUSED = "PAUSED"
    """Partida pausada; pode retomar ou desconectar."""

    DISCONNECTED = "DISCONNECTED"
    """Caiu durante a partida; exige reset forçado para voltar a Offline."""

    @property
    def label(self) -> str:
        """Nome legível usado em exibição e logs."""
        return _LABELS[self]


_LABELS: dict[PlayerState, str] = {
    PlayerState.OFFLINE: "Offline",
    PlayerState.ONLINE: "Online",
    PlayerState.IN_GAME: "Em Jogo",
    PlayerState.PAUSED: "Pausado",
    PlayerState.DISCONNECTED: "Desconectado",
}

# Estado inicial canônico de toda sessão
INITIAL_STATE: PlayerState = PlayerState.OFFLINE
