"""Adaptador que converte TransitionOutcome em linhas de log.

Toda chamada de ação produz evidência observável:
- aceita: "Transição válida: <De> -> <Para>" (INFO)
- rejeitada: motivo da rejeição (WARNING)
- instalação de estado: "-> Jogador mudou para o estado: <Para>" (INFO)
"""

from __future__ import annotations

import logging

from player_session.domain.session.models import TransitionOutcome
from player_session.domain.session.states import PlayerState
from player_session.observability.logging import get_logger

TRANSITIONS_LOGGER = "player_session.transitions"


def accepted_message(outcome: TransitionOutcome) -> str:
    message = f"Transição válida: {outcome.from_state.label} -> {outcome.next_state.label}"
    if outcome.note:
        message += f" ({outcome.note})"
    return message


def installed_message(state: PlayerState) -> str:
    return f"-> Jogador mudou para o estado: {state.label}"


def initialized_message(state: PlayerState) -> str:
    return f"Jogador inicializado no estado: {state.label}"


class TransitionReporter:
    """Emite os logs de ciclo de vida de uma sessão."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or get_logger(TRANSITIONS_LOGGER)

    def initialized(self, session_id: str, state: PlayerState) -> None:
        self._logger.info(
            initialized_message(state),
            extra={
                "session_id": session_id,
                "outcome": "initialized",
                "to_state": state.value,
            },
        )

    def decided(self, session_id: str, outcome: TransitionOutcome) -> None:
        """Loga a decisão (aceita ou rejeitada) de uma ação da tabela."""
        extra = {
            "session_id": session_id,
            "outcome": "accepted" if outcome.accepted else "rejected",
            "from_state": outcome.from_state.value,
            "to_state": outcome.next_state.value,
            "action": outcome.action.value if outcome.action else None,
        }
        if outcome.accepted:
            self._logger.info(accepted_message(outcome), extra=extra)
        else:
            self._logger.warning(outcome.reason, extra=extra)

    def installed(self, session_id: str, outcome: TransitionOutcome) -> None:
        self._logger.info(
            installed_message(outcome.next_state),
            extra={
                "session_id": session_id,
                "outcome": "forced" if outcome.forced else "installed",
                "from_state": outcome.from_state.value,
                "to_state": outcome.next_state.value,
                "action": outcome.action.value if outcome.action else None,
            },
        )
