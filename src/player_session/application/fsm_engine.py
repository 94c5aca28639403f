"""Engine FSM puro — dispatcher determinístico sem side effects.

- Puro: entrada → output sem modificar estado externo
- Testável: resultado é determinístico dado entrada
- Total: toda combinação (estado, ação) tem resultado definido
"""

from __future__ import annotations

import logging

from player_session.domain.session.actions import PlayerAction
from player_session.domain.session.models import TransitionOutcome
from player_session.domain.session.states import PlayerState
from player_session.domain.session.transitions import decide_transition, forced_reset_outcome
from player_session.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)


class FSMEngine:
    """Engine FSM: dispatcher puro e determinístico."""

    def dispatch(self, current_state: PlayerState, action: PlayerAction) -> TransitionOutcome:
        """Executa a decisão de transição.

        Args:
            current_state: estado atual
            action: ação solicitada

        Returns:
            TransitionOutcome aceito (com next_state) ou rejeitado (com reason)

        Contrato:
        - Nunca lança exceção
        - Sempre retorna TransitionOutcome
        - Output é determinístico
        - Sem side effects
        """
        outcome = decide_transition(current_state, action)

        if outcome.rejected:
            logger.debug(
                "FSM transition invalid",
                extra={
                    "current_state": current_state,
                    "action": action,
                    "error": outcome.reason,
                },
            )
            return outcome

        logger.debug(
            "FSM transition valid",
            extra={
                "current_state": current_state,
                "action": action,
                "next_state": outcome.next_state,
            },
        )
        return outcome

    def force_reset(self, current_state: PlayerState) -> TransitionOutcome:
        """Reset forçado para o estado inicial, ignorando a tabela."""
        outcome = forced_reset_outcome(current_state)
        logger.debug(
            "FSM forced reset",
            extra={"current_state": current_state, "next_state": outcome.next_state},
        )
        return outcome
