"""FSM do jogador — Estados, ações e transições.

Exporta:
- PlayerState: 5 estados canônicos
- PlayerAction: 4 ações verificadas pela tabela
- decide_transition / validate_transition: validadores puros
"""

from player_session.domain.session.actions import PlayerAction
from player_session.domain.session.states import INITIAL_STATE, PlayerState
from player_session.domain.session.transitions import (
    decide_transition,
    forced_reset_outcome,
    possible_next_states_for,
    validate_transition,
)

__all__ = [
    "PlayerState",
    "PlayerAction",
    "INITIAL_STATE",
    "decide_transition",
    "validate_transition",
    "forced_reset_outcome",
    "possible_next_states_for",
]
