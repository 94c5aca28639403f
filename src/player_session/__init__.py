"""player_session: máquina de estados da sessão de um jogador.

Uso típico:
    from player_session import PlayerSession

    jogador = PlayerSession()
    jogador.go_online()
    jogador.start_game()
    jogador.current_state_name()  # "Em Jogo"
"""

from player_session.application.player import PlayerSession
from player_session.domain.session import PlayerAction, PlayerState
from player_session.domain.session.models import TransitionOutcome, TransitionRecord
from player_session.exceptions import PlayerSessionError, UnknownActionError

__version__ = "0.1.0"

__all__ = [
    "PlayerSession",
    "PlayerState",
    "PlayerAction",
    "TransitionOutcome",
    "TransitionRecord",
    "PlayerSessionError",
    "UnknownActionError",
]
