"""Tabela de transições da FSM do jogador.

- TRANSITIONS[(current_state, action)] = next_state
- REJECTIONS[(current_state, action)] = motivo da rejeição
- Toda combinação (estado, ação) aparece em exatamente uma das duas tabelas
- Validação pura: sem side effects
"""

from __future__ import annotations

from player_session.domain.session.actions import PlayerAction
from player_session.domain.session.models import TransitionOutcome
from player_session.domain.session.states import INITIAL_STATE, PlayerState

# Tabela de transições: (current_state, action) → next_state
TRANSITIONS: dict[tuple[PlayerState, PlayerAction], PlayerState] = {
    # === OFFLINE → ... ===
    (PlayerState.OFFLINE, PlayerAction.GO_ONLINE): PlayerState.ONLINE,
    # === ONLINE → ... ===
    (PlayerState.ONLINE, PlayerAction.START_GAME): PlayerState.IN_GAME,
    (PlayerState.ONLINE, PlayerAction.DISCONNECT): PlayerState.OFFLINE,
    # === IN_GAME → ... ===
    (PlayerState.IN_GAME, PlayerAction.PAUSE): PlayerState.PAUSED,
    (PlayerState.IN_GAME, PlayerAction.DISCONNECT): PlayerState.DISCONNECTED,
    # === PAUSED → ... ===
    (PlayerState.PAUSED, PlayerAction.START_GAME): PlayerState.IN_GAME,
    (PlayerState.PAUSED, PlayerAction.DISCONNECT): PlayerState.DISCONNECTED,
    # === DISCONNECTED: sem transições pela tabela (apenas reset forçado) ===
}

# Complemento exibido em transições aceitas específicas
TRANSITION_NOTES: dict[tuple[PlayerState, PlayerAction], str] = {
    (PlayerState.PAUSED, PlayerAction.START_GAME): "Retornar ao jogo",
}

_RETURN_TO_OFFLINE_FIRST = (
    "Falha: O jogador foi Desconectado. Deve voltar para Offline primeiro."
)

# Motivos de rejeição: (current_state, action) → mensagem
REJECTIONS: dict[tuple[PlayerState, PlayerAction], str] = {
    # === OFFLINE ===
    (PlayerState.OFFLINE, PlayerAction.START_GAME): (
        "Falha: Não pode iniciar jogo estando Offline."
    ),
    (PlayerState.OFFLINE, PlayerAction.PAUSE): "Falha: Não pode pausar estando Offline.",
    (PlayerState.OFFLINE, PlayerAction.DISCONNECT): (
        "Falha: Não pode desconectar estando Offline."
    ),
    # === ONLINE ===
    (PlayerState.ONLINE, PlayerAction.GO_ONLINE): "Falha: Já está Online.",
    (PlayerState.ONLINE, PlayerAction.PAUSE): (
        "Falha: Não pode pausar estando Online (ainda não está em jogo)."
    ),
    # === IN_GAME ===
    (PlayerState.IN_GAME, PlayerAction.GO_ONLINE): "Falha: Já está Em Jogo.",
    (PlayerState.IN_GAME, PlayerAction.START_GAME): "Falha: Já está Em Jogo.",
    # === PAUSED ===
    (PlayerState.PAUSED, PlayerAction.GO_ONLINE): (
        "Falha: O jogo está Pausado. Precisa voltar ao jogo ou desconectar."
    ),
    (PlayerState.PAUSED, PlayerAction.PAUSE): "Falha: Já está Pausado.",
    # === DISCONNECTED ===
    (PlayerState.DISCONNECTED, PlayerAction.GO_ONLINE): _RETURN_TO_OFFLINE_FIRST,
    (PlayerState.DISCONNECTED, PlayerAction.START_GAME): _RETURN_TO_OFFLINE_FIRST,
    (PlayerState.DISCONNECTED, PlayerAction.PAUSE): (
        "Falha: O jogador foi Desconectado. Não há jogo para pausar."
    ),
    (PlayerState.DISCONNECTED, PlayerAction.DISCONNECT): "Falha: Já está Desconectado.",
}


def decide_transition(current_state: PlayerState, action: PlayerAction) -> TransitionOutcome:
    """Decide o resultado de `action` no estado `current_state`.

    Função total sobre (PlayerState × PlayerAction): nunca lança exceção para
    membros válidos dos enums e nunca altera estado externo.
    """
    key = (current_state, action)

    next_state = TRANSITIONS.get(key)
    if next_state is not None:
        return TransitionOutcome(
            from_state=current_state,
            action=action,
            accepted=True,
            next_state=next_state,
            note=TRANSITION_NOTES.get(key),
        )

    return TransitionOutcome(
        from_state=current_state,
        action=action,
        accepted=False,
        next_state=current_state,
        reason=REJECTIONS[key],
    )


def validate_transition(
    current_state: PlayerState, action: PlayerAction
) -> tuple[bool, PlayerState | None, str]:
    """Valida se uma transição é permitida.

    Retorna:
    - (True, next_state, ""): transição válida
    - (False, None, motivo): transição inválida

    Nunca lança exceção; apenas valida.
    """
    outcome = decide_transition(current_state, action)
    if outcome.accepted:
        return True, outcome.next_state, ""
    return False, None, outcome.reason or ""


def forced_reset_outcome(current_state: PlayerState) -> TransitionOutcome:
    """Resultado do reset forçado: sempre aceito, destino = estado inicial."""
    return TransitionOutcome(
        from_state=current_state,
        action=None,
        accepted=True,
        next_state=INITIAL_STATE,
        forced=True,
    )


def possible_next_states_for(state: PlayerState) -> list[PlayerState]:
    """Retorna os possíveis próximos estados via ações da tabela.

    O reset forçado não entra na lista. Deduplicação preservando a ordem
    de declaração das ações.
    """
    result: list[PlayerState] = []
    for action in PlayerAction:
        next_state = TRANSITIONS.get((state, action))
        if next_state is not None and next_state not in result:
            result.append(next_state)
    return result
