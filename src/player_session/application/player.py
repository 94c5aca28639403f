"""PlayerSession: ciclo de vida da sessão de um jogador.

A sessão guarda o estado atual e expõe uma API estável de ações. A decisão de
cada ação é delegada ao FSMEngine (puro); a sessão realiza a única mutação
(instalar o sucessor) e o TransitionReporter emite os logs.

Leitura do estado, decisão e instalação do sucessor formam uma única seção
crítica protegida por lock, de modo que chamadas concorrentes na mesma sessão
nunca percam transições.
"""

from __future__ import annotations

import threading
from collections import deque
from typing import Any

from player_session.application.fsm_engine import FSMEngine
from player_session.application.reporting import TransitionReporter
from player_session.config.settings import Settings, get_settings
from player_session.domain.session.actions import PlayerAction
from player_session.domain.session.models import TransitionOutcome, TransitionRecord
from player_session.domain.session.states import INITIAL_STATE, PlayerState
from player_session.domain.session.transitions import decide_transition
from player_session.observability.context import bind_session_id
from player_session.utils.ids import new_session_id


class PlayerSession:
    """Sessão de um jogador (Offline → Online → Em Jogo → Pausado → Desconectado)."""

    def __init__(
        self,
        session_id: str | None = None,
        engine: FSMEngine | None = None,
        reporter: TransitionReporter | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.session_id = session_id or new_session_id()
        self._engine = engine or FSMEngine()
        self._reporter = reporter or TransitionReporter()
        self._settings = settings or get_settings()
        validation_errors = self._settings.validate_history_limit()
        if validation_errors:
            raise ValueError(f"Configuração inválida: {'; '.join(validation_errors)}")
        self._lock = threading.RLock()

        self._state: PlayerState = INITIAL_STATE
        self._history: deque[TransitionRecord] = deque(
            maxlen=self._settings.history_limit or None
        )
        self.transition_count = 0
        self.rejection_count = 0

        self._reporter.initialized(self.session_id, self._state)

    @property
    def current_state(self) -> PlayerState:
        return self._state

    def current_state_name(self) -> str:
        """Nome legível do estado ativo. Sem side effects."""
        return self._state.label

    # Ações delegadas ao FSMEngine

    def go_online(self) -> TransitionOutcome:
        return self.perform(PlayerAction.GO_ONLINE)

    def start_game(self) -> TransitionOutcome:
        """Inicia a partida (Online) ou retoma a partida pausada (Pausado)."""
        return self.perform(PlayerAction.START_GAME)

    def pause(self) -> TransitionOutcome:
        return self.perform(PlayerAction.PAUSE)

    def disconnect(self) -> TransitionOutcome:
        return self.perform(PlayerAction.DISCONNECT)

    def perform(self, action: PlayerAction | str) -> TransitionOutcome:
        """Executa uma ação da tabela de transições.

        Args:
            action: membro de PlayerAction ou nome equivalente ("go_online")

        Returns:
            TransitionOutcome aceito ou rejeitado. Rejeição é retorno normal.

        Raises:
            UnknownActionError: nome de ação desconhecido.
        """
        parsed = PlayerAction.parse(action)

        with self._lock, bind_session_id(self.session_id):
            outcome = self._engine.dispatch(self._state, parsed)
            self._reporter.decided(self.session_id, outcome)

            if outcome.accepted:
                self._install_state(outcome)
            else:
                self.rejection_count += 1

        return outcome

    def force_return_to_offline(self) -> TransitionOutcome:
        """Instala Offline incondicionalmente (reset administrativo).

        Sempre aceito; idempotente quando já está Offline (ainda assim logado).
        """
        with self._lock, bind_session_id(self.session_id):
            outcome = self._engine.force_reset(self._state)
            self._install_state(outcome)
        return outcome

    def _install_state(self, outcome: TransitionOutcome) -> None:
        """Única mutação de estado da sessão. Chamado com o lock adquirido."""
        self._state = outcome.next_state
        self.transition_count += 1
        self._history.append(TransitionRecord.from_outcome(outcome, self.transition_count))
        self._reporter.installed(self.session_id, outcome)

    # Consultas

    def can(self, action: PlayerAction | str) -> bool:
        """True se a ação seria aceita no estado atual."""
        parsed = PlayerAction.parse(action)
        with self._lock:
            return decide_transition(self._state, parsed).accepted

    def available_actions(self) -> list[PlayerAction]:
        """Ações aceitas no estado atual, na ordem de declaração."""
        with self._lock:
            state = self._state
        return [action for action in PlayerAction if decide_transition(state, action).accepted]

    def get_history(self) -> list[TransitionRecord]:
        """Retorna cópia do histórico de transições."""
        with self._lock:
            return list(self._history)

    def get_state_summary(self) -> dict[str, Any]:
        """Retorna resumo do estado atual."""
        with self._lock:
            last = self._history[-1] if self._history else None
            return {
                "session_id": self.session_id,
                "current_state": self._state,
                "current_state_name": self._state.label,
                "transition_count": self.transition_count,
                "rejection_count": self.rejection_count,
                "history_length": len(self._history),
                "last_transition": last,
            }

    def __repr__(self) -> str:
        return f"PlayerSession(session_id={self.session_id!r}, state={self._state.label!r})"
