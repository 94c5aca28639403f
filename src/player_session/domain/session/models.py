"""Modelos de domínio (resultado de ação e histórico de transições)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from pydantic import BaseModel, Field

from player_session.domain.session.actions import PlayerAction
from player_session.domain.session.states import PlayerState


@dataclass(frozen=True, slots=True)
class TransitionOutcome:
    """Resultado de uma chamada de ação sobre a sessão.

    Contém:
    - from_state: estado antes da chamada
    - action: ação solicitada (None no reset forçado)
    - accepted: se a transição foi aceita
    - next_state: sucessor quando aceita; igual a from_state quando rejeitada
    - reason: motivo da rejeição (None quando aceita)
    - note: complemento exibido na transição aceita (ex: "Retornar ao jogo")
    - forced: True apenas para o reset forçado
    """

    from_state: PlayerState
    action: PlayerAction | None
    accepted: bool
    next_state: PlayerState
    reason: str | None = None
    note: str | None = None
    forced: bool = False

    @property
    def rejected(self) -> bool:
        return not self.accepted

    @property
    def changed(self) -> bool:
        """True se o estado efetivamente mudou."""
        return self.accepted and self.next_state != self.from_state


class TransitionRecord(BaseModel):
    """Entrada do histórico de transições aceitas (ou forçadas)."""

    sequence: int
    from_state: PlayerState
    to_state: PlayerState
    action: PlayerAction | None = None
    forced: bool = False
    timestamp: datetime = Field(default_factory=lambda: datetime.now(tz=UTC))

    @classmethod
    def from_outcome(cls, outcome: TransitionOutcome, sequence: int) -> TransitionRecord:
        return cls(
            sequence=sequence,
            from_state=outcome.from_state,
            to_state=outcome.next_state,
            action=outcome.action,
            forced=outcome.forced,
        )
