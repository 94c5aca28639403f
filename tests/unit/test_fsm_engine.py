"""Testes unitários do FSMEngine (dispatcher puro)."""

import logging

import pytest

from player_session.application.fsm_engine import FSMEngine
from player_session.domain.session.actions import PlayerAction
from player_session.domain.session.states import PlayerState


class TestFSMEngine:
    """Testes básicos de dispatch."""

    @pytest.fixture
    def engine(self) -> FSMEngine:
        return FSMEngine()

    def test_offline_to_online(self, engine: FSMEngine) -> None:
        """OFFLINE + GO_ONLINE → ONLINE."""
        outcome = engine.dispatch(PlayerState.OFFLINE, PlayerAction.GO_ONLINE)
        assert outcome.accepted is True
        assert outcome.next_state == PlayerState.ONLINE

    def test_invalid_action_returns_outcome(self, engine: FSMEngine) -> None:
        """Ação inválida não lança exceção: retorna rejeição."""
        outcome = engine.dispatch(PlayerState.OFFLINE, PlayerAction.PAUSE)
        assert outcome.rejected is True
        assert outcome.next_state == PlayerState.OFFLINE
        assert outcome.reason == "Falha: Não pode pausar estando Offline."

    def test_dispatch_logs_debug(self, engine: FSMEngine, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="player_session.application.fsm_engine"):
            engine.dispatch(PlayerState.ONLINE, PlayerAction.PAUSE)
            engine.dispatch(PlayerState.ONLINE, PlayerAction.START_GAME)

        messages = [record.message for record in caplog.records]
        assert messages == ["FSM transition invalid", "FSM transition valid"]

    def test_force_reset(self, engine: FSMEngine) -> None:
        outcome = engine.force_reset(PlayerState.DISCONNECTED)
        assert outcome.accepted is True
        assert outcome.forced is True
        assert outcome.next_state == PlayerState.OFFLINE
