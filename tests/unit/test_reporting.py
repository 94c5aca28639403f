"""Testes do contrato de logs: toda chamada gera evidência observável."""

from __future__ import annotations

import logging

import pytest

from player_session.application.player import PlayerSession
from player_session.application.reporting import TRANSITIONS_LOGGER


@pytest.fixture()
def records(caplog):
    caplog.set_level(logging.INFO, logger=TRANSITIONS_LOGGER)

    def _collect() -> list[logging.LogRecord]:
        return [r for r in caplog.records if r.name == TRANSITIONS_LOGGER]

    return _collect


class TestTransitionLogs:
    def test_initialization_logged(self, records) -> None:
        PlayerSession(session_id="abc")
        logged = records()
        assert len(logged) == 1
        assert logged[0].message == "Jogador inicializado no estado: Offline"
        assert logged[0].outcome == "initialized"  # type: ignore[attr-defined]
        assert logged[0].session_id == "abc"  # type: ignore[attr-defined]

    def test_accepted_logs_transition_then_install(self, records) -> None:
        session = PlayerSession()
        session.go_online()

        logged = records()[1:]
        assert [r.message for r in logged] == [
            "Transição válida: Offline -> Online",
            "-> Jogador mudou para o estado: Online",
        ]
        assert [r.outcome for r in logged] == ["accepted", "installed"]  # type: ignore[attr-defined]
        assert all(r.levelno == logging.INFO for r in logged)

    def test_resume_message_has_note(self, records) -> None:
        session = PlayerSession()
        session.go_online()
        session.start_game()
        session.pause()
        session.start_game()

        messages = [r.message for r in records()]
        assert "Transição válida: Pausado -> Em Jogo (Retornar ao jogo)" in messages

    def test_rejection_logged_as_warning(self, records) -> None:
        session = PlayerSession()
        session.start_game()

        logged = records()[1:]
        assert len(logged) == 1
        assert logged[0].levelno == logging.WARNING
        assert logged[0].message == "Falha: Não pode iniciar jogo estando Offline."
        assert logged[0].outcome == "rejected"  # type: ignore[attr-defined]
        assert logged[0].action == "START_GAME"  # type: ignore[attr-defined]
        assert logged[0].from_state == "OFFLINE"  # type: ignore[attr-defined]

    def test_forced_reset_logs_install_only(self, records) -> None:
        session = PlayerSession()
        session.force_return_to_offline()

        logged = records()[1:]
        assert [r.message for r in logged] == ["-> Jogador mudou para o estado: Offline"]
        assert logged[0].outcome == "forced"  # type: ignore[attr-defined]

    def test_every_call_emits_at_least_one_record(self, records) -> None:
        session = PlayerSession()
        calls = [
            session.start_game,
            session.pause,
            session.disconnect,
            session.go_online,
            session.go_online,
            session.pause,
            session.start_game,
            session.start_game,
            session.force_return_to_offline,
        ]
        for call in calls:
            before = len(records())
            call()
            assert len(records()) > before
