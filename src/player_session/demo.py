"""Demonstração de console da FSM do jogador.

Uso:
    player-session-demo                       Executa os dois roteiros
    player-session-demo --scenario valid      Apenas o fluxo válido
    player-session-demo --actions go_online,start_game,reset
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from player_session.application.player import PlayerSession
from player_session.config.settings import get_settings
from player_session.domain.session.actions import PlayerAction
from player_session.exceptions import UnknownActionError
from player_session.observability.logging import configure_logging

RESET = "reset"

VALID_FLOW: tuple[str, ...] = (
    "go_online",
    "start_game",
    "pause",
    "start_game",
    "disconnect",
)

FAILURE_FLOW: tuple[str, ...] = (
    "start_game",
    "go_online",
    "go_online",
    "start_game",
    "start_game",
    "disconnect",
    "pause",
    RESET,
    "disconnect",
)


def run_actions(session: PlayerSession, actions: Sequence[str]) -> None:
    """Aplica uma sequência de ações; `reset` dispara o reset forçado."""
    for name in actions:
        if name.strip().lower() == RESET:
            session.force_return_to_offline()
        else:
            session.perform(name)


def run_valid_scenario() -> PlayerSession:
    print("\n--- Teste de Fluxo Válido ---")
    jogador = PlayerSession()
    run_actions(jogador, VALID_FLOW)
    print(f"Estado final de Jogador 1: {jogador.current_state_name()}")

    print("\nSimulando retorno forçado de Desconectado para Offline...")
    jogador.force_return_to_offline()
    print(f"Novo estado de Jogador 1: {jogador.current_state_name()}")
    return jogador


def run_failure_scenario() -> PlayerSession:
    print("\n--- Teste de Falhas (Transições Inválidas) ---")
    jogador = PlayerSession()
    run_actions(jogador, FAILURE_FLOW)
    print(f"Estado final de Jogador 2: {jogador.current_state_name()}")
    return jogador


def _parse_action_list(raw: str) -> list[str]:
    names = [item.strip() for item in raw.split(",") if item.strip()]
    for name in names:
        if name.lower() != RESET:
            PlayerAction.parse(name)
    return names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="player-session-demo",
        description="Demonstração da máquina de estados da sessão do jogador",
    )
    parser.add_argument(
        "--scenario",
        choices=("valid", "failures", "all"),
        default="all",
        help="Roteiro a executar (padrão: all)",
    )
    parser.add_argument(
        "--actions",
        help="Lista de ações separadas por vírgula (ex: go_online,start_game,reset)",
    )
    parser.add_argument("--log-format", choices=("json", "text"), help="Formato de log")
    parser.add_argument("--log-level", help="Nível de log (ex: INFO, DEBUG)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point do CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_format:
        overrides["log_format"] = args.log_format
    if overrides:
        settings = settings.model_copy(update=overrides)

    validation_errors = settings.validate_all()
    if validation_errors:
        parser.error(f"Configuração inválida: {'; '.join(validation_errors)}")

    configure_logging(
        settings.log_level.upper(),
        settings.service_name,
        fmt=settings.log_format.lower(),
        stream=sys.stdout,
    )

    if args.actions is not None:
        try:
            actions = _parse_action_list(args.actions)
        except UnknownActionError as exc:
            parser.error(str(exc))
        jogador = PlayerSession()
        run_actions(jogador, actions)
        print(f"Estado final: {jogador.current_state_name()}")
        return 0

    if args.scenario in ("valid", "all"):
        run_valid_scenario()
    if args.scenario in ("failures", "all"):
        run_failure_scenario()
    return 0


if __name__ == "__main__":
    sys.exit(main())
