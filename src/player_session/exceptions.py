"""Exceções do pacote.

Transições rejeitadas NÃO são exceções: são resultados normais
(`TransitionOutcome.accepted is False`). As classes abaixo sinalizam apenas
erros de uso da API.
"""

from __future__ import annotations


class PlayerSessionError(Exception):
    """Erro base do player_session."""

    pass


class UnknownActionError(PlayerSessionError, ValueError):
    """Nome de ação desconhecido (ex: entrada de CLI inválida)."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Ação desconhecida: {name!r}")
        self.name = name
