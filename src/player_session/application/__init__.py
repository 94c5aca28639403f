"""Camada de aplicação: dispatcher, sessão e adaptador de logs."""
