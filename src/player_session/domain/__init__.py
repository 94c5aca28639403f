"""Domínio puro: estados, ações, tabela de transições e modelos."""
