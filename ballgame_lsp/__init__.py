"""Ballgame Language Server and REPL integration package.

This package provides:
- A pygls-based Language Server for Ballgame documents.
- A line-by-line document analyzer that powers the server's diagnostics and hover.
- A simple TCP REPL server to evaluate code via the Interpreter.
"""

__all__ = [
    "server",
    "indexer",
    "repl_server",
]
