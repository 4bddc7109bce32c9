"""
Command line interface для Numerus.
"""

from src.numerus.cli.repl import CliConfig, convert_term, main, repl, run_terms

__all__ = [
    "CliConfig",
    "convert_term",
    "main",
    "repl",
    "run_terms",
]
