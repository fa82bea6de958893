"""MedTree — Драйвери сесії"""
from .terminal import TerminalDriver, run_terminal, main

__all__ = [
    "TerminalDriver",
    "run_terminal",
    "main",
]
