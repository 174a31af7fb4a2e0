"""Tkinter helpers for interactive use."""

from .dialogs import ask_for_abc_file

__all__ = ["ask_for_abc_file"]
