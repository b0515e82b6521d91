"""Clipboard service adapters."""

from .command_clipboard import CommandClipboard, detect_backend

__all__ = ["CommandClipboard", "detect_backend"]
