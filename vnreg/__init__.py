"""Parsing, stepping, asset paths and audio playback for .reg visual-novel scripts."""

__version__ = "0.1.0"

__all__ = ["assets", "errors", "executor", "parser", "player", "script"]