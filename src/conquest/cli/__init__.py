"""Console front-end for Conquest."""

from conquest.cli.console import COLOR_STYLES, ConsoleUI, army_text, play

__all__ = [
    "COLOR_STYLES",
    "ConsoleUI",
    "army_text",
    "play",
]
