"""Factory functions for creating configured instances"""

from rich.console import Console

from ..config.settings import settings
from .dictionary_client import DictionaryClient
from .renderer import WordEntryRenderer


def create_dictionary_client(timeout: float | None = None) -> DictionaryClient:
    """Create a client using settings.api, optionally overriding the timeout"""
    return DictionaryClient(timeout=timeout)


def create_renderer(no_color: bool = False) -> WordEntryRenderer:
    """Create a renderer writing to stdout.

    Plain mode drops the colour system entirely, so weights (bold,
    underline, dim) go away together with colours.
    """
    if no_color or settings.output.no_color:
        console = Console(highlight=False, no_color=True, color_system=None)
    else:
        console = Console(highlight=False)
    return WordEntryRenderer(console)
