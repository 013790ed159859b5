"""Interface definitions for core components"""

from abc import ABC, abstractmethod

from ..models.word_entry import WordEntry


class DictionaryClientInterface(ABC):
    """Interface for dictionary lookup services"""

    @abstractmethod
    def fetch_raw(self, word: str) -> bytes:
        """Fetch the raw response body for a word"""
        pass

    @abstractmethod
    def lookup(self, word: str) -> list[WordEntry]:
        """Fetch and decode all entries for a word"""
        pass


class RendererInterface(ABC):
    """Interface for entry renderers"""

    @abstractmethod
    def render(self, entries: list[WordEntry]) -> None:
        """Write all entries to the output, in order"""
        pass
