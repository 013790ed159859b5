"""Terminal rendering of word entries.

Each entry becomes one block:

    hello
    Phonetics
        - /həˈloʊ/ (https://.../hello-us.mp3)
        - [unavailable]
    Meanings
    1: exclamation
        - used as a greeting (hello there, Katie!)

        Synonyms: greeting

    2: noun
        - ...

Styles are applied with rich and disappear when colour is off; the
layout does not depend on them.
"""

from rich.console import Console
from rich.text import Text

from ..models.word_entry import Definition, Meaning, PhoneticInfo, WordEntry
from .constants import RenderConstants as RC
from .interfaces import RendererInterface


class WordEntryRenderer(RendererInterface):
    """Renders word entries to a rich console"""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def render(self, entries: list[WordEntry]) -> None:
        """Print one block per entry in API order"""
        for entry in entries:
            # soft_wrap keeps the layout independent of the terminal width
            self.console.print(self.format_entry(entry), soft_wrap=True)

    def format_entry(self, entry: WordEntry) -> Text:
        """Build the styled block for a single entry"""
        lines: list[Text] = [Text(entry.word, style=RC.HEADWORD_STYLE)]

        if entry.phonetics:
            lines.append(Text(RC.PHONETICS_HEADER, style=RC.HEADER_STYLE))
        for phonetic in entry.phonetics:
            lines.append(self._bullet(self.format_phonetic(phonetic)))

        if entry.meanings:
            lines.append(Text(RC.MEANINGS_HEADER, style=RC.HEADER_STYLE))
        for index, meaning in enumerate(entry.meanings, start=1):
            lines.extend(self.format_meaning(index, meaning))
            if index < len(entry.meanings):
                lines.append(Text())

        return Text("\n").join(lines)

    def format_phonetic(self, phonetic: PhoneticInfo) -> Text:
        text = Text()
        if phonetic.text is not None:
            text.append(f"{phonetic.text} ")
        else:
            text.append(RC.UNAVAILABLE, style=RC.DIM_STYLE)

        if phonetic.has_audio:
            text.append("(")
            text.append(phonetic.audio, style=RC.DIM_STYLE)
            text.append(")")
        return text

    def format_meaning(self, index: int, meaning: Meaning) -> list[Text]:
        """Lines for one numbered meaning, without a trailing blank line"""
        heading = Text(f"{index}: ")
        heading.append(meaning.part_of_speech, style=RC.PART_OF_SPEECH_STYLE)
        lines = [heading]

        for definition in meaning.definitions:
            lines.append(self._bullet(self.format_definition(definition)))

        if meaning.has_related_words:
            lines.append(Text())
        if meaning.synonyms:
            lines.append(self._related_line(RC.SYNONYMS_LABEL, meaning.synonyms))
        if meaning.antonyms:
            lines.append(self._related_line(RC.ANTONYMS_LABEL, meaning.antonyms))
        return lines

    def format_definition(self, definition: Definition) -> Text:
        # Sense-level synonyms/antonyms are not shown
        text = Text(definition.definition)
        if definition.example is not None:
            text.append(" (")
            text.append(definition.example, style=RC.EXAMPLE_STYLE)
            text.append(")")
        return text

    @staticmethod
    def _bullet(body: Text) -> Text:
        return Text.assemble(RC.INDENT, RC.BULLET, body)

    @staticmethod
    def _related_line(label: str, words: list[str]) -> Text:
        return Text.assemble(
            RC.INDENT,
            (label, RC.LABEL_STYLE),
            ": ",
            RC.LIST_SEPARATOR.join(words),
        )
