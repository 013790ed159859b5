"""Tests for WordEntryRenderer layout and styling"""

import io

from rich.console import Console

from dictionary_lookup.core.decoder import decode_entries
from dictionary_lookup.core.renderer import WordEntryRenderer
from dictionary_lookup.models.word_entry import (
    Definition,
    Meaning,
    PhoneticInfo,
    WordEntry,
)


def _meaning(pos, definitions, synonyms=(), antonyms=()):
    return Meaning(
        part_of_speech=pos,
        definitions=[Definition(definition=d) for d in definitions],
        synonyms=list(synonyms),
        antonyms=list(antonyms),
    )


class TestFormatEntry:
    """Plain-text layout of a single block"""

    def setup_method(self):
        self.renderer = WordEntryRenderer(
            Console(file=io.StringIO(), color_system=None)
        )

    def test_hello_scenario(self):
        """One entry, two phonetics (second without text), one meaning"""
        entry = WordEntry(
            word="hello",
            phonetics=[
                PhoneticInfo(text="/həˈloʊ/", audio="a.mp3"),
                PhoneticInfo(audio=""),
            ],
            meanings=[_meaning("exclamation", ["used as a greeting"])],
        )

        plain = self.renderer.format_entry(entry).plain

        assert plain.split("\n") == [
            "hello",
            "Phonetics",
            "\t- /həˈloʊ/ (a.mp3)",
            "\t- [unavailable] ",
            "Meanings",
            "1: exclamation",
            "\t- used as a greeting",
        ]

    def test_phonetic_without_text_keeps_audio(self):
        phonetic = PhoneticInfo(audio="https://example.org/hello-uk.mp3")

        text = self.renderer.format_phonetic(phonetic)

        assert text.plain == "[unavailable] (https://example.org/hello-uk.mp3)"

    def test_phonetic_text_without_audio(self):
        text = self.renderer.format_phonetic(PhoneticInfo(text="/hɛˈləʊ/", audio=""))

        assert text.plain == "/hɛˈləʊ/ "
        assert "(" not in text.plain

    def test_no_phonetics_omits_header(self):
        entry = WordEntry(
            word="xyzzy", phonetics=[], meanings=[_meaning("noun", ["magic word"])]
        )

        plain = self.renderer.format_entry(entry).plain

        assert "Phonetics" not in plain
        assert plain.startswith("xyzzy\nMeanings\n1: noun")

    def test_no_meanings_omits_header(self):
        entry = WordEntry(
            word="hmm", phonetics=[PhoneticInfo(text="/hm/", audio="")], meanings=[]
        )

        plain = self.renderer.format_entry(entry).plain

        assert "Meanings" not in plain
        assert plain == "hmm\nPhonetics\n\t- /hm/ "

    def test_empty_entry_is_headword_only(self):
        entry = WordEntry(word="bare", phonetics=[], meanings=[])

        assert self.renderer.format_entry(entry).plain == "bare"

    def test_meanings_numbered_with_blank_line_between(self):
        entry = WordEntry(
            word="set",
            phonetics=[],
            meanings=[
                _meaning("noun", ["a group"]),
                _meaning("verb", ["to put"]),
                _meaning("adjective", ["fixed"]),
            ],
        )

        lines = self.renderer.format_entry(entry).plain.split("\n")

        assert lines == [
            "set",
            "Meanings",
            "1: noun",
            "\t- a group",
            "",
            "2: verb",
            "\t- to put",
            "",
            "3: adjective",
            "\t- fixed",
        ]
        assert lines[-1] != ""

    def test_synonyms_and_antonyms_lines(self):
        meaning = _meaning(
            "adjective",
            ["happy"],
            synonyms=["glad", "joyful", "cheerful"],
            antonyms=["sad"],
        )

        lines = [line.plain for line in self.renderer.format_meaning(1, meaning)]

        assert lines == [
            "1: adjective",
            "\t- happy",
            "",
            "\tSynonyms: glad, joyful, cheerful",
            "\tAntonyms: sad",
        ]

    def test_antonyms_only(self):
        meaning = _meaning("adjective", ["hot"], antonyms=["cold", "cool"])

        lines = [line.plain for line in self.renderer.format_meaning(2, meaning)]

        assert lines == ["2: adjective", "\t- hot", "", "\tAntonyms: cold, cool"]
        assert not any("Synonyms" in line for line in lines)

    def test_no_related_words_no_blank_line(self):
        lines = self.renderer.format_meaning(1, _meaning("noun", ["a thing"]))

        assert [line.plain for line in lines] == ["1: noun", "\t- a thing"]

    def test_definition_with_example(self):
        definition = Definition(
            definition="A greeting used when answering the telephone.",
            example="Hello? How may I help you?",
        )

        text = self.renderer.format_definition(definition)

        assert text.plain == (
            "A greeting used when answering the telephone. "
            "(Hello? How may I help you?)"
        )

    def test_definition_level_synonyms_not_rendered(self):
        definition = Definition(
            definition="to greet", synonyms=["salute"], antonyms=["ignore"]
        )

        assert self.renderer.format_definition(definition).plain == "to greet"


class TestStyles:
    """Colour and weight are applied to the expected spans"""

    def setup_method(self):
        self.renderer = WordEntryRenderer(
            Console(file=io.StringIO(), color_system=None)
        )

    def _styles_for(self, text, fragment):
        start = text.plain.index(fragment)
        end = start + len(fragment)
        return {
            str(span.style)
            for span in text.spans
            if span.start <= start and span.end >= end
        }

    def test_headword_and_headers(self):
        entry = WordEntry(
            word="hello",
            phonetics=[PhoneticInfo(text="/h/", audio="")],
            meanings=[_meaning("noun", ["x"])],
        )
        text = self.renderer.format_entry(entry)

        assert "bold underline" in self._styles_for(text, "hello")
        assert "underline" in self._styles_for(text, "Phonetics")
        assert "underline" in self._styles_for(text, "Meanings")
        assert "blue" in self._styles_for(text, "noun")

    def test_dimmed_placeholder_and_audio(self):
        text = self.renderer.format_phonetic(PhoneticInfo(audio="a.mp3"))

        assert "dim" in self._styles_for(text, "[unavailable]")
        assert "dim" in self._styles_for(text, "a.mp3")

    def test_example_and_labels(self):
        definition = Definition(definition="d", example="an example")
        meaning = _meaning("noun", ["d"], synonyms=["s"], antonyms=["a"])

        example = self.renderer.format_definition(definition)
        synonyms, antonyms = self.renderer.format_meaning(1, meaning)[-2:]

        assert "magenta" in self._styles_for(example, "an example")
        assert "red" in self._styles_for(synonyms, "Synonyms")
        assert "red" in self._styles_for(antonyms, "Antonyms")


class TestRender:
    """Rendering through the console"""

    def test_render_fixture_plain(self, hello_payload, plain_console):
        renderer = WordEntryRenderer(plain_console)

        renderer.render(decode_entries(hello_payload))
        output = plain_console.file.getvalue()

        assert "\x1b[" not in output
        assert output.startswith("hello\nPhonetics\n")
        assert (
            "- /həˈloʊ/ "
            "(https://api.dictionaryapi.dev/media/pronunciations/en/hello-us.mp3)"
        ) in output
        assert (
            "- [unavailable] "
            "(https://api.dictionaryapi.dev/media/pronunciations/en/hello-uk.mp3)"
        ) in output
        assert "1: noun" in output
        assert "2: verb" in output
        assert "3: interjection" in output
        assert "Synonyms: hi, howdy" in output
        assert "Antonyms: bye, goodbye" in output
        assert "(Hello, everyone.)" in output

    def test_long_lines_are_not_wrapped(self, plain_console):
        long_definition = "word " * 40
        entry = WordEntry(
            word="long",
            phonetics=[],
            meanings=[_meaning("noun", [long_definition.strip()])],
        )

        WordEntryRenderer(plain_console).render([entry])
        lines = plain_console.file.getvalue().splitlines()

        assert len(lines) == 4
        assert lines[3].strip() == "- " + long_definition.strip()

    def test_render_multiple_entries_in_order(self, plain_console):
        entries = [
            WordEntry(word="bow", phonetics=[], meanings=[_meaning("noun", ["a"])]),
            WordEntry(word="bow", phonetics=[], meanings=[_meaning("verb", ["b"])]),
        ]

        WordEntryRenderer(plain_console).render(entries)
        output = plain_console.file.getvalue()

        assert output.index("1: noun") < output.index("1: verb")
        assert output.count("bow\n") == 2

    def test_homograph_blocks_have_no_separator(self, plain_console):
        entries = [
            WordEntry(word="bow", phonetics=[], meanings=[_meaning("noun", ["a"])]),
            WordEntry(word="bow", phonetics=[], meanings=[_meaning("verb", ["b"])]),
        ]

        WordEntryRenderer(plain_console).render(entries)
        lines = plain_console.file.getvalue().split("\n")

        assert [line.strip() for line in lines] == [
            "bow",
            "Meanings",
            "1: noun",
            "- a",
            "bow",
            "Meanings",
            "1: verb",
            "- b",
            "",
        ]

    def test_render_nothing_for_empty_list(self, plain_console):
        WordEntryRenderer(plain_console).render([])

        assert plain_console.file.getvalue() == ""

    def test_colour_codes_when_forced(self):
        console = Console(
            file=io.StringIO(), force_terminal=True, color_system="standard"
        )
        entry = WordEntry(
            word="hello", phonetics=[], meanings=[_meaning("noun", ["x"])]
        )

        WordEntryRenderer(console).render([entry])

        assert "\x1b[" in console.file.getvalue()
