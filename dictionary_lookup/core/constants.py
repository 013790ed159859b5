"""Shared constants across the application"""


class ApiConstants:
    """Constants for the dictionary API"""

    # Path template below the configured base URL
    ENTRIES_PATH = "{version}/entries/{language}/{word}"

    # HTTP headers
    DEFAULT_HEADERS = {
        "Accept": "application/json",
    }

    # Key of the JSON error object returned for unknown words
    ERROR_TITLE_KEY = "title"


class RenderConstants:
    """Constants for terminal rendering"""

    INDENT = "\t"
    BULLET = "- "
    UNAVAILABLE = "[unavailable] "

    PHONETICS_HEADER = "Phonetics"
    MEANINGS_HEADER = "Meanings"
    SYNONYMS_LABEL = "Synonyms"
    ANTONYMS_LABEL = "Antonyms"
    LIST_SEPARATOR = ", "

    # rich style strings
    HEADWORD_STYLE = "bold underline"
    HEADER_STYLE = "underline"
    DIM_STYLE = "dim"
    PART_OF_SPEECH_STYLE = "blue"
    EXAMPLE_STYLE = "magenta"
    LABEL_STYLE = "red"
