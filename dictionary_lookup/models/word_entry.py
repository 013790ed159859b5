"""Pydantic models for dictionary API word entries"""

from pydantic import BaseModel, ConfigDict, Field


class License(BaseModel):
    """Licence attached to a pronunciation clip"""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Licence name")
    url: str = Field(description="Licence URL")


class PhoneticInfo(BaseModel):
    """One pronunciation variant"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str | None = Field(None, description="Phonetic transcription")
    audio: str = Field(description="Audio clip URL, may be empty")
    source_url: str | None = Field(
        None, alias="sourceUrl", description="Where the audio clip came from"
    )
    license: License | None = Field(None, description="Audio clip licence")

    @property
    def has_audio(self) -> bool:
        """Check if an audio clip URL is available"""
        return len(self.audio) > 0


class Definition(BaseModel):
    """One sense description with an optional usage example"""

    model_config = ConfigDict(frozen=True)

    definition: str = Field(description="Definition text")
    example: str | None = Field(None, description="Usage example")
    synonyms: list[str] = Field(default=[], description="Sense-level synonyms")
    antonyms: list[str] = Field(default=[], description="Sense-level antonyms")


class Meaning(BaseModel):
    """One part-of-speech sense with its definitions and related words"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    part_of_speech: str = Field(
        alias="partOfSpeech", description="Part of speech (noun, verb, etc.)"
    )
    definitions: list[Definition] = Field(description="Definitions in API order")
    synonyms: list[str] = Field(description="Synonyms")
    antonyms: list[str] = Field(description="Antonyms")

    @property
    def has_related_words(self) -> bool:
        """Check if any synonyms or antonyms are present"""
        return bool(self.synonyms or self.antonyms)


class WordEntry(BaseModel):
    """One headword record as returned by the dictionary API"""

    model_config = ConfigDict(frozen=True)

    word: str = Field(description="The headword")
    phonetics: list[PhoneticInfo] = Field(description="Pronunciation variants")
    meanings: list[Meaning] = Field(description="Senses grouped by part of speech")
