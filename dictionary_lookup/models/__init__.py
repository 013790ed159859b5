"""Data models for the dictionary lookup application"""

from .word_entry import Definition, License, Meaning, PhoneticInfo, WordEntry

__all__ = [
    "WordEntry",
    "Meaning",
    "Definition",
    "PhoneticInfo",
    "License",
]
