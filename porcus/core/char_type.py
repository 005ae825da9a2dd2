"""Vowel/consonant classification of grapheme clusters.

WHY: Pig Latin needs to know where the leading consonant cluster ends.
That requires a Unicode-aware answer to "is this a vowel?" which works
for ``é``, ``ø``, ``ə`` and decomposed ``e\\u0301`` alike.

HOW: A grapheme is classified by the first code point of its NFD
decomposition, looked up in the tables of porcus.core.latin. Anything
not listed there is a consonant if it belongs to the Latin script and
NON_LATIN otherwise.

RULES:
- NFC and NFD forms classify identically
- The y family is AMBIGUOUS; the transformer decides what that means
- Word-internal apostrophes are consonants
- Modifier letters of the Latin script (ʰ, ᵃ, ʸ) are consonants
- The empty string has its own EMPTY classification
"""

from __future__ import annotations

import enum
import unicodedata
from typing import Sequence

import regex

from porcus.core.latin import AMBIGUOUS_VOWELS, CONSONANT_LIKE_PUNCTUATION, VOWELS

_LATIN_RE = regex.compile(r"\p{Script=Latin}")


class CharType(enum.Enum):
    """Vowel-or-consonant classification of a grapheme."""

    VOWEL = "vowel"
    CONSONANT = "consonant"
    AMBIGUOUS = "ambiguous"
    NON_LATIN = "non-latin"
    EMPTY = "empty"

    def __str__(self) -> str:
        return self.value


def is_latin(char: str) -> bool:
    """True if the first character of *char* has Script=Latin."""
    return bool(char) and _LATIN_RE.match(char) is not None


def get_char_type(grapheme: str) -> CharType:
    """Classify a grapheme cluster as a vowel or a consonant.

    Only the first code point of the NFD decomposition is looked at, so a
    longer string is classified by its first grapheme.

    >>> get_char_type("é")
    <CharType.VOWEL: 'vowel'>
    >>> get_char_type("ç")
    <CharType.CONSONANT: 'consonant'>
    """
    if not grapheme:
        return CharType.EMPTY

    base = unicodedata.normalize("NFD", grapheme)[0]
    if base in VOWELS:
        return CharType.VOWEL
    if base in AMBIGUOUS_VOWELS:
        return CharType.AMBIGUOUS
    if base in CONSONANT_LIKE_PUNCTUATION:
        return CharType.CONSONANT
    if is_latin(base):
        return CharType.CONSONANT
    return CharType.NON_LATIN


def get_char_type_at(graphemes: Sequence[str], index: int) -> CharType:
    """Classify the grapheme at *index*; out-of-range indices are EMPTY."""
    if index < 0 or index >= len(graphemes):
        return CharType.EMPTY
    return get_char_type(graphemes[index])
