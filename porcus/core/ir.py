"""Intermediate representation: text segments and transformer configuration.

WHY: The segmenter and the transformer need a shared, well-typed
vocabulary. A Segment says "this run of characters is a word" or "this
run is everything else"; a TransformerConfig says which suffixes to use.

HOW: Two frozen dataclasses. Segments are transient, created and thrown
away inside one transform() call. A TransformerConfig is built once and
shared read-only by every call.

RULES:
- Concatenating Segment.text in order reproduces the input exactly
- Word segments are never empty
- TransformerConfig stores suffixes verbatim; empty suffixes are legal
- Both dataclasses are immutable, which makes them safe to share across
  threads without locking
"""

from __future__ import annotations

from dataclasses import dataclass

from porcus.config import DEFAULT_CONSONANT_SUFFIX, DEFAULT_VOWEL_SUFFIX


@dataclass(frozen=True)
class Segment:
    """A maximal run of word characters or of separator characters.

    Attributes:
        text: The characters of the run, exactly as they appear in the input.
        is_word: True for a word run, False for a separator run.
    """

    text: str
    is_word: bool


@dataclass(frozen=True)
class TransformerConfig:
    """Immutable Pig Latin settings.

    Attributes:
        consonant_suffix: Appended after the rotated consonant cluster.
        vowel_suffix: Appended to words that start with a vowel.
        contextual_y: When False, ``y`` and its variants are vowels. When
            True, a ``y`` directly followed by a vowel is a consonant
            (``yoga`` → ``ogayay``) and any other ``y`` is a vowel.
    """

    consonant_suffix: str = DEFAULT_CONSONANT_SUFFIX
    vowel_suffix: str = DEFAULT_VOWEL_SUFFIX
    contextual_y: bool = False
