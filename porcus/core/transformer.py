"""Pig Latin transformation of segmented text.

WHY: This is the whole point of the package: move each word's leading
consonant cluster to the end and add a suffix, or just add a different
suffix to words that start with a vowel, without disturbing anything
around the words.

HOW: transform() runs the segmenter, rewrites every word segment with
transform_word() and joins the segments back together. transform_word()
lower-cases the word, splits it into grapheme clusters, counts the
leading consonant graphemes, rearranges, appends the suffix and finally
re-applies the original word's case pattern.

RULES:
- Vowel-led word: word + vowel_suffix
- Consonant cluster C with non-empty remainder R: R + C + consonant_suffix
- No vowel at all: word + consonant_suffix (nothing moves)
- Words whose first character is not Latin script pass through unchanged
- A non-Latin letter inside a Latin word ends the consonant cluster
- Separators pass through unchanged
- Case: UPPER stays upper, Sentence stays sentence, anything else is
  lowercased
- Pure and total: same config + same text → same output, never raises
"""

from __future__ import annotations

import logging
from typing import List, Optional

from porcus.config import DEFAULT_CONSONANT_SUFFIX, DEFAULT_VOWEL_SUFFIX
from porcus.core.case import restore_case
from porcus.core.char_type import CharType, get_char_type_at, is_latin
from porcus.core.ir import TransformerConfig
from porcus.core.segmenter import iter_segments, split_graphemes

logger = logging.getLogger(__name__)


class PigLatinTransformer:
    """Converts text to Pig Latin with a fixed pair of suffixes.

    Instances hold only an immutable TransformerConfig, so one transformer
    can be shared freely between threads.

    >>> PigLatinTransformer().transform("à l’œuf")
    'àway œufl’ay'
    >>> PigLatinTransformer("", "").transform("cat")
    'atc'
    """

    def __init__(
        self,
        consonant_suffix: str = DEFAULT_CONSONANT_SUFFIX,
        vowel_suffix: str = DEFAULT_VOWEL_SUFFIX,
        *,
        contextual_y: bool = False,
    ) -> None:
        self._config = TransformerConfig(
            consonant_suffix=consonant_suffix,
            vowel_suffix=vowel_suffix,
            contextual_y=contextual_y,
        )

    @classmethod
    def from_config(cls, config: TransformerConfig) -> "PigLatinTransformer":
        """Build a transformer around an existing configuration."""
        obj = cls.__new__(cls)
        obj._config = config
        return obj

    @property
    def config(self) -> TransformerConfig:
        return self._config

    @property
    def consonant_suffix(self) -> str:
        return self._config.consonant_suffix

    @property
    def vowel_suffix(self) -> str:
        return self._config.vowel_suffix

    def __repr__(self) -> str:
        return "PigLatinTransformer(consonant_suffix={!r}, vowel_suffix={!r}, contextual_y={!r})".format(
            self._config.consonant_suffix,
            self._config.vowel_suffix,
            self._config.contextual_y,
        )

    def transform(self, text: str) -> str:
        """Convert every word of *text* to Pig Latin.

        Args:
            text: Any string. Non-word characters are copied verbatim.

        Returns:
            The transformed text. Empty input gives an empty string.
        """
        parts: List[str] = []
        word_count = 0
        for segment in iter_segments(text):
            if segment.is_word:
                parts.append(self.transform_word(segment.text))
                word_count += 1
            else:
                parts.append(segment.text)
        logger.debug("Transformed %d words in %d segments", word_count, len(parts))
        return "".join(parts)

    to_pig_latin = transform

    def transform_word(self, word: str) -> str:
        """Convert a single word, restoring its case pattern.

        *word* is expected to be one word segment. Words that do not start
        with a Latin-script character are returned unchanged.
        """
        if not word or not is_latin(word[0]):
            return word

        graphemes = split_graphemes(word.lower())
        prefix_length = 0
        while self._has_consonant_at(graphemes, prefix_length):
            prefix_length += 1

        if prefix_length == 0:
            pig = "".join(graphemes) + self._config.vowel_suffix
        else:
            pig = (
                "".join(graphemes[prefix_length:])
                + "".join(graphemes[:prefix_length])
                + self._config.consonant_suffix
            )
        return restore_case(pig, word)

    def _has_consonant_at(self, graphemes: List[str], index: int) -> bool:
        char_type = get_char_type_at(graphemes, index)
        if char_type is CharType.CONSONANT:
            return True
        if char_type is CharType.AMBIGUOUS and self._config.contextual_y:
            return get_char_type_at(graphemes, index + 1) is CharType.VOWEL
        return False


def to_pig_latin(
    text: str,
    consonant_suffix: str = DEFAULT_CONSONANT_SUFFIX,
    vowel_suffix: str = DEFAULT_VOWEL_SUFFIX,
    transformer: Optional[PigLatinTransformer] = None,
) -> str:
    """Convert *text* to Pig Latin in one call.

    Uses *transformer* when given, otherwise builds one from the suffixes.
    """
    if transformer is None:
        transformer = PigLatinTransformer(consonant_suffix, vowel_suffix)
    return transformer.transform(text)
