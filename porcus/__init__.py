"""porcus: Pig Latin for the whole Latin script.

WHY: Naive Pig Latin converters only know a-z. Real text has diacritics
(``Česko``), ligatures (``œuf``), apostrophes inside words (``l’œuf``) and
IPA transcriptions (``stɹɪŋ``). This package handles all of them while
leaving everything that is not a word untouched.

HOW: Two-stage pure pipeline. The segmenter splits text into word and
separator runs; the transformer rotates each word's leading consonant
cluster, appends the configured suffix and restores the casing. Output
is the runs rejoined in their original order.

RULES:
- PigLatinTransformer and to_pig_latin() are the public entry points
- The transformation is total: every str is valid input
- Configuration is immutable and passed explicitly; no global state

Usage::

    >>> from porcus import PigLatinTransformer
    >>> PigLatinTransformer().transform("Pig latin")
    'Igpay atinlay'
    >>> PigLatinTransformer("eɪ", "weɪ").transform("ə stɹɪŋ")
    'əweɪ ɪŋstɹeɪ'
"""

from porcus.config import DEFAULT_CONSONANT_SUFFIX, DEFAULT_VOWEL_SUFFIX
from porcus.core.case import Case
from porcus.core.char_type import CharType
from porcus.core.ir import Segment, TransformerConfig
from porcus.core.segmenter import segment_text
from porcus.core.transformer import PigLatinTransformer, to_pig_latin

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONSONANT_SUFFIX",
    "DEFAULT_VOWEL_SUFFIX",
    "Case",
    "CharType",
    "PigLatinTransformer",
    "Segment",
    "TransformerConfig",
    "segment_text",
    "to_pig_latin",
]
