"""Case detection and mapping for whole words.

WHY: The transformer works on a lower-cased copy of each word, so the
original capitalisation has to be detected up front and re-applied to
the rearranged result (``Pig`` → ``Igpay``, ``PIG`` → ``IGPAY``).

HOW: detect_case() looks at the first character and at the rest
separately. Uncased characters (digits, CJK, apostrophes) satisfy both
"not upper" and "not lower", so they never change the verdict.
to_case() maps a string onto a Case; restore_case() is the three-way
output policy used by the transformer.

RULES:
- Empty and all-uncased strings are LOWER
- A single uppercase letter (``I``, ``Å``) is SENTENCE, not UPPER
- Sentence case uppercases the first grapheme, not the first code point
- restore_case(): UPPER → upper, SENTENCE → sentence, everything else →
  lower. It is deliberately not a per-character case mirror.
"""

from __future__ import annotations

import enum

import regex

_FIRST_GRAPHEME_RE = regex.compile(r"\X")


class Case(enum.Enum):
    """Case pattern of a word."""

    LOWER = "lowercase"
    UPPER = "UPPERCASE"
    SENTENCE = "Sentencecase"
    MIXED = "MixedCase"

    def __str__(self) -> str:
        return self.value


def detect_case(word: str) -> Case:
    """Detect the case pattern of *word*.

    >>> detect_case("foobar"), detect_case("FOOBAR"), detect_case("Foobar")
    (<Case.LOWER: 'lowercase'>, <Case.UPPER: 'UPPERCASE'>, <Case.SENTENCE: 'Sentencecase'>)
    >>> detect_case("iPhone")
    <Case.MIXED: 'MixedCase'>
    """
    if not word:
        return Case.LOWER

    first, rest = word[0], word[1:]
    first_is_lower = not first.isupper()
    first_is_upper = not first.islower()
    rest_is_lower = not any(c.isupper() for c in rest)
    rest_is_upper = not any(c.islower() for c in rest)

    if first_is_lower and rest_is_lower:
        return Case.LOWER
    if first_is_upper and rest_is_lower:
        return Case.SENTENCE
    if first_is_upper and rest_is_upper:
        return Case.UPPER
    return Case.MIXED


def to_case(text: str, case: Case) -> str:
    """Return *text* rendered in *case*. MIXED leaves it unchanged."""
    if case is Case.LOWER:
        return text.lower()
    if case is Case.UPPER:
        return text.upper()
    if case is Case.SENTENCE:
        return _to_sentence_case(text)
    return text


def restore_case(text: str, original: str) -> str:
    """Render *text* in the case pattern of *original*.

    Only uppercase and sentence case are carried over. Lowercase and mixed
    originals both produce lowercase output.
    """
    case = detect_case(original)
    if case is Case.UPPER or case is Case.SENTENCE:
        return to_case(text, case)
    return text.lower()


def _to_sentence_case(text: str) -> str:
    match = _FIRST_GRAPHEME_RE.match(text)
    if match is None:
        return text
    first = match.group()
    return first.upper() + text[len(first):].lower()
