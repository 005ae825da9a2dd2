"""Word segmentation: split text into alternating word and separator runs.

WHY: Only words are rewritten; spaces, punctuation, digits, emoji and
everything else must reach the output byte-for-byte. Splitting the input
into typed runs up front keeps the transformer free of any knowledge
about what a separator looks like.

HOW: One compiled pattern from the ``regex`` package describes a word:
a run of letters (``\\p{L}``), combining marks (``\\p{M}``) and
IPA_SYMBOLS, optionally joined to further letter runs by a single
CONSONANT_LIKE_PUNCTUATION character. finditer() walks the input once,
left to right, and the gaps between matches become separator segments.

RULES:
- Lossless: "".join(s.text for s in segment_text(t)) == t for every t
- Total: never raises, for any str
- Empty input → empty list
- Adjacent segments always differ in is_word
- An apostrophe joins a word only between two letters: ``l’œuf`` is one
  word, the quotes in ``'tis'`` are separators
- Letters of any script are word characters; deciding what to do with
  non-Latin words is the transformer's job
"""

from __future__ import annotations

from typing import AbstractSet, Iterator, List

import regex

from porcus.core.ir import Segment
from porcus.core.latin import CONSONANT_LIKE_PUNCTUATION, IPA_SYMBOLS


def _char_class(chars: AbstractSet[str]) -> str:
    """Escape *chars* for use inside a ``[...]`` character class."""
    return "".join("\\U{:08x}".format(ord(c)) for c in sorted(chars))


_LETTER = r"\p{{L}}\p{{M}}{ipa}".format(ipa=_char_class(IPA_SYMBOLS))
_JOINER = _char_class(CONSONANT_LIKE_PUNCTUATION)

_WORD_RE = regex.compile(
    r"[{letter}]+(?:[{joiner}][{letter}]+)*".format(letter=_LETTER, joiner=_JOINER)
)


def iter_segments(text: str) -> Iterator[Segment]:
    """Yield the segments of *text* lazily, in order."""
    position = 0
    for match in _WORD_RE.finditer(text):
        start, end = match.span()
        if start > position:
            yield Segment(text=text[position:start], is_word=False)
        yield Segment(text=match.group(), is_word=True)
        position = end
    if position < len(text):
        yield Segment(text=text[position:], is_word=False)


def segment_text(text: str) -> List[Segment]:
    """Partition *text* into an ordered, lossless list of segments.

    >>> [s.text for s in segment_text("pig, latin!")]
    ['pig', ', ', 'latin', '!']
    """
    return list(iter_segments(text))


def split_graphemes(word: str) -> List[str]:
    """Split *word* into extended grapheme clusters."""
    return regex.findall(r"\X", word)
