"""Latin-script and IPA character tables for vowel/consonant classification.

WHY: Unicode has no "vowel" property. Whether a letter is a vowel has to
come from a curated list, and keeping the list as data (not logic) makes
it easy to extend when someone reports a missing letter.

HOW: Each table is a frozenset of single code points. Letters are listed
in decomposed form only: ``á`` is covered by ``a`` because the classifier
looks at the first code point of the NFD decomposition. Modifier and
combining characters are not listed.

RULES:
- VOWELS are always vowels
- AMBIGUOUS_VOWELS (the y family) are vowels or consonants depending on
  the transformer configuration
- CONSONANT_LIKE_PUNCTUATION joins words and counts as a consonant, so
  ``M'lady`` becomes ``Adym'lay``
- IPA_SYMBOLS are non-letters (by general category) that still belong
  inside phonetic words
- Every other Latin-script letter is a consonant
"""

from __future__ import annotations

from typing import FrozenSet

VOWELS: FrozenSet[str] = frozenset(
    # Basic Latin
    "AEIOU"
    "aeiou"
    # Latin-1 Supplement
    "ªº"
    "ÆØæøıĲĳŒœ"
    # Latin Extended-B
    "ƎƏƐƖƗƟƱ"  # non-European and historic
    "ǝ"
    "Ⱥ"  # Senćoŧen
    "ȢȣɄɆɇ"
    # IPA Extensions
    "ɐɑɒ"  # a-like
    "ɘəɚɛɜɝɞ"  # e-like
    "ɨɩɪ"  # i-like
    "ɵɶɷ"  # o-like
    "ʉʊ"  # u-like
    # Phonetic Extensions
    "ᴀᴁᴂ"
    "ᴇᴈ"
    "ᴉ"
    "ᴏᴐᴑᴒᴓᴔᴕᴖᴗ"
    "ᴜᴝᴞᵫ"
    "ᵻᵼᵾᵿ"
    "ᶏᶐᶒᶓᶔᶕᶖᶗᶙ"  # retroflex hook
    "ẚ"
    "ⁱ"  # superscript
    "ₐₑₒₔ"  # subscript
    # Latin Extended-C
    "ⱥ"
    "ⱭⱯⱰ"
    "ⱸⱺⱻ"  # Uralic Phonetic Alphabet
    # Latin Extended-D
    "ꜲꜳꜴꜵꜶꜷꜸꜹꜺꜻꜼꜽ"  # medievalist a-like
    "ꝊꝋꝌꝍꝎꝏ"  # medievalist o-like
    "ꝪꝫꝬꝭꝸ"  # abbreviations
    "ꞚꞛꞜꞝꞞꞟ"  # Volapük
    "Ɜ"
    "Ɪ"  # West African
    "Ꞷꞷ"  # African
    "Ꞹꞹ"  # Mazahua
    "ꞺꞻꞼꞽꞾꞿ"  # Ugaritic and Egyptological
    "ꟷ"  # Celtic
    "ꟹ"
    "ꟾ"  # Roman
    # Latin Extended-E
    "ꬰꬱ"  # German dialectology, a-like
    "ꬲꬳꬴ"
    "ꬽꬾꬿꭀꭁꭂꭃꭄ"
    "ꭎꭏꭐꭑꭒ"
    "ꭠꭡꭢꭣ"  # Sakha
    "ꭤ"  # Americanist
    # Halfwidth and Fullwidth Forms
    "ＡＥＩＯＵ"
    "ａｅｉｏｕ"
)

AMBIGUOUS_VOWELS: FrozenSet[str] = frozenset("YyƳƴɎɏʎʏỾỿＹｙꭚ")

CONSONANT_LIKE_PUNCTUATION: FrozenSet[str] = frozenset(
    "'"
    "’"  # U+2019 right single quotation mark
    "＇"  # U+FF07 fullwidth apostrophe
    "·"  # U+00B7 middle dot (Catalan l·l)
    "՟"  # U+055F Armenian abbreviation mark
    "״"  # U+05F4 Hebrew gershayim (z״l)
    "‧"  # U+2027 hyphenation point
)

IPA_SYMBOLS: FrozenSet[str] = frozenset(
    "˞"  # U+02DE rhotic hook
    "˔˕"  # raised, lowered
    "˖˗"  # advanced, retracted
    "˥˦˧˨˩"  # tone letters
)
