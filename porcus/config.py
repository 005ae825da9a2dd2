"""Configuration constants for the Pig Latin transformer and CLI.

WHY: Defaults are shared by the library, the CLI, and the tests. Keeping
them as plain module-level values means there is exactly one place to
look when a suffix or the program name changes.

HOW: Plain strings only. The per-call configuration is the frozen
TransformerConfig in porcus.core.ir, which is built from these defaults
and passed explicitly.

RULES:
- No environment variables, no config files, no mutable module state
- DEFAULT_CONSONANT_SUFFIX / DEFAULT_VOWEL_SUFFIX are the classic "ay"/"way"
- Standard input is always decoded as strict UTF-8
"""

from __future__ import annotations

PROGRAM_NAME = "porcus"

DEFAULT_CONSONANT_SUFFIX = "ay"
"""Appended to words starting with a consonant, e.g. ``nix`` → ``ixn`` + ``ay``."""

DEFAULT_VOWEL_SUFFIX = "way"
"""Appended to words starting with a vowel, e.g. ``egg`` → ``egg`` + ``way``."""

INPUT_ENCODING = "utf-8"
OUTPUT_ENCODING = "utf-8"
