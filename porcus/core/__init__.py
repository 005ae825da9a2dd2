"""Core segmentation, classification and transformation modules.

WHY: The core package is the whole algorithm, with no I/O. The CLI and
any embedding application call into it; nothing in here reads stdin or
writes stdout.

HOW: latin.py holds the character tables, char_type.py classifies
graphemes, case.py detects and restores capitalisation, segmenter.py
splits text into word/separator runs, transformer.py ties them
together. ir.py defines the shared dataclasses.

RULES:
- Every function here is pure; configuration is passed explicitly
- No module-level mutable state
- Nothing here raises on text input
"""
