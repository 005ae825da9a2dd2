"""Shared test fixtures for the porcus test suite.

WHY: Several test modules need the same transformers and the same way of
driving the CLI with in-memory streams. Centralising them here keeps the
individual tests short.

HOW: Pytest fixtures provide a default transformer, an IPA-flavoured one
(the "eɪ"/"weɪ" example), and a run_cli callable that feeds bytes to
porcus.cli.main() and returns (exit status, stdout bytes).

RULES:
- Fixtures build fresh objects per test; nothing is shared across tests
- run_cli never touches the real sys.stdin / sys.stdout
"""

import io
from typing import Callable, List, Tuple

import pytest

from porcus.cli import main
from porcus.core.transformer import PigLatinTransformer


@pytest.fixture
def default_transformer():
    """Transformer with the classic "ay"/"way" suffixes."""
    return PigLatinTransformer()


@pytest.fixture
def ipa_transformer():
    """Transformer with IPA suffixes, for phonetic transcriptions."""
    return PigLatinTransformer("eɪ", "weɪ")


@pytest.fixture
def run_cli() -> Callable[..., Tuple[int, bytes]]:
    """Run the CLI on in-memory byte streams."""

    def _run(argv: List[str], data: bytes = b"") -> Tuple[int, bytes]:
        stdin = io.BytesIO(data)
        stdout = io.BytesIO()
        status = main(argv, stdin=stdin, stdout=stdout)
        return status, stdout.getvalue()

    return _run
