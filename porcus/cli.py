"""Command-line filter: standard input to Pig Latin on standard output.

WHY: The most common use is shell piping (``echo Hello | porcus``). The
CLI is a thin wrapper around PigLatinTransformer so that scripts get
exactly the library's behaviour.

HOW: argparse parses the suffix flags first, so bad arguments fail
before any input is read. Then all of stdin is read as bytes, decoded
as strict UTF-8, transformed in one call and written to stdout as UTF-8.

RULES:
- -c/--consonant and -v/--vowel set the suffixes (defaults "ay"/"way")
- -y/--contextual-y treats a y before a vowel as a consonant
- -h/--help and -V/--version print and exit 0
- Unknown or malformed arguments: usage on stderr, exit 2, no input read
- Undecodable input: "Error: ..." on stderr, exit 1, nothing on stdout
- Status and error output goes to stderr, never stdout
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO, List, Optional

from porcus import __version__
from porcus.config import (
    DEFAULT_CONSONANT_SUFFIX,
    DEFAULT_VOWEL_SUFFIX,
    INPUT_ENCODING,
    OUTPUT_ENCODING,
    PROGRAM_NAME,
)
from porcus.core.transformer import PigLatinTransformer

logger = logging.getLogger(__name__)


class InputDecodeError(ValueError):
    """Raised when standard input is not valid text.

    WHY: Callers need to tell a decoding failure apart from a bug, and
    the message should say which encoding was expected.

    RULES:
    - Raised before any output is written
    - Message includes the encoding and the byte offset of the problem
    """

    def __init__(self, encoding: str, exc: UnicodeDecodeError) -> None:
        self.encoding = encoding
        self.position = exc.start
        super().__init__(
            "input is not valid {} (invalid byte at offset {})".format(encoding, exc.start)
        )


def _status(msg: str) -> None:
    """Print a status message to stderr and flush."""
    print(msg, file=sys.stderr, flush=True)


def _read_input(stream: BinaryIO) -> str:
    raw = stream.read()
    try:
        return raw.decode(INPUT_ENCODING)
    except UnicodeDecodeError as exc:
        raise InputDecodeError(INPUT_ENCODING, exc) from exc


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() lets tests inspect
    defaults without feeding any input.
    """
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Transforms standard input to pig latin.",
    )

    parser.add_argument(
        "-c", "--consonant",
        dest="consonant_suffix",
        metavar="SUFFIX",
        default=DEFAULT_CONSONANT_SUFFIX,
        help="suffix for words starting with a consonant (default: %(default)s)",
    )

    parser.add_argument(
        "-v", "--vowel",
        dest="vowel_suffix",
        metavar="SUFFIX",
        default=DEFAULT_VOWEL_SUFFIX,
        help="suffix for words starting with a vowel (default: %(default)s)",
    )

    parser.add_argument(
        "-y", "--contextual-y",
        action="store_true",
        help="treat y as a consonant when a vowel follows it",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="log debug information to stderr",
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> int:
    """Entry point for the ``porcus`` command.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:]).
        stdin: Binary input stream (defaults to sys.stdin.buffer).
        stdout: Binary output stream (defaults to sys.stdout.buffer).

    Returns:
        Process exit status: 0 on success, 1 on an input error, 130 when
        interrupted. Argument errors exit 2 from inside argparse.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer

    transformer = PigLatinTransformer(
        args.consonant_suffix,
        args.vowel_suffix,
        contextual_y=args.contextual_y,
    )
    logger.debug("Using %r", transformer)

    try:
        text = _read_input(stdin)
        logger.debug("Read %d characters from standard input", len(text))
        result = transformer.transform(text)
        stdout.write(result.encode(OUTPUT_ENCODING))
        stdout.flush()
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        return 130
    except ValueError as e:
        _status("Error: {}".format(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
