"""Classify a printable ASCII character as letter, digit, punctuation or other."""

from __future__ import annotations

import string
import sys
from enum import Enum
from typing import Optional, Sequence

__all__ = ["CharClass", "classify", "main"]

_PUNCTUATION = frozenset(" " + string.punctuation)


class CharClass(Enum):
    UPPER = "upper case letter"
    LOWER = "lower case letter"
    DIGIT = "digit"
    PUNCTUATION = "punctuation"
    OTHER = "other"


def classify(ch: str) -> CharClass:
    """Return the class of ``ch``; it must be one character with code 32..127.

    Raises ``ValueError`` for anything else. The space counts as punctuation.
    """
    if len(ch) != 1:
        raise ValueError("expected exactly one character")
    if not 32 <= ord(ch) <= 127:
        raise ValueError("char is out of range [32, 127]")
    if "A" <= ch <= "Z":
        return CharClass.UPPER
    if "a" <= ch <= "z":
        return CharClass.LOWER
    if "0" <= ch <= "9":
        return CharClass.DIGIT
    if ch in _PUNCTUATION:
        return CharClass.PUNCTUATION
    return CharClass.OTHER


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Classify the first non-blank character of the argument or of a line of input."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        text = args[0] if args else input()
    except EOFError:
        text = ""
    ch = text.lstrip()[:1]
    if not ch:
        print("no character given")
        return 1
    try:
        kind = classify(ch)
    except ValueError as error:
        print(error)
        return 1
    print(kind.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())