"""Per-token casing rules: acronym detection and camel/Pascal word casing."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from keycase.options import CaseStyle

if TYPE_CHECKING:
    from keycase.options import ConversionOptions

__all__ = ["convert_word", "handle_acronym", "is_acronym"]

_ACRONYM = re.compile(r"[A-Z]{2,}")


def is_acronym(word: str) -> bool:
    """Return True if ``word`` is two or more uppercase ASCII letters."""
    return _ACRONYM.fullmatch(word) is not None


def handle_acronym(word: str, is_first: bool, case_style: CaseStyle) -> str:
    """Case an acronym token.

    A leading acronym in camelCase output is lowercased in its entirety
    (``XML_parser`` -> ``xmlParser``).  Everywhere else the acronym stays
    upper-cased.
    """
    if not word:
        return word
    if case_style == CaseStyle.PASCAL or not is_first:
        return word[0].upper() + word[1:].upper()
    return word.lower()


def convert_word(word: str, is_first: bool, options: ConversionOptions) -> str:
    """Case one token for camelCase / PascalCase output.

    Internal capitalization of the source word is discarded: ``hELLo`` becomes
    ``hello`` or ``Hello``.

    Args:
        word:     The token to case.
        is_first: Whether this is the first token of the identifier.
        options:  Supplies ``preserve_acronyms`` and ``case_style``.

    Returns:
        The cased token.
    """
    if not word:
        return word

    if options.preserve_acronyms and is_acronym(word):
        return handle_acronym(word, is_first, options.case_style)

    lower = word.lower()
    if is_first and options.case_style == CaseStyle.CAMEL:
        return lower
    return lower[:1].upper() + lower[1:]
