"""Text pipeline: whitespace trimming, safe-character filtering, mode dispatch.

Steps run in a fixed order, each gated by its option flag:

1. ``trim_whitespace``  - strip the ends and collapse whitespace runs.
2. ``safe_chars_only``  - NFD-normalize, drop combining marks and non-ASCII.
3. ``mode``             - tokenize and re-join the cased words with no separator
                          (or run the reverse camel -> snake rewrite).
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Callable

from keycase.options import ConversionMode, ConversionOptions
from keycase.text.tokenizer import camel_to_snake, split_kebab, split_snake, split_title
from keycase.text.words import convert_word

__all__ = ["collapse_whitespace", "convert_lines", "convert_text", "safe_characters_only"]

_WHITESPACE_RUN = re.compile(r"\s+")
_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
_NON_ASCII = re.compile(r"[^\x00-\x7f]")

_SPLITTERS: dict[ConversionMode, Callable[[str], list[str]]] = {
    ConversionMode.SNAKE_TO_CAMEL: split_snake,
    ConversionMode.KEBAB_TO_CAMEL: split_kebab,
    ConversionMode.TITLE_TO_CAMEL: split_title,
}


def collapse_whitespace(text: str) -> str:
    """Strip ``text`` and collapse every internal whitespace run to one space."""
    return _WHITESPACE_RUN.sub(" ", text.strip())


def safe_characters_only(text: str) -> str:
    """Remove diacritics, then any remaining non-ASCII code point.

    ``"Crème brûlée"`` -> ``"Creme brulee"``; ``"日本 key"`` -> ``" key"``.
    """
    decomposed = unicodedata.normalize("NFD", text)
    return _NON_ASCII.sub("", _COMBINING_MARKS.sub("", decomposed))


def _join_words(words: list[str], options: ConversionOptions) -> str:
    return "".join(convert_word(w, i == 0, options) for i, w in enumerate(words))


def convert_text(text: str, options: ConversionOptions) -> str:
    """Run one string through the pipeline.

    Args:
        text:    A single line (or a single JSON key / CSV header cell).
        options: Conversion settings for the current job.

    Returns:
        The converted string.  Empty input is returned unchanged; a ``None``
        mode leaves the text as produced by the trimming and filtering steps.
    """
    if not text:
        return text

    result = text
    if options.trim_whitespace:
        result = collapse_whitespace(result)
    if options.safe_chars_only:
        result = safe_characters_only(result)

    if options.mode == ConversionMode.REVERSE:
        return camel_to_snake(result)

    splitter = _SPLITTERS.get(options.mode) if options.mode is not None else None
    if splitter is None:
        return result
    return _join_words(splitter(result), options)


def convert_lines(text: str, options: ConversionOptions) -> str:
    """Convert each ``\\n``-separated line of ``text`` independently."""
    return "\n".join(convert_text(line, options) for line in text.split("\n"))
