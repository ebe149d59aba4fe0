"""Text subpackage: tokenizers, word casing and the per-line pipeline.

Re-exports:
- convert_text / convert_lines: the pipeline entry points
- convert_word / is_acronym / handle_acronym: per-token casing
- camel_to_snake and the forward splitters
"""

from keycase.text.pipeline import (
    collapse_whitespace,
    convert_lines,
    convert_text,
    safe_characters_only,
)
from keycase.text.tokenizer import camel_to_snake, split_kebab, split_snake, split_title
from keycase.text.words import convert_word, handle_acronym, is_acronym

__all__ = [
    "camel_to_snake",
    "collapse_whitespace",
    "convert_lines",
    "convert_text",
    "convert_word",
    "handle_acronym",
    "is_acronym",
    "safe_characters_only",
    "split_kebab",
    "split_snake",
    "split_title",
]
