"""Tokenizers for the forward grammars and the reverse camel/Pascal splitter.

Forward modes split on a fixed delimiter and drop empty tokens:
- snake_case  -> split on "_"
- kebab-case  -> split on "-"
- Title Case  -> split on whitespace runs

Reverse mode rewrites camelCase / PascalCase into snake_case with two regex
passes.  The passes are order-dependent: the acronym pass must run first, or
"XMLHttpRequest" is split as "xmlhttp_request" instead of "xml_http_request".
"""

from __future__ import annotations

import re

__all__ = ["camel_to_snake", "split_kebab", "split_snake", "split_title"]

# Acronym run followed by a Capitalized word: "XMLHttp" -> "XML_Http"
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")

# Lowercase letter or digit followed by an uppercase letter: "userName" -> "user_Name"
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")

_WHITESPACE = re.compile(r"\s+")


def split_snake(text: str) -> list[str]:
    """Split ``snake_case`` text into non-empty tokens."""
    return [w for w in text.split("_") if w]


def split_kebab(text: str) -> list[str]:
    """Split ``kebab-case`` text into non-empty tokens."""
    return [w for w in text.split("-") if w]


def split_title(text: str) -> list[str]:
    """Split ``Title Case`` (or any whitespace-separated) text into tokens."""
    return [w for w in _WHITESPACE.split(text) if w]


def camel_to_snake(text: str) -> str:
    """Rewrite camelCase / PascalCase text as lower snake_case.

    Pass 1 separates an acronym run from the Capitalized word after it, pass 2
    separates a lowercase letter or digit from a following capital.  Acronyms
    come out lowercased, so the conversion is lossy:
    ``parseHTMLString`` -> ``parse_html_string``.

    Args:
        text: The identifier (or line of identifiers) to rewrite.

    Returns:
        The snake_case form, fully lowercased.
    """
    # Pass 1: XMLHttpRequest -> XML_HttpRequest
    s = _ACRONYM_BOUNDARY.sub(r"\1_\2", text)

    # Pass 2: XML_HttpRequest -> XML_Http_Request
    s = _CAMEL_BOUNDARY.sub(r"\1_\2", s)

    return s.lower()
