"""Split a raw search string into words.

Words keep their original left-to-right order. Quoted phrases lose their
quotes, and a word terminated by a colon keeps the colon so the parser can
recognise it as an attribute name (``tag:``, ``-status:``).
"""

from __future__ import annotations

import logging
from importlib import resources
from typing import Any

from lark import Lark, Token, Transformer

log = logging.getLogger(__name__)


def _load_grammar() -> str:
    """Load the Lark grammar from the package resources."""
    return resources.files("plugin_query.search").joinpath("grammar.lark").read_text()


_GRAMMAR_TEXT = _load_grammar()

_lexer = Lark(
    _GRAMMAR_TEXT,
    parser="lalr",
    lexer="basic",
)


class _WordTransformer(Transformer):
    """Transform the token stream into plain word strings."""

    def start(self, items: list[Any]) -> list[str]:
        words: list[str] = []
        for token in items:
            if not isinstance(token, Token):
                continue
            if token.type == "UNCLOSED_PHRASE":
                # Unterminated quote: the rest of the input is discarded
                break
            if token.type == "PHRASE":
                words.append(str(token)[1:-1])
            else:
                words.append(str(token))
        return words


_transformer = _WordTransformer()


def split_query(query: str) -> list[str]:
    """Split a search string into words.

    Args:
        query: Raw search string as typed by the user.

    Returns:
        The words in input order. When the input is non-empty but yields
        no words (only spaces, or an unterminated quote at the start), the
        whole input is returned verbatim as the single word.
    """
    words: list[str] = _transformer.transform(_lexer.parse(query))

    if not words and query:
        words = [query]

    log.debug("Split %r into %d word(s): %r", query, len(words), words)
    return words
