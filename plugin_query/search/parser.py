"""Turn split words into free search text plus attribute events.

A query mixes free text with ``name:value`` attributes, for example
``tag:Database -tag:Paid sort_by:rating postgres``. Attributes are handed
to an :class:`AttributeSink` as soon as they are read. Free text may occur
at most once; anything the parser cannot place unambiguously makes the
whole raw query the search text.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from plugin_query.search.tokenizer import split_query

log = logging.getLogger(__name__)


class AttributeSink(Protocol):
    """Receiver for the attributes of a query."""

    def handle_attribute(self, name: str, value: str, invert: bool) -> None: ...


class ParseOutcome(enum.Enum):
    """How parsing of a query ended."""

    EMPTY = "empty"
    CLEAN = "clean"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class AttributeEvent:
    """One ``name:value`` pair; ``invert`` is set for ``-name:value``."""

    name: str
    value: str
    invert: bool = False


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a raw query.

    Attributes:
        outcome: EMPTY when there were no words, FALLBACK when the raw
            query became the search text, CLEAN otherwise.
        search_query: Free search text, the raw query on FALLBACK, or None.
        events: Attribute events dispatched to the sink, in order. On
            FALLBACK these are the events dispatched before the parser gave
            up; the sink keeps their effects.
    """

    outcome: ParseOutcome
    search_query: str | None = None
    events: tuple[AttributeEvent, ...] = ()


def _split_attribute_name(word: str) -> tuple[str, bool]:
    """Strip the trailing colon and an optional leading ``-`` from a name."""
    invert = word.startswith("-")
    return word[1 if invert else 0 : -1], invert


def parse_query(
    query: str,
    sink: AttributeSink,
    words: Sequence[str] | None = None,
) -> ParseResult:
    """Parse a raw query, dispatching its attributes to ``sink``.

    Args:
        query: The raw query string. Returned verbatim as the search text
            when the words cannot be interpreted unambiguously.
        sink: Receiver for ``name:value`` attributes.
        words: Pre-split words of ``query``. Split with
            :func:`split_query` when omitted.

    Returns:
        The parse result. Never raises for any string input.
    """
    if words is None:
        words = split_query(query)
    size = len(words)

    if size == 0:
        return ParseResult(ParseOutcome.EMPTY)
    if size == 1:
        # A lone word is always free text, even one shaped like "name:"
        return ParseResult(ParseOutcome.CLEAN, search_query=words[0])

    events: list[AttributeEvent] = []
    search_query: str | None = None
    index = 0

    while index < size:
        word = words[index]
        index += 1

        if word.endswith(":"):
            if index == size:
                log.debug("Attribute %r has no value, falling back to raw query", word)
                return ParseResult(ParseOutcome.FALLBACK, query, tuple(events))
            name, invert = _split_attribute_name(word)
            event = AttributeEvent(name, words[index], invert)
            index += 1
            sink.handle_attribute(event.name, event.value, event.invert)
            events.append(event)
        elif search_query is None:
            search_query = word
        else:
            log.debug("Second free-text word %r, falling back to raw query", word)
            return ParseResult(ParseOutcome.FALLBACK, query, tuple(events))

    return ParseResult(ParseOutcome.CLEAN, search_query, tuple(events))
