"""Queries for the trending (marketplace) plugin listing.

Recognised attributes:

- ``tag:<name>`` / ``-tag:<name>``: include or exclude a tag. The opposite
  polarity cancels an earlier occurrence instead of contradicting it.
- ``sort_by:<key>``: one of :data:`SORT_CLAUSES`; last value wins.
- ``repository:<url>``: custom plugin repository; last value wins.

Other attribute names are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from urllib.parse import quote

from plugin_query.search.parser import ParseOutcome, parse_query

log = logging.getLogger(__name__)

# sort_by value -> literal URL query clause
SORT_CLAUSES: dict[str, str] = {
    "featured": "is_featured_search=true",
    "updates": "orderBy=update+date",
    "downloads": "orderBy=downloads",
    "rating": "orderBy=rating",
    "name": "orderBy=name",
}

# Characters encodeURIComponent leaves alone on top of quote()'s defaults
_URI_COMPONENT_SAFE = "!~*'()"


def encode_component(value: str) -> str:
    """Percent-encode a URL query component."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


class TrendingAttributes:
    """Accumulates trending-listing attributes while a query is parsed."""

    def __init__(self) -> None:
        self.tags: set[str] = set()
        self.exclude_tags: set[str] = set()
        self.sort_by: str | None = None
        self.repository: str | None = None

    def handle_attribute(self, name: str, value: str, invert: bool) -> None:
        if name == "tag":
            if invert:
                if value in self.tags:
                    self.tags.discard(value)
                else:
                    self.exclude_tags.add(value)
            elif value in self.exclude_tags:
                self.exclude_tags.discard(value)
            else:
                self.tags.add(value)
        elif name == "sort_by":
            self.sort_by = value
        elif name == "repository":
            self.repository = value
        else:
            log.debug("Ignoring unknown trending attribute %r", name)


@dataclass(frozen=True)
class TrendingQuery:
    """Parsed trending-listing query.

    Attributes:
        search_query: Free search text, or the raw query when it could not
            be parsed unambiguously.
        tags: Tags a plugin must carry.
        exclude_tags: Tags a plugin must not carry. Never overlaps ``tags``.
        sort_by: Requested sort key, verbatim.
        repository: Custom plugin repository, verbatim.
        outcome: How parsing ended.
    """

    search_query: str | None = None
    tags: frozenset[str] = field(default_factory=frozenset)
    exclude_tags: frozenset[str] = field(default_factory=frozenset)
    sort_by: str | None = None
    repository: str | None = None
    outcome: ParseOutcome = ParseOutcome.EMPTY

    @classmethod
    def from_string(cls, query: str) -> TrendingQuery:
        """Parse a raw search string for the trending listing."""
        attributes = TrendingAttributes()
        result = parse_query(query, attributes)
        return cls(
            search_query=result.search_query,
            tags=frozenset(attributes.tags),
            exclude_tags=frozenset(attributes.exclude_tags),
            sort_by=attributes.sort_by,
            repository=attributes.repository,
            outcome=result.outcome,
        )

    def url_query(self) -> str:
        """Serialize to a marketplace URL query string.

        Order is fixed: sort clause, one ``tags=`` pair per included tag
        (sorted), then ``search=``. Excluded tags and the repository are
        not part of the URL.
        """
        parts: list[str] = []

        sort_clause = SORT_CLAUSES.get(self.sort_by or "")
        if sort_clause:
            parts.append(sort_clause)

        for tag in sorted(self.tags):
            parts.append(f"tags={encode_component(tag)}")

        if self.search_query is not None:
            parts.append(f"search={encode_component(self.search_query)}")

        return "&".join(parts)
