"""Queries for the installed-plugins listing.

Only ``status:<value>`` attributes are recognised. Each value sets one of
six tri-state flags (``None`` means no constraint); ``-status:<value>``
inverts it. Later values for the same flag overwrite earlier ones.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from plugin_query.search.parser import ParseOutcome, parse_query

log = logging.getLogger(__name__)

# status value -> (flag name, flag value when not inverted)
STATUS_FLAGS: dict[str, tuple[str, bool]] = {
    "enabled": ("enabled", True),
    "disabled": ("enabled", False),
    "bundled": ("bundled", True),
    "installed": ("bundled", False),
    "invalid": ("invalid", True),
    "outdated": ("need_update", True),
    "uninstalled": ("deleted", True),
    "inactive": ("need_restart", True),
}

FLAG_NAMES: tuple[str, ...] = (
    "enabled",
    "bundled",
    "invalid",
    "need_update",
    "deleted",
    "need_restart",
)


class InstalledAttributes:
    """Accumulates installed-listing flags while a query is parsed."""

    def __init__(self) -> None:
        self.enabled: bool | None = None  # False == disabled
        self.bundled: bool | None = None  # False == installed by the user
        self.invalid: bool | None = None
        self.need_update: bool | None = None
        self.deleted: bool | None = None
        self.need_restart: bool | None = None  # inactive, or updated but not reloaded

    def handle_attribute(self, name: str, value: str, invert: bool) -> None:
        if name != "status":
            log.debug("Ignoring unknown installed attribute %r", name)
            return

        mapping = STATUS_FLAGS.get(value)
        if mapping is None:
            log.debug("Ignoring unknown status %r", value)
            return

        flag, flag_value = mapping
        setattr(self, flag, flag_value != invert)


@dataclass(frozen=True)
class InstalledQuery:
    """Parsed installed-listing query."""

    search_query: str | None = None
    enabled: bool | None = None
    bundled: bool | None = None
    invalid: bool | None = None
    need_update: bool | None = None
    deleted: bool | None = None
    need_restart: bool | None = None
    outcome: ParseOutcome = ParseOutcome.EMPTY

    @classmethod
    def from_string(cls, query: str) -> InstalledQuery:
        """Parse a raw search string for the installed listing."""
        attributes = InstalledAttributes()
        result = parse_query(query, attributes)
        flags = {name: getattr(attributes, name) for name in FLAG_NAMES}
        return cls(search_query=result.search_query, outcome=result.outcome, **flags)

    @property
    def has_attributes(self) -> bool:
        """Whether any status flag constrains the listing."""
        return any(getattr(self, name) is not None for name in FLAG_NAMES)

    def flags(self) -> dict[str, bool | None]:
        """Return the six flags by name."""
        return {name: getattr(self, name) for name in FLAG_NAMES}
