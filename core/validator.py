"""Timezone identifier validation."""

import re

from core.zone_database import ZoneDatabase, default_database

MAX_IDENTIFIER_LENGTH = 100

# Region-ambiguous abbreviations that some zone databases accept as aliases.
AMBIGUOUS_ABBREVIATIONS = frozenset({
    "EST", "PST", "CST", "MST",
    "EDT", "PDT", "CDT", "MDT",
    "GMT", "BST",
})

_FIXED_OFFSET = re.compile(r"^(GMT|UTC)[+-]\d+$")


def is_valid_timezone(raw, database: ZoneDatabase | None = None) -> bool:
    """
    Whether `raw` is an acceptable IANA zone identifier.

    Stricter than "the database knows this name": abbreviations such as
    EST and fixed-offset spellings such as GMT+5 are rejected. UTC is
    accepted. Input is not trimmed; callers trim first.
    """
    if not isinstance(raw, str) or not raw:
        return False
    if len(raw) > MAX_IDENTIFIER_LENGTH:
        return False
    if raw.upper() in AMBIGUOUS_ABBREVIATIONS:
        return False
    if _FIXED_OFFSET.match(raw):
        return False

    database = database or default_database
    return database.is_valid_zone(raw)
