"""Domain Types: identity types, status defaults, and identifier parsing.

Invariants:
    - Entity identifiers are int4 values (SERIAL primary keys)
    - parse_identifier never raises: anything that is not a valid id maps to None,
      and a None id matches no row
"""

import re
from enum import Enum


INT4_MIN = -2_147_483_648
INT4_MAX = 2_147_483_647
_ID_PATTERN = re.compile(r"-?[0-9]+")


# ─── Enums ───────────────────────────────────────────────────────

class Entity(str, Enum):
    """Entity labels used in not-found messages and log context."""
    USER = "User"
    COMPUTER = "Computer"
    MAINTENANCE_LOG = "Maintenance log"


DEFAULT_COMPUTER_STATUS = "Active"
DEFAULT_MAINTENANCE_STATUS = "Scheduled"


def parse_identifier(raw: str | int | None) -> int | None:
    """Parse a path identifier. Returns None when it cannot match a row."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    else:
        text = raw.strip()
        if not _ID_PATTERN.fullmatch(text):
            return None
        value = int(text)
    if value < INT4_MIN or value > INT4_MAX:
        return None
    return value
