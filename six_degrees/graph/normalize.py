"""
Actor name canonicalization.
"""

from six_degrees.config import NAME_STRIP_CHARS

_STRIP_TABLE = str.maketrans("", "", NAME_STRIP_CHARS)


def normalize_name(raw: str) -> str:
    """
    Return the lookup key for an actor name.

    Removes every apostrophe and double quote and trims surrounding
    whitespace, so "O'Brien, Pat" and "OBrien, Pat" resolve to the same
    actor. Quotes go first so that whitespace they were shielding is
    trimmed too, which keeps the function idempotent.
    """
    return raw.translate(_STRIP_TABLE).strip()
