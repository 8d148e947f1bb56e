"""Helpers for text search queries."""


def contains_pattern(query: str) -> str:
    """Build an ILIKE pattern matching ``query`` anywhere in a value.

    LIKE wildcards in the query are escaped so they match literally.
    Pass a backslash as the ``escape`` character of the ILIKE.
    """
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
