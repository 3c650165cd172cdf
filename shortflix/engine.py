from typing import Iterable, List, Optional

from .models import Short


def matches_tag(short: Short, tag: str) -> bool:
    wanted = tag.lower()
    return any(t.lower() == wanted for t in short.tags)


def matches_query(short: Short, query: str) -> bool:
    needle = query.lower()
    return needle in short.title.lower() or any(needle in t.lower() for t in short.tags)


def filter_shorts(shorts: Iterable[Short], tag: Optional[str] = None, q: Optional[str] = None) -> List[Short]:
    """Apply the tag and query filters (both optional, combined with AND).

    Empty strings behave like absent filters. Input order is preserved.
    """
    result = list(shorts)
    if tag:
        result = [s for s in result if matches_tag(s, tag)]
    if q:
        result = [s for s in result if matches_query(s, q)]
    return result
