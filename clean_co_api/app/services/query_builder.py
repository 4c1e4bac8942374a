"""
Translate catalog listing parameters into a MongoDB query descriptor.

``build_service_query`` is a pure function: it inspects the parameters
supplied with a request and returns a ``ServiceQuery`` holding the
filter, the sort specification and the pagination window.  Parameters
that are absent leave the corresponding part empty, which the store
interprets as "match everything" and "natural order".
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from pymongo import ASCENDING, DESCENDING

SORT_DIRECTIONS = {
    "asc": ASCENDING,
    "ascending": ASCENDING,
    "1": ASCENDING,
    "desc": DESCENDING,
    "descending": DESCENDING,
    "-1": DESCENDING,
}


@dataclass
class ServiceQuery:
    """Filter, sort and pagination for one catalog listing request."""

    filter: Dict[str, Any] = field(default_factory=dict)
    sort: Dict[str, int] = field(default_factory=dict)
    page: int = 1
    # ``None`` means every matching record is returned.
    limit: Optional[int] = None

    @property
    def skip(self) -> int:
        if self.limit is None:
            return 0
        return (self.page - 1) * self.limit

    def sort_spec(self) -> Optional[List[Tuple[str, int]]]:
        """Sort as the list of pairs pymongo expects, or ``None``."""
        return list(self.sort.items()) or None


def _positive_int(name: str, value: Union[str, int, None]) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a positive integer") from None
    if number < 1:
        raise ValueError(f"{name} must be a positive integer")
    return number


def parse_sort_order(token: str) -> int:
    """Map an order token such as ``asc`` or ``-1`` to a pymongo direction."""
    try:
        return SORT_DIRECTIONS[token.strip().lower()]
    except KeyError:
        raise ValueError(f"Unsupported sort order: {token}") from None


def build_service_query(
    category: Optional[str] = None,
    sort_field: Optional[str] = None,
    sort_order: Optional[str] = None,
    page: Union[str, int, None] = None,
    limit: Union[str, int, None] = None,
) -> ServiceQuery:
    """Build the query descriptor for the services listing.

    Parameters
    ----------
    category : Optional[str]
        Exact category to match.  Empty or missing means all categories.
    sort_field, sort_order : Optional[str]
        Field to sort by and its direction.  Sorting applies only when
        both are given.
    page, limit : str | int | None
        1‑based page number and page size.  ``page`` defaults to 1; a
        missing ``limit`` disables pagination.

    Raises
    ------
    ValueError
        If ``page`` or ``limit`` is not a positive integer, or the sort
        order token is not recognised.
    """
    query = ServiceQuery()
    if category:
        query.filter["category"] = category
    if sort_field and sort_order:
        query.sort[sort_field] = parse_sort_order(sort_order)
    query.page = _positive_int("page", page) or 1
    query.limit = _positive_int("limit", limit)
    return query
