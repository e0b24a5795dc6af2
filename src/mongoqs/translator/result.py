"""
QResult - the query description handed to the document store.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class QResult:
    """
    Filter, projection, sort, paging and meta values for one query.

    limit and skip are 0 when unspecified.
    """
    filter: dict[str, dict[str, Any]] = field(default_factory=dict)
    projection: dict[str, int] = field(default_factory=dict)
    sort: dict[str, int] = field(default_factory=dict)
    limit: int = 0
    skip: int = 0
    meta: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "filter": dict(self.filter),
            "projection": dict(self.projection),
            "sort": dict(self.sort),
            "limit": self.limit,
            "skip": self.skip,
            "meta": dict(self.meta),
        }

    def find_kwargs(self) -> dict:
        """
        Keyword arguments for pymongo ``Collection.find``.

        Usage:
            cursor = collection.find(**result.find_kwargs())
        """
        projection: Optional[dict[str, int]] = dict(self.projection) or None
        return {
            "filter": dict(self.filter),
            "projection": projection,
            "sort": list(self.sort.items()) or None,
            "limit": self.limit,
            "skip": self.skip,
        }

    def __str__(self) -> str:
        return (
            f"--- Filter ---\n{self.filter}\n--------------\n"
            f"--- Projection ---\n{self.projection}\n------------------\n"
            f"--- Sort ---\n{self.sort}\n-------------\n"
            f"--- Paging ---\nLimit:\t{self.limit}\nSkip:\t{self.skip}\n--------------\n"
            f"--- Meta ---\n{self.meta}\n-------------"
        )
