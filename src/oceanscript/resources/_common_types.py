"""Shared pagination types for list endpoints.

This module contains:
- List options (page cursor sent with every list request)
- Link metadata parsed from list responses
- The page container returned by every list call
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

# Largest page size the API accepts; fewer pages means fewer round trips.
DEFAULT_PER_PAGE = 200


@dataclass
class ListOptions:
    """Page cursor for list requests. Pages are numbered from 1."""

    page: int = 1
    per_page: int = DEFAULT_PER_PAGE

    def params(self) -> dict[str, int]:
        return {"page": self.page, "per_page": self.per_page}


@dataclass(frozen=True)
class Pages:
    """Navigation URLs of a list response. Absent links are empty strings."""

    first: str = ""
    prev: str = ""
    next: str = ""
    last: str = ""

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Pages":
        return cls(**{key: str(payload.get(key) or "") for key in ("first", "prev", "next", "last")})


@dataclass(frozen=True)
class Links:
    """Link metadata of a list response."""

    pages: Optional[Pages] = None

    @classmethod
    def from_payload(cls, payload: object) -> Optional["Links"]:
        """Parse the ``links`` object of a list response.

        Returns ``None`` when the response carries no link metadata at all.
        """
        if not isinstance(payload, dict):
            return None
        pages = payload.get("pages")
        return cls(pages=Pages.from_payload(pages) if isinstance(pages, dict) and pages else None)

    def is_last_page(self) -> bool:
        """Return True when no further page exists.

        The API omits ``pages`` entirely for single-page results and drops
        ``last`` once the final page is reached.
        """
        if self.pages is None:
            return True
        return self.pages.last == ""


@dataclass
class Page(Generic[T]):
    """Items of one fetched page plus its link metadata."""

    items: list[T] = field(default_factory=list)
    links: Optional[Links] = None


__all__ = ["DEFAULT_PER_PAGE", "Links", "ListOptions", "Page", "Pages"]
