"""
Sort orders for the book listing.

A sort token coming from the listing page is parsed into a `SortOrder` and
looked up in a fixed table of (key, descending) pairs. Unknown or missing
tokens fall back to ascending title; this never raises.
"""

import enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from ..schemas.book import BookStats


class SortOrder(str, enum.Enum):
    A_TITLE = "a_title"
    Z_TITLE = "z_title"
    LOW_RATING = "low_rating"
    HIGH_RATING = "high_rating"
    LOW_COUNT = "low_count"
    HIGH_COUNT = "high_count"
    LOW_PAGES = "low_pages"
    HIGH_PAGES = "high_pages"

    @classmethod
    def parse(cls, token: Optional[str]) -> "SortOrder":
        """Exact, case-sensitive match; anything else is A_TITLE."""
        try:
            return cls(token)
        except ValueError:
            return cls.A_TITLE


def score_key(book: BookStats) -> Tuple[bool, float]:
    # Unscored books rank below every scored one.
    if book.average_score is None:
        return (False, 0.0)
    return (True, book.average_score)


_SORT_TABLE: Dict[SortOrder, Tuple[Callable[[BookStats], Any], bool]] = {
    SortOrder.A_TITLE: (lambda book: book.title, False),
    SortOrder.Z_TITLE: (lambda book: book.title, True),
    SortOrder.LOW_RATING: (score_key, False),
    SortOrder.HIGH_RATING: (score_key, True),
    SortOrder.LOW_COUNT: (lambda book: book.review_count, False),
    SortOrder.HIGH_COUNT: (lambda book: book.review_count, True),
    SortOrder.LOW_PAGES: (lambda book: book.pages, False),
    SortOrder.HIGH_PAGES: (lambda book: book.pages, True),
}


def sort_books(projected: Iterable[BookStats], token: Optional[str] = None) -> List[BookStats]:
    """
    Returns a new list ordered by the sort token.

    Ties keep their input order, also for the descending variants.

    Args:
        projected (Iterable[BookStats]): Projected books.
        token (Optional[str]): One of the SortOrder values; anything else means a_title.

    Returns:
        List[BookStats]: The same records, reordered.
    """
    key, descending = _SORT_TABLE[SortOrder.parse(token)]
    return sorted(projected, key=key, reverse=descending)
