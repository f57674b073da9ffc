"""
Rankings by score: exceptional books and top/bottom reviews of a book.

Book rankings reorder the whole projection by average score, whatever sort
was applied before. Callers that want only the best book take the head.
"""

import enum
from typing import Iterable, List, Optional

from ..core.config import settings
from ..models.review import Review
from ..schemas.book import BookStats
from .sorting import score_key


class Ranking(str, enum.Enum):
    TOP = "top"
    WORST = "worst"

    @classmethod
    def parse(cls, token: Optional[str]) -> "Ranking":
        try:
            return cls(token)
        except ValueError:
            return cls.TOP


def top_books(projected: Iterable[BookStats]) -> List[BookStats]:
    """All books, best average score first; unscored books last."""
    return sorted(projected, key=score_key, reverse=True)


def worst_books(projected: Iterable[BookStats]) -> List[BookStats]:
    """All books, worst average score first; unscored books first."""
    return sorted(projected, key=score_key)


def rank_books(projected: Iterable[BookStats], ranking: Optional[str] = None) -> List[BookStats]:
    """
    Dispatches to `top_books` or `worst_books`. Unknown rankings mean "top".

    Args:
        projected (Iterable[BookStats]): Projected books, in any order.
        ranking (Optional[str]): "top" or "worst".

    Returns:
        List[BookStats]: The full collection reordered by average score.
    """
    if Ranking.parse(ranking) is Ranking.WORST:
        return worst_books(projected)
    return top_books(projected)


def top_reviews(reviews: Iterable[Review], n: Optional[int] = None) -> List[Review]:
    """
    Up to `n` of a book's reviews, highest score first.

    `reviews` must be in insertion order; ties keep it. Defaults to
    settings.DEFAULT_REVIEW_LIMIT.
    """
    if n is None:
        n = settings.DEFAULT_REVIEW_LIMIT
    ordered = sorted(reviews, key=lambda review: review.score, reverse=True)
    return ordered[:max(n, 0)]


def bottom_reviews(reviews: Iterable[Review], n: Optional[int] = None) -> List[Review]:
    """Up to `n` of a book's reviews, lowest score first."""
    if n is None:
        n = settings.DEFAULT_REVIEW_LIMIT
    ordered = sorted(reviews, key=lambda review: review.score)
    return ordered[:max(n, 0)]
