"""
Projection of raw review rows into per-book statistics.

The average score and review count of a book are never stored; they are
recomputed from the reviews passed in on every call.
"""

from collections import defaultdict
from typing import Dict, Iterable, List

from ..models.book import Book
from ..models.review import Review
from ..schemas.book import BookStats


def project_book_stats(books: Iterable[Book], reviews: Iterable[Review]) -> List[BookStats]:
    """
    Builds one BookStats per book, in the order the books are given.

    Books without reviews are kept with review_count=0 and average_score=None.
    Reviews whose book is not in `books` are ignored.
    """
    scores: Dict[int, List[float]] = defaultdict(list)
    for review in reviews:
        scores[review.book_id].append(review.score)

    projected = []
    for book in books:
        book_scores = scores.get(book.id, [])
        average = sum(book_scores) / len(book_scores) if book_scores else None
        projected.append(
            BookStats(
                id=book.id,
                title=book.title,
                pages=book.pages,
                year=book.year,
                average_score=average,
                review_count=len(book_scores),
            )
        )
    return projected
