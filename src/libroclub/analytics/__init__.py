from .authors import title_case, parse_author_list
from .stats import project_book_stats
from .sorting import SortOrder, sort_books
from .ranking import (
    Ranking,
    top_books,
    worst_books,
    rank_books,
    top_reviews,
    bottom_reviews,
)

__all__ = [
    "title_case",
    "parse_author_list",
    "project_book_stats",
    "SortOrder",
    "sort_books",
    "Ranking",
    "top_books",
    "worst_books",
    "rank_books",
    "top_reviews",
    "bottom_reviews",
]
