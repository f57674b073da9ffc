from .crud_user import get_user_by_id, create_user, get_users
from .crud_author import get_author_by_name, get_author_by_id, get_authors
from .crud_book import (
    create_book,
    delete_book,
    get_book_by_id,
    get_book_by_title,
    get_books,
    list_books_with_stats,
)
from .crud_review import (
    create_review,
    get_reviews_for_book,
    get_reviews_for_user,
    get_review_by_id,
    get_top_reviews,
    get_bottom_reviews,
)

__all__ = [
    "get_user_by_id",
    "create_user",
    "get_users",
    "get_author_by_name",
    "get_author_by_id",
    "get_authors",
    "create_book",
    "delete_book",
    "get_book_by_id",
    "get_book_by_title",
    "get_books",
    "list_books_with_stats",
    "create_review",
    "get_reviews_for_book",
    "get_reviews_for_user",
    "get_review_by_id",
    "get_top_reviews",
    "get_bottom_reviews",
]
