from .book import Book
from .author import Author, BookAuthor
from .review import Review
from .user import User

__all__ = ["Book", "Author", "BookAuthor", "Review", "User"]
