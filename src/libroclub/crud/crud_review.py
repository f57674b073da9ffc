from sqlalchemy.orm import Session
from pydantic import ValidationError as SchemaValidationError
from typing import Any, Mapping, Union
import logging

from ..analytics.ranking import top_reviews, bottom_reviews
from ..core.exceptions import NotFoundError, ValidationError
from ..models.review import Review
from ..models.user import User
from ..models.book import Book
from ..schemas.review import ReviewCreate

logger = logging.getLogger(__name__)


def _validate_review_params(params: Union[ReviewCreate, Mapping[str, Any]]) -> ReviewCreate:
    if isinstance(params, ReviewCreate):
        return params
    try:
        return ReviewCreate.model_validate(dict(params))
    except SchemaValidationError as e:
        invalid = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
        raise ValidationError(f"Invalid review fields: {', '.join(invalid)}") from e


def create_review(db: Session, review: Union[ReviewCreate, Mapping[str, Any]], book_id: int) -> Review:
    """
    Creates a review for an existing book on behalf of an existing user.
    Raises ValidationError if a field is missing and NotFoundError if either
    reference is unknown.
    """
    review = _validate_review_params(review)
    if db.get(Book, book_id) is None:
        logger.warning(f"Attempted to review non-existent book ID: {book_id}")
        raise NotFoundError("Book", book_id)
    if db.get(User, review.user_id) is None:
        logger.warning(f"Attempted review by non-existent user ID: {review.user_id}")
        raise NotFoundError("User", review.user_id)

    db_review = Review(**review.model_dump(), book_id=book_id)
    db.add(db_review)

    try:
        db.commit()
        db.refresh(db_review)
        logger.info(f"Review {db_review.id} created for book {book_id} by user {review.user_id}.")
    except Exception as e:
        logger.exception(f"Error committing review creation for book {book_id}: {e}")
        db.rollback()
        raise

    return db_review


def get_reviews_for_book(db: Session, book_id: int) -> list[Review]:
    """Reviews of a book in insertion order."""
    return db.query(Review).\
            filter(Review.book_id == book_id).\
            order_by(Review.id).all()


def get_reviews_for_user(db: Session, user_id: int) -> list[Review]:
    """Reviews written by a user in insertion order (the user's page)."""
    return db.query(Review).\
            filter(Review.user_id == user_id).\
            order_by(Review.id).all()


def get_review_by_id(db: Session, review_id: int) -> Review | None:
     """Obtiene una reseña específica por su ID."""
     return db.get(Review, review_id)


def _get_book_or_raise(db: Session, book_id: int) -> Book:
    book = db.get(Book, book_id)
    if book is None:
        logger.warning(f"Attempted to rank reviews of non-existent book ID: {book_id}")
        raise NotFoundError("Book", book_id)
    return book


def get_top_reviews(db: Session, book_id: int, n: int | None = None) -> list[Review]:
    """Highest-scored reviews of a book, see `analytics.ranking.top_reviews`."""
    _get_book_or_raise(db, book_id)
    return top_reviews(get_reviews_for_book(db, book_id), n)


def get_bottom_reviews(db: Session, book_id: int, n: int | None = None) -> list[Review]:
    """Lowest-scored reviews of a book, see `analytics.ranking.bottom_reviews`."""
    _get_book_or_raise(db, book_id)
    return bottom_reviews(get_reviews_for_book(db, book_id), n)
