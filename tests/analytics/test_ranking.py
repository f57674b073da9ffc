# tests/analytics/test_ranking.py
import pytest

from libroclub.analytics.ranking import (
    bottom_reviews,
    rank_books,
    top_books,
    top_reviews,
    worst_books,
)
from libroclub.analytics.sorting import sort_books
from libroclub.models.book import Book
from libroclub.models.review import Review
from libroclub.schemas.book import BookStats

@pytest.fixture
def projected():
    return [
        BookStats(id=1, title="B", pages=300, year=2000, average_score=3.0, review_count=2),
        BookStats(id=2, title="A", pages=100, year=2001, average_score=4.5, review_count=4),
        BookStats(id=3, title="C", pages=200, year=2002, average_score=1.5, review_count=1),
    ]

def _ids(books):
    return [book.id for book in books]

def test_top_and_worst_books(projected):
    assert _ids(top_books(projected)) == [2, 1, 3]
    assert _ids(worst_books(projected)) == [3, 1, 2]

def test_rankings_are_full_size_reverses(projected):
    top = rank_books(projected, "top")
    worst = rank_books(projected, "worst")

    assert len(top) == len(worst) == len(projected)
    assert [b.average_score for b in top] == [b.average_score for b in worst][::-1]

@pytest.mark.parametrize("token", ["a_title", "z_title", "low_count", "high_pages"])
def test_ranking_ignores_prior_sort(projected, token):
    resorted = sort_books(projected, token)

    assert _ids(rank_books(resorted, "top")) == [2, 1, 3]
    assert _ids(rank_books(resorted, "worst")) == [3, 1, 2]

@pytest.mark.parametrize("token", [None, "best", "TOP"])
def test_unknown_ranking_falls_back_to_top(projected, token):
    assert _ids(rank_books(projected, token)) == _ids(top_books(projected))

def test_unscored_books_are_lowest_ranked(projected):
    unscored = BookStats(id=4, title="D", pages=10, year=2003)

    assert rank_books(projected + [unscored], "top")[-1] == unscored
    assert rank_books(projected + [unscored], "worst")[0] == unscored

@pytest.fixture
def book():
    book = Book(id=1, title="Title 1", pages=100, year=2000)
    for review_id, score in enumerate([3, 1, 5, 3, 2], start=1):
        book.reviews.append(
            Review(id=review_id, title=f"Review {review_id}", description="d", score=score, user_id=1)
        )
    return book

def test_top_and_bottom_reviews_with_two_reviews():
    book = Book(id=1, title="Title 1", pages=100, year=2000)
    low = Review(id=1, title="Review 1", description="d", score=1, user_id=1)
    high = Review(id=2, title="Review 2", description="d", score=2, user_id=1)
    book.reviews.extend([low, high])

    assert top_reviews(book.reviews, 3) == [high, low]
    assert bottom_reviews(book.reviews, 3) == [low, high]

def test_top_reviews_default_limit_and_ties(book):
    assert [r.id for r in top_reviews(book.reviews)] == [3, 1, 4]

def test_bottom_reviews_default_limit_and_ties(book):
    assert [r.id for r in bottom_reviews(book.reviews)] == [2, 5, 1]

def test_review_ranking_limits(book):
    assert len(top_reviews(book.reviews, 10)) == 5
    assert top_reviews(book.reviews, 0) == []
    assert bottom_reviews(book.reviews, -1) == []
    assert top_reviews([], 3) == []
