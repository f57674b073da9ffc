# tests/conftest.py
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from libroclub.db.session import Base
# Import all models to ensure they are registered with Base
from libroclub.models import Author, Book, BookAuthor, Review, User

# --- Test Database Setup ---
# Use an in-memory SQLite database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"

# A fresh engine per test: create/delete commit and roll back for real,
# so each test needs its own empty database.
@pytest.fixture(scope="function")
def db_engine():
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()

@pytest.fixture(scope="function")
def db_session_factory(db_engine):
    """Returns a SQLAlchemy session factory."""
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

@pytest.fixture(scope="function")
def db_session(db_session_factory):
    """Provides a session bound to the per-test database."""
    session = db_session_factory()
    try:
        yield session
    finally:
        session.close()

# --- Helper Fixtures ---
@pytest.fixture
def test_user(db_session):
    user = User(name="Reviewer One")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user

@pytest.fixture
def add_review(db_session, test_user):
    """Adds a review with the given score straight through the ORM."""
    def _add_review(book, score, title=None):
        review = Review(
            title=title or f"Review {score}",
            description=f"description {score}",
            score=score,
            book_id=book.id,
            user_id=test_user.id,
        )
        db_session.add(review)
        db_session.commit()
        db_session.refresh(review)
        return review
    return _add_review
