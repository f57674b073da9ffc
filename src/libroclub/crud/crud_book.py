"""
Operaciones CRUD para el modelo Book en la base de datos.
Incluye la creación atómica de un libro con sus autores, el borrado en cascada
(reseñas y autores huérfanos), búsquedas por ID o título y el listado con
estadísticas derivadas de las reseñas.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.orm import Session
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from ..analytics.authors import parse_author_list, title_case
from ..analytics.stats import project_book_stats
from ..core.exceptions import (
    AtomicityFailure,
    DuplicateTitleError,
    NotFoundError,
    ValidationError,
)
from ..db.session import atomic
from ..models.author import Author, BookAuthor
from ..models.book import Book
from ..models.review import Review
from ..schemas.book import BookCreate, BookStats
from .crud_author import get_author_by_name

logger = logging.getLogger(__name__)

def get_book_by_id(db: Session, book_id: int) -> Optional[Book]:
    """
    Recupera un libro por su ID primario.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        book_id (int): ID del libro a recuperar.

    Returns:
        Optional[Book]: El objeto Book si se encuentra, None si no existe.
    """
    return db.get(Book, book_id)

def get_book_by_title(db: Session, title: str) -> Optional[Book]:
    """
    Recupera un libro por su título exacto.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        title (str): Título normalizado del libro.

    Returns:
        Optional[Book]: El objeto Book si se encuentra, None si no existe.
    """
    stmt = select(Book).where(Book.title == title)
    result = db.execute(stmt)
    return result.scalars().first()

def get_books(db: Session) -> List[Book]:
    """Todos los libros en orden de ID."""
    return db.execute(select(Book).order_by(Book.id)).scalars().all()

def list_books_with_stats(db: Session) -> List[BookStats]:
    """
    Proyecta todos los libros con su puntuación media y número de reseñas,
    recalculados a partir de las reseñas vigentes.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.

    Returns:
        List[BookStats]: Un registro inmutable por libro, en orden de ID.
    """
    reviews = db.execute(select(Review).order_by(Review.id)).scalars().all()
    return project_book_stats(get_books(db), reviews)

def _validate_book_params(params: Union[BookCreate, Mapping[str, Any]]) -> BookCreate:
    if isinstance(params, BookCreate):
        book_in = params
    else:
        try:
            book_in = BookCreate.model_validate(dict(params))
        except SchemaValidationError as e:
            missing = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
            raise ValidationError(f"Invalid book fields: {', '.join(missing)}") from e
    if not book_in.title.strip():
        raise ValidationError("Invalid book fields: title")
    return book_in

def _get_or_create_author(db: Session, name: str) -> Author:
    """Reutiliza el autor con ese nombre exacto o crea uno nuevo."""
    author = get_author_by_name(db, name)
    if author is not None:
        return author
    author = Author(name=name)
    db.add(author)
    # Flush so a repeated name later in the same list finds this row.
    db.flush()
    return author

def create_book(db: Session, params: Union[BookCreate, Mapping[str, Any]]) -> Book:
    """
    Crea un libro y enlaza sus autores en una sola transacción.

    El título y los nombres de autor se normalizan con mayúsculas iniciales.
    Cada autor se reutiliza si ya existe uno con el mismo nombre exacto; si no,
    se crea. Los enlaces conservan el orden en que se escribieron los autores.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        params (BookCreate | Mapping): title, pages, year y opcionalmente authors.

    Returns:
        Book: El libro creado, con sus autores ya enlazados.

    Raises:
        ValidationError: Si falta title, pages o year.
        DuplicateTitleError: Si ya existe un libro con el título normalizado.
        AtomicityFailure: Si falla cualquier paso posterior; no queda nada escrito.
    """
    book_in = _validate_book_params(params)
    title = title_case(book_in.title.strip())
    author_names = parse_author_list(book_in.authors)

    if get_book_by_title(db, title) is not None:
        logger.warning(f"Attempted to create duplicate book title: '{title}'")
        raise DuplicateTitleError(title)

    try:
        with atomic(db):
            db_book = Book(title=title, pages=book_in.pages, year=book_in.year)
            db.add(db_book)
            db.flush()

            for name in author_names:
                author = _get_or_create_author(db, name)
                db_book.author_links.append(BookAuthor(author=author))
            db.flush()
    except IntegrityError as e:
        if get_book_by_title(db, title) is not None:
            raise DuplicateTitleError(title) from e
        logger.exception(f"Error creating book '{title}': {e}")
        raise AtomicityFailure(f"Creating book '{title}' failed and was rolled back") from e
    except Exception as e:
        logger.exception(f"Error creating book '{title}': {e}")
        raise AtomicityFailure(f"Creating book '{title}' failed and was rolled back") from e

    db.refresh(db_book)
    logger.info(f"Book {db_book.id} '{title}' created with {len(author_names)} author link(s).")
    return db_book

def _count_author_links(db: Session, author_id: int) -> int:
    return db.query(func.count(BookAuthor.id)).\
            filter(BookAuthor.author_id == author_id).\
            scalar()

def delete_book(db: Session, book_id: int) -> None:
    """
    Elimina un libro, sus reseñas y los autores que se queden sin libros.

    Los autores compartidos con otros libros se conservan. Todo ocurre en una
    sola transacción.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        book_id (int): ID del libro a eliminar.

    Raises:
        NotFoundError: Si el libro no existe.
        AtomicityFailure: Si falla algún paso; el estado previo se conserva.
    """
    db_book = get_book_by_id(db, book_id)
    if db_book is None:
        logger.warning(f"Attempted delete of non-existent book ID: {book_id}")
        raise NotFoundError("Book", book_id)

    author_ids = list(dict.fromkeys(link.author_id for link in db_book.author_links))
    removed_authors = []

    try:
        with atomic(db):
            db.query(Review).\
                filter(Review.book_id == book_id).\
                delete(synchronize_session=False)

            for author_id in author_ids:
                db.query(BookAuthor).\
                    filter(BookAuthor.book_id == book_id, BookAuthor.author_id == author_id).\
                    delete(synchronize_session=False)
                if _count_author_links(db, author_id) == 0:
                    db.query(Author).\
                        filter(Author.id == author_id).\
                        delete(synchronize_session=False)
                    removed_authors.append(author_id)

            db.query(Book).\
                filter(Book.id == book_id).\
                delete(synchronize_session=False)
    except Exception as e:
        logger.exception(f"Error deleting book ID {book_id}: {e}")
        raise AtomicityFailure(f"Deleting book {book_id} failed and was rolled back") from e

    logger.info(f"Book {book_id} deleted. Orphaned authors removed: {removed_authors or 'none'}.")
