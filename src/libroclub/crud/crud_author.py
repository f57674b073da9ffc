"""
Operaciones CRUD para el modelo Author en la base de datos.
Incluye búsquedas por nombre exacto (usada al reutilizar autores existentes
durante la creación de libros), por ID y el listado completo.
"""

from sqlalchemy.orm import Session
from sqlalchemy import select
from typing import List, Optional

from ..models.author import Author

def get_author_by_name(db: Session, name: str) -> Optional[Author]:
    """
    Recupera un autor por su nombre exacto (sensible a mayúsculas).

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        name (str): Nombre normalizado del autor.

    Returns:
        Optional[Author]: El primer autor con ese nombre, None si no existe.
    """
    stmt = select(Author).where(Author.name == name).order_by(Author.id)
    result = db.execute(stmt)
    return result.scalars().first()

def get_author_by_id(db: Session, author_id: int) -> Optional[Author]:
    """
    Recupera un autor por su ID primario.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        author_id (int): ID del autor a recuperar.

    Returns:
        Optional[Author]: El objeto Author si se encuentra, None si no existe.
    """
    return db.get(Author, author_id)

def get_authors(db: Session, skip: int = 0, limit: int = 100) -> List[Author]:
    """Lista los autores ordenados por nombre."""
    stmt = select(Author).order_by(Author.name, Author.id).offset(skip).limit(limit)
    return db.execute(stmt).scalars().all()
