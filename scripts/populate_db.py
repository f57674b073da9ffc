"""
Script para poblar la base de datos de LibroClub con un catálogo inicial de libros.

Crea las tablas si no existen y añade cada libro de SEED_BOOKS mediante
`create_book`, de modo que los títulos y autores se normalizan y los autores
compartidos se reutilizan igual que en el formulario de alta.

Uso:
    Ejecutar directamente este script para poblar la base de datos con libros.
    Requiere que la base de datos y los modelos estén correctamente configurados.

Nota:
    - Los libros cuyo título ya existe se saltan.
    - Al terminar se muestra el listado con estadísticas ordenado por título.
"""

import logging
import sys
from typing import Any, Dict, List, Optional

try:
    from sqlalchemy.orm import Session
    from libroclub.core.config import settings
    from libroclub.core.exceptions import DuplicateTitleError, LibroClubError
    from libroclub.db.session import SessionLocal, Base, engine
    from libroclub.crud import create_book, list_books_with_stats
    from libroclub.analytics import sort_books
except ImportError as e:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    logging.getLogger(__name__).error(f"Error importando módulos: {e}.")
    logging.getLogger(__name__).error("Asegúrate de haber ejecutado 'pip install -e .'")
    sys.exit(1)

logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

SEED_BOOKS: List[Dict[str, Any]] = [
    {"title": "the left hand of darkness", "pages": 304, "year": 1969, "authors": "ursula k. le guin"},
    {"title": "the dispossessed", "pages": 387, "year": 1974, "authors": "Ursula K. Le Guin"},
    {"title": "good omens", "pages": 412, "year": 1990, "authors": "terry pratchett, neil gaiman"},
    {"title": "american gods", "pages": 465, "year": 2001, "authors": "Neil Gaiman"},
    {"title": "the colour of magic", "pages": 288, "year": 1983, "authors": "Terry Pratchett"},
    {"title": "structure and interpretation of computer programs", "pages": 657, "year": 1985,
     "authors": "harold abelson,gerald jay sussman,julie sussman"},
    {"title": "dune", "pages": 612, "year": 1965, "authors": "frank herbert"},
]

def populate_books(db: Session) -> None:
    """
    Añade los libros de SEED_BOOKS que todavía no existan.

    Args:
        db (Session): Sesión SQLAlchemy activa.

    Returns:
        None
    """
    logger.info("--- Iniciando Población de Libros --- ")
    total_books_added: int = 0

    for params in SEED_BOOKS:
        try:
            book = create_book(db, params)
        except DuplicateTitleError as e:
            logger.info(f"Libro ya existe: '{e.title}'. Saltando.")
            continue
        except LibroClubError as e:
            logger.error(f"No se pudo crear '{params['title']}': {e}")
            continue
        total_books_added += 1
        author_names = ", ".join(author.name for author in book.authors)
        logger.info(f"  Añadido: '{book.title}' ({author_names or 'sin autores'})")

    logger.info(f"--- Población de Libros Finalizada: {total_books_added} libros añadidos en total. ---")

    for stats in sort_books(list_books_with_stats(db), "a_title"):
        logger.info(f"  {stats.title} - {stats.pages} págs, {stats.review_count} reseñas")

if __name__ == "__main__":
    db_session: Optional[Session] = None
    try:
        logger.info(f"Creando tablas en {settings.DATABASE_URL} ({settings.ENVIRONMENT})...")
        Base.metadata.create_all(bind=engine)
        logger.info("Abriendo sesión de base de datos para poblar...")
        db_session = SessionLocal()
        populate_books(db_session)
    except Exception as main_exc:
        logger.exception(f"Error CRÍTICO durante la población: {main_exc}")
    finally:
        if db_session:
            logger.info("Cerrando sesión de base de datos.")
            db_session.close()
