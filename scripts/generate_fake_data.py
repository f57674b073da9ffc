"""
Script para generación de datos falsos en la base de datos de LibroClub.

Este módulo crea usuarios y reseñas de prueba utilizando Faker y las funciones
CRUD del proyecto. Está pensado para poblar entornos de desarrollo o pruebas
con datos realistas y variados.

Uso:
    Ejecutar después de scripts/populate_db.py. Requiere que la base de datos
    y los modelos estén correctamente configurados.

Nota:
    - El script NO crea libros, solo utiliza los existentes.
    - Al final muestra los mejores y peores libros según la puntuación media.
"""

import random
import logging
import sys
from faker import Faker
from sqlalchemy.orm import Session
from typing import List, Optional

try:
    from libroclub.core.config import settings
    from libroclub.core.exceptions import LibroClubError
    from libroclub.db.session import SessionLocal
    from libroclub.schemas.user import UserCreate
    from libroclub.schemas.review import ReviewCreate
    from libroclub.crud import create_user, create_review, get_books, list_books_with_stats
    from libroclub.analytics import rank_books
except ImportError as e:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    logging.getLogger(__name__).error(f"Error importando módulos: {e}.")
    logging.getLogger(__name__).error("Asegúrate de haber ejecutado 'pip install -e .'")
    sys.exit(1)

logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

NUM_FAKE_USERS: int = 20
MAX_REVIEWS_PER_USER: int = 5
MIN_REVIEWS_PER_USER: int = 1

fake = Faker(['es_ES', 'en_US'])

def generate_data() -> None:
    """
    Genera usuarios y reseñas falsas en la base de datos.

    Crea NUM_FAKE_USERS usuarios y, para cada uno, un número aleatorio de
    reseñas sobre libros existentes.

    Returns:
        None
    """
    logger.info("=============================================")
    logger.info(" Iniciando script de generación de datos falsos")
    logger.info("=============================================")

    db: Optional[Session] = None
    created_user_ids: List[int] = []

    try:
        db = SessionLocal()

        logger.info(f"--- Fase 1: Creando {NUM_FAKE_USERS} Usuarios Falsos ---")
        for i in range(NUM_FAKE_USERS):
            new_user = create_user(db=db, user=UserCreate(name=fake.name()))
            created_user_ids.append(new_user.id)
            logger.info(f"  ({i+1}/{NUM_FAKE_USERS}) Usuario Creado: {new_user.name} (ID: {new_user.id})")

        logger.info("--- Fase 2: Obteniendo IDs de Libros Existentes ---")
        book_ids = [book.id for book in get_books(db)]
        if not book_ids:
            logger.error("No hay libros en la base de datos. Ejecuta antes scripts/populate_db.py.")
            return
        logger.info(f"Se encontraron {len(book_ids)} libros disponibles.")

        logger.info(f"--- Fase 3: Generando Reseñas Falsas ({MIN_REVIEWS_PER_USER}-{MAX_REVIEWS_PER_USER} por usuario) ---")
        total_reviews_added: int = 0

        for user_id in created_user_ids:
            num_reviews: int = random.randint(MIN_REVIEWS_PER_USER, min(MAX_REVIEWS_PER_USER, len(book_ids)))
            for book_id in random.sample(book_ids, num_reviews):
                review_in = ReviewCreate(
                    title=fake.sentence(nb_words=4).rstrip("."),
                    description=fake.paragraph(nb_sentences=random.randint(1, 4)),
                    score=random.randint(1, 5),
                    user_id=user_id,
                )
                try:
                    create_review(db=db, review=review_in, book_id=book_id)
                    total_reviews_added += 1
                except LibroClubError as e:
                    logger.warning(f"  No se pudo crear la reseña para User {user_id}, Book {book_id}: {e}")

        logger.info(f"--- Fase 3 Completada: Total reseñas falsas añadidas: {total_reviews_added} ---")

        ranked = rank_books(list_books_with_stats(db), "top")
        logger.info(f"Mejor libro: {ranked[0].title} ({ranked[0].average_score})")
        logger.info(f"Peor libro: {ranked[-1].title} ({ranked[-1].average_score})")

    except Exception as e:
        logger.exception(f"Error CRÍTICO durante la generación de datos: {e}")
        if db:
            db.rollback()
    finally:
        if db:
            logger.info("Cerrando sesión de base de datos.")
            db.close()

if __name__ == "__main__":
    generate_data()
    logger.info("============================================")
    logger.info(" Script de Generación de Datos Finalizado")
    logger.info("============================================")
