"""
Configuración y utilidades para la gestión de la sesión de base de datos SQLAlchemy en LibroClub.
Incluye la creación del motor, la fábrica de sesiones y la clase base para los modelos ORM.
Proporciona una función de dependencia para obtener y cerrar sesiones de base de datos de forma segura
y un ámbito transaccional explícito para las operaciones de varios pasos.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from libroclub.core.config import settings

logger = logging.getLogger(__name__)

engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    """
    Proporciona una sesión de base de datos para su uso en dependencias (por ejemplo, en FastAPI).

    Yields:
        Session: Sesión de base de datos SQLAlchemy.

    Ensures:
        La sesión se cierra correctamente después de su uso.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def atomic(db: Session) -> Iterator[Session]:
    """
    Ejecuta un bloque de escrituras como una única transacción.

    Si el bloque termina sin errores se hace commit; ante cualquier excepción
    se hace rollback y la excepción se propaga sin modificar.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.

    Yields:
        Session: La misma sesión, para escribir dentro del ámbito.
    """
    try:
        yield db
        db.commit()
    except Exception:
        logger.warning("Rolling back transaction after a failed step.")
        db.rollback()
        raise
