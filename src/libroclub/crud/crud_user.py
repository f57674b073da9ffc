"""
Operaciones CRUD para el modelo User en la base de datos de LibroClub.
Incluye funciones para crear usuarios, obtenerlos por ID y listarlos.
"""

import logging
from sqlalchemy.orm import Session
from ..models.user import User
from ..schemas.user import UserCreate
from typing import Optional, List

logger = logging.getLogger(__name__)

def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    """
    Obtiene un usuario por su ID.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        user_id (int): ID del usuario a buscar.

    Returns:
        Optional[User]: El usuario si existe, None si no.
    """
    return db.get(User, user_id)

def create_user(db: Session, user: UserCreate) -> User:
    """
    Crea un nuevo usuario en la base de datos.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        user (UserCreate): Objeto con los datos del usuario a crear.

    Returns:
        User: El usuario creado.
    """
    db_user: User = User(name=user.name)
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.info(f"User {db_user.id} created.")
    return db_user

def get_users(db: Session, skip: int = 0, limit: int = 100) -> List[User]:
    """
    Obtiene una lista de usuarios ordenada por ID, con paginación.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        skip (int): Número de registros a omitir (paginación).
        limit (int): Número máximo de registros a devolver.

    Returns:
        List[User]: Usuarios encontrados.
    """
    return db.query(User).order_by(User.id).offset(skip).limit(limit).all()
