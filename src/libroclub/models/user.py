"""
Modelo ORM para la entidad User en la base de datos de LibroClub.
Define los campos principales de un usuario y su relación con las reseñas.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from libroclub.db.session import Base

class User(Base):
    """
    Representa un usuario que escribe reseñas.

    Atributos:
        id (int): Identificador primario del usuario.
        name (str): Nombre visible del usuario.
        reviews (List[Review]): Lista de reseñas realizadas por el usuario.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)

    reviews = relationship(
        "Review",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Review.id",
    )

    def __repr__(self) -> str:
        """
        Representación legible del objeto User para depuración.

        Returns:
            str: Cadena representando el usuario.
        """
        return f"<User(id={self.id}, name='{self.name}')>"
