"""
Modelo ORM para la entidad Book en la base de datos de LibroClub.
Define los campos principales de un libro y sus relaciones con reseñas y autores.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from libroclub.db.session import Base

class Book(Base):
    """
    Representa un libro en la base de datos.

    La puntuación media y el número de reseñas no se almacenan: se calculan
    a partir de las reseñas vigentes en cada consulta (ver `libroclub.analytics`).

    Atributos:
        id (int): Identificador primario del libro.
        title (str): Título del libro, único en todo el catálogo.
        pages (int): Número de páginas.
        year (int): Año de publicación.
        reviews (List[Review]): Reseñas del libro, en orden de inserción.
        author_links (List[BookAuthor]): Enlaces a autores, en el orden en que se asociaron.
        authors (List[Author]): Autores del libro (solo lectura), mismo orden que author_links.
    """
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), unique=True, index=True, nullable=False)
    pages = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)

    reviews = relationship(
        "Review",
        back_populates="book",
        cascade="all, delete-orphan",
        order_by="Review.id",
    )
    author_links = relationship(
        "BookAuthor",
        back_populates="book",
        cascade="all, delete-orphan",
        order_by="BookAuthor.id",
    )
    authors = relationship(
        "Author",
        secondary="book_authors",
        order_by="BookAuthor.id",
        viewonly=True,
    )

    def __repr__(self) -> str:
        """
        Representación legible del objeto Book para depuración.

        Returns:
            str: Cadena representando el libro.
        """
        return f"<Book(id={self.id}, title='{self.title[:30]}', year={self.year})>"
