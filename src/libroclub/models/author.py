"""
Modelo ORM para la entidad Author y la tabla de unión BookAuthor.
Un autor puede pertenecer a varios libros; se elimina cuando pierde su último enlace.
"""

from sqlalchemy import Column, Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship
from libroclub.db.session import Base

class Author(Base):
    """
    Representa un autor del catálogo.

    Atributos:
        id (int): Identificador primario del autor.
        name (str): Nombre normalizado del autor.
        book_links (List[BookAuthor]): Enlaces a los libros del autor.
        books (List[Book]): Libros publicados por el autor (solo lectura).
    """
    __tablename__ = "authors"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), index=True, nullable=False)

    book_links = relationship("BookAuthor", back_populates="author")
    books = relationship(
        "Book",
        secondary="book_authors",
        order_by="Book.title",
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, name='{self.name}')>"


class BookAuthor(Base):
    """Relación libro-autor. El id sustituto conserva el orden de asociación."""
    __tablename__ = "book_authors"

    id = Column(Integer, primary_key=True)
    book_id = Column(Integer, ForeignKey("books.id"), nullable=False)
    author_id = Column(Integer, ForeignKey("authors.id"), nullable=False)

    book = relationship("Book", back_populates="author_links")
    author = relationship("Author", back_populates="book_links")

    __table_args__ = (
        Index("idx_book_authors_book_id", "book_id"),
        Index("idx_book_authors_author_id", "author_id"),
    )

    def __repr__(self):
        return f"<BookAuthor(book_id={self.book_id}, author_id={self.author_id})>"
