"""
Esquemas Pydantic para la entidad Book en LibroClub.
Define los parámetros de creación de un libro, su representación de salida y
el registro proyectado con las estadísticas derivadas de sus reseñas.
"""

from pydantic import BaseModel, ConfigDict
from typing import List, Optional

class BookCreate(BaseModel):
    """
    Parámetros para crear un libro.

    Atributos:
        title (str): Título en texto libre; se normaliza a mayúsculas iniciales.
        pages (int): Número de páginas.
        year (int): Año de publicación.
        authors (Optional[str]): Lista de autores separada por comas.
    """
    title: str
    pages: int
    year: int
    authors: Optional[str] = None

class AuthorSchema(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)

class BookSchema(BaseModel):
    """
    Esquema de salida para un libro con sus autores en orden de asociación.
    """
    id: int
    title: str
    pages: int
    year: int
    authors: List[AuthorSchema] = []

    model_config = ConfigDict(from_attributes=True)

class BookStats(BaseModel):
    """
    Libro proyectado: campos del libro más las estadísticas derivadas.

    Es inmutable; ordenar o clasificar devuelve nuevas listas sin tocar los registros.

    Atributos:
        average_score (Optional[float]): Media de las puntuaciones, None si no hay reseñas.
        review_count (int): Número de reseñas del libro.
    """
    id: int
    title: str
    pages: int
    year: int
    average_score: Optional[float] = None
    review_count: int = 0

    model_config = ConfigDict(from_attributes=True, frozen=True)
