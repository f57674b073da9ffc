"""
Esquemas Pydantic para la entidad Review en LibroClub.
Define los modelos de entrada y salida para validación y serialización de reseñas.
"""

from pydantic import BaseModel, Field, ConfigDict

class ReviewBase(BaseModel):
    """
    Esquema base para una reseña.

    Atributos:
        title (str): Título de la reseña.
        description (str): Texto de la reseña.
        score (float): Puntuación otorgada al libro; admite decimales.
    """
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    score: float

class ReviewCreate(ReviewBase):
    """
    Esquema para la creación de una reseña desde el formulario.
    El book_id se gestiona aparte (la reseña se crea sobre un libro concreto).
    """
    user_id: int

class ReviewSchema(ReviewBase):
    """
    Esquema de salida para una reseña, incluyendo sus referencias.
    """
    id: int
    user_id: int
    book_id: int

    model_config = ConfigDict(from_attributes=True)
