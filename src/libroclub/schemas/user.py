"""
Esquemas Pydantic para la entidad User en LibroClub.
"""

from pydantic import BaseModel, Field, ConfigDict

class UserCreate(BaseModel):
    """
    Esquema para la creación de un usuario.

    Atributos:
        name (str): Nombre visible del usuario.
    """
    name: str = Field(..., min_length=1)

class UserSchema(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
