"""
Excepciones de dominio de LibroClub.

Las operaciones de la capa CRUD y del motor de estadísticas lanzan estas
excepciones hacia el llamador; ninguna se reintenta automáticamente.
"""


class LibroClubError(Exception):
    """Base class for every error raised by the catalog core."""


class ValidationError(LibroClubError):
    """A required Book or Review field is missing or malformed."""


class DuplicateTitleError(LibroClubError):
    """A book with the same (normalized) title already exists."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"A book titled '{title}' already exists")


class NotFoundError(LibroClubError):
    """Lookup or delete of an unknown id."""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class AtomicityFailure(LibroClubError):
    """A step inside a create/delete transaction failed and everything was rolled back."""
