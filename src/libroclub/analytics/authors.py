"""
Normalización de nombres: mayúsculas iniciales y parseo de listas de autores.

    >>> parse_author_list("more than,one name")
    ['More Than', 'One Name']
"""

import re
from typing import List, Optional

_WORD_RE = re.compile(r"\S+")


def _capitalize_word(match: "re.Match[str]") -> str:
    word = match.group(0)
    return word[:1].upper() + word[1:].lower()


def title_case(text: str) -> str:
    """
    Capitaliza la primera letra de cada palabra separada por espacios y
    pasa el resto a minúsculas. Los espacios originales se conservan.

    Args:
        text (str): Texto a normalizar.

    Returns:
        str: Texto con mayúsculas iniciales.
    """
    return _WORD_RE.sub(_capitalize_word, text)


def parse_author_list(text: Optional[str]) -> List[str]:
    """
    Convierte una lista de autores separada por comas en nombres normalizados.

    Cada elemento se recorta y se normaliza con `title_case`; el orden de
    entrada se conserva y los repetidos no se eliminan. Los elementos vacíos
    (por ejemplo, una coma final) se descartan.

    Args:
        text (Optional[str]): Texto libre introducido en el formulario.

    Returns:
        List[str]: Nombres en el orden original, posiblemente vacía.
    """
    if text is None:
        return []
    names = []
    for token in text.split(","):
        token = token.strip()
        if token:
            names.append(title_case(token))
    return names
