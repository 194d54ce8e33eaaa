"""
Utilitaires et constantes pour FilmDepot.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from filmdepot.utils.constants import (
    RELEASE_DATE_TOLERANCE,
    RESOLUTION_MARKERS,
    SOURCE_MARKERS,
)
from filmdepot.utils.helpers import (
    get_string_tokens_without_punctuation,
    remove_diacritics,
)

__all__ = [
    "RESOLUTION_MARKERS",
    "SOURCE_MARKERS",
    "RELEASE_DATE_TOLERANCE",
    "get_string_tokens_without_punctuation",
    "remove_diacritics",
]
