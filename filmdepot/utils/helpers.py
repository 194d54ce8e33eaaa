"""
Fonctions utilitaires partagees dans le projet FilmDepot.

Ce module centralise les fonctions reutilisees a travers le codebase :
- remove_diacritics : suppression des diacritiques pour comparaison
- get_string_tokens_without_punctuation : tokenisation normalisee d'un texte
- clean_title : nettoyage des titres recus de l'API
"""

import re
import unicodedata
from typing import Optional

# Caracteres non alphanumeriques en bordure d'un token
_EDGE_PUNCTUATION_PATTERN = re.compile(r"^[\W_]+|[\W_]+$")


def strip_invisible_chars(text: str) -> str:
    """
    Retire les caractères Unicode invisibles d'une chaîne.

    Supprime les caractères de contrôle et les marques directionnelles
    qui peuvent provenir des APIs (LRM, RLM, BOM, etc.).
    """
    return "".join(
        char for char in text if unicodedata.category(char) not in ("Cf", "Cc")
    )


def clean_title(title: Optional[str]) -> Optional[str]:
    """Nettoie un titre : retire les caractères invisibles et les espaces superflus."""
    if not title:
        return title
    return strip_invisible_chars(title).strip()


def remove_diacritics(text: str) -> str:
    """
    Supprime les accents d'une chaine pour une comparaison insensible aux accents.

    Decomposition NFD, filtrage des marques diacritiques (Mn), puis recomposition NFC.
    Ex: "Amélie" -> "Amelie"
    """
    normalized = unicodedata.normalize("NFD", text)
    stripped = "".join(char for char in normalized if unicodedata.category(char) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def get_string_tokens_without_punctuation(
    text: Optional[str], strip_diacritics: bool = True
) -> list[str]:
    """
    Decoupe un texte en tokens normalises.

    Etapes : trim, minuscules, suppression optionnelle des diacritiques,
    decoupage sur les espaces, puis retrait de la ponctuation en bordure
    de chaque token (la ponctuation interne est conservee : "co-op" reste "co-op").
    Les tokens vides sont ecartes.

    Args:
        text: Texte a decouper (None donne une liste vide)
        strip_diacritics: Supprimer les accents avant decoupage

    Returns:
        Liste ordonnee des tokens normalises.
    """
    if not text:
        return []

    prepared = text.strip().lower()
    if strip_diacritics:
        prepared = remove_diacritics(prepared)

    tokens = []
    for word in prepared.split():
        token = _EDGE_PUNCTUATION_PATTERN.sub("", word)
        if token:
            tokens.append(token)
    return tokens
