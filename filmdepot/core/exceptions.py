"""
Exceptions du domaine FilmDepot.

Les erreurs par entite (parsing, recherche) sont collectees dans des rapports
par les services ; les violations de contrat (visites mal ordonnees, visite
deja enregistree) remontent directement a l'appelant.
"""

from datetime import datetime
from typing import Optional


class FileNameParserError(ValueError):
    """Nom de fichier malforme (vide ou contenant un separateur de chemin)."""

    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        super().__init__(f"Nom de fichier invalide: {file_name!r}")


class LinkingError(Exception):
    """
    Erreur de resolution d'un rip vers un film canonique.

    Attributes:
        title: Titre recherche
        release_date: Annee parsee utilisee pour la recherche, si connue
    """

    def __init__(self, title: str, release_date: Optional[str] = None) -> None:
        self.title = title
        self.release_date = release_date
        super().__init__(self._describe())

    def _describe(self) -> str:
        suffix = f" ({self.release_date})" if self.release_date else ""
        return f"{self.title}{suffix}"


class NoSearchResultsError(LinkingError):
    """La recherche n'a retourne aucun candidat exploitable."""

    def _describe(self) -> str:
        return f"Aucun resultat pour: {super()._describe()}"


class MultipleSearchResultsError(LinkingError):
    """Plusieurs candidats restent possibles apres desambiguisation."""

    def __init__(
        self, title: str, release_date: Optional[str] = None, candidate_count: int = 0
    ) -> None:
        self.candidate_count = candidate_count
        super().__init__(title, release_date)

    def _describe(self) -> str:
        return (
            f"{self.candidate_count} resultats ambigus pour: {super()._describe()}"
        )


class VisitOrderError(ValueError):
    """La visite de gauche n'est pas strictement anterieure a celle de droite."""

    def __init__(self, left: datetime, right: datetime) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"La visite de gauche ({left:%Y-%m-%d %H:%M}) doit preceder "
            f"la visite de droite ({right:%Y-%m-%d %H:%M})"
        )


class VisitAlreadyRegisteredError(Exception):
    """Une visite existe deja pour cet horodatage."""

    def __init__(self, visit_datetime: datetime) -> None:
        self.visit_datetime = visit_datetime
        super().__init__(f"Visite deja enregistree: {visit_datetime:%Y%m%d}")
