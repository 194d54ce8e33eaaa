"""
Gestionnaire de scan des rips de l'entrepot.

Les comptages utilisent les champs parses des rips, pas le film linke.
"""

from collections import Counter
from datetime import datetime

from filmdepot.core.entities.rip import MovieRip
from filmdepot.core.ports.repositories import IUnitOfWork
from filmdepot.services.visit_diff import diff_items


class ScanRipsManager:
    """Comptages et comparaisons sur les rips des visites."""

    def __init__(self, unit_of_work: IUnitOfWork) -> None:
        self._uow = unit_of_work

    def _latest_movie_rips(self) -> list[MovieRip]:
        visit = self._uow.visits.get_closest_movie_warehouse_visit()
        return visit.movie_rips if visit is not None else []

    def get_rip_count_by_release_date(self) -> dict[str, int]:
        """
        Nombre de rips par annee parsee, sur la visite la plus recente.

        Les rips sans annee parsee ne sont pas comptes.
        """
        return dict(
            Counter(
                rip.parsed_release_date
                for rip in self._latest_movie_rips()
                if rip.parsed_release_date
            )
        )

    def get_all_rips_with_release_date(self, release_date: str) -> list[str]:
        """Noms de fichiers des rips de la visite la plus recente sortis en release_date."""
        wanted = str(release_date).strip()
        return sorted(
            rip.file_name
            for rip in self._latest_movie_rips()
            if rip.parsed_release_date == wanted
        )

    def get_rip_count_by_visit(self) -> dict[datetime, int]:
        """Nombre de rips par visite, dans l'ordre chronologique."""
        return {
            visit.visit_datetime: len(visit.movie_rips)
            for visit in self._uow.visits.get_all()
        }

    def get_last_visit_diff(self) -> dict[str, list[str]]:
        """
        Compare les noms de fichiers des deux dernieres visites.

        Avec une seule visite, tous ses rips sont "added".

        Raises:
            ValueError: Si aucune visite n'est enregistree
        """
        dates = self._uow.visits.get_visit_dates()
        if not dates:
            raise ValueError("Aucune visite enregistree")
        visit_right = self._uow.visits.get_by_datetime(dates[-1])
        left_names: list[str] = []
        if len(dates) > 1:
            visit_left = self._uow.visits.get_by_datetime(dates[-2])
            left_names = [rip.file_name for rip in visit_left.movie_rips]
        return diff_items(left_names, (rip.file_name for rip in visit_right.movie_rips))
