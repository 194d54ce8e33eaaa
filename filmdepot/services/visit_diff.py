"""
Fonctions pures de comparaison de visites.

Partagees par les gestionnaires de scan des rips et des films : meme
contrat d'ordre entre visites, meme forme de resultat {"added", "removed"}.
"""

from collections.abc import Hashable, Iterable
from typing import Optional

from filmdepot.core.entities.rip import MovieWarehouseVisit
from filmdepot.core.exceptions import VisitOrderError


def check_visit_order(
    visit_left: Optional[MovieWarehouseVisit],
    visit_right: Optional[MovieWarehouseVisit],
) -> None:
    """
    Verifie le contrat d'une comparaison de visites.

    Raises:
        ValueError: Si visit_right est None
        VisitOrderError: Si visit_left n'est pas strictement anterieure a visit_right
    """
    if visit_right is None:
        raise ValueError("La visite de droite est obligatoire")
    if visit_left is not None and visit_left.visit_datetime >= visit_right.visit_datetime:
        raise VisitOrderError(visit_left.visit_datetime, visit_right.visit_datetime)


def diff_items(
    left_items: Iterable[Hashable], right_items: Iterable[Hashable]
) -> dict[str, list[str]]:
    """
    Difference ensembliste entre deux collections.

    Returns:
        {"added": presents a droite seulement, "removed": presents a gauche seulement},
        chaque liste contenant les representations texte triees.
    """
    left = set(left_items)
    right = set(right_items)
    return {
        "added": sorted(str(item) for item in right - left),
        "removed": sorted(str(item) for item in left - right),
    }
