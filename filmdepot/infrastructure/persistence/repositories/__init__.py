"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans filmdepot/core/ports/repositories.py, utilisant SQLModel pour
la persistance SQLite.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel (partagee via l'unite de travail)
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
- Ne valide jamais la transaction (flush uniquement)
"""

from filmdepot.infrastructure.persistence.repositories.movie_repository import (
    SQLModelMovieRepository,
)
from filmdepot.infrastructure.persistence.repositories.movie_rip_repository import (
    SQLModelMovieRipRepository,
)
from filmdepot.infrastructure.persistence.repositories.named_entity_repositories import (
    SQLModelCastMemberRepository,
    SQLModelDirectorRepository,
    SQLModelGenreRepository,
)
from filmdepot.infrastructure.persistence.repositories.visit_repository import (
    SQLModelMovieWarehouseVisitRepository,
)

__all__ = [
    "SQLModelMovieRepository",
    "SQLModelMovieRipRepository",
    "SQLModelMovieWarehouseVisitRepository",
    "SQLModelGenreRepository",
    "SQLModelCastMemberRepository",
    "SQLModelDirectorRepository",
]
