"""
Implementations SQLModel des repositories de genres, acteurs et realisateurs.

Les trois entites partagent la meme structure (external_id, name) ; une
base commune porte les requetes, chaque sous-classe fixe son modele.
"""

from typing import Callable, Optional

from sqlmodel import Session, col, select

from filmdepot.core.ports.repositories import (
    ICastMemberRepository,
    IDirectorRepository,
    IGenreRepository,
)
from filmdepot.infrastructure.persistence.mappers import (
    cast_member_to_entity,
    director_to_entity,
    genre_to_entity,
)
from filmdepot.infrastructure.persistence.models import (
    CastMemberModel,
    DirectorModel,
    GenreModel,
)


class _SQLModelNamedEntityRepository:
    """Requetes communes aux entites nommees liees aux films."""

    model_class: type
    to_entity: Callable

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_all(self) -> list:
        """Liste toutes les entites, triees par nom."""
        statement = select(self.model_class).order_by(self.model_class.name)
        return [self.to_entity(m) for m in self._session.exec(statement).all()]

    def find_by_external_id(self, external_id: int) -> Optional[object]:
        """Recupere une entite par son ID TMDB."""
        statement = select(self.model_class).where(
            self.model_class.external_id == external_id
        )
        model = self._session.exec(statement).first()
        if model:
            return self.to_entity(model)
        return None

    def get_by_name(self, name: str) -> list:
        """Recherche les entites dont le nom contient la chaine (insensible a la casse)."""
        statement = (
            select(self.model_class)
            .where(col(self.model_class.name).ilike(f"%{name.strip()}%"))
            .order_by(self.model_class.name)
        )
        return [self.to_entity(m) for m in self._session.exec(statement).all()]


class SQLModelGenreRepository(_SQLModelNamedEntityRepository, IGenreRepository):
    """Repository SQLModel pour les genres."""

    model_class = GenreModel
    to_entity = staticmethod(genre_to_entity)


class SQLModelCastMemberRepository(_SQLModelNamedEntityRepository, ICastMemberRepository):
    """Repository SQLModel pour les acteurs."""

    model_class = CastMemberModel
    to_entity = staticmethod(cast_member_to_entity)


class SQLModelDirectorRepository(_SQLModelNamedEntityRepository, IDirectorRepository):
    """Repository SQLModel pour les realisateurs."""

    model_class = DirectorModel
    to_entity = staticmethod(director_to_entity)
