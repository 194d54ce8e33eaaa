"""
Conversion entre modeles SQLModel et entites de domaine.

Partage par les repositories : un rip charge avec son film, ou une visite
chargee avec ses rips, utilise les memes conversions.
"""

from typing import Optional

from filmdepot.core.entities.media import CastMember, Director, Genre, Movie
from filmdepot.core.entities.rip import MovieRip, MovieWarehouseVisit
from filmdepot.infrastructure.persistence.models import (
    CastMemberModel,
    DirectorModel,
    GenreModel,
    MovieModel,
    MovieRipModel,
    MovieWarehouseVisitModel,
)


def _str_id(model_id: Optional[int]) -> Optional[str]:
    return str(model_id) if model_id is not None else None


def genre_to_entity(model: GenreModel) -> Genre:
    return Genre(name=model.name, external_id=model.external_id, id=_str_id(model.id))


def cast_member_to_entity(model: CastMemberModel) -> CastMember:
    return CastMember(
        name=model.name, external_id=model.external_id, id=_str_id(model.id)
    )


def director_to_entity(model: DirectorModel) -> Director:
    return Director(
        name=model.name, external_id=model.external_id, id=_str_id(model.id)
    )


def movie_to_entity(model: MovieModel) -> Movie:
    """
    Convertit un film en entite, relations comprises.

    Args :
        model : Le modele MovieModel depuis la DB

    Retourne :
        L'entite Movie avec genres, acteurs et realisateurs
    """
    return Movie(
        id=_str_id(model.id),
        external_id=model.external_id,
        title=model.title,
        original_title=model.original_title,
        release_date=model.release_date,
        imdb_id=model.imdb_id,
        keywords=model.keywords,
        genres=[genre_to_entity(g) for g in model.genres],
        cast_members=[cast_member_to_entity(c) for c in model.cast_members],
        directors=[director_to_entity(d) for d in model.directors],
    )


def movie_rip_to_entity(model: MovieRipModel) -> MovieRip:
    """Convertit un rip en entite, avec son film s'il est linke."""
    return MovieRip(
        id=_str_id(model.id),
        file_name=model.file_name,
        parsed_title=model.parsed_title,
        parsed_release_date=model.parsed_release_date,
        parsed_rip_quality=model.parsed_rip_quality,
        parsed_rip_info=model.parsed_rip_info,
        parsed_rip_group=model.parsed_rip_group,
        movie=movie_to_entity(model.movie) if model.movie is not None else None,
    )


def visit_to_entity(model: MovieWarehouseVisitModel) -> MovieWarehouseVisit:
    """Convertit une visite en entite, avec les rips presents."""
    return MovieWarehouseVisit(
        id=_str_id(model.id),
        visit_datetime=model.visit_datetime,
        movie_rips=[movie_rip_to_entity(r) for r in model.movie_rips],
    )
