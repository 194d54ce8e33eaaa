"""
Modeles SQLModel pour la base de donnees FilmDepot.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- movies: Films canoniques (uniques par external_id TMDB)
- genres, cast_members, directors: Entites liees aux films
- movie_rips: Rips de l'entrepot (uniques par file_name)
- movie_warehouse_visits: Visites horodatees de l'entrepot

Tables d'association (plusieurs-a-plusieurs, sans suppression en cascade):
- movie_genre_links, movie_cast_member_links, movie_director_links
- visit_rip_links
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, Relationship, SQLModel


class MovieGenreLink(SQLModel, table=True):
    """Association film <-> genre."""

    __tablename__ = "movie_genre_links"

    movie_id: Optional[int] = Field(
        default=None, foreign_key="movies.id", primary_key=True
    )
    genre_id: Optional[int] = Field(
        default=None, foreign_key="genres.id", primary_key=True
    )


class MovieCastMemberLink(SQLModel, table=True):
    """Association film <-> acteur."""

    __tablename__ = "movie_cast_member_links"

    movie_id: Optional[int] = Field(
        default=None, foreign_key="movies.id", primary_key=True
    )
    cast_member_id: Optional[int] = Field(
        default=None, foreign_key="cast_members.id", primary_key=True
    )


class MovieDirectorLink(SQLModel, table=True):
    """Association film <-> realisateur."""

    __tablename__ = "movie_director_links"

    movie_id: Optional[int] = Field(
        default=None, foreign_key="movies.id", primary_key=True
    )
    director_id: Optional[int] = Field(
        default=None, foreign_key="directors.id", primary_key=True
    )


class VisitRipLink(SQLModel, table=True):
    """Presence d'un rip lors d'une visite de l'entrepot."""

    __tablename__ = "visit_rip_links"

    visit_id: Optional[int] = Field(
        default=None, foreign_key="movie_warehouse_visits.id", primary_key=True
    )
    movie_rip_id: Optional[int] = Field(
        default=None, foreign_key="movie_rips.id", primary_key=True
    )


class GenreModel(SQLModel, table=True):
    """Genre TMDB."""

    __tablename__ = "genres"

    id: Optional[int] = Field(default=None, primary_key=True)
    external_id: Optional[int] = Field(default=None, index=True)
    name: str = Field(index=True)

    movies: list["MovieModel"] = Relationship(
        back_populates="genres", link_model=MovieGenreLink
    )


class CastMemberModel(SQLModel, table=True):
    """Acteur (personne TMDB)."""

    __tablename__ = "cast_members"

    id: Optional[int] = Field(default=None, primary_key=True)
    external_id: Optional[int] = Field(default=None, index=True)
    name: str = Field(index=True)

    movies: list["MovieModel"] = Relationship(
        back_populates="cast_members", link_model=MovieCastMemberLink
    )


class DirectorModel(SQLModel, table=True):
    """Realisateur (personne TMDB)."""

    __tablename__ = "directors"

    id: Optional[int] = Field(default=None, primary_key=True)
    external_id: Optional[int] = Field(default=None, index=True)
    name: str = Field(index=True)

    movies: list["MovieModel"] = Relationship(
        back_populates="directors", link_model=MovieDirectorLink
    )


class MovieModel(SQLModel, table=True):
    """
    Modele representant un film canonique.

    external_id est unique : un film TMDB n'est cree qu'une fois, quel que
    soit le nombre de rips qui le referencent.
    """

    __tablename__ = "movies"

    id: Optional[int] = Field(default=None, primary_key=True)
    external_id: Optional[int] = Field(default=None, index=True, unique=True)
    title: str = Field(index=True)
    original_title: Optional[str] = None
    release_date: Optional[int] = None
    imdb_id: Optional[str] = Field(default=None, index=True)
    keywords: Optional[str] = None  # Mots-cles TMDB separes par des virgules
    created_at: Optional[datetime] = Field(default_factory=datetime.utcnow)

    genres: list[GenreModel] = Relationship(
        back_populates="movies", link_model=MovieGenreLink
    )
    cast_members: list[CastMemberModel] = Relationship(
        back_populates="movies", link_model=MovieCastMemberLink
    )
    directors: list[DirectorModel] = Relationship(
        back_populates="movies", link_model=MovieDirectorLink
    )
    movie_rips: list["MovieRipModel"] = Relationship(back_populates="movie")


class MovieRipModel(SQLModel, table=True):
    """
    Modele representant un rip de l'entrepot.

    Un rip n'est jamais supprime quand il disparait de l'entrepot : il n'apparait
    simplement plus dans les visites suivantes.
    """

    __tablename__ = "movie_rips"

    id: Optional[int] = Field(default=None, primary_key=True)
    file_name: str = Field(index=True, unique=True)
    parsed_title: Optional[str] = None
    parsed_release_date: Optional[str] = Field(default=None, index=True)
    parsed_rip_quality: Optional[str] = None
    parsed_rip_info: Optional[str] = None
    parsed_rip_group: Optional[str] = None
    movie_id: Optional[int] = Field(default=None, foreign_key="movies.id", index=True)

    movie: Optional[MovieModel] = Relationship(back_populates="movie_rips")
    visits: list["MovieWarehouseVisitModel"] = Relationship(
        back_populates="movie_rips", link_model=VisitRipLink
    )


class MovieWarehouseVisitModel(SQLModel, table=True):
    """Visite de l'entrepot, identifiee par son horodatage."""

    __tablename__ = "movie_warehouse_visits"

    id: Optional[int] = Field(default=None, primary_key=True)
    visit_datetime: datetime = Field(index=True, unique=True)

    movie_rips: list[MovieRipModel] = Relationship(
        back_populates="visits", link_model=VisitRipLink
    )
