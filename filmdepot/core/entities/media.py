"""
Media metadata entities.

Entities representing canonical movies and the people/genres attached to
them, as identified in The Movie Database (TMDB).
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Genre:
    """
    Movie genre from TMDB.

    Attributes:
        name: Genre name (ex: "Drama")
        external_id: TMDB genre ID
        id: Internal database ID (ignored in comparisons)
    """

    name: str
    external_id: Optional[int] = None
    id: Optional[str] = field(default=None, compare=False)


@dataclass(frozen=True)
class CastMember:
    """
    Actor appearing in a movie.

    Attributes:
        name: Actor name
        external_id: TMDB person ID
        id: Internal database ID (ignored in comparisons)
    """

    name: str
    external_id: Optional[int] = None
    id: Optional[str] = field(default=None, compare=False)


@dataclass(frozen=True)
class Director:
    """
    Director of a movie.

    Attributes:
        name: Director name
        external_id: TMDB person ID
        id: Internal database ID (ignored in comparisons)
    """

    name: str
    external_id: Optional[int] = None
    id: Optional[str] = field(default=None, compare=False)


@dataclass(eq=False)
class Movie:
    """
    Canonical movie from TMDB.

    A Movie is created once per external_id and shared by every rip that
    resolves to it (several encodes of the same film). Two Movie instances
    are equal when they carry the same external_id; without an external_id
    only the instance itself is equal to it.

    Attributes:
        id: Internal database ID
        external_id: The Movie Database ID (alternate key)
        title: Localized title
        original_title: Original language title
        release_date: Release year
        imdb_id: IMDb identifier (ex: "tt0077416")
        keywords: Comma separated TMDB keywords
        genres: Genres attached by the details fetcher
        cast_members: Actors attached by the details fetcher
        directors: Directors attached by the details fetcher
    """

    id: Optional[str] = None
    external_id: Optional[int] = None
    title: str = ""
    original_title: Optional[str] = None
    release_date: Optional[int] = None
    imdb_id: Optional[str] = None
    keywords: Optional[str] = None
    genres: list[Genre] = field(default_factory=list)
    cast_members: list[CastMember] = field(default_factory=list)
    directors: list[Director] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Movie):
            return NotImplemented
        if self.external_id is None or other.external_id is None:
            return self is other
        return self.external_id == other.external_id

    def __hash__(self) -> int:
        if self.external_id is None:
            return id(self)
        return hash(("movie", self.external_id))

    def __str__(self) -> str:
        if self.release_date is None:
            return self.title
        return f"{self.title} ({self.release_date})"
