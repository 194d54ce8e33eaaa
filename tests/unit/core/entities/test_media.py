"""
Tests pour les entites media (Movie, Genre, CastMember, Director).
"""

from filmdepot.core.entities.media import CastMember, Director, Genre, Movie


class TestMovieEntity:
    """Tests pour l'entite Movie."""

    def test_movies_equal_by_external_id(self):
        """Deux instances du meme film TMDB sont egales et partagent leur hash."""
        a = Movie(external_id=9426, title="The Fly", release_date=1986)
        b = Movie(id="3", external_id=9426, title="La Mouche")
        assert a == b
        assert len({a, b}) == 1

    def test_movies_with_different_external_ids_differ(self):
        assert Movie(external_id=1, title="The Fly") != Movie(external_id=2, title="The Fly")

    def test_movie_without_external_id_equals_only_itself(self):
        a = Movie(title="Gummo")
        b = Movie(title="Gummo")
        assert a == a
        assert a != b

    def test_str_with_release_date(self):
        assert str(Movie(external_id=1, title="Papillon", release_date=1973)) == "Papillon (1973)"

    def test_str_without_release_date(self):
        assert str(Movie(external_id=1, title="Papillon")) == "Papillon"

    def test_related_lists_default_empty(self):
        movie = Movie(title="Test Movie")
        assert movie.genres == []
        assert movie.cast_members == []
        assert movie.directors == []
        assert movie.keywords is None


class TestNamedEntities:
    def test_id_ignored_in_comparisons(self):
        assert Genre(name="Drama", external_id=18, id="1") == Genre(name="Drama", external_id=18)

    def test_entities_are_hashable(self):
        actors = {CastMember(name="Jeff Goldblum", external_id=4784)} | {
            CastMember(name="Jeff Goldblum", external_id=4784, id="7")
        }
        assert len(actors) == 1

    def test_director_equality(self):
        assert Director(name="David Cronenberg", external_id=224) != Director(
            name="David Cronenberg", external_id=None
        )
