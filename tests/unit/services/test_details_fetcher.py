"""
Tests pour MovieDetailsFetcher : completion des films via l'API.
"""

import httpx
import pytest

from filmdepot.core.entities.media import CastMember, Director, Genre, Movie
from filmdepot.services.details_fetcher import FetchStats, MovieDetailsFetcher

DRAMA = Genre(name="Drama", external_id=18)
HORROR = Genre(name="Horror", external_id=27)


@pytest.fixture
def fetcher(mock_uow, mock_api_client) -> MovieDetailsFetcher:
    return MovieDetailsFetcher(unit_of_work=mock_uow, api_client=mock_api_client)


@pytest.fixture
def the_fly() -> Movie:
    return Movie(external_id=9426, title="The Fly", release_date=1986)


class TestFetchStats:
    def test_total(self):
        assert FetchStats(updated=2, failed=1).total == 3


class TestPopulateGenres:
    @pytest.mark.asyncio
    async def test_updates_and_commits_once(self, fetcher, mock_uow, mock_api_client, the_fly):
        gummo = Movie(external_id=10267, title="Gummo", release_date=1997)
        mock_uow.movies.get_movies_without_genres.return_value = [the_fly, gummo]
        mock_api_client.get_movie_genres.side_effect = [[DRAMA, HORROR], [DRAMA]]

        stats = await fetcher.populate_genres()

        assert stats == FetchStats(updated=2, failed=0)
        assert the_fly.genres == [DRAMA, HORROR]
        assert gummo.genres == [DRAMA]
        assert mock_uow.movies.save.call_count == 2
        mock_uow.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_reuses_known_genres(self, fetcher, mock_uow, mock_api_client, the_fly):
        stored_drama = Genre(name="Drama", external_id=18, id="genre-1")
        mock_uow.genres.find_by_external_id.side_effect = (
            lambda external_id: stored_drama if external_id == 18 else None
        )
        mock_uow.movies.get_movies_without_genres.return_value = [the_fly]
        mock_api_client.get_movie_genres.return_value = [DRAMA, HORROR]

        await fetcher.populate_genres()

        assert the_fly.genres[0] is stored_drama
        assert the_fly.genres[1] is HORROR

    @pytest.mark.asyncio
    async def test_empty_response_counts_as_failure(
        self, fetcher, mock_uow, mock_api_client, the_fly
    ):
        without_id = Movie(title="Unknown")
        mock_uow.movies.get_movies_without_genres.return_value = [the_fly, without_id]
        mock_api_client.get_movie_genres.return_value = []

        stats = await fetcher.populate_genres()

        assert stats == FetchStats(updated=0, failed=2)
        mock_api_client.get_movie_genres.assert_called_once_with(9426)
        mock_uow.movies.save.assert_not_called()
        mock_uow.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_transport_error_rolls_back(self, fetcher, mock_uow, mock_api_client, the_fly):
        mock_uow.movies.get_movies_without_genres.return_value = [the_fly]
        mock_api_client.get_movie_genres.side_effect = httpx.ConnectError("down")

        with pytest.raises(httpx.ConnectError):
            await fetcher.populate_genres()

        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()


class TestPopulatePeople:
    @pytest.mark.asyncio
    async def test_actors(self, fetcher, mock_uow, mock_api_client, the_fly):
        goldblum = CastMember(name="Jeff Goldblum", external_id=4784)
        mock_uow.movies.get_movies_without_actors.return_value = [the_fly]
        mock_api_client.get_movie_actors.return_value = [goldblum]

        stats = await fetcher.populate_actors()

        assert stats.updated == 1
        assert the_fly.cast_members == [goldblum]
        mock_uow.cast_members.find_by_external_id.assert_called_once_with(4784)

    @pytest.mark.asyncio
    async def test_directors(self, fetcher, mock_uow, mock_api_client, the_fly):
        cronenberg = Director(name="David Cronenberg", external_id=224)
        mock_uow.movies.get_movies_without_directors.return_value = [the_fly]
        mock_api_client.get_movie_directors.return_value = [cronenberg]

        stats = await fetcher.populate_directors()

        assert stats.updated == 1
        assert the_fly.directors == [cronenberg]


class TestPopulateScalars:
    @pytest.mark.asyncio
    async def test_keywords_are_comma_joined(self, fetcher, mock_uow, mock_api_client, the_fly):
        mock_uow.movies.get_movies_without_keywords.return_value = [the_fly]
        mock_api_client.get_movie_keywords.return_value = ["scientist", "insect", "remake"]

        stats = await fetcher.populate_keywords()

        assert stats.updated == 1
        assert the_fly.keywords == "scientist,insect,remake"

    @pytest.mark.asyncio
    async def test_no_keywords(self, fetcher, mock_uow, mock_api_client, the_fly):
        mock_uow.movies.get_movies_without_keywords.return_value = [the_fly]
        mock_api_client.get_movie_keywords.return_value = []

        stats = await fetcher.populate_keywords()

        assert stats.failed == 1
        assert the_fly.keywords is None

    @pytest.mark.asyncio
    async def test_imdb_ids(self, fetcher, mock_uow, mock_api_client, the_fly):
        mock_uow.movies.get_movies_without_imdb_id.return_value = [the_fly]
        mock_api_client.get_movie_imdb_id.return_value = "tt0091064"

        stats = await fetcher.populate_imdb_ids()

        assert stats == FetchStats(updated=1, failed=0)
        assert the_fly.imdb_id == "tt0091064"
        mock_uow.movies.save.assert_called_once_with(the_fly)
