"""
Tests unitaires pour les commandes CLI.

Tests couvrant:
- visit: ecriture du contenu, enregistrement et liste des visites
- scan-rips / scan-movies: affichage des comptages et differences
- fetch: verification de la cle API et affichage des compteurs
"""

from datetime import datetime
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from filmdepot.adapters.cli.commands import (
    fetch_app,
    scan_movies_app,
    scan_rips_app,
    visit_app,
)
from filmdepot.core.entities.media import Genre
from filmdepot.core.entities.rip import MovieRip, MovieWarehouseVisit
from filmdepot.core.exceptions import VisitAlreadyRegisteredError
from filmdepot.services.details_fetcher import FetchStats

runner = CliRunner()


@pytest.fixture
def mock_container():
    """Mock le Container instancie par le decorateur @with_container()."""
    with patch("filmdepot.adapters.cli.helpers.Container") as mock_cls:
        container_instance = MagicMock()
        mock_cls.return_value = container_instance
        yield container_instance


@pytest.fixture
def visit() -> MovieWarehouseVisit:
    return MovieWarehouseVisit(
        visit_datetime=datetime(2022, 3, 21),
        movie_rips=[MovieRip(file_name="Gummo.1997.DVDRip.XviD-DiSSOLVE"), MovieRip(file_name="x")],
    )


class TestVisitCommands:
    def test_write_does_not_init_database(self, mock_container):
        manager = mock_container.visit_manager.return_value
        manager.write_movie_warehouse_contents_to_text_file.return_value = Path(
            "/contents/movies_20220321.txt"
        )

        result = runner.invoke(visit_app, ["write"])

        assert result.exit_code == 0
        assert "movies_20220321.txt" in result.output
        mock_container.database.init.assert_not_called()
        mock_container.shutdown_resources.assert_called_once()

    def test_write_existing_file(self, mock_container):
        manager = mock_container.visit_manager.return_value
        manager.write_movie_warehouse_contents_to_text_file.side_effect = FileExistsError("x")

        result = runner.invoke(visit_app, ["write"])

        assert result.exit_code == 1

    def test_register_file(self, mock_container, visit):
        manager = mock_container.visit_manager.return_value
        manager.read_warehouse_contents_and_register_visit.return_value = visit

        result = runner.invoke(visit_app, ["register", "movies_20220321.txt", "--strict"])

        assert result.exit_code == 0
        assert "2 rip(s)" in result.output
        mock_container.database.init.assert_called_once()
        manager.read_warehouse_contents_and_register_visit.assert_called_once_with(
            Path("movies_20220321.txt"), fail_on_parsing_errors=True
        )

    def test_register_defaults_to_latest_contents_file(self, mock_container, visit, tmp_path):
        for day in ("20220101", "20220321"):
            (tmp_path / f"movies_{day}.txt").write_text("", encoding="utf-8")
        manager = mock_container.visit_manager.return_value
        manager.contents_dir = tmp_path
        manager.read_warehouse_contents_and_register_visit.return_value = visit

        result = runner.invoke(visit_app, ["register"])

        assert result.exit_code == 0
        manager.read_warehouse_contents_and_register_visit.assert_called_once_with(
            tmp_path / "movies_20220321.txt", fail_on_parsing_errors=False
        )

    def test_register_already_registered(self, mock_container):
        manager = mock_container.visit_manager.return_value
        manager.read_warehouse_contents_and_register_visit.side_effect = (
            VisitAlreadyRegisteredError(datetime(2022, 3, 21))
        )

        result = runner.invoke(visit_app, ["register", "movies_20220321.txt"])

        assert result.exit_code == 1

    def test_list_without_visit(self, mock_container):
        mock_container.scan_movies_manager.return_value.list_visit_dates.return_value = []

        result = runner.invoke(visit_app, ["list"])

        assert result.exit_code == 0
        assert "Aucune visite" in result.output


class TestScanCommands:
    def test_rips_by_year(self, mock_container):
        manager = mock_container.scan_rips_manager.return_value
        manager.get_rip_count_by_release_date.return_value = {"1997": 2, "1973": 1}

        result = runner.invoke(scan_rips_app, ["by-year"])

        assert result.exit_code == 0
        assert "1997" in result.output
        assert "1973" in result.output

    def test_rips_diff_without_visit(self, mock_container):
        manager = mock_container.scan_rips_manager.return_value
        manager.get_last_visit_diff.side_effect = ValueError("Aucune visite enregistree")

        result = runner.invoke(scan_rips_app, ["diff"])

        assert result.exit_code == 1

    def test_movies_diff(self, mock_container):
        manager = mock_container.scan_movies_manager.return_value
        manager.get_last_visit_diff.return_value = {
            "added": ["Wake In Fright (1971)"],
            "removed": ["Face Off (1997)"],
        }

        result = runner.invoke(scan_movies_app, ["diff"])

        assert result.exit_code == 0
        assert "+ Wake In Fright (1971)" in result.output
        assert "- Face Off (1997)" in result.output

    def test_genres_with_visit_date(self, mock_container, visit):
        manager = mock_container.scan_movies_manager.return_value
        manager.get_closest_visit.return_value = visit
        manager.get_count_by_genre.return_value = {Genre(name="Drama", external_id=18): 2}

        result = runner.invoke(scan_movies_app, ["genres", "--visit", "2022-03-21"])

        assert result.exit_code == 0
        assert "Drama" in result.output
        manager.get_closest_visit.assert_called_once_with(datetime(2022, 3, 21))

    def test_genres_without_visit(self, mock_container):
        mock_container.scan_movies_manager.return_value.get_closest_visit.return_value = None

        result = runner.invoke(scan_movies_app, ["genres"])

        assert result.exit_code == 1


class TestFetchCommands:
    def test_requires_api_key(self, mock_container):
        mock_container.config.return_value = MagicMock(tmdb_enabled=False)

        result = runner.invoke(fetch_app, ["genres"])

        assert result.exit_code == 1
        mock_container.details_fetcher.assert_not_called()

    def test_fetch_genres(self, mock_container):
        mock_container.config.return_value = MagicMock(tmdb_enabled=True)
        fetcher = mock_container.details_fetcher.return_value
        fetcher.populate_genres = AsyncMock(return_value=FetchStats(updated=3, failed=1))
        mock_container.tmdb_client.return_value.close = AsyncMock()

        result = runner.invoke(fetch_app, ["genres"])

        assert result.exit_code == 0
        assert "3 mis a jour" in result.output
        assert "1 echec(s)" in result.output
        mock_container.tmdb_client.return_value.close.assert_awaited_once()
        mock_container.shutdown_resources.assert_called_once()
