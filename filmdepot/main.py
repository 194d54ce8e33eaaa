"""
Point d'entree CLI de FilmDepot.

Monte les sous-commandes (visit, scan-rips, scan-movies, link, fetch) et
configure loguru avant chaque commande.
"""

from typing import Annotated

import typer

from .adapters.cli.commands import (
    fetch_app,
    link_app,
    scan_movies_app,
    scan_rips_app,
    visit_app,
)
from .config import Settings
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="filmdepot",
    help="Catalogue des rips de films d'un entrepot de stockage",
    no_args_is_help=True,
)
app.add_typer(visit_app, name="visit")
app.add_typer(scan_rips_app, name="scan-rips")
app.add_typer(scan_movies_app, name="scan-movies")
app.add_typer(link_app, name="link")
app.add_typer(fetch_app, name="fetch")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Logs DEBUG sur la console")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Erreurs uniquement")
    ] = False,
) -> None:
    """FilmDepot - Visites, linking et statistiques d'un entrepot de films."""
    settings = Settings()
    if quiet:
        log_level = "ERROR"
    elif verbose:
        log_level = "DEBUG"
    else:
        log_level = settings.log_level
    configure_logging(
        log_level=log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


@app.command()
def info() -> None:
    """Affiche la configuration chargee (variables FILMDEPOT_ et .env)."""
    settings = Settings()
    rows = {
        "Entrepot": settings.movie_warehouse_dir,
        "Fichiers de contenu": settings.warehouse_contents_dir,
        "IDs manuels": settings.manual_external_ids_file,
        "Base": settings.database_url,
        "TMDB": "configure" if settings.tmdb_enabled else "cle absente",
        "Linking concurrent": settings.linker_max_concurrency,
    }
    for label, value in rows.items():
        typer.echo(f"{label:<20} {value}")


@app.command()
def version() -> None:
    """Affiche la version."""
    typer.echo(f"FilmDepot v{__version__}")


def main() -> None:
    """Point d'entree du script filmdepot."""
    app()


if __name__ == "__main__":
    main()
