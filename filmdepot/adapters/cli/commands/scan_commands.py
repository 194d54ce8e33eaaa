"""
Commandes CLI de scan : statistiques et differences sur les rips et les films.
"""

from datetime import datetime
from typing import Annotated, Optional

import typer
from rich.table import Table

from filmdepot.adapters.cli import console
from filmdepot.adapters.cli.helpers import (
    print_counts,
    print_diff,
    resolve_visit,
    with_container,
)

VISIT_DATE_FORMATS = ["%Y%m%d", "%Y-%m-%d"]

VisitDateOption = Annotated[
    Optional[datetime],
    typer.Option(
        "--visit", "-d",
        formats=VISIT_DATE_FORMATS,
        help="Date de la visite (la plus proche est retenue, la derniere par defaut)",
    ),
]


scan_rips_app = typer.Typer(
    name="scan-rips",
    help="Statistiques sur les rips de l'entrepot",
    rich_markup_mode="rich",
)

scan_movies_app = typer.Typer(
    name="scan-movies",
    help="Requetes sur les films linkes de l'entrepot",
    rich_markup_mode="rich",
)


@scan_rips_app.command("by-year")
@with_container()
def rips_by_year(container) -> None:
    """Nombre de rips par annee de sortie (derniere visite)."""
    counts = container.scan_rips_manager().get_rip_count_by_release_date()
    print_counts("Rips par annee", "Annee", counts)


@scan_rips_app.command("by-visit")
@with_container()
def rips_by_visit(container) -> None:
    """Nombre de rips par visite."""
    counts = container.scan_rips_manager().get_rip_count_by_visit()
    table = Table(title="Rips par visite")
    table.add_column("Visite", style="cyan")
    table.add_column("Nombre", justify="right", style="green")
    for visit_datetime, count in counts.items():
        table.add_row(f"{visit_datetime:%Y-%m-%d}", str(count))
    console.print(table)


@scan_rips_app.command("year")
@with_container()
def rips_with_year(
    container,
    release_date: Annotated[str, typer.Argument(help="Annee de sortie (ex: 1997)")],
) -> None:
    """Liste les rips d'une annee de sortie (derniere visite)."""
    for file_name in container.scan_rips_manager().get_all_rips_with_release_date(release_date):
        console.print(f"  {file_name}")


@scan_rips_app.command("diff")
@with_container()
def rips_diff(container) -> None:
    """Rips ajoutes et retires entre les deux dernieres visites."""
    try:
        diff = container.scan_rips_manager().get_last_visit_diff()
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    print_diff(diff)


@scan_movies_app.command("visits")
@with_container()
def movies_visits(container) -> None:
    """Liste les dates des visites."""
    for visit_datetime in container.scan_movies_manager().list_visit_dates():
        console.print(f"  {visit_datetime:%Y-%m-%d %H:%M}")


@scan_movies_app.command("diff")
@with_container()
def movies_diff(
    container,
    left: Annotated[
        Optional[datetime],
        typer.Option("--from", formats=VISIT_DATE_FORMATS, help="Visite de reference"),
    ] = None,
    right: Annotated[
        Optional[datetime],
        typer.Option("--to", formats=VISIT_DATE_FORMATS, help="Visite comparee"),
    ] = None,
) -> None:
    """Films ajoutes et retires entre deux visites (les deux dernieres par defaut)."""
    manager = container.scan_movies_manager()
    try:
        if left is None and right is None:
            diff = manager.get_last_visit_diff()
        else:
            visit_left = manager.get_closest_visit(left) if left else None
            diff = manager.get_visit_diff(visit_left, manager.get_closest_visit(right))
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    print_diff(diff)


@scan_movies_app.command("genres")
@with_container()
def movies_by_genre(container, visit_date: VisitDateOption = None) -> None:
    """Nombre de films par genre."""
    manager = container.scan_movies_manager()
    print_counts("Films par genre", "Genre", manager.get_count_by_genre(resolve_visit(manager, visit_date)))


@scan_movies_app.command("actors")
@with_container()
def movies_by_actor(
    container,
    visit_date: VisitDateOption = None,
    top: Annotated[int, typer.Option("--top", "-n", help="Nombre de lignes")] = 20,
) -> None:
    """Acteurs les plus presents."""
    manager = container.scan_movies_manager()
    counts = manager.get_count_by_actor(resolve_visit(manager, visit_date))
    top_counts = dict(sorted(counts.items(), key=lambda item: -item[1])[:top])
    print_counts("Films par acteur", "Acteur", top_counts)


@scan_movies_app.command("directors")
@with_container()
def movies_by_director(
    container,
    visit_date: VisitDateOption = None,
    top: Annotated[int, typer.Option("--top", "-n", help="Nombre de lignes")] = 20,
) -> None:
    """Realisateurs les plus presents."""
    manager = container.scan_movies_manager()
    counts = manager.get_count_by_director(resolve_visit(manager, visit_date))
    top_counts = dict(sorted(counts.items(), key=lambda item: -item[1])[:top])
    print_counts("Films par realisateur", "Realisateur", top_counts)


def _print_movies(movies) -> None:
    if not movies:
        console.print("[yellow]Aucun film.[/yellow]")
        return
    for movie in movies:
        console.print(f"  {movie}")


@scan_movies_app.command("with-genre")
@with_container()
def movies_with_genre(
    container,
    name: Annotated[str, typer.Argument(help="Nom (ou partie du nom) du genre")],
    visit_date: VisitDateOption = None,
) -> None:
    """Films d'un genre."""
    manager = container.scan_movies_manager()
    genres = manager.genres_from_name(name)
    _print_movies(manager.get_movies_with_genres(resolve_visit(manager, visit_date), *genres))


@scan_movies_app.command("with-actor")
@with_container()
def movies_with_actor(
    container,
    name: Annotated[str, typer.Argument(help="Nom (ou partie du nom) de l'acteur")],
    visit_date: VisitDateOption = None,
) -> None:
    """Films d'un acteur."""
    manager = container.scan_movies_manager()
    actors = manager.get_actors_from_name(name)
    _print_movies(manager.get_movies_with_actors(resolve_visit(manager, visit_date), *actors))


@scan_movies_app.command("with-director")
@with_container()
def movies_with_director(
    container,
    name: Annotated[str, typer.Argument(help="Nom (ou partie du nom) du realisateur")],
    visit_date: VisitDateOption = None,
) -> None:
    """Films d'un realisateur."""
    manager = container.scan_movies_manager()
    directors = manager.get_directors_from_name(name)
    _print_movies(
        manager.get_movies_with_directors(resolve_visit(manager, visit_date), *directors)
    )


@scan_movies_app.command("with-year")
@with_container()
def movies_with_year(
    container,
    release_dates: Annotated[list[int], typer.Argument(help="Annees de sortie")],
    visit_date: VisitDateOption = None,
) -> None:
    """Films sortis l'une des annees donnees."""
    manager = container.scan_movies_manager()
    _print_movies(
        manager.get_movies_with_release_dates(resolve_visit(manager, visit_date), *release_dates)
    )


@scan_movies_app.command("search")
@with_container()
def movies_search(
    container,
    title: Annotated[str, typer.Argument(help='Titre, avec annee optionnelle ("Licorice Pizza 2021")')],
    visit_date: VisitDateOption = None,
) -> None:
    """Recherche des films par titre."""
    manager = container.scan_movies_manager()
    _print_movies(manager.search_movie_entities_by_title(resolve_visit(manager, visit_date), title))
