"""
Commandes CLI des visites de l'entrepot (ecriture du contenu, enregistrement).
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from filmdepot.adapters.cli import console
from filmdepot.adapters.cli.helpers import suppress_loguru, with_container
from filmdepot.core.exceptions import FileNameParserError, VisitAlreadyRegisteredError


visit_app = typer.Typer(
    name="visit",
    help="Visites de l'entrepot de films",
    rich_markup_mode="rich",
)


@visit_app.command("write")
@with_container(requires_db=False)
def visit_write(container) -> None:
    """Liste l'entrepot dans le fichier de contenu du jour (movies_YYYYMMDD.txt)."""
    manager = container.visit_manager()
    try:
        file_path = manager.write_movie_warehouse_contents_to_text_file()
    except FileNotFoundError as e:
        console.print(f"[red]Repertoire introuvable:[/red] {e}")
        raise typer.Exit(code=1)
    except FileExistsError as e:
        console.print(f"[yellow]Fichier de contenu deja ecrit:[/yellow] {e}")
        raise typer.Exit(code=1)
    console.print(f"[green]Contenu de l'entrepot ecrit dans[/green] {file_path}")


@visit_app.command("register")
@with_container()
def visit_register(
    container,
    file_path: Annotated[
        Optional[Path],
        typer.Argument(help="Fichier movies_YYYYMMDD.txt (dernier fichier ecrit par defaut)"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Annule l'enregistrement sur un nom non parsable"),
    ] = False,
) -> None:
    """Enregistre la visite decrite par un fichier de contenu."""
    manager = container.visit_manager()
    if file_path is None:
        candidates = sorted(manager.contents_dir.glob("movies_*.txt"))
        if not candidates:
            console.print(f"[red]Aucun fichier de contenu dans[/red] {manager.contents_dir}")
            raise typer.Exit(code=1)
        file_path = candidates[-1]

    with suppress_loguru():
        try:
            visit = manager.read_warehouse_contents_and_register_visit(
                file_path, fail_on_parsing_errors=strict
            )
        except VisitAlreadyRegisteredError as e:
            console.print(f"[yellow]{e}[/yellow]")
            raise typer.Exit(code=1)
        except (FileNameParserError, ValueError) as e:
            console.print(f"[red]Enregistrement annule:[/red] {e}")
            raise typer.Exit(code=1)

    console.print(
        f"[green]Visite {visit.visit_datetime:%Y-%m-%d} enregistree[/green]: "
        f"{len(visit.movie_rips)} rip(s)"
    )


@visit_app.command("list")
@with_container()
def visit_list(container) -> None:
    """Liste les dates des visites enregistrees."""
    dates = container.scan_movies_manager().list_visit_dates()
    if not dates:
        console.print("[yellow]Aucune visite enregistree.[/yellow]")
        return
    for visit_datetime in dates:
        console.print(f"  {visit_datetime:%Y-%m-%d %H:%M}")
