"""
Commandes CLI de linking des rips vers les films TMDB.
"""

import asyncio

import typer
from rich.status import Status

from filmdepot.adapters.cli import console
from filmdepot.adapters.cli.helpers import suppress_loguru, with_container
from filmdepot.services.rip_linker import LinkingReport


link_app = typer.Typer(
    name="link",
    help="Linking des rips vers les films canoniques TMDB",
    rich_markup_mode="rich",
)


def _require_tmdb(container) -> None:
    if not container.config().tmdb_enabled:
        console.print("[red]Cle API TMDB non configuree[/red] (FILMDEPOT_TMDB_API_KEY)")
        raise typer.Exit(code=1)


def _print_report(report: LinkingReport) -> None:
    """Affiche le resume d'un lot de linking."""
    for file_name in report.no_results:
        console.print(f"  [red]✗[/red] {file_name} - aucun resultat")
    for file_name in report.multiple_results:
        console.print(f"  [yellow]?[/yellow] {file_name} - resultats multiples")
    for file_name, external_id in report.invalid_external_ids.items():
        console.print(f"  [red]✗[/red] {file_name} - ID inconnu: {external_id}")
    for file_name in report.skipped:
        console.print(f"  [dim]-[/dim] {file_name} - ignore")

    console.print("\n[bold]Resume:[/bold]")
    console.print(f"  [green]{len(report.linked)}[/green] linke(s)")
    if report.failed:
        console.print(f"  [red]{report.failed}[/red] echec(s)")
    if report.skipped:
        console.print(f"  [yellow]{len(report.skipped)}[/yellow] ignore(s)")


@link_app.command("search")
def link_search() -> None:
    """Recherche et linke tous les rips non linkes."""
    asyncio.run(_link_search_async())


@with_container()
async def _link_search_async(container) -> None:
    _require_tmdb(container)
    linker = container.rip_linker()
    try:
        with suppress_loguru(), Status("[cyan]Recherche TMDB...", console=console):
            report = await linker.search_and_link()
    finally:
        await container.tmdb_client().close()
    _print_report(report)


@link_app.command("manual")
def link_manual() -> None:
    """Linke les rips listes dans le fichier d'IDs manuels."""
    asyncio.run(_link_manual_async())


@with_container()
async def _link_manual_async(container) -> None:
    _require_tmdb(container)
    linker = container.rip_linker()
    try:
        with suppress_loguru():
            report = await linker.link_from_manual_external_ids()
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Fichier d'IDs manuels invalide:[/red] {e}")
        raise typer.Exit(code=1)
    finally:
        await container.tmdb_client().close()
    _print_report(report)


@link_app.command("validate-manual")
def link_validate_manual() -> None:
    """Verifie les IDs manuels sans rien enregistrer."""
    asyncio.run(_link_validate_manual_async())


@with_container()
async def _link_validate_manual_async(container) -> None:
    _require_tmdb(container)
    linker = container.rip_linker()
    try:
        with suppress_loguru():
            validation = await linker.validate_manual_external_ids()
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Fichier d'IDs manuels invalide:[/red] {e}")
        raise typer.Exit(code=1)
    finally:
        await container.tmdb_client().close()

    for file_name, external_id in validation["valid"].items():
        console.print(f"  [green]✓[/green] {file_name} -> {external_id}")
    for file_name, external_id in validation["invalid"].items():
        console.print(f"  [red]✗[/red] {file_name} -> {external_id}")


@link_app.command("unlinked")
@with_container()
def link_unlinked(container) -> None:
    """Liste les rips non linkes."""
    file_names = container.rip_linker().get_all_unlinked_movie_rips()
    for file_name in file_names:
        console.print(f"  {file_name}")
    console.print(f"\n[bold]{len(file_names)}[/bold] rip(s) non linke(s)")
