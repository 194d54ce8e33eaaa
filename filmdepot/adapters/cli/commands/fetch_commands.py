"""
Commandes CLI de recuperation des details TMDB des films.
"""

import asyncio

import typer
from rich.status import Status

from filmdepot.adapters.cli import console
from filmdepot.adapters.cli.helpers import suppress_loguru, with_container


fetch_app = typer.Typer(
    name="fetch",
    help="Recuperation des details TMDB des films linkes",
    rich_markup_mode="rich",
)

# Nom de la commande -> methode du MovieDetailsFetcher
FETCH_TARGETS = {
    "genres": "populate_genres",
    "actors": "populate_actors",
    "directors": "populate_directors",
    "keywords": "populate_keywords",
    "imdb-ids": "populate_imdb_ids",
}


@with_container()
async def _fetch_async(container, targets: list[str]) -> None:
    if not container.config().tmdb_enabled:
        console.print("[red]Cle API TMDB non configuree[/red] (FILMDEPOT_TMDB_API_KEY)")
        raise typer.Exit(code=1)

    try:
        for target in targets:
            # Une unite de travail par lot
            fetcher = container.details_fetcher()
            with suppress_loguru(), Status(f"[cyan]{target}...", console=console):
                stats = await getattr(fetcher, FETCH_TARGETS[target])()
            line = f"  {target}: [green]{stats.updated}[/green] mis a jour"
            if stats.failed:
                line += f", [red]{stats.failed}[/red] echec(s)"
            console.print(line)
    finally:
        await container.tmdb_client().close()


def _register(name: str) -> None:
    def command() -> None:
        asyncio.run(_fetch_async([name]))

    command.__doc__ = f"Recupere les {name} des films qui n'en ont pas."
    fetch_app.command(name)(command)


for _name in FETCH_TARGETS:
    _register(_name)


@fetch_app.command("all")
def fetch_all() -> None:
    """Recupere tous les details manquants."""
    asyncio.run(_fetch_async(list(FETCH_TARGETS)))
