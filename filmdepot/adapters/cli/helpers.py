"""
Utilitaires partages pour les commandes CLI de FilmDepot.

Ce module fournit :
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- resolve_visit : visite la plus proche d'une date, ou sortie en erreur
- print_diff : affichage d'une difference entre visites
- print_counts : affichage d'un comptage sous forme de tableau
"""

import inspect
from contextlib import contextmanager
from datetime import datetime
from functools import wraps
from typing import Optional

import typer
from loguru import logger as loguru_logger
from rich.table import Table

from filmdepot.adapters.cli import console
from filmdepot.container import Container
from filmdepot.core.entities.rip import MovieWarehouseVisit
from filmdepot.services.scan_movies import ScanMoviesManager


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("filmdepot")
    try:
        yield
    finally:
        loguru_logger.enable("filmdepot")


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Les ressources du container (session SQL) sont liberees apres la commande.

    Fonctionne pour les implementations synchrones comme asynchrones.

    Args:
        requires_db: Si True (defaut), initialise la base de donnees.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        def build_container() -> Container:
            container = Container()
            if requires_db:
                container.database.init()
            return container

        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                container = build_container()
                try:
                    return await func(container, *args, **kwargs)
                finally:
                    container.shutdown_resources()
            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            container = build_container()
            try:
                return func(container, *args, **kwargs)
            finally:
                container.shutdown_resources()
        # Typer ne doit pas voir le parametre container
        signature = inspect.signature(func)
        wrapper.__signature__ = signature.replace(
            parameters=list(signature.parameters.values())[1:]
        )
        return wrapper
    return decorator


def resolve_visit(
    manager: ScanMoviesManager, visit_date: Optional[datetime]
) -> MovieWarehouseVisit:
    """Visite la plus proche de visit_date (la derniere sans date), sinon exit 1."""
    visit = manager.get_closest_visit(visit_date)
    if visit is None:
        console.print("[red]Aucune visite enregistree.[/red]")
        raise typer.Exit(code=1)
    console.print(f"[dim]Visite du {visit.visit_datetime:%Y-%m-%d}[/dim]")
    return visit


def print_diff(diff: dict[str, list[str]]) -> None:
    """Affiche les entrees ajoutees puis retirees."""
    for item in diff["added"]:
        console.print(f"  [green]+[/green] {item}")
    for item in diff["removed"]:
        console.print(f"  [red]-[/red] {item}")
    console.print(
        f"\n[green]{len(diff['added'])}[/green] ajout(s), "
        f"[red]{len(diff['removed'])}[/red] retrait(s)"
    )


def print_counts(title: str, column: str, counts: dict) -> None:
    """Affiche un comptage trie par nombre decroissant."""
    table = Table(title=title)
    table.add_column(column, style="cyan")
    table.add_column("Nombre", justify="right", style="green")
    for key, count in sorted(counts.items(), key=lambda item: (-item[1], str(item[0]))):
        table.add_row(str(getattr(key, "name", key)), str(count))
    console.print(table)
