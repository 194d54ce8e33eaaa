"""
Interface en ligne de commande de FilmDepot (typer + rich).
"""

from rich.console import Console

# Console globale pour tous les affichages
console = Console()
