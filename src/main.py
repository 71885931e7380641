"""
Point d'entrée CLI de ShortCat.

Initialise le container DI, configure le logging et fournit les commandes CLI :
- serve : lance le serveur HTTP (uvicorn)
- init-db : crée les tables de la base
- orphans : liste (et supprime avec --delete) les fichiers non référencés
"""

from typing import Annotated, Optional

import typer
import uvicorn
from loguru import logger
from rich.console import Console
from rich.table import Table

from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="shortcat",
    help="Catalogue de courtes videos",
)
container = Container()
console = Console()


@app.callback()
def main_callback() -> None:
    """ShortCat - Catalogue de courtes videos."""
    configure_logging(container.config())


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'ecoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'ecoute")] = None,
) -> None:
    """Lance le serveur HTTP."""
    from .web.app import create_app

    settings = container.config()
    bind_host = host or settings.host
    bind_port = port or settings.port
    logger.info(f"Demarrage du serveur sur {bind_host}:{bind_port}")
    uvicorn.run(create_app(container), host=bind_host, port=bind_port)


@app.command(name="init-db")
def init_database() -> None:
    """Cree les tables de la base de donnees."""
    container.database.init()
    container.shutdown_resources()
    console.print("[green]Base de donnees initialisee[/green]")


@app.command()
def orphans(
    delete: Annotated[
        bool, typer.Option("--delete", help="Supprimer les fichiers orphelins")
    ] = False,
) -> None:
    """Liste les fichiers stockes qu'aucune entree ne reference."""
    container.database.init()
    session = container.session()
    try:
        sweeper = container.orphan_sweeper(
            catalog_repository=container.catalog_repository(session=session)
        )
        report = sweeper.sweep(dry_run=not delete)
    finally:
        session.close()
        container.shutdown_resources()

    if not report.orphans:
        console.print("[green]Aucun fichier orphelin[/green]")
        return

    table = Table(title=f"{len(report.orphans)} fichier(s) orphelin(s)")
    table.add_column("Reference")
    table.add_column("Statut")
    for ref in report.orphans:
        if ref in report.deleted:
            status = "[green]supprime[/green]"
        elif ref in report.failed:
            status = "[red]echec[/red]"
        else:
            status = "[yellow]conserve[/yellow]"
        table.add_row(ref, status)
    console.print(table)

    if report.failed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
