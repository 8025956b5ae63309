"""
CLI de formbind.

Comandos:
- parse: Parsea un texto con los parsers de formulario
- demo: Formulario interactivo de ejemplo (Person)
"""

import logging
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler

from formbind import __version__
from formbind.cli.parse import parse_text
from formbind.cli.theme import CLITheme, ThemeName, get_console

app = typer.Typer(
    name="formbind",
    help="Vinculación y validación de formularios de texto.",
    no_args_is_help=True,
)

app.command("parse")(parse_text)


def setup_logging(verbose: bool = False) -> None:
    """Configura logging con salida Rich sobre la consola del tema."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=get_console(), show_path=False)],
        force=True,
    )


def version_callback(value: bool):
    if value:
        typer.echo(f"formbind v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-V", callback=version_callback, is_eager=True),
    ] = None,
    theme: Annotated[ThemeName, typer.Option("--theme", help="Tema de colores")] = ThemeName.LIGHT,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Mostrar mensajes de depuración")] = False,
):
    """formbind - Formularios de texto con validación."""
    CLITheme.set_theme(theme)
    setup_logging(verbose)


@app.command("demo")
def demo_command():
    """Formulario interactivo de ejemplo."""
    from formbind.cli.demo import run_demo

    person = run_demo()
    if person is None:
        raise typer.Exit(1)
