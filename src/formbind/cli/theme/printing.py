"""
Funciones que imprimen directamente a la consola.

Todas aceptan una consola opcional; por defecto usan la del tema activo.
"""

from typing import Optional

from rich.console import Console
from rich.text import Text

from formbind.cli.theme.palette import get_console


def print_header(text: str, subtitle: Optional[str] = None, console: Optional[Console] = None) -> None:
    """Imprime un encabezado."""
    console = console or get_console()
    console.print()
    console.print(Text(text, style="title"))
    if subtitle:
        console.print(Text(subtitle, style="muted"))


def print_field(label: str, value, indent: int = 2, console: Optional[Console] = None) -> None:
    """Imprime un campo con valor."""
    console = console or get_console()
    line = Text(" " * indent)
    line.append(f"{label}: ", style="label")
    line.append(str(value), style="input")
    console.print(line)


def print_success(message: str, console: Optional[Console] = None) -> None:
    """Imprime mensaje de éxito."""
    (console or get_console()).print(Text(f"✓ {message}", style="success"))


def print_error(message: str, console: Optional[Console] = None) -> None:
    """Imprime mensaje de error."""
    (console or get_console()).print(Text(f"✗ {message}", style="field.error"))
