"""
Comando CLI para probar los parsers de texto.
"""

from datetime import timedelta
from enum import Enum
from typing import Annotated

import typer

from formbind import parse
from formbind.cli.theme import print_error


class ParseKind(str, Enum):
    """Tipos de dato soportados por el comando parse."""
    INT = "int"
    FLOAT = "float"
    UINT = "uint"
    DAY = "day"
    DATE = "date"
    REQUIRED = "required"


def format_result(kind: ParseKind, text: str) -> str:
    """
    Parsea el texto y retorna el resultado formateado.

    Raises:
        ParseError: Si el texto no es válido para el tipo
    """
    if kind == ParseKind.INT:
        return str(parse.parse_int(text))
    if kind == ParseKind.FLOAT:
        return repr(parse.parse_float(text))
    if kind == ParseKind.UINT:
        return str(parse.parse_uint(text))
    if kind == ParseKind.DAY:
        hours = parse.parse_day(text) / timedelta(hours=1)
        return f"{hours:.0f} hours"
    if kind == ParseKind.DATE:
        return parse.format_date(parse.parse_date(text))
    return parse.field_required(text)


def parse_text(
    kind: Annotated[ParseKind, typer.Argument(help="Tipo de dato")],
    text: Annotated[str, typer.Argument(help="Texto a parsear")],
):
    """
    Parsea un texto tal como lo haría un campo de formulario.

    Ejemplo:
        formbind parse day 5
        formbind parse date 31/12/2020
    """
    try:
        result = format_result(kind, text)
    except parse.ParseError as e:
        print_error(str(e))
        raise typer.Exit(1)
    typer.echo(result)
