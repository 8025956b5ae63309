"""
Parseo de texto para tipos de datos comunes.

Cada función recibe el texto tal como lo escribió el usuario y retorna el
valor estructurado. Los errores se lanzan como ParseError con un mensaje
corto, pensado para mostrarse directamente junto al campo.
"""

import re
from datetime import datetime, timedelta, date as date_type
from typing import Union

# Mensajes de error mostrados al usuario
MSG_NUMBER = "must be a valid number"
MSG_POSITIVE = "must be an amount greater than 0"
MSG_REQUIRED = "required"
MSG_DATE_FORMAT = "must be dd/mm/yyyy"
MSG_DATE_INVALID = "must be a valid date"

# Entero en base 10 con signo opcional, sin espacios ni separadores
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Decimal o notación científica; también inf y nan, sin espacios ni "_"
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class ParseError(ValueError):
    """Error de parseo con mensaje legible por el usuario."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def parse_int(s: str) -> int:
    """Parsea un entero a partir de dígitos."""
    if not _INT_PATTERN.fullmatch(s):
        raise ParseError(MSG_NUMBER)
    try:
        return int(s)
    except ValueError:
        # Excede el límite de dígitos de int()
        raise ParseError(MSG_NUMBER) from None


def parse_float(s: str) -> float:
    """Parsea un número de punto flotante."""
    if not _FLOAT_PATTERN.fullmatch(s):
        raise ParseError(MSG_NUMBER)
    return float(s)


def parse_uint(s: str) -> int:
    """
    Parsea un entero positivo.

    Cualquier valor menor a 1 es un error, incluido el cero.
    """
    n = parse_int(s)
    if n < 1:
        raise ParseError(MSG_POSITIVE)
    return n


def parse_day(s: str) -> timedelta:
    """Parsea una cantidad de días como unidades de 24 horas."""
    n = parse_uint(s)
    try:
        return timedelta(hours=24 * n)
    except OverflowError:
        raise ParseError(MSG_NUMBER) from None


def field_required(s: str) -> str:
    """Verifica que el texto no esté vacío (ignorando espacios)."""
    if s.strip() == "":
        raise ParseError(MSG_REQUIRED)
    return s


def format_date(d: Union[datetime, date_type]) -> str:
    """Formatea una fecha como d/m/yyyy (sin ceros a la izquierda)."""
    return f"{d.day}/{d.month}/{d.year}"


def parse_date(s: str) -> datetime:
    """
    Parsea una fecha en formato dd/mm/yyyy.

    Args:
        s: Texto con exactamente dos separadores "/"

    Returns:
        datetime a medianoche (hora local, sin zona)

    Raises:
        ParseError: Si el formato o alguno de los componentes es inválido
    """
    parts = s.split("/")
    if len(parts) != 3:
        raise ParseError(MSG_DATE_FORMAT)

    day_text, month_text, year_text = parts
    if not _INT_PATTERN.fullmatch(year_text):
        raise ParseError(f"year not a number: {year_text}")
    if not _INT_PATTERN.fullmatch(month_text):
        raise ParseError(f"month not a number: {month_text}")
    if not _INT_PATTERN.fullmatch(day_text):
        raise ParseError(f"day not a number: {day_text}")

    try:
        return datetime(int(year_text), int(month_text), int(day_text))
    except (ValueError, OverflowError):
        raise ParseError(MSG_DATE_INVALID) from None
