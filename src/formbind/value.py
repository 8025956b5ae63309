"""
Implementaciones de Value para tipos de datos comunes.

Cada Value apunta (vía Ref) a un dato del modelo del llamador. Cuando el dato
está en su valor cero se muestra el valor por defecto configurado.
"""

from datetime import datetime, timedelta
from typing import Optional

from formbind import parse
from formbind.form import Value
from formbind.ref import Ref

ONE_DAY = timedelta(hours=24)


class Int:
    """Mapea texto a un número entero."""

    def __init__(self, ref: Ref[int], default: int = 0):
        self.ref = ref
        self.default = default

    def to_text(self) -> str:
        n = self.ref.get()
        if n == 0:
            n = self.default
        return str(n)

    def from_text(self, text: str) -> None:
        try:
            self.ref.set(parse.parse_int(text))
        except parse.ParseError:
            self.ref.set(0)
            raise

    def clear(self) -> None:
        self.ref.set(0)


class Float:
    """Mapea texto a un número de punto flotante (2 decimales al mostrar)."""

    def __init__(self, ref: Ref[float], default: float = 0.0):
        self.ref = ref
        self.default = default

    def to_text(self) -> str:
        x = self.ref.get()
        if x == 0:
            x = self.default
        return f"{x:.2f}"

    def from_text(self, text: str) -> None:
        try:
            self.ref.set(parse.parse_float(text))
        except parse.ParseError:
            self.ref.set(0.0)
            raise

    def clear(self) -> None:
        self.ref.set(0.0)


class Text:
    """Texto libre, sin validación."""

    def __init__(self, ref: Ref[str], default: str = ""):
        self.ref = ref
        self.default = default

    def to_text(self) -> str:
        return self.ref.get() or self.default

    def from_text(self, text: str) -> None:
        self.ref.set(text)

    def clear(self) -> None:
        self.ref.set("")


class Days:
    """Mapea texto a unidades de 24 horas (timedelta)."""

    def __init__(self, ref: Ref[timedelta]):
        self.ref = ref

    def to_text(self) -> str:
        return str(int(self.ref.get() / ONE_DAY))

    def from_text(self, text: str) -> None:
        try:
            self.ref.set(parse.parse_day(text))
        except parse.ParseError:
            self.ref.set(timedelta(0))
            raise

    def clear(self) -> None:
        self.ref.set(ONE_DAY)


class Required:
    """
    Decorador que rechaza texto vacío.

    Intercepta from_text; to_text y clear se delegan sin cambios al valor
    envuelto.
    """

    def __init__(self, inner: Value):
        self.inner = inner

    def to_text(self) -> str:
        return self.inner.to_text()

    def from_text(self, text: str) -> None:
        parse.field_required(text)
        self.inner.from_text(text)

    def clear(self) -> None:
        self.inner.clear()


class Date:
    """Mapea texto dd/mm/yyyy a un datetime."""

    def __init__(self, ref: Ref[Optional[datetime]], default: Optional[datetime] = None):
        self.ref = ref
        self.default = default

    def to_text(self) -> str:
        d = self.ref.get()
        if d is None:
            d = self.default
        if d is None:
            return ""
        return parse.format_date(d)

    def from_text(self, text: str) -> None:
        try:
            self.ref.set(parse.parse_date(text))
        except parse.ParseError:
            self.ref.set(None)
            raise

    def clear(self) -> None:
        self.ref.set(datetime.now())
