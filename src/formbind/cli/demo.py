"""
Formulario de ejemplo: datos de una persona.

Muestra el uso típico de formbind: los campos se declaran una sola vez,
cada Value apunta a un atributo del modelo y cada Input es un widget de
terminal. Tras un envío exitoso el modelo contiene los datos validados.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from rich.console import Console, Group
from rich.padding import Padding
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text
from rich import box

from formbind import AttrRef, Field, Form
from formbind import value
from formbind.config import BreakPoints, DEFAULT_BREAKPOINTS
from formbind.cli.theme import (
    build_theme,
    get_console,
    get_palette,
    print_error,
    print_field,
    print_header,
    print_success,
)
from formbind.cli.widgets import TextInput

logger = logging.getLogger(__name__)

# Comandos que el usuario puede escribir en lugar de un valor
CMD_SUBMIT = ":submit"
CMD_CLEAR = ":clear"
CMD_QUIT = ":quit"

AskFn = Callable[[str, str], str]


@dataclass
class Person:
    """Datos estructurados del formulario."""
    name: str = ""
    age: int = 0
    salary: float = 0.0
    holidays: timedelta = timedelta(days=1)
    start: Optional[datetime] = None


@dataclass
class PersonInputs:
    """Estado de las entradas de texto."""
    name: TextInput = field(default_factory=lambda: TextInput("Name", hint="required"))
    age: TextInput = field(default_factory=lambda: TextInput("Age"))
    salary: TextInput = field(default_factory=lambda: TextInput("Salary", hint="$"))
    holidays: TextInput = field(default_factory=lambda: TextInput("Holidays", hint="days"))
    start: TextInput = field(default_factory=lambda: TextInput("Start date", hint="dd/mm/yyyy"))

    def ordered(self) -> List[TextInput]:
        return [self.name, self.age, self.salary, self.holidays, self.start]


class PersonForm(Form):
    """Formulario que vincula las entradas al modelo Person."""

    def __init__(self, model: Optional[Person] = None):
        super().__init__()
        self.model = model if model is not None else Person()
        self.inputs = PersonInputs()
        self._loaded = False

    def update(self) -> None:
        """
        Llamar en cada refresco de la interfaz.

        La carga de campos ocurre una sola vez; luego solo se validan en
        tiempo real los campos que cambiaron.
        """
        if not self._loaded:
            m, i = self.model, self.inputs
            self.load([
                Field(value.Required(value.Text(AttrRef(m, "name"))), i.name),
                Field(value.Int(AttrRef(m, "age"), default=18), i.age),
                Field(value.Float(AttrRef(m, "salary")), i.salary),
                Field(value.Days(AttrRef(m, "holidays")), i.holidays),
                Field(value.Date(AttrRef(m, "start"), default=datetime.now()), i.start),
            ])
            self._loaded = True
        self.validate()


def build_display(
    pf: PersonForm,
    width: int,
    breakpoints: BreakPoints = DEFAULT_BREAKPOINTS,
    selected: Optional[int] = None,
):
    """
    Construye la vista del formulario según el ancho disponible.

    En pantallas angostas cada campo ocupa su propia línea; en el resto se
    muestra una tabla.
    """
    bp = breakpoints.get(width)
    inputs = pf.inputs.ordered()

    if breakpoints.select(width) == "tiny":
        lines = []
        for idx, inp in enumerate(inputs):
            marker = "> " if idx == selected else "  "
            line = Text(marker, style="primary")
            line.append_text(inp.render())
            lines.append(line)
        content = Group(*lines)
    else:
        table = Table(
            box=box.ROUNDED,
            border_style="primary.variant",
            header_style="title",
            width=None if bp.is_fluid else bp.body,
        )
        table.add_column("", width=1)
        table.add_column("Campo", style="label")
        table.add_column("Valor")
        table.add_column("Error")
        for idx, inp in enumerate(inputs):
            marker = Text(">" if idx == selected else "", style="primary")
            table.add_row(marker, inp.label, inp.render_value(), inp.render_error())
        content = table

    return Padding(content, (0, bp.margins))


def _default_ask(console: Console) -> AskFn:
    def ask(label: str, default: str) -> str:
        return Prompt.ask(
            Text(label, style="label"),
            default=default,
            show_default=bool(default),
            console=console,
        )
    return ask


def print_person(person: Person, console: Optional[Console] = None) -> None:
    print_field("Name", person.name, console=console)
    print_field("Age", person.age, console=console)
    print_field("Salary", f"{person.salary:.2f}", console=console)
    print_field("Holidays", f"{int(person.holidays / timedelta(hours=24))} days", console=console)
    print_field("Start date", person.start.strftime("%d/%m/%Y") if person.start else "-", console=console)


def run_demo(
    console: Optional[Console] = None,
    ask: Optional[AskFn] = None,
    breakpoints: BreakPoints = DEFAULT_BREAKPOINTS,
) -> Optional[Person]:
    """
    Ejecuta el formulario interactivo.

    Args:
        console: Consola Rich (por defecto la del tema activo); se le
            aplica el tema activo mientras dura el formulario
        ask: Función (etiqueta, texto actual) -> respuesta del usuario
        breakpoints: Puntos de quiebre para elegir el layout

    Returns:
        Person con los datos validados, o None si el usuario sale
    """
    console = console or get_console()
    ask = ask or _default_ask(console)

    with console.use_theme(build_theme(get_palette())):
        return _form_loop(console, ask, breakpoints)


def _form_loop(console: Console, ask: AskFn, breakpoints: BreakPoints) -> Optional[Person]:
    pf = PersonForm()
    pf.update()
    inputs = pf.inputs.ordered()
    idx = 0

    print_header("Person", f"{CMD_SUBMIT} envía, {CMD_CLEAR} limpia, {CMD_QUIT} sale", console=console)

    while True:
        console.print(build_display(pf, console.width, breakpoints, selected=idx))
        inp = inputs[idx]
        answer = ask(inp.label, inp.text())
        command = answer.strip()

        if command == CMD_QUIT:
            logger.debug("Formulario cancelado")
            return None

        if command == CMD_CLEAR:
            pf.clear()
            idx = 0
            continue

        if command != CMD_SUBMIT:
            inp.set_text(answer)
            pf.update()
            if inp.has_error:
                continue
            idx += 1
            if idx < len(inputs):
                continue

        if pf.submit():
            print_success("Formulario válido", console=console)
            print_person(pf.model, console=console)
            return pf.model

        print_error("Hay campos con errores", console=console)
        idx = next(ii for ii, item in enumerate(inputs) if item.has_error)
