"""
Vinculación de entradas de texto a valores tipados.

Un Form se usa de dos maneras:

1. Validación en tiempo real (Form.validate): procesa solo los campos cuyo
   texto cambió desde la última validación. Pensado para llamarse en cada
   refresco de la interfaz.
2. Validación por lotes (Form.submit): procesa todos los campos, cambien o
   no, y retorna si el formulario completo es válido.

Un campo vacío que el usuario todavía no tocó no está en estado de error;
recién al enviar el formulario se marca el error.

Los errores nunca se propagan más allá de Field/Form: se convierten en el
mensaje de error de la entrada correspondiente.
"""

import logging
from dataclasses import dataclass
from typing import List, Protocol, Sequence

logger = logging.getLogger(__name__)


class Value(Protocol):
    """
    Conversión bidireccional entre texto y un dato estructurado.

    from_text y to_text lanzan ValueError cuando el texto o el dato no son
    válidos; el mensaje se muestra al usuario.
    """

    def to_text(self) -> str:
        """Convierte el dato a texto."""
        ...

    def from_text(self, text: str) -> None:
        """Parsea el dato desde texto."""
        ...

    def clear(self) -> None:
        """Restablece el dato."""
        ...


class Input(Protocol):
    """Widget que muestra texto y un mensaje de error."""

    def text(self) -> str:
        ...

    def set_text(self, text: str) -> None:
        ...

    def set_error(self, error: str) -> None:
        ...

    def clear_error(self) -> None:
        ...


@dataclass
class Field:
    """Vincula un Value a un Input."""
    value: Value
    input: Input

    def validate(self) -> bool:
        """
        Valida el campo pasando el texto de la entrada por el Value.

        Returns:
            True si el texto es válido, False si no
        """
        try:
            self.value.from_text(self.input.text())
        except ValueError as e:
            logger.debug("Campo inválido (%r): %s", self.value, e)
            self.input.set_error(str(e))
            return False
        self.input.clear_error()
        return True


class Form:
    """Colección ordenada de campos con detección de cambios."""

    def __init__(self):
        self.fields: List[Field] = []
        # Último texto visto de cada campo, mismo orden que fields
        self._cache: List[str] = []

    def load(self, fields: Sequence[Field]) -> None:
        """
        Carga los valores del modelo en las entradas.

        Una secuencia vacía conserva los campos previos (solo recarga).
        """
        if fields:
            self.fields = list(fields)
        self._cache = [""] * len(self.fields)

        for ii, fld in enumerate(self.fields):
            try:
                text = fld.value.to_text()
            except ValueError as e:
                fld.input.set_error(str(e))
                continue
            self._cache[ii] = fld.input.text()
            fld.input.clear_error()
            fld.input.set_text(text)

        logger.debug("Formulario cargado con %d campos", len(self.fields))

    def validate(self) -> None:
        """Valida solo los campos cuyo texto cambió (tiempo real)."""
        for ii, fld in enumerate(self.fields):
            text = fld.input.text()
            if text != self._cache[ii]:
                self._cache[ii] = text
                fld.validate()

    def submit(self) -> bool:
        """
        Valida todos los campos.

        Todos los campos se validan aunque alguno falle, para que cada uno
        muestre su error.

        Returns:
            True si todos los campos son válidos y los datos pueden usarse
        """
        results = [fld.validate() for fld in self.fields]
        ok = all(results)
        logger.debug("Envío: %d/%d campos válidos", sum(results), len(results))
        return ok

    def clear(self) -> None:
        """Restablece modelo y entradas a sus valores base."""
        for ii, fld in enumerate(self.fields):
            fld.value.clear()
            try:
                text = fld.value.to_text()
            except ValueError:
                text = ""
            fld.input.clear_error()
            fld.input.set_text(text)
            self._cache[ii] = text
        logger.debug("Formulario restablecido")

    @property
    def cache(self) -> List[str]:
        """Copia del último texto visto por campo."""
        return list(self._cache)
