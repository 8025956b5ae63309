"""
formbind - Vinculación y validación de formularios de texto.

Conecta entradas de texto de una interfaz con valores tipados del modelo:
detección de cambios, conversión texto/valor y propagación de errores.
"""

__version__ = "0.1.0"

from formbind.form import Field, Form, Input, Value
from formbind.parse import ParseError
from formbind.ref import AttrRef, ItemRef, Ref, Slot

__all__ = [
    "Field",
    "Form",
    "Input",
    "Value",
    "ParseError",
    "Ref",
    "AttrRef",
    "ItemRef",
    "Slot",
]
