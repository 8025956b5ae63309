"""
Widgets de terminal que implementan formbind.Input.
"""

from typing import Optional

from rich.text import Text


class TextInput:
    """Entrada de texto con etiqueta y mensaje de error."""

    def __init__(self, label: str, hint: str = ""):
        self.label = label
        self.hint = hint
        self._text = ""
        self.error: Optional[str] = None

    # Interfaz formbind.Input

    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text

    def set_error(self, error: str) -> None:
        self.error = error

    def clear_error(self) -> None:
        self.error = None

    # Presentación

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def render_value(self) -> Text:
        """Texto actual estilizado (o placeholder si está vacío)."""
        if not self._text:
            return Text(self.hint or "-", style="input.empty")
        return Text(self._text, style="input")

    def render_error(self) -> Text:
        if self.error is None:
            return Text("")
        return Text(self.error, style="field.error")

    def render(self) -> Text:
        """Línea completa: etiqueta, valor y error."""
        line = Text()
        line.append(f"{self.label}: ", style="label")
        line.append_text(self.render_value())
        if self.error is not None:
            line.append("  ")
            line.append_text(self.render_error())
        return line

    def __repr__(self) -> str:
        return f"TextInput({self.label!r}, text={self._text!r}, error={self.error!r})"
