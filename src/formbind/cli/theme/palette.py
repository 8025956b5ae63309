"""
Gestión de temas: traduce la paleta semántica a estilos Rich.
"""

from enum import Enum
from typing import Optional

from rich.console import Console
from rich.theme import Theme

from formbind.config import MATERIAL_DARK, MATERIAL_DESIGN, Palette


class ThemeName(str, Enum):
    """Temas disponibles."""
    LIGHT = "light"
    DARK = "dark"


# Mapeo de nombres a paletas
THEMES = {
    ThemeName.LIGHT: MATERIAL_DESIGN,
    ThemeName.DARK: MATERIAL_DARK,
}


def build_theme(p: Palette) -> Theme:
    """Construye el Theme de Rich a partir de una paleta."""
    return Theme({
        # Colores base
        "primary": p.primary,
        "primary.variant": p.primary_variant,
        "secondary": p.secondary,
        "secondary.variant": p.secondary_variant,
        "error": p.error,
        # Estilos compuestos
        "title": f"bold {p.primary}",
        "label": p.primary_variant,
        "input": f"bold {p.secondary}",
        "input.empty": "dim",
        "field.error": f"bold {p.error}",
        "success": f"bold {p.secondary_variant}",
        "muted": "dim",
        "badge.error": f"bold {p.on_error} on {p.error}",
    })


class CLITheme:
    """Gestor de tema para la CLI."""

    _palette: Palette = MATERIAL_DESIGN
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        """Establece el tema activo."""
        cls._palette = THEMES.get(theme, MATERIAL_DESIGN)
        cls._console = None  # Recrear console con el nuevo tema

    @classmethod
    def get_palette(cls) -> Palette:
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            cls._console = Console(theme=build_theme(cls._palette))
        return cls._console


def get_console() -> Console:
    """Obtiene la consola Rich con tema aplicado."""
    return CLITheme.get_console()


def get_palette() -> Palette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()
