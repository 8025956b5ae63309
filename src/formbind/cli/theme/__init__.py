"""
Sistema de temas para la CLI de formbind.

- palette: Paleta activa y consola Rich (CLITheme)
- printing: Funciones que imprimen directamente a consola
"""

from formbind.cli.theme.palette import (
    ThemeName,
    THEMES,
    CLITheme,
    build_theme,
    get_console,
    get_palette,
)
from formbind.cli.theme.printing import (
    print_header,
    print_field,
    print_success,
    print_error,
)

__all__ = [
    # palette
    "ThemeName",
    "THEMES",
    "CLITheme",
    "build_theme",
    "get_console",
    "get_palette",
    # printing
    "print_header",
    "print_field",
    "print_success",
    "print_error",
]
