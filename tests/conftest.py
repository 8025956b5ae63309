"""Configuración de pytest para tests de formbind."""

import pytest

from formbind.cli.theme import CLITheme, ThemeName
from formbind.cli.widgets import TextInput


@pytest.fixture
def text_input():
    """Entrada de texto vacía."""
    return TextInput("Campo")


@pytest.fixture(autouse=True)
def reset_theme():
    """Restablece el tema global entre tests."""
    CLITheme.set_theme(ThemeName.LIGHT)
    yield
    CLITheme.set_theme(ThemeName.LIGHT)
