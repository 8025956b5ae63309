"""Modelos Pydantic para la configuración visual de formularios."""

import re

from pydantic import BaseModel, Field, field_validator

_HEX_COLOR = re.compile(r"^#[0-9a-f]{6}$")


def argb(c: int) -> str:
    """
    Convierte un color 0xAARRGGBB a notación hex #rrggbb.

    El canal alfa se descarta: la terminal no maneja transparencias.
    """
    return f"#{c & 0xFFFFFF:06x}"


def rgb(c: int) -> str:
    """Convierte un color 0xRRGGBB a notación hex #rrggbb."""
    return argb(0xFF000000 | c)


# ============================================================================
# Paleta de colores
# ============================================================================

class Palette(BaseModel):
    """
    Colores semánticos de la interfaz.

    Los colores "on_*" se muestran sobre el color base correspondiente y
    deben contrastar con él.
    """
    primary: str = Field(..., description="Color principal (títulos, foco)")
    primary_variant: str = Field(..., description="Variante del principal")
    secondary: str = Field(..., description="Acento, uso moderado")
    secondary_variant: str = Field(..., description="Variante del acento")
    background: str = Field(..., description="Fondo detrás del contenido")
    surface: str = Field(..., description="Superficie de paneles y tarjetas")
    error: str = Field(..., description="Errores de validación")
    on_primary: str
    on_secondary: str
    on_background: str
    on_surface: str
    on_error: str

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex(cls, v: str) -> str:
        v = str(v).strip().lower()
        if not _HEX_COLOR.match(v):
            raise ValueError(f"Color inválido: {v!r} (se espera #rrggbb)")
        return v


# Paleta base de Material Design
MATERIAL_DESIGN = Palette(
    primary=rgb(0x6200EE),
    primary_variant=rgb(0x3700B3),
    secondary=rgb(0x03DAC6),
    secondary_variant=rgb(0x018786),
    background=rgb(0xFFFFFF),
    surface=rgb(0xFFFFFF),
    error=rgb(0xB00020),
    on_primary=rgb(0xFFFFFF),
    on_secondary=rgb(0x000000),
    on_background=rgb(0x000000),
    on_surface=rgb(0x000000),
    on_error=rgb(0xFFFFFF),
)

# Variante oscura de Material Design
MATERIAL_DARK = Palette(
    primary=rgb(0xBB86FC),
    primary_variant=rgb(0x3700B3),
    secondary=rgb(0x03DAC6),
    secondary_variant=rgb(0x03DAC6),
    background=rgb(0x121212),
    surface=rgb(0x121212),
    error=rgb(0xCF6679),
    on_primary=rgb(0x000000),
    on_secondary=rgb(0x000000),
    on_background=rgb(0xFFFFFF),
    on_surface=rgb(0xFFFFFF),
    on_error=rgb(0x000000),
)


# ============================================================================
# Puntos de quiebre (layout responsivo)
# ============================================================================

# Valor centinela: margen o cuerpo "fluido"
FLUID = 0


class BreakPoint(BaseModel):
    """Viewport de un tipo de dispositivo, en columnas de terminal."""
    width: int = Field(..., gt=0, description="Ancho máximo de la pantalla")
    margins: int = Field(default=FLUID, ge=0, description="Margen lateral (0 = fluido)")
    body: int = Field(default=FLUID, ge=0, description="Ancho del cuerpo (0 = fluido)")

    @property
    def is_fluid(self) -> bool:
        return self.body == FLUID


class BreakPoints(BaseModel):
    """Puntos de quiebre por tipo de dispositivo."""
    tiny: BreakPoint
    small: BreakPoint
    medium: BreakPoint
    large: BreakPoint

    def select(self, width: int) -> str:
        """Retorna el nombre del punto de quiebre para un ancho dado."""
        if width <= self.tiny.width:
            return "tiny"
        if width <= self.small.width:
            return "small"
        if width <= self.medium.width:
            return "medium"
        return "large"

    def get(self, width: int) -> BreakPoint:
        """Retorna el BreakPoint que corresponde a un ancho dado."""
        return getattr(self, self.select(width))


DEFAULT_BREAKPOINTS = BreakPoints(
    tiny=BreakPoint(width=59, margins=1),
    small=BreakPoint(width=99, margins=2),
    medium=BreakPoint(width=139, margins=8),
    large=BreakPoint(width=139, margins=FLUID, body=100),
)
