"""
hyprnav.config.defaults - Conjuntos de teclas por defecto.

Define las combinaciones que se usan cuando hyprland.conf no contiene
ningun bind de movefocus:

    Flechas con SUPER (siempre se desvinculan primero):
        SUPER + Right/Left/Up/Down

    enable (fallback):
        SUPER + <flecha>     -> exec hyprnav <direccion>

    disable (fallback):
        $mainMod + <flecha>  -> movefocus l/r/u/d
"""

from __future__ import annotations

from hyprnav.navigation.directional import Direction

# Modificador usado para las flechas que hyprnav toma por defecto
ARROW_MODIFIER = "SUPER"

# Modificador de la configuracion por defecto de Hyprland
DEFAULT_MAIN_MOD = "$mainMod"

# Orden en que se desvinculan/vinculan las flechas al habilitar
ARROW_KEYS: tuple[Direction, ...] = (
    Direction.RIGHT,
    Direction.LEFT,
    Direction.UP,
    Direction.DOWN,
)

# Orden de la configuracion por defecto de Hyprland (movefocus)
DEFAULT_MOVEFOCUS_KEYS: tuple[Direction, ...] = (
    Direction.LEFT,
    Direction.RIGHT,
    Direction.UP,
    Direction.DOWN,
)


def arrow_combo(direction: Direction, modifier: str = ARROW_MODIFIER) -> str:
    """The ``<modifier>, <arrow>`` pair for a direction's arrow key."""
    return f"{modifier}, {direction.value}"
