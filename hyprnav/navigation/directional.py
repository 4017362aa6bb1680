"""
hyprnav.navigation.directional - Foco direccional entre ventanas.

Implementa la logica geometrica para encontrar la ventana "mejor"
en una direccion cardinal respecto a la ventana enfocada:

    1. Solo ventanas del mismo workspace, excluyendo la enfocada por
       su address, nunca por geometria.
    2. Filtro de semiplano: el centro del candidato debe estar
       estrictamente del lado pedido sobre el eje de avance.
    3. Filtro de solapamiento ortogonal: sobre el eje perpendicular,
       los extremos deben solaparse en una cantidad positiva. Asi una
       ventana en diagonal nunca se elige.
    4. Puntaje (primario, secundario): distancia entre centros sobre el
       eje de avance, luego desalineacion lateral. Gana el menor; en
       empate exacto gana el primero en el orden de entrada.
"""

from __future__ import annotations

import enum
import logging
import math
from typing import TYPE_CHECKING, Optional, Sequence, Union

from hyprnav.core.window import Window

if TYPE_CHECKING:
    from hyprnav.core.hyprctl import Hyprctl

log = logging.getLogger(__name__)


class Direction(enum.Enum):
    """Cardinal directions for focus operations."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def axis(self) -> str:
        """Travel axis: "x" for left/right, "y" for up/down."""
        return _AXIS[self]

    @property
    def sign(self) -> int:
        """+1 when travelling toward larger coordinates, -1 otherwise."""
        return _SIGN[self]

    @property
    def code(self) -> str:
        """Single-letter code used by Hyprland's movefocus dispatcher."""
        return self.value[0]

    @classmethod
    def parse(cls, text: str) -> Optional[Direction]:
        """Case-insensitive lookup by name; None for anything else."""
        try:
            return cls(text.strip().lower())
        except (ValueError, AttributeError):
            return None

    @classmethod
    def from_code(cls, code: str) -> Optional[Direction]:
        """Map a movefocus letter (l, r, u, d) back to a Direction."""
        for direction in cls:
            if direction.code == code:
                return direction
        return None


_AXIS: dict[Direction, str] = {
    Direction.LEFT: "x",
    Direction.RIGHT: "x",
    Direction.UP: "y",
    Direction.DOWN: "y",
}

_SIGN: dict[Direction, int] = {
    Direction.LEFT: -1,
    Direction.RIGHT: 1,
    Direction.UP: -1,
    Direction.DOWN: 1,
}


Score = tuple[float, float]


def _compare(a: float, b: float) -> int:
    """Three-way float comparison; any NaN compares as equal."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def _score_less(a: Score, b: Score) -> bool:
    """Lexicographic (primary, secondary) ordering, NaN-tolerant."""
    primary = _compare(a[0], b[0])
    if primary != 0:
        return primary < 0
    return _compare(a[1], b[1]) < 0


def _score_candidate(
    focused: Window,
    candidate: Window,
    direction: Direction,
) -> Optional[Score]:
    """
    Apply the half-plane and orthogonal-overlap filters to one candidate.

    Returns:
        The (primary, secondary) score, or None if the candidate is not
        eligible in that direction.
    """
    f = focused.rect
    c = candidate.rect

    if direction.axis == "x":
        delta = c.center_x - f.center_x
        lateral = c.center_y - f.center_y
        overlap = f.overlap_y(c)
    else:
        delta = c.center_y - f.center_y
        lateral = c.center_x - f.center_x
        overlap = f.overlap_x(c)

    # Semiplano estricto: centros alineados (o NaN) nunca califican
    if not direction.sign * delta > 0:
        return None

    if not overlap > 0:
        return None

    return (abs(delta), abs(lateral))


def find_nearest_window(
    focused: Window,
    candidates: Sequence[Window],
    direction: Union[Direction, str],
) -> Optional[Window]:
    """
    Find the nearest window in a given direction from the focused window.

    Args:
        focused:    The currently focused window.
        candidates: Every window of the snapshot, in hyprctl order. The
                    focused window may be included; it is skipped.
        direction:  The direction to search. A string that does not name
                    a direction yields None.

    Returns:
        The nearest Window in that direction, or None if no candidate
        survives the filters.
    """
    if not isinstance(direction, Direction):
        parsed = Direction.parse(direction) if isinstance(direction, str) else None
        if parsed is None:
            log.debug("find_nearest_window: invalid direction %r", direction)
            return None
        direction = parsed

    best: Optional[Window] = None
    best_score: Score = (math.inf, math.inf)

    for candidate in candidates:
        if candidate.address == focused.address:
            continue
        if candidate.workspace.id != focused.workspace.id:
            continue

        score = _score_candidate(focused, candidate, direction)
        if score is None:
            continue

        # Solo un puntaje estrictamente menor reemplaza: empate -> el primero
        if _score_less(score, best_score):
            best = candidate
            best_score = score

    return best


def focus_direction(
    hyprctl: Hyprctl,
    direction: Direction,
) -> Optional[Window]:
    """
    Focus the nearest window in the given direction.

    Takes one snapshot (active window, then all clients), selects the
    target and dispatches a single focus command.

    Args:
        hyprctl:   The Hyprland control interface.
        direction: Direction to move focus.

    Returns:
        The window that was focused, or None if no target found.
    """
    focused = hyprctl.get_active_window()
    if focused is None:
        log.debug("focus_%s: no active window", direction.value)
        return None

    windows = hyprctl.get_clients()
    target = find_nearest_window(focused, windows, direction)
    if target is None:
        log.debug("focus_%s: no window found in that direction", direction.value)
        return None

    hyprctl.focus_window(target.address)
    log.info("focus_%s: %s -> %s", direction.value, focused, target)
    return target
