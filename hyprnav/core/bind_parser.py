"""
hyprnav.core.bind_parser - Parser de sentencias bind de hyprland.conf.

Reconoce la forma historica de foco direccional de Hyprland:

    bind = $mainMod, left, movefocus, l

y la convierte en un MoveFocusBind (modificador, tecla, direccion).

Caracteristicas:
    - Una sola forma de sentencia, linea por linea.
    - El campo modificador se conserva tal cual ($mainMod, SUPER SHIFT, ...).
    - Texto sobrante al final de la linea (comentarios) se ignora.
    - Orden del archivo preservado.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from hyprnav.navigation.directional import Direction

log = logging.getLogger(__name__)


_MOVEFOCUS_RE = re.compile(
    r"^\s*bind\s*=\s*([^,]+?)\s*,\s*([^,]+?)\s*,\s*movefocus\s*,\s*([lrud])\b"
)


class BindParseError(ValueError):
    """Raised when a line is not a movefocus bind statement."""
    pass


@dataclass(frozen=True, slots=True)
class MoveFocusBind:
    """One ``bind = <modifier>, <key>, movefocus, <code>`` statement."""

    modifier: str
    key: str
    code: str

    def __post_init__(self) -> None:
        if Direction.from_code(self.code) is None:
            raise BindParseError(f"Unknown movefocus direction: {self.code!r}")

    @property
    def direction(self) -> Direction:
        return Direction.from_code(self.code)

    @property
    def combo(self) -> str:
        """The ``<modifier>, <key>`` pair accepted by ``keyword unbind``."""
        return f"{self.modifier}, {self.key}"

    def to_keyword(self) -> str:
        """The bind value that restores this statement via ``keyword bind``."""
        return f"{self.combo}, movefocus, {self.code}"


# ============================================================================
# Public API
# ============================================================================

def parse_movefocus_bind(line: str) -> MoveFocusBind:
    """
    Parse one config line into a MoveFocusBind.

    Args:
        line: A line of hyprland.conf, e.g.
              "bind = $mainMod, H, movefocus, l  # vim left".

    Returns:
        The parsed MoveFocusBind.

    Raises:
        BindParseError: If the line is not a movefocus bind statement.
    """
    match = _MOVEFOCUS_RE.match(line)
    if match is None:
        raise BindParseError(f"Not a movefocus bind: {line!r}")

    modifier, key, code = (group.strip() for group in match.groups())
    return MoveFocusBind(modifier=modifier, key=key, code=code)


def is_movefocus_bind(line: str) -> bool:
    """Check if a line is a movefocus bind without raising."""
    try:
        parse_movefocus_bind(line)
        return True
    except BindParseError:
        return False


def read_movefocus_binds(path: Path) -> list[MoveFocusBind]:
    """
    Scan a Hyprland config file for movefocus binds, in file order.

    A missing or unreadable file yields an empty list, so callers fall
    back to the default key set.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        log.info("Hyprland config not found: %s", path)
        return []
    except (OSError, UnicodeDecodeError) as e:
        log.warning("Failed to read Hyprland config %s: %s", path, e)
        return []

    binds: list[MoveFocusBind] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        try:
            bind = parse_movefocus_bind(line)
        except BindParseError:
            continue
        log.debug("%s:%d: %s", path, lineno, bind.to_keyword())
        binds.append(bind)

    return binds
