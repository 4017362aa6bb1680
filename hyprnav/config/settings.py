"""
hyprnav.config.settings - Configuracion explicita de hyprnav.

Toda la configuracion que depende del entorno del proceso se resuelve
una sola vez en el punto de entrada (Settings.from_env) y se pasa como
parametro a cada componente. Ningun otro modulo lee os.environ.

Variables de entorno:
    HYPRNAV_CONFIG     Ruta a hyprland.conf
                       (por defecto $HOME/.config/hypr/hyprland.conf)
    HYPRNAV_HYPRCTL    Ejecutable hyprctl (por defecto "hyprctl")
    HYPRNAV_PROGRAM    Comando escrito en los binds exec (por defecto "hyprnav")
    HYPRNAV_LOG_LEVEL  Nivel de logging (por defecto WARNING)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from hyprnav.core.hyprctl import HYPRCTL


PROGRAM = "hyprnav"
DEFAULT_LOG_LEVEL = "WARNING"

# Relativo a $HOME
HYPRLAND_CONFIG = Path(".config") / "hypr" / "hyprland.conf"


def default_config_path(home: Optional[str]) -> Path:
    """$HOME/.config/hypr/hyprland.conf, relative to "." without HOME."""
    return Path(home or ".") / HYPRLAND_CONFIG


def parse_log_level(name: Optional[str]) -> int:
    """Map a level name (any case) to a logging level; WARNING if unknown."""
    if name:
        level = logging.getLevelName(name.strip().upper())
        if isinstance(level, int):
            return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Resolved configuration for one invocation.

    Atributos:
        hyprland_config: Ruta del hyprland.conf a escanear.
        hyprctl:         Ejecutable de control de Hyprland.
        program:         Comando que invocan los binds generados.
        log_level:       Nivel numerico de logging.
    """

    hyprland_config: Path
    hyprctl: str = HYPRCTL
    program: str = PROGRAM
    log_level: int = logging.WARNING

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """Build Settings from environment variables (os.environ by default)."""
        env = os.environ if environ is None else environ

        config = env.get("HYPRNAV_CONFIG")
        path = Path(config).expanduser() if config else default_config_path(env.get("HOME"))

        return cls(
            hyprland_config=path,
            hyprctl=env.get("HYPRNAV_HYPRCTL") or HYPRCTL,
            program=env.get("HYPRNAV_PROGRAM") or PROGRAM,
            log_level=parse_log_level(env.get("HYPRNAV_LOG_LEVEL")),
        )
