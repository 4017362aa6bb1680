"""
hyprnav.core.keybinds - Reescritura de keybindings de Hyprland.

Traduce los binds de movefocus del usuario a binds que invocan hyprnav
(enable) y los restaura (disable), usando ``hyprctl keyword``. Los cambios
son solo en vivo: hyprland.conf nunca se modifica.

El KeybindManager:
    1. Lee los binds movefocus de la ruta de configuracion recibida.
    2. Construye un plan (lista ordenada de KeywordCommand).
    3. Lo aplica via hyprctl, siempre unbind antes de bind.

Uso tipico:
    keybinds = KeybindManager(hyprctl, Path("~/.config/hypr/hyprland.conf"))
    keybinds.enable()
    keybinds.disable()
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from hyprnav.config.defaults import (
    ARROW_KEYS,
    DEFAULT_MAIN_MOD,
    DEFAULT_MOVEFOCUS_KEYS,
    arrow_combo,
)
from hyprnav.config.settings import PROGRAM
from hyprnav.core.bind_parser import MoveFocusBind, read_movefocus_binds
from hyprnav.core.hyprctl import Hyprctl

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KeywordCommand:
    """One ``hyprctl keyword <keyword> <value>`` call."""

    keyword: str
    value: str

    def __str__(self) -> str:
        return f"{self.keyword} {self.value}"


def _unbind_arrows() -> list[KeywordCommand]:
    return [KeywordCommand("unbind", arrow_combo(d)) for d in ARROW_KEYS]


def plan_enable(
    binds: Sequence[MoveFocusBind],
    program: str = PROGRAM,
) -> list[KeywordCommand]:
    """
    Commands that point the user's movefocus keys at hyprnav.

    The SUPER+arrow combos are always released first. Each parsed bind
    is then unbound and rebound to ``exec <program> <direction>``; with
    no parsed binds, SUPER+arrows are bound to hyprnav instead.

    Args:
        binds:   Movefocus binds found in hyprland.conf, in file order.
        program: Command the new binds execute.

    Returns:
        Ordered list of keyword commands.
    """
    commands = _unbind_arrows()

    if not binds:
        for direction in ARROW_KEYS:
            commands.append(
                KeywordCommand(
                    "bind",
                    f"{arrow_combo(direction)}, exec, {program} {direction.value}",
                )
            )
        return commands

    for bind in binds:
        commands.append(KeywordCommand("unbind", bind.combo))
        commands.append(
            KeywordCommand("bind", f"{bind.combo}, exec, {program} {bind.direction.value}")
        )

    return commands


def plan_disable(binds: Sequence[MoveFocusBind]) -> list[KeywordCommand]:
    """
    Commands that restore Hyprland's own movefocus bindings.

    The SUPER+arrow combos are released, then every parsed combo is
    unbound (dropping the hyprnav exec bind) and rebound verbatim; with
    no parsed binds, the default ``$mainMod + arrow -> movefocus`` set
    is bound.
    """
    commands = _unbind_arrows()

    if not binds:
        for direction in DEFAULT_MOVEFOCUS_KEYS:
            commands.append(
                KeywordCommand(
                    "bind",
                    f"{arrow_combo(direction, DEFAULT_MAIN_MOD)}, movefocus, {direction.code}",
                )
            )
        return commands

    for bind in binds:
        commands.append(KeywordCommand("unbind", bind.combo))
        commands.append(KeywordCommand("bind", bind.to_keyword()))

    return commands


class KeybindManager:
    """
    Applies or reverts hyprnav keybindings on a running Hyprland.

    The config path is explicit so that the manager never depends on
    the process environment.
    """

    def __init__(
        self,
        hyprctl: Hyprctl,
        config_path: Path,
        program: str = PROGRAM,
    ) -> None:
        self._hyprctl = hyprctl
        self._config_path = Path(config_path)
        self._program = program

    @property
    def config_path(self) -> Path:
        return self._config_path

    def read_binds(self) -> list[MoveFocusBind]:
        """Movefocus binds currently declared in the config file."""
        binds = read_movefocus_binds(self._config_path)
        log.debug("Found %d movefocus binds in %s", len(binds), self._config_path)
        return binds

    def apply(self, commands: Sequence[KeywordCommand]) -> int:
        """Issue every command in order. Returns the number issued."""
        for cmd in commands:
            self._hyprctl.keyword(cmd.keyword, cmd.value)
        log.info("Applied %d keyword commands", len(commands))
        return len(commands)

    def enable(self) -> int:
        """Bind the user's movefocus keys (or SUPER+arrows) to hyprnav."""
        print("Applying hyprnav directional bindings...")

        binds = self.read_binds()
        count = self.apply(plan_enable(binds, self._program))

        if binds:
            print(f"hyprnav bindings applied using keys from {self._config_path}.")
        else:
            print(
                "No original movefocus bindings found. "
                "Applied default SUPER+arrow hyprnav bindings."
            )
        return count

    def disable(self) -> int:
        """Restore the movefocus bindings declared in the config file."""
        print("Restoring original Hyprland focus bindings...")

        binds = self.read_binds()
        count = self.apply(plan_disable(binds))

        if binds:
            print(f"Bindings restored from {self._config_path}.")
        else:
            print(
                "No original movefocus bindings found. "
                "Applied default movefocus bindings."
            )

        print("Bindings restored.")
        return count
