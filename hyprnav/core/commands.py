"""
hyprnav.core.commands - Dispatcher de modos de la linea de comandos.

Mapea nombres de modo en string ("enable", "left", ...) a las acciones
de hyprnav, de modo que el punto de entrada y el texto de ayuda usen
una sola tabla:

    dispatcher = CommandDispatcher()
    build_default_commands(dispatcher, hyprctl, keybinds)
    dispatcher.execute("right")

Tambien se puede usar como decorador:
    @dispatcher.command("help")
    def show_help():
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from hyprnav.core.hyprctl import Hyprctl
from hyprnav.core.keybinds import KeybindManager
from hyprnav.navigation.directional import Direction, focus_direction

log = logging.getLogger(__name__)


# Type for command functions: called with no arguments
CommandFn = Callable[[], None]


@dataclass(frozen=True, slots=True)
class Command:
    """Metadata for a registered command."""

    name: str
    fn: CommandFn
    description: str
    category: str


class CommandDispatcher:
    """
    Registry that maps command name strings to callable functions.

    Registration order is kept: it is the order shown in the help text.
    """

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    @property
    def count(self) -> int:
        return len(self._commands)

    @property
    def command_names(self) -> list[str]:
        """All registered command names, in registration order."""
        return list(self._commands.keys())

    def register(
        self,
        name: str,
        fn: CommandFn,
        description: str = "",
        category: str = "general",
    ) -> None:
        """
        Register a command by name.

        If a command with the same name already exists, it is replaced.

        Args:
            name:        Unique command name (e.g. "enable").
            fn:          The callable to invoke.
            description: Human-readable description, shown in the help.
            category:    Grouping category (e.g. "focus", "bindings").
        """
        if name in self._commands:
            log.info("Command replaced: %s", name)

        self._commands[name] = Command(
            name=name,
            fn=fn,
            description=description,
            category=category,
        )
        log.debug("Command registered: %s (%s)", name, category)

    def execute(self, name: str) -> bool:
        """
        Execute a command by name.

        Args:
            name: The command name to execute.

        Returns:
            True if the command was found and executed successfully.
        """
        cmd = self._commands.get(name)
        if cmd is None:
            log.warning("Unknown command: %s", name)
            return False

        log.debug("Executing command: %s", name)
        try:
            cmd.fn()
        except Exception:
            log.exception("Error executing command: %s", name)
            return False

        return True

    def has(self, name: str) -> bool:
        """Check if a command is registered."""
        return name in self._commands

    def command(
        self,
        name: str,
        description: str = "",
        category: str = "general",
    ) -> Callable[[CommandFn], CommandFn]:
        """
        Decorator to register a function as a command.

        Usage:
            @dispatcher.command("enable", category="bindings")
            def enable():
                ...
        """

        def decorator(fn: CommandFn) -> CommandFn:
            self.register(name, fn, description=description, category=category)
            return fn

        return decorator

    def list_commands(self) -> list[Command]:
        """List registered commands in registration order."""
        return list(self._commands.values())


def usage(dispatcher: CommandDispatcher) -> str:
    """Render the help text from the registered commands."""
    lines = [
        "hyprnav - directional focus navigation for Hyprland",
        "",
        "Usage:",
        "  hyprnav <command>",
        "",
        "Commands:",
    ]
    for cmd in dispatcher.list_commands():
        lines.append(f"  {cmd.name:<12} {cmd.description}".rstrip())
    return "\n".join(lines)


_FOCUS_DESCRIPTIONS: dict[Direction, str] = {
    Direction.LEFT: "Focus the window to the left",
    Direction.RIGHT: "Focus the window to the right",
    Direction.UP: "Focus the window above",
    Direction.DOWN: "Focus the window below",
}


def build_default_commands(
    dispatcher: CommandDispatcher,
    hyprctl: Hyprctl,
    keybinds: KeybindManager,
) -> None:
    """
    Register all built-in commands into the dispatcher.

    This is the single place that maps mode strings to actions.

    Args:
        dispatcher: The CommandDispatcher to populate.
        hyprctl:    The Hyprland control interface.
        keybinds:   The KeybindManager for enable/disable.
    """

    # -- Binding commands ----------------------------------------------
    @dispatcher.command(
        "enable", description="Apply hyprnav directional bindings", category="bindings"
    )
    def enable() -> None:
        keybinds.enable()

    @dispatcher.command(
        "disable",
        description="Restore Hyprland's default movefocus bindings",
        category="bindings",
    )
    def disable() -> None:
        keybinds.disable()

    # -- Focus directional commands ------------------------------------
    def _make_focus_dir(direction: Direction) -> CommandFn:
        def _focus() -> None:
            focus_direction(hyprctl, direction)
        return _focus

    for _dir in Direction:
        dispatcher.register(
            _dir.value,
            _make_focus_dir(_dir),
            description=_FOCUS_DESCRIPTIONS[_dir],
            category="focus",
        )

    # -- Help ----------------------------------------------------------
    @dispatcher.command("help", description="Show this help message", category="general")
    def show_help() -> None:
        print(usage(dispatcher))

    log.debug("Default commands registered: %d", dispatcher.count)
