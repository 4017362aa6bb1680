"""
hyprnav - Entry point.

Run with:  hyprnav <command>   or   python -m hyprnav <command>
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from hyprnav.config.settings import Settings
from hyprnav.core.commands import CommandDispatcher, build_default_commands, usage
from hyprnav.core.hyprctl import Hyprctl
from hyprnav.core.keybinds import KeybindManager

log = logging.getLogger(__name__)


# Aliases aceptados ademas de los nombres de comando
_ALIASES: dict[str, str] = {
    "-h": "help",
    "--help": "help",
}


class SafeStreamHandler(logging.StreamHandler):
    """Handler that replaces unencodable characters instead of crashing."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            enc = getattr(self.stream, "encoding", "utf-8") or "utf-8"
            safe = msg.encode(enc, errors="replace").decode(enc, errors="replace")
            self.stream.write(safe + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Configure logging for hyprnav.

    Log lines go to stderr so they never mix with the messages that
    enable/disable/help print on stdout. A handler installed by an
    earlier call is replaced.
    """
    fmt = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    handler = SafeStreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(level)
    for old in [h for h in root.handlers if isinstance(h, SafeStreamHandler)]:
        root.removeHandler(old)
    root.addHandler(handler)


def resolve_mode(args: Sequence[str], dispatcher: CommandDispatcher) -> Optional[str]:
    """
    Pick the command named by the argument list.

    Returns None unless there is exactly one argument naming a registered
    command (case-insensitive, help aliases included).
    """
    if len(args) != 1:
        return None
    mode = args[0].strip().lower()
    mode = _ALIASES.get(mode, mode)
    if not dispatcher.has(mode):
        return None
    return mode


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    settings = Settings.from_env()
    setup_logging(settings.log_level)

    hyprctl = Hyprctl(settings.hyprctl)
    keybinds = KeybindManager(hyprctl, settings.hyprland_config, program=settings.program)

    dispatcher = CommandDispatcher()
    build_default_commands(dispatcher, hyprctl, keybinds)

    mode = resolve_mode(args, dispatcher)
    if mode is None:
        log.debug("Invalid arguments %r, showing usage", args)
        print(usage(dispatcher))
        return 0

    dispatcher.execute(mode)
    return 0


if __name__ == "__main__":
    sys.exit(main())
