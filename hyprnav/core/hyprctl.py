"""
hyprnav.core.hyprctl - Hyprland control interface via hyprctl.

Centralizes every call to the ``hyprctl`` binary so that no other module
needs to import subprocess directly. Queries never raise: an unreachable
compositor or a malformed reply degrades to empty data, which callers
treat as "nothing to do".
"""

from __future__ import annotations

import json
import logging
import subprocess
from typing import Any, Optional

from hyprnav.core.window import Window

log = logging.getLogger(__name__)


HYPRCTL = "hyprctl"


class Hyprctl:
    """
    Thin wrapper over the hyprctl command line.

    Two read queries form the window snapshot (``clients`` and
    ``activewindow``); two write commands cover focus dispatch and
    keybinding changes. Each call is attempted once, without retries.
    """

    def __init__(self, binary: str = HYPRCTL) -> None:
        self._binary = binary

    # ------------------------------------------------------------------
    # Transporte
    # ------------------------------------------------------------------
    def run(self, *args: str) -> str:
        """
        Run ``hyprctl <args>`` and return its stripped stdout.

        A missing binary or a failed launch is logged and yields "".
        The exit status is ignored: hyprctl reports most errors on stdout.
        """
        cmd = [self._binary, *args]
        try:
            result = subprocess.run(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except FileNotFoundError:
            log.error("hyprctl: executable not found: %r", self._binary)
            return ""
        except (OSError, subprocess.SubprocessError) as e:
            log.error("hyprctl: failed to run %r: %s", cmd, e)
            return ""

        output = result.stdout.decode("utf-8", errors="replace").strip()
        log.debug("hyprctl %s -> %d bytes", " ".join(args), len(output))
        return output

    def _query_json(self, *args: str) -> Any:
        """Run a ``-j`` query and decode it; None when empty or invalid."""
        output = self.run(*args, "-j")
        if not output:
            return None
        try:
            return json.loads(output)
        except ValueError:
            log.debug("hyprctl %s: not a JSON reply: %r", " ".join(args), output[:80])
            return None

    # ------------------------------------------------------------------
    # Snapshot (lectura)
    # ------------------------------------------------------------------
    def get_clients(self) -> list[Window]:
        """
        List every client window, in hyprctl order.

        Malformed records are skipped; a malformed reply yields [].
        """
        data = self._query_json("clients")
        if not isinstance(data, list):
            if data is not None:
                log.warning("hyprctl clients: expected a list, got %s", type(data).__name__)
            return []

        windows: list[Window] = []
        for record in data:
            try:
                windows.append(Window.from_hyprctl(record))
            except ValueError as e:
                log.debug("hyprctl clients: skipping record: %s", e)
        return windows

    def get_active_window(self) -> Optional[Window]:
        """
        The window Hyprland currently reports as focused.

        Returns None when nothing is focused (hyprctl then prints ``{}``
        or ``Invalid``) or when the reply cannot be parsed.
        """
        data = self._query_json("activewindow")
        if not isinstance(data, dict) or not data:
            return None
        try:
            return Window.from_hyprctl(data)
        except ValueError as e:
            log.warning("hyprctl activewindow: %s", e)
            return None

    # ------------------------------------------------------------------
    # Comandos (escritura)
    # ------------------------------------------------------------------
    def focus_window(self, address: str) -> None:
        """Dispatch ``focuswindow address:<address>``. Fire-and-forget."""
        self.run("dispatch", "focuswindow", f"address:{address}")

    def keyword(self, name: str, value: str) -> None:
        """Issue ``keyword <name> <value>`` (e.g. ``bind`` / ``unbind``)."""
        log.debug("hyprctl keyword %s %r", name, value)
        self.run("keyword", name, value)
