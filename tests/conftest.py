"""
Pytest configuration and fixtures for hyprnav tests.

FakeHyprctl replaces the hyprctl process with canned replies and records
every call, so the snapshot -> selector -> dispatch flow can be tested
without a running Hyprland.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from hyprnav.core.hyprctl import Hyprctl
from hyprnav.core.window import Window
from hyprnav.navigation.rect import Rect
from hyprnav.navigation.workspace import Workspace


def client(
    address: str,
    x: float,
    y: float,
    w: float,
    h: float,
    ws: int = 1,
    **extra: Any,
) -> dict[str, Any]:
    """A hyprctl client record as printed by ``hyprctl clients -j``."""
    record: dict[str, Any] = {
        "address": address,
        "mapped": True,
        "hidden": False,
        "at": [x, y],
        "size": [w, h],
        "workspace": {"id": ws, "name": str(ws)},
        "floating": False,
        "monitor": 0,
        "class": "kitty",
        "title": f"window {address}",
    }
    record.update(extra)
    return record


def make_window(
    address: str,
    x: float,
    y: float,
    w: float,
    h: float,
    ws: int = 1,
) -> Window:
    return Window(address=address, rect=Rect(x, y, w, h), workspace=Workspace(ws))


class FakeHyprctl(Hyprctl):
    """Hyprctl whose transport answers from a reply table."""

    def __init__(self) -> None:
        super().__init__("hyprctl")
        self.replies: dict[tuple[str, ...], str] = {}
        self.calls: list[tuple[str, ...]] = []

    def run(self, *args: str) -> str:
        self.calls.append(args)
        return self.replies.get(args, "")

    def set_clients(self, records: list[dict[str, Any]]) -> None:
        self.replies[("clients", "-j")] = json.dumps(records)

    def set_active(self, record: dict[str, Any]) -> None:
        self.replies[("activewindow", "-j")] = json.dumps(record)

    @property
    def dispatched(self) -> list[tuple[str, ...]]:
        return [c[1:] for c in self.calls if c[0] == "dispatch"]

    @property
    def keywords(self) -> list[tuple[str, str]]:
        return [(c[1], c[2]) for c in self.calls if c[0] == "keyword"]


@pytest.fixture
def hyprctl() -> FakeHyprctl:
    return FakeHyprctl()


@pytest.fixture
def active() -> Window:
    """Active window at (0, 0, 100, 100) on workspace 1."""
    return make_window("0xactive", 0, 0, 100, 100)


@pytest.fixture
def hyprland_conf(tmp_path: Path) -> Path:
    """A hyprland.conf with vim-style movefocus binds and unrelated lines."""
    path = tmp_path / "hyprland.conf"
    path.write_text(
        "\n".join(
            [
                "$mainMod = SUPER",
                "bind = $mainMod, Q, exec, kitty",
                "# bind = $mainMod, left, movefocus, l",
                "bind = $mainMod, H, movefocus, l",
                "bind = $mainMod, L, movefocus, r  # right",
                "  bind=$mainMod,K,movefocus,u",
                "bind = $mainMod, J, movefocus, d",
                "bind = $mainMod SHIFT, H, movewindow, l",
                "",
            ]
        ),
        encoding="utf-8",
    )
    return path
