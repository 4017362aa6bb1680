"""
hyprnav.core.window - The Window data structure.

Each Window instance is an immutable snapshot of one Hyprland client as
reported by ``hyprctl``. Unlike a live handle, nothing here talks to the
compositor: a fresh list is fetched per invocation and discarded after.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hyprnav.navigation.rect import Rect
from hyprnav.navigation.workspace import Workspace


def _pair(data: dict[str, Any], key: str) -> tuple[float, float]:
    """Read a two-number array such as ``at`` or ``size``."""
    value = data[key]
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{key!r} is not a pair: {value!r}")
    first, second = value
    return float(first), float(second)


# ============================================================================
# Window
# ============================================================================
@dataclass(frozen=True, slots=True, eq=False)
class Window:
    """
    Represents a single Hyprland client at one point in time.

    Equality and hashing are based solely on the address, so two windows
    stacked on the exact same geometry are still distinct, and a Window
    can be safely used in sets and as dict keys.
    """

    address: str
    rect: Rect
    workspace: Workspace
    title: str = ""
    class_name: str = ""

    @classmethod
    def from_hyprctl(cls, data: Any) -> Window:
        """
        Build a Window from one record of ``hyprctl clients -j`` or
        ``hyprctl activewindow -j``.

        Raises:
            ValueError: If the record lacks an address, a geometry or a
                        workspace, or if any of them is malformed.
        """
        if not isinstance(data, dict):
            raise ValueError(f"client record is not an object: {data!r}")

        try:
            address = data["address"]
            x, y = _pair(data, "at")
            w, h = _pair(data, "size")
            workspace = Workspace.from_hyprctl(data["workspace"])
        except (KeyError, TypeError) as e:
            raise ValueError(f"malformed client record: {e}") from e

        if not isinstance(address, str) or not address:
            raise ValueError(f"invalid client address: {address!r}")

        return cls(
            address=address,
            rect=Rect(x, y, w, h),
            workspace=workspace,
            title=str(data.get("title", "")),
            class_name=str(data.get("class", "")),
        )

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Window):
            return NotImplemented
        return self.address == other.address

    def __hash__(self) -> int:
        return hash(self.address)

    # ------------------------------------------------------------------
    # Representacion
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return (
            f"Window(address={self.address}, class={self.class_name!r}, "
            f"ws={self.workspace.id}, {self.rect})"
        )

    def __str__(self) -> str:
        label = self.class_name or self.title or "?"
        return f"<{label} {self.address} ws={self.workspace.id}>"
