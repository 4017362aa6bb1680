"""
hyprnav.navigation.workspace - Workspace de Hyprland.

Un workspace es solo una clave de agrupacion: dos ventanas en
workspaces distintos nunca son candidatas entre si.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Workspace:
    """
    Workspace identified by Hyprland's integer id.

    Special workspaces (scratchpads) use negative ids; they are grouped
    like any other workspace.
    """

    id: int
    name: str = ""

    @classmethod
    def from_hyprctl(cls, data: Any) -> Workspace:
        """
        Build a Workspace from the ``workspace`` object of a hyprctl record.

        Raises:
            ValueError: If the object has no integer ``id``.
        """
        if not isinstance(data, dict):
            raise ValueError(f"workspace is not an object: {data!r}")

        ws_id = data.get("id")
        # bool es subclase de int, pero no es un id valido
        if not isinstance(ws_id, int) or isinstance(ws_id, bool):
            raise ValueError(f"invalid workspace id: {ws_id!r}")

        return cls(id=ws_id, name=str(data.get("name", "")))

    def __str__(self) -> str:
        return f"Workspace({self.id})"
