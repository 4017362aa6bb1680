"""
hyprnav.navigation.rect - Estructura geometrica Rect.

Define un rectangulo inmutable que representa la geometria de una
ventana en pantalla, tal como la reporta Hyprland (posicion "at" y
tamano "size"). Las coordenadas son reales: Hyprland puede reportar
valores fraccionarios con escalado.
"""

from __future__ import annotations

from dataclasses import dataclass


def overlap_1d(a1: float, a2: float, b1: float, b2: float) -> float:
    """
    Length of the shared span between [a1, a2] and [b1, b2].

    Returns 0.0 when the spans are disjoint, only touch at one point,
    or when any bound is NaN.
    """
    overlap = min(a2, b2) - max(a1, b1)
    # NaN > 0 es False: una geometria corrupta nunca solapa
    if overlap > 0:
        return overlap
    return 0.0


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Rectangulo inmutable definido por posicion (x, y) y dimensiones (w, h).

    El origen (0, 0) es la esquina superior-izquierda del layout global
    de Hyprland; y crece hacia abajo.

    Atributos:
        x: Coordenada horizontal de la esquina superior-izquierda.
        y: Coordenada vertical de la esquina superior-izquierda.
        w: Ancho.
        h: Alto.
    """

    x: float
    y: float
    w: float
    h: float

    # ------------------------------------------------------------------
    # Propiedades derivadas
    # ------------------------------------------------------------------
    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center_x(self) -> float:
        return self.x + self.w / 2

    @property
    def center_y(self) -> float:
        return self.y + self.h / 2

    @property
    def center(self) -> tuple[float, float]:
        return (self.center_x, self.center_y)

    @property
    def area(self) -> float:
        return self.w * self.h

    # ------------------------------------------------------------------
    # Operaciones geometricas
    # ------------------------------------------------------------------
    def overlap_x(self, other: Rect) -> float:
        """Shared width between the horizontal extents of both rects."""
        return overlap_1d(self.left, self.right, other.left, other.right)

    def overlap_y(self, other: Rect) -> float:
        """Shared height between the vertical extents of both rects."""
        return overlap_1d(self.top, self.bottom, other.top, other.bottom)

    # ------------------------------------------------------------------
    # Extents (x1, y1, x2, y2)
    # ------------------------------------------------------------------
    @property
    def extents(self) -> tuple[float, float, float, float]:
        """Retorna (left, top, right, bottom)."""
        return (self.left, self.top, self.right, self.bottom)

    @classmethod
    def from_ltrb(cls, left: float, top: float, right: float, bottom: float) -> Rect:
        """Crea un Rect desde coordenadas (left, top, right, bottom)."""
        return cls(left, top, right - left, bottom - top)

    # ------------------------------------------------------------------
    # Representacion
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"Rect({self.w:g}x{self.h:g}+{self.x:g}+{self.y:g})"
