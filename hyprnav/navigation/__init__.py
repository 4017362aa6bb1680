"""
hyprnav.navigation - Geometria y seleccion direccional.

Este paquete contiene:
    - rect        : Estructura Rect para geometria de ventanas
    - workspace   : Workspace - clave de agrupacion de ventanas
    - directional : Direction y el selector de la ventana mas cercana

directional no se re-exporta aqui: depende de hyprnav.core.window, que a
su vez importa rect y workspace desde este paquete.
"""

from hyprnav.navigation.rect import Rect, overlap_1d
from hyprnav.navigation.workspace import Workspace

__all__ = [
    "Rect",
    "overlap_1d",
    "Workspace",
]
