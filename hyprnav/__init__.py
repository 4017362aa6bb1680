"""
hyprnav - Foco direccional por teclado para Hyprland.

Este paquete contiene:
    - navigation : Geometria (Rect, Workspace) y el selector direccional
    - core       : Window, interfaz hyprctl, parser de binds, keybindings
                   y dispatcher de comandos
    - config     : Settings explicitos y conjuntos de teclas por defecto
"""

__version__ = "0.1.0"
