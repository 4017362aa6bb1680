"""
hyprnav.core - Snapshot de ventanas y comandos hacia Hyprland.

This package contains:
    - window      : The Window snapshot record
    - hyprctl     : Hyprctl - queries and commands via the hyprctl binary
    - bind_parser : Parser for hyprland.conf movefocus bind statements
    - keybinds    : KeybindManager - enable/disable hyprnav bindings
    - commands    : CommandDispatcher - CLI mode registry
"""

from hyprnav.core.window import Window
from hyprnav.core.hyprctl import Hyprctl

__all__ = ["Window", "Hyprctl"]
