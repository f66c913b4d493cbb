"""Layout geometry, navigation, socket messages and rule script generation for a tiling window manager."""

__version__ = "0.1.0"
__all__ = [
    "ahk",
    "arrangement",
    "config_generation",
    "custom_layout",
    "cycle_direction",
    "default_layout",
    "layout",
    "operation_direction",
    "rect",
    "types",
]