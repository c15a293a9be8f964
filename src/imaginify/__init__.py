from imaginify.design_system.colors import ThemeMode
from imaginify.design_system.elements import Element
from imaginify.design_system.themes import ThemeContext, resolve_color

__all__ = [
    "Element",
    "ThemeContext",
    "ThemeMode",
    "resolve_color",
]

__version__ = "0.1.0"
