"""CMS Menu - hierarchical navigation menus built from items and groups."""

from .menu import MenuComponent, MenuItem, MenuGroup, MenuStructureError
from .manager import MenuManager
from .main import build_demo_menu, main

__all__ = [
    'MenuComponent', 'MenuItem', 'MenuGroup', 'MenuStructureError',
    'MenuManager', 'build_demo_menu', 'main',
]
