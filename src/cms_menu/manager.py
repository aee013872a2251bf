"""Top-level menu collection."""
import sys
import logging

from .menu import MenuComponent, check_detached

logger = logging.getLogger(__name__)

MENU_HEADER = "=== Menu Principal ==="


class MenuManager:
    """Holds the top-level nodes of the menu and forwards every operation to them."""

    def __init__(self, components=None):
        self._root = []
        components = list(components or [])
        check_detached(components)
        for component in components:
            self.add(component)

    @property
    def components(self):
        return tuple(self._root)

    def add(self, component):
        if not isinstance(component, MenuComponent):
            raise TypeError(f"Not a menu component: {component!r}")
        component._attach_to(self)
        self._root.append(component)
        logger.debug(f"Added top-level {component!r}")
        return component

    def lines(self):
        yield MENU_HEADER
        yield ""
        for component in self._root:
            yield from component.lines(0)

    def render_menu(self, out=None):
        out = out if out is not None else sys.stdout
        for line in self.lines():
            print(line, file=out)

    def get_total_items(self):
        return sum(component.count_items() for component in self._root)

    def find_by_url(self, url):
        """Return the first node whose url equals `url`, or None."""
        for component in self._root:
            found = component.find_by_url(url)
            if found is not None:
                return found
        return None

    def iter_nodes(self):
        for component in self._root:
            yield from component.iter_nodes()

    def find_by_title(self, title):
        """Return the first node (pre-order) titled `title`, or None."""
        return next((node for node in self.iter_nodes() if node.title == title), None)
