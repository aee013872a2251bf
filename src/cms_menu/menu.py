"""Menu structure and node representation."""
import sys
import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

ACTIVE_MARK = "✓"
INACTIVE_MARK = "✗"
INDENT = "  "


class MenuStructureError(ValueError):
    """Raised when a node would end up with two owners or inside itself."""


def check_detached(components):
    """Validate a batch of nodes before any of them is attached.

    Raises:
        TypeError: if an entry is not a MenuComponent.
        MenuStructureError: if an entry already has an owner or appears twice.
    """
    seen = set()
    for component in components:
        if not isinstance(component, MenuComponent):
            raise TypeError(f"Not a menu component: {component!r}")
        if component.is_attached or id(component) in seen:
            raise MenuStructureError(f"'{component.title}' is already attached to a menu")
        seen.add(id(component))


class MenuComponent(ABC):
    """A node of the menu tree: either a MenuItem or a MenuGroup."""

    def __init__(self, title, icon="", is_active=True):
        self.title = title
        self.icon = icon
        self.is_active = is_active
        self._owner = None

    @property
    @abstractmethod
    def url(self):
        pass

    @property
    def is_attached(self):
        return self._owner is not None

    @property
    def status_mark(self):
        return ACTIVE_MARK if self.is_active else INACTIVE_MARK

    def _attach_to(self, owner):
        if self._owner is not None:
            raise MenuStructureError(f"'{self.title}' is already attached to a menu")
        self._owner = owner

    @abstractmethod
    def lines(self, indent=0):
        """Yield the rendered lines of this node and its subtree."""

    def render(self, indent=0, out=None):
        """Write the node (and its subtree) to `out`, stdout by default."""
        out = out if out is not None else sys.stdout
        for line in self.lines(indent):
            print(line, file=out)

    def iter_nodes(self):
        """Pre-order walk over this node and every descendant."""
        yield self

    @abstractmethod
    def count_items(self):
        pass

    @abstractmethod
    def disable_all_items(self):
        pass

    @abstractmethod
    def find_by_url(self, url):
        pass

    def __repr__(self):
        return f"{type(self).__name__}({self.title!r}, url={self.url!r})"


class MenuItem(MenuComponent):
    """A navigable destination. Always counts as exactly one item."""

    def __init__(self, title, url, icon="", is_active=True):
        super().__init__(title, icon=icon, is_active=is_active)
        self._url = url

    @property
    def url(self):
        return self._url

    def lines(self, indent=0):
        yield f"{INDENT * indent}[{self.status_mark}] {self.icon} {self.title} → {self.url}"

    def count_items(self):
        return 1

    def disable_all_items(self):
        self.is_active = False

    def find_by_url(self, url):
        return self if self.url == url else None


class MenuGroup(MenuComponent):
    """A non-navigable container of items and nested groups."""

    def __init__(self, title, icon="", is_active=True, children=None):
        super().__init__(title, icon=icon, is_active=is_active)
        self._children = []
        children = list(children or [])
        check_detached(children)
        for child in children:
            self.add(child)

    @property
    def url(self):
        return ""

    @property
    def children(self):
        return tuple(self._children)

    def add(self, component):
        """Append `component` as the last child and return it.

        Raises:
            TypeError: if `component` is not a MenuComponent.
            MenuStructureError: if `component` already has an owner or is
                this group or one of its ancestors.
        """
        if not isinstance(component, MenuComponent):
            raise TypeError(f"Not a menu component: {component!r}")
        node = self
        while isinstance(node, MenuGroup):
            if node is component:
                raise MenuStructureError(
                    f"Cannot add '{component.title}' inside its own subtree"
                )
            node = node._owner
        component._attach_to(self)
        self._children.append(component)
        logger.debug(f"Attached {component!r} to group '{self.title}'")
        return component

    def lines(self, indent=0):
        yield f"{INDENT * indent}[{self.status_mark}] {self.icon} {self.title} ▼"
        for child in self._children:
            yield from child.lines(indent + 1)

    def count_items(self):
        return sum(child.count_items() for child in self._children)

    def disable_all_items(self):
        self.is_active = False
        for child in self._children:
            child.disable_all_items()
        logger.debug(f"Disabled group '{self.title}' and its {len(self._children)} children")

    def find_by_url(self, url):
        for child in self._children:
            found = child.find_by_url(url)
            if found is not None:
                return found
        return None

    def iter_nodes(self):
        yield self
        for child in self._children:
            yield from child.iter_nodes()
