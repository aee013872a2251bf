import sys
import yaml
import argparse
import logging
from pathlib import Path

# Local imports
from .menu import MenuItem, MenuGroup, MenuStructureError
from .manager import MenuManager

logger = logging.getLogger(__name__)

TITLE_BANNER = "=== Sistema de Menus CMS (Composite Pattern) ==="
DEFAULT_LOOKUP = "/roupas/camisetas"


def build_demo_menu():
    """Build the fixed CMS menu used by the demonstration."""
    manager = MenuManager()

    manager.add(MenuItem("Home", "/", "🏠"))

    products = MenuGroup("Produtos", "📦")
    products.add(MenuItem("Todos", "/produtos"))
    products.add(MenuItem("Categorias", "/categorias"))
    products.add(MenuItem("Ofertas", "/ofertas"))

    clothing = MenuGroup("Roupas", "👕")
    clothing.add(MenuItem("Camisetas", "/roupas/camisetas"))
    clothing.add(MenuItem("Calças", "/roupas/calcas"))
    products.add(clothing)

    manager.add(products)

    admin = MenuGroup("Administração", "⚙️")
    admin.add(MenuItem("Usuários", "/admin/usuarios"))
    admin.add(MenuItem("Configurações", "/admin/config"))
    manager.add(admin)

    return manager


def load_config(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}
    except UnicodeDecodeError as e:
        raise MenuStructureError(f"{path}: not valid UTF-8 ({e.reason})") from e
    if not isinstance(config, dict) or not isinstance(config.get('menu'), list):
        raise MenuStructureError(f"{path}: expected a top-level 'menu' list")
    return config


def parse_menu(raw_items):
    """Turn the raw `menu` list of a config file into menu components.

    Entries with an `items` key become groups, the rest become items.
    """
    nodes = []
    for raw in raw_items:
        if not isinstance(raw, dict) or 'title' not in raw:
            raise MenuStructureError(f"Invalid menu entry: {raw!r}")
        icon = raw.get('icon') or ""
        is_active = raw.get('active', True)
        if not isinstance(is_active, bool):
            raise MenuStructureError(
                f"'active' of '{raw['title']}' must be true or false, got {is_active!r}"
            )
        if 'items' in raw:
            children = raw['items'] if raw['items'] is not None else []
            if not isinstance(children, list):
                raise MenuStructureError(
                    f"'items' of '{raw['title']}' must be a list, got {children!r}"
                )
            nodes.append(MenuGroup(
                raw['title'],
                icon=icon,
                is_active=is_active,
                children=parse_menu(children),
            ))
        else:
            nodes.append(MenuItem(
                raw['title'],
                raw.get('url') or "",
                icon=icon,
                is_active=is_active,
            ))
    return nodes


def load_menu(path):
    config = load_config(path)
    manager = MenuManager(parse_menu(config['menu']))
    logger.info(f"Loaded {manager.get_total_items()} menu items from {path}")
    return manager


def run_demo(manager, find_url=DEFAULT_LOOKUP, disable_title=None, out=None):
    out = out if out is not None else sys.stdout

    if disable_title:
        target = manager.find_by_title(disable_title)
        if target is None:
            logger.warning(f"Nothing titled '{disable_title}' to disable")
        else:
            target.disable_all_items()

    print(f"{TITLE_BANNER}\n", file=out)
    manager.render_menu(out)

    print(f"\nTotal de itens no menu: {manager.get_total_items()}", file=out)

    item = manager.find_by_url(find_url)
    if item is not None:
        print(f"\n✓ Item encontrado: {item.title}", file=out)
    else:
        logger.debug(f"No menu entry links to {find_url}")
    return item


def main(argv=None):
    parser = argparse.ArgumentParser(description="CMS hierarchical menu demo")
    parser.add_argument("--config", help="Path to a YAML menu file (defaults to the built-in demo menu)")
    parser.add_argument("--find", default=DEFAULT_LOOKUP, help="Link target to look up")
    parser.add_argument("--disable", metavar="TITLE", help="Disable the subtree of the first node with this title")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    if args.config:
        try:
            manager = load_menu(Path(args.config))
        except (OSError, yaml.YAMLError, MenuStructureError) as e:
            logger.error(f"Failed to load config: {e}")
            sys.exit(1)
    else:
        manager = build_demo_menu()

    run_demo(manager, find_url=args.find, disable_title=args.disable)
    return 0


if __name__ == "__main__":
    main()
