"""The menu bar: its top-level menus, their entries and File menu dispatch."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import Enum, auto
from types import MappingProxyType
from typing import Any

from baize.menu_catalog import menu_attr, menu_items
from baize.menu_model import ItemType, MenuItem, MenuItemAttr, MenuItemID, MenuType

Handler = Callable[[MenuItem], Any]

# Top-level menus in the order they appear on the bar, with the id of their attributes.
_BAR_LAYOUT: tuple[tuple[MenuType, MenuItemID], ...] = (
    (MenuType.MENU_FILE, MenuItemID.MENU_FILE),
    (MenuType.MENU_EDIT, MenuItemID.MENU_EDIT),
    (MenuType.MENU_VIEW, MenuItemID.MENU_VIEW),
    (MenuType.MENU_CODING, MenuItemID.MENU_CODING),
    (MenuType.MENU_INSERT, MenuItemID.MENU_INSERT),
    (MenuType.MENU_MODEL, MenuItemID.MENU_MODEL),
    (MenuType.MENU_SETTING, MenuItemID.MENU_SETTING),
    (MenuType.MENU_TOOLS, MenuItemID.MENU_TOOLS),
    (MenuType.MENU_PLUGIN, MenuItemID.MENU_PLUGIN),
    (MenuType.MENU_CUSTOM, MenuItemID.MENU_CUSTOM_TOOLS),
    (MenuType.MENU_ONLINE_TOOL, MenuItemID.MENU_ONLINE_TOOL),
    (MenuType.MENU_LINK, MenuItemID.MENU_LINK),
    (MenuType.MENU_HELP, MenuItemID.MENU_HELP),
)


class FileAction(Enum):
    """Operations the File menu can start."""

    NEW_FILE = auto()
    NEW_FOLDER = auto()
    OPEN_FILE = auto()
    OPEN_FOLDER = auto()
    SAVE = auto()
    SAVE_AS = auto()
    RELOAD = auto()
    EXIT = auto()
    IMPORT_WORD = auto()
    IMPORT_HTML = auto()
    IMPORT_JSON = auto()
    IMPORT_YAML = auto()
    IMPORT_XML = auto()
    IMPORT_TXT = auto()
    EXPORT_WORD = auto()
    EXPORT_HTML = auto()
    EXPORT_JSON = auto()
    EXPORT_YAML = auto()
    EXPORT_XML = auto()
    EXPORT_PDF = auto()


_FILE_ACTIONS = MappingProxyType({
    MenuItemID.M_FILE_NEW_FILE: FileAction.NEW_FILE,
    MenuItemID.M_FILE_NEW_FOLDER: FileAction.NEW_FOLDER,
    MenuItemID.M_FILE_OPEN_FILE: FileAction.OPEN_FILE,
    MenuItemID.M_FILE_OPEN_FOLDER: FileAction.OPEN_FOLDER,
    MenuItemID.M_FILE_SAVE: FileAction.SAVE,
    MenuItemID.M_FILE_SAVE_AS: FileAction.SAVE_AS,
    MenuItemID.M_FILE_RELOAD: FileAction.RELOAD,
    MenuItemID.M_FILE_EXIT: FileAction.EXIT,
    MenuItemID.M_FILE_IMPORT_WORD: FileAction.IMPORT_WORD,
    MenuItemID.M_FILE_IMPORT_HTML: FileAction.IMPORT_HTML,
    MenuItemID.M_FILE_IMPORT_JSON: FileAction.IMPORT_JSON,
    MenuItemID.M_FILE_IMPORT_YAML: FileAction.IMPORT_YAML,
    MenuItemID.M_FILE_IMPORT_XML: FileAction.IMPORT_XML,
    MenuItemID.M_FILE_IMPORT_TXT: FileAction.IMPORT_TXT,
    MenuItemID.M_FILE_EXPORT_WORD: FileAction.EXPORT_WORD,
    MenuItemID.M_FILE_EXPORT_HTML: FileAction.EXPORT_HTML,
    MenuItemID.M_FILE_EXPORT_JSON: FileAction.EXPORT_JSON,
    MenuItemID.M_FILE_EXPORT_YAML: FileAction.EXPORT_YAML,
    MenuItemID.M_FILE_EXPORT_XML: FileAction.EXPORT_XML,
    MenuItemID.M_FILE_EXPORT_PDF: FileAction.EXPORT_PDF,
})


def menu_bar_attrs() -> list[MenuItemAttr]:
    """Return the attributes of the top-level menus in menu-bar order."""
    return [menu_attr(item_id) for _, item_id in _BAR_LAYOUT]


def file_action_for(item_id: MenuItemID) -> FileAction | None:
    """Return the File menu operation for ``item_id``, or None if it starts none."""
    return _FILE_ACTIONS.get(item_id)


class MenuBar:
    """The top-level menus and their entries; triggered actions go to ``handler``."""

    def __init__(self, handler: Handler | None = None) -> None:
        self.handler = handler
        self._attrs: dict[MenuType, MenuItemAttr] = {}
        self._menus: dict[MenuType, list[MenuItem]] = {}
        for menu_type, item_id in _BAR_LAYOUT:
            self._attrs[menu_type] = menu_attr(item_id)
            self._menus[menu_type] = menu_items(menu_type)

    def titles(self) -> list[str]:
        """Return the labels of the top-level menus in order."""
        return [attr.label for attr in self._attrs.values()]

    def menu(self, menu_type: MenuType) -> list[MenuItem]:
        """Return the entries of a top-level menu; raise KeyError if it is not on the bar."""
        return self._menus[menu_type]

    def _items(self) -> Iterator[MenuItem]:
        for entries in self._menus.values():
            for entry in entries:
                yield from entry.walk()

    def find(self, obj_name: str) -> MenuItem:
        """Return the first entry named ``obj_name``; raise KeyError if there is none."""
        for item in self._items():
            if item.item_type is not ItemType.SEPARATOR and item.obj_name == obj_name:
                return item
        raise KeyError(obj_name)

    def trigger(self, obj_name: str) -> Any:
        """Activate the first action named ``obj_name`` and return the handler's result.

        Raises KeyError if no action has that name and ValueError if it is disabled.
        """
        for item in self._items():
            if item.item_type is ItemType.ACTION and item.obj_name == obj_name:
                if not item.enabled:
                    raise ValueError(f"menu action {obj_name!r} is disabled")
                if self.handler is None:
                    return None
                return self.handler(item)
        raise KeyError(obj_name)