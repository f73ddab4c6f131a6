"""Menus described in XML files, and URL checks for link entries."""

from __future__ import annotations

import os
import re
import xml.etree.ElementTree as ET
from enum import Enum

from baize.menu_model import ItemType, MenuItem

_ROOT_TAG = "Menu"
_ITEM_TAG = "menuItem"

_URL = re.compile(r"^(https?|ftp)://[^\s/$.?#].[^\s]*$", re.IGNORECASE)


class MenuXmlError(Exception):
    """A menu description could not be read, parsed or understood."""

    def __init__(self, title: str, message: str) -> None:
        super().__init__(f"{title}: {message}")
        self.title = title
        self.message = message


class XmlItemKind(Enum):
    """Value of the ``type`` attribute of a ``menuItem`` element."""

    MENU = "menu"
    ACTION = "action"
    SEPARATOR = "separator"


_ITEM_TYPES = {
    XmlItemKind.MENU: ItemType.SUBMENU,
    XmlItemKind.ACTION: ItemType.ACTION,
    XmlItemKind.SEPARATOR: ItemType.SEPARATOR,
}


def item_kind(text: str | None) -> XmlItemKind:
    """Map a ``type`` attribute to its kind, case-insensitively; unknown means MENU."""
    try:
        return XmlItemKind((text or "").lower())
    except ValueError:
        return XmlItemKind.MENU


def _child_text(element: ET.Element, tag: str) -> str:
    child = element.find(tag)
    return "".join(child.itertext()) if child is not None else ""


def parse_menu_element(root: ET.Element) -> list[MenuItem]:
    """Return the menu items described by the ``menuItem`` children of ``root``."""
    items = []
    for element in root:
        if element.tag != _ITEM_TAG:
            continue
        kind = item_kind(element.get("type"))
        item = MenuItem(
            label=_child_text(element, "Label"),
            obj_name=_child_text(element, "ObjName"),
            shortcut=_child_text(element, "ShortCut"),
            item_type=_ITEM_TYPES[kind],
            qml_file=_child_text(element, "QmlFile"),
            icon_path=_child_text(element, "Icon"),
            url=_child_text(element, "Url"),
        )
        if kind is XmlItemKind.MENU:
            item.sub_items = parse_menu_element(element)
        items.append(item)
    return items


def parse_menu_string(text: str | bytes) -> list[MenuItem]:
    """Parse a menu description whose root element is ``Menu``.

    Raises MenuXmlError for malformed XML or a different root element.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        line, column = exc.position
        raise MenuXmlError("XML 解析错误", f"行: {line}, 列: {column}\n错误: {exc}") from exc
    if root.tag != _ROOT_TAG:
        raise MenuXmlError("XML 结构错误", f"根元素不是 '{_ROOT_TAG}'")
    return parse_menu_element(root)


def parse_menu_file(path: str | os.PathLike[str]) -> list[MenuItem]:
    """Read and parse the menu description in ``path``.

    Raises MenuXmlError if the file cannot be read or its content is invalid.
    """
    name = os.fspath(path)
    try:
        with open(name, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MenuXmlError("文件错误", f"读取 {name} 文件失败，请确认文件是否存在") from exc
    return parse_menu_string(data)


def is_valid_url(url: str) -> bool:
    """Return whether ``url`` is an http, https or ftp URL that can be opened."""
    return _URL.match(url) is not None