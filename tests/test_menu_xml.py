import pytest

from baize.menu_model import ItemType, MenuItemID
from baize.menu_xml import (
    MenuXmlError,
    XmlItemKind,
    is_valid_url,
    item_kind,
    parse_menu_element,
    parse_menu_file,
    parse_menu_string,
)

import xml.etree.ElementTree as ET

SAMPLE = """<?xml version="1.0" encoding="UTF-8"?>
<Menu>
  <menuItem type="menu">
    <ObjName>subOnline</ObjName>
    <Label>在线</Label>
    <menuItem type="action">
      <ObjName>actionSearch</ObjName>
      <Label>Search</Label>
      <ShortCut>Ctrl+K</ShortCut>
      <Url>https://example.com/search</Url>
      <Icon>:/icons/search.png</Icon>
      <QmlFile>search.qml</QmlFile>
    </menuItem>
    <menuItem type="separator"/>
  </menuItem>
  <other>ignored</other>
  <menuItem type="ACTION">
    <ObjName>actionDocs</ObjName>
    <Label>Docs</Label>
  </menuItem>
</Menu>
"""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("menu", XmlItemKind.MENU),
        ("Action", XmlItemKind.ACTION),
        ("SEPARATOR", XmlItemKind.SEPARATOR),
        ("unknown", XmlItemKind.MENU),
        ("", XmlItemKind.MENU),
        (None, XmlItemKind.MENU),
    ],
)
def test_item_kind(text, expected):
    assert item_kind(text) is expected


def test_parse_top_level_items():
    items = parse_menu_string(SAMPLE)
    assert [item.obj_name for item in items] == ["subOnline", "actionDocs"]
    assert [item.item_type for item in items] == [ItemType.SUBMENU, ItemType.ACTION]


def test_parse_nested_action_fields():
    submenu = parse_menu_string(SAMPLE)[0]
    assert submenu.label == "在线"
    action, separator = submenu.sub_items
    assert action.label == "Search"
    assert action.shortcut == "Ctrl+K"
    assert action.url == "https://example.com/search"
    assert action.icon_path == ":/icons/search.png"
    assert action.qml_file == "search.qml"
    assert action.menu_id is MenuItemID.MENU_BUTT
    assert separator.item_type is ItemType.SEPARATOR


def test_missing_children_are_empty():
    docs = parse_menu_string(SAMPLE)[1]
    assert docs.shortcut == ""
    assert docs.url == ""
    assert docs.sub_items == []


def test_walk_covers_nested_items():
    items = parse_menu_string(SAMPLE)
    names = [item.obj_name for top in items for item in top.walk()]
    assert names == ["subOnline", "actionSearch", "", "actionDocs"]


def test_parse_menu_element_directly():
    root = ET.fromstring("<Menu><menuItem type='action'><Label>A</Label></menuItem></Menu>")
    items = parse_menu_element(root)
    assert len(items) == 1
    assert items[0].label == "A"


def test_parse_menu_file(tmp_path):
    target = tmp_path / "links.xml"
    target.write_text(SAMPLE, encoding="utf-8")
    assert parse_menu_file(target) == parse_menu_string(SAMPLE)


def test_missing_file_raises(tmp_path):
    with pytest.raises(MenuXmlError) as info:
        parse_menu_file(tmp_path / "missing.xml")
    assert info.value.title == "文件错误"


def test_malformed_xml_raises():
    with pytest.raises(MenuXmlError) as info:
        parse_menu_string("<Menu><menuItem></Menu>")
    assert info.value.title == "XML 解析错误"


def test_wrong_root_raises():
    with pytest.raises(MenuXmlError) as info:
        parse_menu_string("<library/>")
    assert info.value.title == "XML 结构错误"


@pytest.mark.parametrize(
    "url, valid",
    [
        ("https://example.com", True),
        ("http://example.com/path?q=1", True),
        ("FTP://example.com/file", True),
        ("example.com", False),
        ("mailto:someone@example.com", False),
        ("https://", False),
        ("https://exa mple.com", False),
    ],
)
def test_is_valid_url(url, valid):
    assert is_valid_url(url) is valid