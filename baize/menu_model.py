"""Menu identifiers and the menu item tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Iterable, Iterator


class _ZeroBased(IntEnum):
    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return count


class MenuType(_ZeroBased):
    """Top-level menus of the menu bar."""

    MAIN = auto()
    MENU_BEGIN = auto()
    MENU_FILE = auto()
    MENU_EDIT = auto()
    MENU_VIEW = auto()
    MENU_CODING = auto()
    MENU_INSERT = auto()
    MENU_MODEL = auto()
    MENU_SETTING = auto()
    MENU_TOOLS = auto()
    MENU_PLUGIN = auto()
    MENU_CUSTOM = auto()
    MENU_ONLINE_TOOL = auto()
    MENU_LINK = auto()
    MENU_HELP = auto()
    MENU_END = auto()
    MENU_BUTT = auto()


class MenuItemID(_ZeroBased):
    """Identifiers of every menu and menu entry."""

    MENU_NONE = auto()
    OBJ_NAME_MENU_BAR = auto()

    # File menu
    OBJ_NAME_FILE = auto()
    MENU_FILE = auto()
    M_FILE_NEW_FILE = auto()
    M_FILE_NEW_FOLDER = auto()
    M_FILE_OPEN_FILE = auto()
    M_FILE_OPEN_FOLDER = auto()
    M_FILE_SAVE = auto()
    M_FILE_SAVE_AS = auto()
    M_FILE_RELOAD = auto()
    M_FILE_EXIT = auto()
    M_FILE_IMPORT = auto()
    M_FILE_IMPORT_WORD = auto()
    M_FILE_IMPORT_HTML = auto()
    M_FILE_IMPORT_JSON = auto()
    M_FILE_IMPORT_YAML = auto()
    M_FILE_IMPORT_XML = auto()
    M_FILE_IMPORT_TXT = auto()
    M_FILE_EXPORT = auto()
    M_FILE_EXPORT_WORD = auto()
    M_FILE_EXPORT_JSON = auto()
    M_FILE_EXPORT_XML = auto()
    M_FILE_EXPORT_YAML = auto()
    M_FILE_EXPORT_HTML = auto()
    M_FILE_EXPORT_PDF = auto()

    # Edit menu
    OBJ_NAME_EDIT = auto()
    MENU_EDIT = auto()
    M_EDIT_UNDO = auto()
    M_EDIT_REDO = auto()
    M_EDIT_COPY = auto()
    M_EDIT_CUT = auto()
    M_EDIT_PASTE = auto()
    M_EDIT_GO_LINE = auto()
    M_EDIT_FIND_FILE = auto()
    M_EDIT_REPLACE_FILE = auto()
    M_EDIT_FIND_DIR = auto()
    M_EDIT_REPLACE_DIR = auto()

    # View menu
    OBJ_NAME_VIEW = auto()
    MENU_VIEW = auto()
    M_VIEW_EDIT_MOD = auto()
    M_VIEW_PREVIEW_MOD = auto()
    M_VIEW_EDIT_PREVIEW = auto()
    M_VIEW_SHOW_EXPLORER = auto()
    M_VIEW_SHOW_TOC = auto()
    M_VIEW_SHOW_LINE_NO = auto()
    M_VIEW_SHOW_SPACE = auto()
    M_VIEW_SHOW_LINE_BREAK = auto()
    M_VIEW_SHOW_ALL = auto()
    M_VIEW_FOLD_ALL = auto()
    M_VIEW_EXPAND_ALL = auto()
    M_VIEW_FOLD_CUR = auto()
    M_VIEW_EXPAND_CUR = auto()
    M_VIEW_FOLD = auto()
    M_VIEW_FOLD_1 = auto()
    M_VIEW_FOLD_2 = auto()
    M_VIEW_FOLD_3 = auto()
    M_VIEW_FOLD_4 = auto()
    M_VIEW_FOLD_5 = auto()
    M_VIEW_FOLD_6 = auto()
    M_VIEW_EXPAND = auto()
    M_VIEW_EXPAND_1 = auto()
    M_VIEW_EXPAND_2 = auto()
    M_VIEW_EXPAND_3 = auto()
    M_VIEW_EXPAND_4 = auto()
    M_VIEW_EXPAND_5 = auto()
    M_VIEW_EXPAND_6 = auto()

    # Encoding menu
    OBJ_NAME_CODING = auto()
    MENU_CODING = auto()
    M_CODING_OPEN = auto()
    M_CODING_OPEN_ANSI = auto()
    M_CODING_OPEN_UTF8 = auto()
    M_CODING_OPEN_UTF16LE = auto()
    M_CODING_OPEN_UTF16BE = auto()
    M_CODING_OPEN_GBK = auto()
    M_CODING_OPEN_GB2312 = auto()
    M_CODING_OPEN_GB18030 = auto()
    M_CODING_OPEN_BG5 = auto()
    M_CODING_OPEN_BG5_HKSCS = auto()
    M_CODING_OPEN_HEX = auto()
    M_CODING_CONVERT = auto()
    M_CODING_CVT_ANSI = auto()
    M_CODING_CVT_UTF8 = auto()
    M_CODING_CVT_UTF16LE = auto()
    M_CODING_CVT_UTF16BE = auto()
    M_CODING_CVT_GBK = auto()
    M_CODING_CVT_GB2312 = auto()
    M_CODING_CVT_GB18030 = auto()
    M_CODING_CVT_BG5 = auto()
    M_CODING_CVT_BG5_HKSCS = auto()
    M_CODING_CVT_HEX = auto()
    M_CODING_NOTIFY = auto()

    # Insert menu
    OBJ_NAME_INSERT = auto()
    MENU_INSERT = auto()
    M_INSERT_FONT = auto()
    M_INSERT_KATEX = auto()
    M_INSERT_MD_TABLE = auto()
    M_INSERT_WEB_LINK = auto()
    M_INSERT_TXT = auto()
    M_INSERT_T_IMAGES = auto()
    M_INSERT_T_CODEBLOCK = auto()
    M_INSERT_T_MD_LIST = auto()
    M_INSERT_T_UPDATE_TIME = auto()
    M_INSERT_FROM_FILE = auto()
    M_INSERT_F_TXT = auto()
    M_INSERT_F_JSON = auto()
    M_INSERT_F_INI = auto()
    M_INSERT_F_YAML = auto()
    M_INSERT_F_XML = auto()
    M_INSERT_F_CSV = auto()
    M_INSERT_F_XLS = auto()

    # Template menu
    OBJ_NAME_MODEL = auto()
    MENU_MODEL = auto()
    M_MODEL_CUSTOM_MODEL = auto()
    M_MODEL_CUSTOM_MANAGE = auto()
    M_MODEL_WRITE_MODEL = auto()
    M_MODEL_W_LEETCODE = auto()
    M_MODEL_W_QUESTION = auto()
    M_MODEL_W_COVER = auto()
    M_MODEL_W_PAPER = auto()
    M_MODEL_MATERIAL = auto()
    M_MODEL_M_ADMONITION = auto()
    M_MODEL_MERMAID = auto()
    M_MODEL_ME_BASE = auto()
    M_MODEL_ME_FLOWCHAT = auto()
    M_MODEL_ME_SEQUENCE = auto()
    M_MODEL_ME_CLASS = auto()
    M_MODEL_ME_STATE = auto()
    M_MODEL_ME_ENTITY = auto()
    M_MODEL_ME_USER_JOURNEY = auto()
    M_MODEL_ME_GANTT = auto()
    M_MODEL_ME_PIE = auto()
    M_MODEL_ME_QUADRANT = auto()
    M_MODEL_ME_REQUIREMENT = auto()
    M_MODEL_ME_GIT = auto()
    M_MODEL_ME_C4 = auto()
    M_MODEL_ME_MINDMAP = auto()
    M_MODEL_ME_TIMELINE = auto()
    M_MODEL_ME_ZEN_UML = auto()
    M_MODEL_ME_SANKEY = auto()
    M_MODEL_ME_XY_CHART = auto()
    M_MODEL_ME_BLOCK = auto()
    M_MODEL_ME_PACKET = auto()
    M_MODEL_ME_KANBAN = auto()
    M_MODEL_ME_ARCHITECTURE = auto()
    M_MODEL_ME_RADAR = auto()
    M_MODEL_ME_TREEMAP = auto()
    M_MODEL_PLANTUML = auto()
    M_MODEL_PL_BASE = auto()
    M_MODEL_PL_SEQUENCE = auto()
    M_MODEL_PL_USE_CASE = auto()
    M_MODEL_PL_CLASS = auto()
    M_MODEL_PL_ACTIVITY = auto()
    M_MODEL_PL_COMP = auto()
    M_MODEL_PL_STATE = auto()
    M_MODEL_PL_OBJECT = auto()
    M_MODEL_PL_DEPLOY = auto()
    M_MODEL_PL_TIMING = auto()
    M_MODEL_PL_REGEX = auto()
    M_MODEL_PL_NWDIAG = auto()
    M_MODEL_PL_SALT = auto()
    M_MODEL_PL_ARCHI_MATE = auto()
    M_MODEL_PL_GANTT = auto()
    M_MODEL_PL_CHRONOLOGY = auto()
    M_MODEL_PL_MINDMAP = auto()
    M_MODEL_PL_WBS = auto()
    M_MODEL_PL_EBNF = auto()
    M_MODEL_PL_JSON = auto()
    M_MODEL_PL_YAML = auto()
    M_MODEL_PL_SDL = auto()
    M_MODEL_PL_ASCII_MATH = auto()
    M_MODEL_PL_DITAA = auto()
    M_MODEL_PL_ENTITY = auto()
    M_MODEL_PL_INFO_ENG = auto()

    # Settings menu
    OBJ_NAME_SETTING = auto()
    MENU_SETTING = auto()
    M_SETTING_SYSTEM = auto()
    M_SETTING_THEME = auto()
    M_SETTING_QUICK = auto()
    M_SETTING_EDITOR = auto()
    M_SETTING_MD_PARSE = auto()
    M_SETTING_SHORTCUT = auto()

    # Tools menu
    OBJ_NAME_TOOLS = auto()
    MENU_TOOLS = auto()
    M_TOOL_KATEX = auto()
    M_TOOL_MERMAID = auto()
    M_TOOL_PLANTUML = auto()
    M_TOOL_DRAW = auto()
    M_TOOL_EXECL = auto()

    # Plugins menu
    OBJ_NAME_PLUGIN = auto()
    MENU_PLUGIN = auto()
    M_PLUGIN_ED_ = auto()

    # Custom tools menu
    OBJ_NAME_CUSTOM = auto()
    MENU_CUSTOM_TOOLS = auto()

    # Online tools menu
    OBJ_NAME_ONLINE_TOOL = auto()
    MENU_ONLINE_TOOL = auto()

    # Links menu
    OBJ_NAME_LINK = auto()
    MENU_LINK = auto()

    # Help menu
    OBJ_NAME_HELP = auto()
    MENU_HELP = auto()
    M_HELP_RELEASE = auto()
    M_HELP_SHORTCUT = auto()
    M_HELP_DOCS = auto()
    M_HELP_ISSUE = auto()
    M_HELP_ABORT = auto()
    M_HELP_HOMEPAGE = auto()
    M_HELP_THANKS = auto()
    M_HELP_UPDATE = auto()
    M_HELP_CONTACT_US = auto()
    M_HELP_OPEN_SRC = auto()

    MENU_BUTT = auto()


class ItemType(Enum):
    """Kind of a menu entry."""

    ACTION = "action"
    SEPARATOR = "separator"
    SUBMENU = "submenu"


@dataclass(frozen=True)
class MenuItemAttr:
    """Object name, visible label and shortcut of a top-level menu."""

    obj_name: str
    label: str
    shortcut: str = ""


@dataclass
class MenuItem:
    """One entry of a menu, possibly holding a submenu."""

    menu_id: MenuItemID = MenuItemID.MENU_BUTT
    label: str = ""
    obj_name: str = ""
    shortcut: str = ""
    item_type: ItemType = ItemType.ACTION
    qml_file: str = ""
    icon_path: str = ""
    url: str = ""
    enabled: bool = True
    sub_items: list[MenuItem] = field(default_factory=list)

    @staticmethod
    def separator() -> MenuItem:
        """Return a separator entry."""
        return MenuItem(MenuItemID.MENU_BUTT, "", "", item_type=ItemType.SEPARATOR)

    @staticmethod
    def submenu(
        menu_id: MenuItemID, label: str, obj_name: str, items: Iterable[MenuItem]
    ) -> MenuItem:
        """Return a submenu entry holding ``items``."""
        return MenuItem(
            menu_id, label, obj_name, item_type=ItemType.SUBMENU, sub_items=list(items)
        )

    def walk(self) -> Iterator[MenuItem]:
        """Yield this item and every item below it, depth first."""
        yield self
        for child in self.sub_items:
            yield from child.walk()