# baize

The core of a Markdown note editor, with no GUI. Menu labels and messages are in
Chinese. The package has these modules:

- **`baize.menu_model`** holds the `MenuItem` dataclass, the `ItemType`, `MenuItemID`
  and `MenuType` enums, and `MenuItemAttr`. A `MenuItem` has a label, an object name, a
  shortcut, an icon path, a URL and a QML file, plus sub-items. `MenuItem.separator()`
  and `MenuItem.submenu(...)` build the special kinds. `walk()` yields an item and every
  item below it, depth first.
- **`baize.menu_catalog`** holds the built-in File, Edit, View, Coding, Insert,
  Template, Settings, Tools and Help menus. Each one has a function such as
  `file_menu_items()`. `menu_items(menu_type)` returns a fresh list for a menu type,
  and an empty list for a type that has no built-in entries. `menu_attr(item_id)`
  returns the object name, label and shortcut of a top-level menu.
- **`baize.menu_xml`** reads menus from XML. `parse_menu_string` and `parse_menu_file`
  take a `<Menu>` root holding `<menuItem type="menu|action|separator">` elements. The
  child elements `ObjName`, `Label`, `ShortCut`, `QmlFile`, `Icon` and `Url` fill in
  each item. These functions raise `MenuXmlError` when a file cannot be read, the XML is
  malformed, or the root element is not `Menu`. `is_valid_url` accepts http, https and
  ftp URLs.
- **`baize.menubar`** holds `MenuBar`, which puts the top-level menus together in
  menu-bar order. `titles()` gives the menu labels. `menu(menu_type)` gives the entries
  of one menu. `find(obj_name)` looks up an entry by object name. `trigger(obj_name)`
  passes the named action to the handler you supplied and returns its result. It raises
  `KeyError` for an unknown name and `ValueError` for a disabled action.
  `file_action_for(item_id)` maps a File menu id to a `FileAction`.
  `menu_bar_attrs()` lists the attributes of every top-level menu.
- **`baize.latex`** converts text for display. `render(text)` converts inline (`$…$`)
  and block (`$$…$$`, `\[…\]`, starred environments) formulas, `bmatrix` matrices (into
  Markdown tables), `\frac`, `\sqrt` and Greek letter commands. The single steps are
  also public: `convert_formula`, `convert_text_with_formulas` and
  `convert_matrix_to_markdown`.
- **`baize.logger`** holds `Logger` and `LogLevel`. `initialize(filename, level,
  console_output)` opens a log file for appending. An empty name means
  `logs/YYYY-MM-DD.log`. Entries go to the console and to the file in the form
  `[LEVEL] [time] [file: line: func] message`. `get_logger()` returns a shared instance.
  A `Logger` is also a context manager that closes its file on exit.
- **`baize.fileio`** has three functions. `read_file(path)` reads UTF-8 text and refuses
  files over `MAX_FILE_SIZE` (10 MiB). `create_file(path)` makes an empty file.
  `create_folder(parent, name)` makes a folder. Failures raise `FileReadError`,
  `NewFileError`, `FileAlreadyExistsError` or `NewFolderError`.
- **`baize.errors`** holds the `ErrCode` enum and the `HemyError` family of exceptions.
  Each exception carries a `code`.
- **`baize.gui_defs`** holds window sizes, margins, dialog texts, and
  `push_button_style(align, padding, radius)`, which returns a style-sheet string.
- **`baize.app`** holds the layout model. `MainWindowConfig` carries the window
  settings. `CentralLayout` carries the panel limits, and its `initial_sizes()` gives the
  starting panel widths. `line_number_area_width` computes the width of the line-number
  gutter. `Workbench` renders its text whenever `set_text` is called and passes the
  result to every callback registered with `subscribe`.

## Installation

```
pip install .
```

## Examples

Render LaTeX into Markdown:

```python
from baize.latex import render

print(render(r"\frac{a}{b} + \alpha"))   # (a)/(b) + α
```

Walk a built-in menu:

```python
from baize.menu_catalog import menu_items
from baize.menu_model import MenuType

for item in menu_items(MenuType.MENU_EDIT):
    print(item.label, item.shortcut)
```

Trigger a menu action:

```python
from baize.menubar import MenuBar, file_action_for

bar = MenuBar(handler=lambda item: file_action_for(item.menu_id))
print(bar.trigger("actionSave"))   # FileAction.SAVE
```

Log to a file:

```python
from baize.logger import LogLevel, get_logger

log = get_logger()
log.initialize("run.log", LogLevel.DEBUG, True)
log.info("started")
```

## What it does not do

- There is no window, dialog, editor widget or command-line program.
- `MenuBar` only reports which action was triggered; carrying it out is the handler's
  job. `FileAction` names the File menu operations, but nothing in the package performs
  saving, importing or exporting.
- The Plugins, Custom Tools, Online Tools and Links menus have no built-in entries, so
  their lists in `MenuBar` are empty. You can load entries for them from XML with
  `baize.menu_xml`.
- `is_valid_url` only checks a URL; nothing opens it in a browser.

## Tests

```
pip install .[test]
pytest
```