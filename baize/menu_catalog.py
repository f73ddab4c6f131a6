"""The built-in menus of the menu bar and their entries."""

from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType

from baize.menu_model import MenuItem, MenuItemAttr, MenuItemID, MenuType

_ID = MenuItemID


def _action(menu_id: MenuItemID, label: str, obj_name: str, shortcut: str = "") -> MenuItem:
    return MenuItem(menu_id, label, obj_name, shortcut)


def _sep() -> MenuItem:
    return MenuItem.separator()


def file_menu_items() -> list[MenuItem]:
    """Return the entries of the File menu."""
    return [
        _action(_ID.M_FILE_NEW_FILE, "新建文件", "actionNewFile", "Ctrl+N"),
        _action(_ID.M_FILE_NEW_FOLDER, "新建文件夹", "actionNewDir", "Ctrl+D"),
        _action(_ID.M_FILE_OPEN_FILE, "打开文件", "actionOpenFile", "Ctrl+Alt+N"),
        _action(_ID.M_FILE_OPEN_FOLDER, "打开文件夹", "actionOpenDir", "Ctrl+Alt+D"),
        _sep(),
        MenuItem.submenu(_ID.M_FILE_IMPORT, "从文件导入", "FileSubMenuImport", [
            _action(_ID.M_FILE_IMPORT_WORD, "从 Word 导入", "FromWord"),
            _action(_ID.M_FILE_IMPORT_HTML, "从 Html 导入", "FromHtml"),
            _action(_ID.M_FILE_IMPORT_JSON, "从 Json 导入", "FromJson"),
            _action(_ID.M_FILE_IMPORT_YAML, "从 Yaml 导入", "FromYaml"),
            _action(_ID.M_FILE_IMPORT_XML, "从 XML 导入", "FromXml"),
            _action(_ID.M_FILE_IMPORT_TXT, "从文本文件导入", "FromTxt"),
        ]),
        MenuItem.submenu(_ID.M_FILE_EXPORT, "导出到文件", "FileSubMenuExport", [
            _action(_ID.M_FILE_EXPORT_WORD, "导出到 Word", "ToWord"),
            _action(_ID.M_FILE_EXPORT_JSON, "导出到 Json", "ToJson"),
            _action(_ID.M_FILE_EXPORT_XML, "导出到 XML", "ToXml"),
            _action(_ID.M_FILE_EXPORT_YAML, "导出到 Yaml", "ToYaml"),
            _action(_ID.M_FILE_EXPORT_HTML, "导出到 Html", "ToHtml"),
            _action(_ID.M_FILE_EXPORT_PDF, "导出到 Pdf", "ToPdf"),
        ]),
        _sep(),
        _action(_ID.M_FILE_SAVE, "保存", "actionSave", "Ctrl+S"),
        _action(_ID.M_FILE_SAVE_AS, "另存为", "actionSaveAs", "Ctrl+Shift+S"),
        _action(_ID.M_FILE_RELOAD, "从磁盘重新加载", "actionReloadFromDisk", "Ctrl+Alt+Y"),
        _sep(),
        _action(_ID.M_FILE_EXIT, "退出", "actionExit", "Alt+F4"),
    ]


def edit_menu_items() -> list[MenuItem]:
    """Return the entries of the Edit menu."""
    return [
        _action(_ID.M_EDIT_UNDO, "撤销", "actionUndo", "Ctrl+Z"),
        _action(_ID.M_EDIT_REDO, "重做", "actionRedo", "Ctrl+Y"),
        _sep(),
        _action(_ID.M_EDIT_COPY, "拷贝", "actionCopy", "Ctrl+C"),
        _action(_ID.M_EDIT_CUT, "剪切", "actionCut", "Ctrl+X"),
        _action(_ID.M_EDIT_PASTE, "粘贴", "actionPaste", "Ctrl+V"),
        _sep(),
        _action(_ID.M_EDIT_FIND_FILE, "在文件中查找", "actionFind", "Ctrl+F"),
        _action(_ID.M_EDIT_REPLACE_FILE, "在文件中替换", "actionReplace", "Ctrl+R"),
        _action(_ID.M_EDIT_FIND_DIR, "在目录中查找", "actionFindDir", "Ctrl+Shift+F"),
        _action(_ID.M_EDIT_REPLACE_DIR, "在目录中替换", "actionReplaceDir", "Ctrl+Shift+R"),
        _sep(),
        _action(_ID.M_EDIT_GO_LINE, "跳转到行", "actionGoToLine", "Alt+G"),
    ]


def view_menu_items() -> list[MenuItem]:
    """Return the entries of the View menu."""
    return [
        _action(_ID.M_VIEW_EDIT_MOD, "编辑视图", "actionEditView", "F9"),
        _action(_ID.M_VIEW_PREVIEW_MOD, "预览视图", "actionPreview", "F10"),
        _action(_ID.M_VIEW_EDIT_PREVIEW, "编辑/预览视图", "actionEditPreview", "F11"),
        _sep(),
        _action(_ID.M_VIEW_SHOW_EXPLORER, "显示/隐藏资源管理器", "actionDisplayExplorer"),
        _action(_ID.M_VIEW_SHOW_TOC, "显示/隐藏大纲", "actionDisplayToc"),
        _action(_ID.M_VIEW_SHOW_LINE_NO, "显示/隐藏行号", "actionDisplayLineNo"),
        _action(_ID.M_VIEW_SHOW_LINE_BREAK, "显示/隐藏换行", "actionDisplayLineBreak"),
        _action(_ID.M_VIEW_SHOW_SPACE, "显示/隐藏空格", "actionDisplaySpace"),
        _action(_ID.M_VIEW_SHOW_ALL, "显示/隐藏所有符号", "actionDisplayAllChart"),
        _sep(),
        _action(_ID.M_VIEW_EXPAND_ALL, "展开所有层次", "actionExpandAll", "Alt+0"),
        _action(_ID.M_VIEW_FOLD_ALL, "折叠所有层次", "actionFoldAll", "Alt+Shift+0"),
        _action(_ID.M_VIEW_EXPAND_CUR, "展开当前层次", "actionExpandCurrent", "Ctrl+Alt+F"),
        _action(_ID.M_VIEW_FOLD_CUR, "折叠当前层次", "actionFoldCurrent", "Ctrl+Alt+Shift+F"),
        _sep(),
        MenuItem.submenu(_ID.M_VIEW_FOLD, "展开层次", "ViewSubMenuFold", [
            _action(_ID.M_VIEW_FOLD_1, "1", "actionFold_1", "Alt+1"),
            _action(_ID.M_VIEW_FOLD_2, "2", "actionFold_2", "Alt+2"),
            _action(_ID.M_VIEW_FOLD_3, "3", "actionFold_3", "Alt+3"),
            _action(_ID.M_VIEW_FOLD_4, "4", "actionFold_4", "Alt+4"),
            _action(_ID.M_VIEW_FOLD_5, "5", "actionFold_5", "Alt+5"),
            _action(_ID.M_VIEW_FOLD_6, "6", "actionFold_6", "Alt+6"),
        ]),
        MenuItem.submenu(_ID.M_VIEW_EXPAND, "折叠层次", "ViewSubMenuExpand", [
            _action(_ID.M_VIEW_EXPAND_1, "1", "actionExpand_1", "Alt+Shift+1"),
            _action(_ID.M_VIEW_EXPAND_2, "2", "actionExpand_2", "Alt+Shift+2"),
            _action(_ID.M_VIEW_EXPAND_3, "3", "actionExpand_3", "Alt+Shift+3"),
            _action(_ID.M_VIEW_EXPAND_4, "4", "actionExpand_4", "Alt+Shift+4"),
            _action(_ID.M_VIEW_EXPAND_5, "5", "actionExpand_5", "Alt+Shift+5"),
            _action(_ID.M_VIEW_EXPAND_6, "6", "actionExpand_6", "Alt+Shift+6"),
        ]),
    ]


def coding_menu_items() -> list[MenuItem]:
    """Return the entries of the Encoding menu."""
    return [
        MenuItem.submenu(_ID.M_CODING_OPEN, "使用......编码打开", "actionEditView", [
            _action(_ID.M_CODING_OPEN_ANSI, "ANSI", "actionPreview"),
            _action(_ID.M_CODING_OPEN_UTF8, "UTF-8", "actionEditPreview"),
            _action(_ID.M_CODING_OPEN_UTF16LE, "UTF-16 Little Endian", "actionDisplayExplorer"),
            _action(_ID.M_CODING_OPEN_UTF16BE, "UTF-16 Big Endian", "actionDisplayToc"),
            _action(_ID.M_CODING_OPEN_BG5, "Big5(繁体中文)", "actionDisplayLineNo"),
            _action(_ID.M_CODING_OPEN_BG5_HKSCS, "Big5-HKSCS(繁体中文)", "actionDisplayLineBreak"),
            _action(_ID.M_CODING_OPEN_GBK, "GBK(简体中文)", "actionDisplaySpace"),
            _action(_ID.M_CODING_OPEN_GB2312, "GBK2312(简体中文)", "actionDisplayAllChart"),
            _action(_ID.M_CODING_OPEN_GB18030, "GBK18030(简体中文)", "actionExpandAll"),
            _action(_ID.M_CODING_OPEN_HEX, "Hex(十六进制)", "actionFoldAll"),
        ]),
        MenuItem.submenu(_ID.M_CODING_CONVERT, "转为......编码", "actionExpandCurrent", [
            _action(_ID.M_CODING_CVT_ANSI, "ANSI", "actionFoldCurrent"),
            _action(_ID.M_CODING_CVT_UTF8, "UTF-8", "ViewSubMenuFold"),
            _action(_ID.M_CODING_CVT_UTF16LE, "UTF-16 Little Endian", "actionFold_1"),
            _action(_ID.M_CODING_CVT_UTF16BE, "UTF-16 Big Endian", "actionFold_2"),
            _action(_ID.M_CODING_CVT_BG5, "Big5(繁体中文)", "actionFold_3"),
            _action(_ID.M_CODING_CVT_BG5_HKSCS, "Big5-HKSCS(繁体中文)", "actionFold_4"),
            _action(_ID.M_CODING_CVT_GBK, "GBK(简体中文)", "actionFold_5"),
            _action(_ID.M_CODING_CVT_GB2312, "GBK2312(简体中文)", "actionFold_6"),
            _action(_ID.M_CODING_CVT_GB18030, "GBK18030(简体中文)", "ViewSubMenuExpand"),
            _action(_ID.M_CODING_CVT_HEX, "Hex(十六进制)", "actionExpand_1"),
        ]),
        _action(_ID.M_CODING_NOTIFY, "注意：请勿直接编辑乱码文件", "actionExpand_6"),
    ]


def insert_menu_items() -> list[MenuItem]:
    """Return the entries of the Insert menu."""
    return [
        _action(_ID.M_INSERT_FONT, "特殊字体", "actionInsFonts"),
        _action(_ID.M_INSERT_KATEX, "Katex公式", "actionInsKatex"),
        _action(_ID.M_INSERT_MD_TABLE, "Markdown表格", "actionInsMdTable"),
        _action(_ID.M_INSERT_WEB_LINK, "网页链接", "actionInsWebLink"),
        _sep(),
        MenuItem.submenu(_ID.M_INSERT_TXT, "文本", "InsSubMenuTxt", [
            _action(_ID.M_INSERT_T_IMAGES, "图片链接", "actionInsImages"),
            _action(_ID.M_INSERT_T_CODEBLOCK, "折叠代码块", "actionInsCodeBlock"),
            _action(_ID.M_INSERT_T_MD_LIST, "有序列表", "actionInsMdList"),
            _action(_ID.M_INSERT_T_UPDATE_TIME, "更新时间", "actionInsUpdateTime"),
        ]),
        MenuItem.submenu(_ID.M_INSERT_FROM_FILE, "来自文件", "InsSubMenuFromFile", [
            _action(_ID.M_INSERT_F_TXT, "*.txt;*.log", "actionInsFromTxt"),
            _action(_ID.M_INSERT_F_JSON, "*.json", "actionInsFromJson"),
            _action(_ID.M_INSERT_F_INI, "*.ini", "actionInsFromIni"),
            _action(_ID.M_INSERT_F_YAML, "*.yaml;*.yml", "actionInsFromYaml"),
            _action(_ID.M_INSERT_F_XML, "*.xml", "actionInsFromXml"),
            _action(_ID.M_INSERT_F_CSV, "*.csv", "actionInsFromCsv"),
            _action(_ID.M_INSERT_F_XLS, "*.xls;*.xlsx", "actionInsFromXls"),
        ]),
    ]


def model_menu_items() -> list[MenuItem]:
    """Return the entries of the Template menu."""
    return [
        MenuItem.submenu(_ID.M_MODEL_MATERIAL, "Material模块", "ModelSubMenuMaterial", [
            _action(_ID.M_MODEL_M_ADMONITION, "Admonition", "actionModelAdmonition"),
        ]),
        MenuItem.submenu(_ID.M_MODEL_MERMAID, "Mermaid绘图", "ModelSubMenuMermaid", [
            _action(_ID.M_MODEL_ME_BASE, "基础框架", "actionModelMermaidBase"),
            _action(_ID.M_MODEL_ME_FLOWCHAT, "流程图", "actionModelMermaidFlowChat"),
            _action(_ID.M_MODEL_ME_SEQUENCE, "时序图", "actionModelMermaidSequence"),
            _action(_ID.M_MODEL_ME_CLASS, "类图", "actionModelMermaidClass"),
            _action(_ID.M_MODEL_ME_STATE, "状态图", "actionModelMermaidState"),
            _action(_ID.M_MODEL_ME_ENTITY, "实体关系图", "actionModelMermaidEntity"),
            _action(_ID.M_MODEL_ME_USER_JOURNEY, "用户旅程图", "actionModelMermaidUserJourney"),
            _action(_ID.M_MODEL_ME_GANTT, "甘特图", "actionModelMermaidGantt"),
            _action(_ID.M_MODEL_ME_PIE, "饼图", "actionModelMermaidPie"),
            _action(_ID.M_MODEL_ME_QUADRANT, "象限图", "actionModelMermaidQuadrant"),
            _action(_ID.M_MODEL_ME_REQUIREMENT, "需求图", "actionModelMermaidRequirement"),
            _action(_ID.M_MODEL_ME_GIT, "GitGraph(Git)图", "actionModelMermaidGit"),
            _action(_ID.M_MODEL_ME_C4, "C4图", "actionModelMermaidC4"),
            _action(_ID.M_MODEL_ME_MINDMAP, "思维导图", "actionModelMermaidMindmap"),
            _action(_ID.M_MODEL_ME_TIMELINE, "时间线图", "actionModelMermaidTimeLine"),
            _action(_ID.M_MODEL_ME_ZEN_UML, "ZenUML", "actionModelMermaidZenUml"),
            _action(_ID.M_MODEL_ME_SANKEY, "桑基图", "actionModelMermaidSanKey"),
            _action(_ID.M_MODEL_ME_XY_CHART, "XY图", "actionModelMermaidXYChart"),
            _action(_ID.M_MODEL_ME_BLOCK, "框图", "actionModelMermaidBlock"),
            _action(_ID.M_MODEL_ME_PACKET, "数据包图", "actionModelMermaidPacket"),
            _action(_ID.M_MODEL_ME_KANBAN, "看板图", "actionModelMermaidKanBan"),
            _action(_ID.M_MODEL_ME_ARCHITECTURE, "架构图", "actionModelMermaidArchitecture"),
            _action(_ID.M_MODEL_ME_RADAR, "雷达图", "actionModelMermaidRadar"),
            _action(_ID.M_MODEL_ME_TREEMAP, "树形图", "actionModelMermaidTreeMap"),
        ]),
        MenuItem.submenu(_ID.M_MODEL_PLANTUML, "PlantUml绘图", "ModelSubMenuPlantUml", [
            _action(_ID.M_MODEL_PL_BASE, "基础框架", "actionModelPltUmlBase"),
            _action(_ID.M_MODEL_PL_SEQUENCE, "序列图", "actionModelPltUmlSequence"),
            _action(_ID.M_MODEL_PL_USE_CASE, "用例图", "actionModelPltUmlUseCase"),
            _action(_ID.M_MODEL_PL_CLASS, "类图", "actionModelPltUmlClass"),
            _action(_ID.M_MODEL_PL_ACTIVITY, "活动图", "actionModelPltUmlActivity"),
            _action(_ID.M_MODEL_PL_COMP, "组件图", "actionModelPltUmlComponent"),
            _action(_ID.M_MODEL_PL_STATE, "状态图", "actionModelPltUmlState"),
            _action(_ID.M_MODEL_PL_OBJECT, "对象图", "actionModelPltUmlObject"),
            _action(_ID.M_MODEL_PL_DEPLOY, "部署图", "actionModelPltUmlDeploy"),
            _action(_ID.M_MODEL_PL_TIMING, "定时图", "actionModelPltUmlTiming"),
            _action(_ID.M_MODEL_PL_REGEX, "Regex图表", "actionModelPltUmlRegex"),
            _action(_ID.M_MODEL_PL_NWDIAG, "使用nwdiag的网络图", "actionModelPltUmlNWDiag"),
            _action(_ID.M_MODEL_PL_SALT, "Salt (Wireframe)", "actionModelPltUmlSlat"),
            _action(_ID.M_MODEL_PL_ARCHI_MATE, "架构图", "actionModelPltUmlArchiMate"),
            _action(_ID.M_MODEL_PL_GANTT, "甘特图", "actionModelPltUmlGantt"),
            _action(_ID.M_MODEL_PL_CHRONOLOGY, "时序图", "actionModelPltUmlChronology"),
            _action(_ID.M_MODEL_PL_MINDMAP, "思维导图", "actionModelPltUmlMindmap"),
            _action(_ID.M_MODEL_PL_WBS, "WBS 图表", "actionModelPltUmlWBS"),
            _action(_ID.M_MODEL_PL_EBNF, "EBNF图表", "actionModelPltUmlEBNF"),
            _action(_ID.M_MODEL_PL_JSON, "JSON数据", "actionModelPltUmlJson"),
            _action(_ID.M_MODEL_PL_YAML, "YAML数据", "actionModelPltUmlYaml"),
            _action(_ID.M_MODEL_PL_SDL, "规范和描述语言(SDL)", "actionModelPltUmlSdl"),
            _action(_ID.M_MODEL_PL_ASCII_MATH, "AsciiMath", "actionModelPltUmlAsciiMath"),
            _action(_ID.M_MODEL_PL_DITAA, "Ditaa图表", "actionModelPltUmlDitaa"),
            _action(_ID.M_MODEL_PL_ENTITY, "实体关系图", "actionModelPltUmlEntity"),
            _action(_ID.M_MODEL_PL_INFO_ENG, "信息工程图", "actionModelPltUmlInfoEng"),
        ]),
        _sep(),
        MenuItem.submenu(_ID.M_MODEL_WRITE_MODEL, "写作模板", "ModelSubMenuWriteModel", [
            _action(_ID.M_MODEL_W_LEETCODE, "力扣解题模板", "actionModelWLeetCode"),
            _action(_ID.M_MODEL_W_QUESTION, "问题处理模板", "actionModelWQuestion"),
            _action(_ID.M_MODEL_W_COVER, "文章封面", "actionModelWCover"),
            _action(_ID.M_MODEL_W_PAPER, "论文模板", "actionModelWPaper"),
        ]),
        _sep(),
        _action(_ID.M_MODEL_CUSTOM_MODEL, "自定义模板", "actionModelCustomModel"),
        _action(_ID.M_MODEL_CUSTOM_MANAGE, "自定义模板管理", "actionModelCustomMange"),
    ]


def setting_menu_items() -> list[MenuItem]:
    """Return the entries of the Settings menu."""
    return [
        _action(_ID.M_SETTING_SYSTEM, "系统设置", "actionSettingSystem"),
        _action(_ID.M_SETTING_THEME, "主题设置", "actionSettingTheme"),
        _action(_ID.M_SETTING_QUICK, "快速链接设置", "actionSettingQuickLink"),
        _action(_ID.M_SETTING_EDITOR, "编辑器设置", "actionSettingEditor"),
        _action(_ID.M_SETTING_MD_PARSE, "Markdown解析设置", "actionSettingMdParse"),
        _action(_ID.M_SETTING_SHORTCUT, "快捷键设置", "actionSettingShortCut"),
    ]


def tools_menu_items() -> list[MenuItem]:
    """Return the entries of the Tools menu."""
    return [
        _action(_ID.M_TOOL_MERMAID, "Mermaid绘图", "actionToolMermaid"),
        _action(_ID.M_TOOL_PLANTUML, "PlantUML绘图", "actionToolPlantUML"),
        _action(_ID.M_TOOL_EXECL, "表格制作", "actionToolExecl"),
        _action(_ID.M_TOOL_DRAW, "绘图制作", "actionToolDraw"),
        _action(_ID.M_TOOL_KATEX, "编辑数学公式", "actionToolKatex"),
    ]


def help_menu_items() -> list[MenuItem]:
    """Return the entries of the Help menu."""
    return [
        _action(_ID.M_HELP_RELEASE, "版本发布", "actionHelpRelease"),
        _action(_ID.M_HELP_SHORTCUT, "键盘快捷方式", "actionHelpShortKey"),
        _sep(),
        _action(_ID.M_HELP_DOCS, "使用文档", "actionHelpDocs"),
        _action(_ID.M_HELP_ISSUE, "提交创意/意见", "actionHelpIssue"),
        _sep(),
        _action(_ID.M_HELP_ABORT, "关于", "actionHelpAbort"),
        _action(_ID.M_HELP_HOMEPAGE, "主页", "actionHelpHomePage"),
        _action(_ID.M_HELP_THANKS, "致谢", "actionHelpThanks"),
        _action(_ID.M_HELP_UPDATE, "检查更新", "actionHelpUpdate"),
        _sep(),
        _action(_ID.M_HELP_CONTACT_US, "联系我们", "actionHelpContactUs"),
        _action(_ID.M_HELP_OPEN_SRC, "开源软件", "actionHelpOpenSource"),
    ]


_MENU_BAR_ATTRS = MappingProxyType({
    _ID.MENU_FILE: MenuItemAttr("MenuFile", "文件(&F)", "Alt+F"),
    _ID.MENU_EDIT: MenuItemAttr("MenuEdit", "编辑(&E)", "Alt+E"),
    _ID.MENU_VIEW: MenuItemAttr("MenuView", "视图(&V)", "Alt+V"),
    _ID.MENU_CODING: MenuItemAttr("MenuCoding", "文件编码(&C)", "Alt+C"),
    _ID.MENU_INSERT: MenuItemAttr("MenuInsert", "插入(&I)", "Alt+I"),
    _ID.MENU_MODEL: MenuItemAttr("MenuModel", "模板(&M)", "Alt+M"),
    _ID.MENU_SETTING: MenuItemAttr("MenuSetting", "设置(&S)", "Alt+S"),
    _ID.MENU_TOOLS: MenuItemAttr("MenuTools", "工具(&T)", "Alt+T"),
    _ID.MENU_PLUGIN: MenuItemAttr("MenuPlugins", "插件(&P)", "Alt+P"),
    _ID.MENU_CUSTOM_TOOLS: MenuItemAttr("MenuCustomTools", "自定义工具(&P)", "Alt+A"),
    _ID.MENU_ONLINE_TOOL: MenuItemAttr("MenuOnlineTool", "在线工具(&O)", "Alt+O"),
    _ID.MENU_LINK: MenuItemAttr("MenuLinks", "链接(&L)", "Alt+L"),
    _ID.MENU_HELP: MenuItemAttr("MenuHelp", "帮助(&H)", "Alt+H"),
})

_BUILDERS: dict[MenuType, Callable[[], list[MenuItem]]] = {
    MenuType.MENU_FILE: file_menu_items,
    MenuType.MENU_EDIT: edit_menu_items,
    MenuType.MENU_VIEW: view_menu_items,
    MenuType.MENU_CODING: coding_menu_items,
    MenuType.MENU_INSERT: insert_menu_items,
    MenuType.MENU_MODEL: model_menu_items,
    MenuType.MENU_SETTING: setting_menu_items,
    MenuType.MENU_TOOLS: tools_menu_items,
    MenuType.MENU_HELP: help_menu_items,
}


def menu_attr(item_id: MenuItemID) -> MenuItemAttr:
    """Return the attributes of a top-level menu; raise KeyError for any other id."""
    return _MENU_BAR_ATTRS[item_id]


def menu_items(menu_type: MenuType) -> list[MenuItem]:
    """Return a fresh list of the built-in entries of a menu, empty if it has none."""
    builder = _BUILDERS.get(menu_type)
    return builder() if builder is not None else []