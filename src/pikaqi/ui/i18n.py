"""Internationalisation strings for the Pikaqi UI.

Usage::

    from pikaqi.ui.i18n import t, set_language

    set_language("Chinese")
    print(t().btn_hint)             # "提示"
    print(t().engine_exited.format(code=1))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_new_game: str
    menu_undo: str
    menu_flip_board: str
    menu_settings_action: str
    menu_quit: str

    status_ready: str
    status_engine_thinking: str
    status_hint: str
    turn_red: str
    turn_black: str

    # Engine connection
    engine_connecting: str
    engine_ready: str
    engine_error: str  # "Error: {msg}"
    engine_exited: str  # "Engine exited (code {code})"

    # ── MovePanel ────────────────────────────────────────────────────────
    moves_header: str

    # ── AnalysisPanel ────────────────────────────────────────────────────
    analysis_header: str
    analysis_depth: str
    analysis_empty: str

    # ── EngineLogPanel ───────────────────────────────────────────────────
    engine_log_header: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    btn_new_game: str
    btn_flip: str
    btn_undo: str
    btn_hint: str
    chk_play_vs_engine: str
    chk_auto_analyze: str
    think_time_label: str
    ms_suffix: str

    # ── SettingsDialog ───────────────────────────────────────────────────
    settings_title: str
    settings_board: str
    settings_engine: str
    settings_language: str

    # Board page
    settings_board_theme: str
    settings_show_coords: str
    settings_show_legal: str

    # Engine page
    settings_engine_side: str
    side_red: str
    side_black: str
    settings_engine_path: str
    settings_engine_path_placeholder: str
    settings_engine_browse: str
    settings_engine_browse_title: str
    settings_multipv: str
    settings_think_time: str
    settings_engine_note: str


_EN = Strings(
    window_title="Pikaqi",
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_undo="&Undo Move",
    menu_flip_board="&Flip Board",
    menu_settings_action="&Preferences…",
    menu_quit="&Quit",
    status_ready="Ready",
    status_engine_thinking="Engine thinking…",
    status_hint="Calculating hint…",
    turn_red="Red to move",
    turn_black="Black to move",
    engine_connecting="Connecting to engine…",
    engine_ready="Engine ready",
    engine_error="Error: {msg}",
    engine_exited="Engine exited (code {code})",
    moves_header="Moves",
    analysis_header="Analysis",
    analysis_depth="Depth: {depth}",
    analysis_empty="-",
    engine_log_header="Engine output",
    btn_new_game="New Game",
    btn_flip="Flip",
    btn_undo="Undo",
    btn_hint="Hint",
    chk_play_vs_engine="Play vs engine",
    chk_auto_analyze="Auto analyze",
    think_time_label="Think time:",
    ms_suffix=" ms",
    settings_title="Settings",
    settings_board="Board",
    settings_engine="Engine",
    settings_language="Language",
    settings_board_theme="Board theme:",
    settings_show_coords="Show coordinates:",
    settings_show_legal="Show legal moves:",
    settings_engine_side="Engine plays:",
    side_red="Red",
    side_black="Black",
    settings_engine_path="Engine binary:",
    settings_engine_path_placeholder="Bundled Pikafish",
    settings_engine_browse="Browse…",
    settings_engine_browse_title="Select engine binary",
    settings_multipv="Analysis lines:",
    settings_think_time="Think time per search:",
    settings_engine_note="A new engine binary is started as soon as you press OK.",
)

_ZH = Strings(
    window_title="Pikaqi 象棋",
    menu_game="对局(&G)",
    menu_new_game="新对局(&N)",
    menu_undo="悔棋(&U)",
    menu_flip_board="翻转棋盘(&F)",
    menu_settings_action="设置(&P)…",
    menu_quit="退出(&Q)",
    status_ready="就绪",
    status_engine_thinking="引擎思考中…",
    status_hint="正在计算提示…",
    turn_red="红方走棋",
    turn_black="黑方走棋",
    engine_connecting="正在连接引擎…",
    engine_ready="引擎就绪",
    engine_error="错误：{msg}",
    engine_exited="引擎已退出（代码 {code}）",
    moves_header="着法",
    analysis_header="分析",
    analysis_depth="深度：{depth}",
    analysis_empty="-",
    engine_log_header="引擎输出",
    btn_new_game="新对局",
    btn_flip="翻转",
    btn_undo="悔棋",
    btn_hint="提示",
    chk_play_vs_engine="与引擎对弈",
    chk_auto_analyze="自动分析",
    think_time_label="思考时间：",
    ms_suffix=" 毫秒",
    settings_title="设置",
    settings_board="棋盘",
    settings_engine="引擎",
    settings_language="语言",
    settings_board_theme="棋盘主题：",
    settings_show_coords="显示坐标：",
    settings_show_legal="显示可走位置：",
    settings_engine_side="引擎执：",
    side_red="红方",
    side_black="黑方",
    settings_engine_path="引擎程序：",
    settings_engine_path_placeholder="内置 Pikafish",
    settings_engine_browse="浏览…",
    settings_engine_browse_title="选择引擎程序",
    settings_multipv="分析线路数：",
    settings_think_time="每次搜索思考时间：",
    settings_engine_note="点击确定后将立即启动新的引擎程序。",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Chinese": _ZH,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
