"""
Theme definitions for the Online Quiz GUI.
"""


class Colors:
    # Primary Colors
    PRIMARY_BLUE = "#0364B8"
    PRIMARY_BLUE_HOVER = "#0A2767"
    PRIMARY_BLUE_PRESSED = "#0A2767"

    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"
    HOVER = "#f0f0f0"
    DISABLED_BG = "#e0e0e0"

    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#666666"
    TEXT_DISABLED = "#757575"
    TEXT_ON_PRIMARY = "#ffffff"

    # Borders & Dividers
    BORDER = "#e0e0e0"
    BORDER_FOCUS = "#28A8EA"

    # Status
    ERROR = "#d32f2f"
    SUCCESS = "#388e3c"

    # Result screen
    SCORE_GOLD = "#FFD700"

    SELECTION_BG = "#F0F9FF"
    SELECTION_TEXT = "#1f1f1f"


class ColorsDark:
    """Dark theme color palette."""

    PRIMARY_BLUE = "#3794FF"
    PRIMARY_BLUE_HOVER = "#4FA3FF"
    PRIMARY_BLUE_PRESSED = "#2A7FE8"

    BACKGROUND = "#1e1e1e"
    SURFACE = "#252526"
    HOVER = "#21262D"
    DISABLED_BG = "#3D444D"

    TEXT_PRIMARY = "#E6EDF3"
    TEXT_SECONDARY = "#8B949E"
    TEXT_DISABLED = "#9CA3AF"
    TEXT_ON_PRIMARY = "#FFFFFF"

    BORDER = "#30363D"
    BORDER_FOCUS = "#3794FF"

    ERROR = "#F85149"
    SUCCESS = "#3FB950"

    SCORE_GOLD = "#FFD700"

    SELECTION_BG = "#1F6FEB"
    SELECTION_TEXT = "#FFFFFF"


class Fonts:
    # Font Families
    UI_FONT = "-apple-system, 'SF Pro Text', 'Segoe UI', Roboto, Helvetica, Arial, sans-serif"

    # Sizes
    H1 = "18pt"
    H2 = "16pt"
    BODY = "14pt"
    SMALL = "12pt"

    # Weights
    WEIGHT_REGULAR = "400"
    WEIGHT_MEDIUM = "500"
    WEIGHT_BOLD = "600"


def _build_styles(C) -> dict:
    """QSS fragments for a palette."""
    return {
        "BUTTON_PRIMARY": f"""
            QPushButton {{
                background-color: {C.PRIMARY_BLUE};
                color: {C.TEXT_ON_PRIMARY};
                border-radius: 6px;
                padding: 8px 16px;
                font-weight: {Fonts.WEIGHT_MEDIUM};
                border: none;
                qproperty-iconSize: 20px 20px;
            }}
            QPushButton:hover {{
                background-color: {C.PRIMARY_BLUE_HOVER};
            }}
            QPushButton:pressed {{
                background-color: {C.PRIMARY_BLUE_PRESSED};
            }}
            QPushButton:disabled {{
                background-color: {C.DISABLED_BG};
                color: {C.TEXT_DISABLED};
            }}
        """,
        "BUTTON_SECONDARY": f"""
            QPushButton {{
                background-color: {C.SURFACE};
                color: {C.TEXT_PRIMARY};
                border: 1px solid {C.BORDER};
                border-radius: 6px;
                padding: 8px 16px;
                font-weight: {Fonts.WEIGHT_MEDIUM};
                qproperty-iconSize: 20px 20px;
            }}
            QPushButton:hover {{
                background-color: {C.HOVER};
                border-color: {C.BORDER_FOCUS};
            }}
            QPushButton:pressed {{
                background-color: {C.BORDER};
            }}
            QPushButton:disabled {{
                background-color: {C.DISABLED_BG};
                color: {C.TEXT_DISABLED};
                border-color: {C.DISABLED_BG};
            }}
        """,
        "CHOICE_BUTTON": f"""
            QPushButton {{
                background-color: {C.SURFACE};
                color: {C.TEXT_PRIMARY};
                border: 1px solid {C.BORDER};
                border-radius: 8px;
                padding: 12px 16px;
                text-align: left;
                font-size: {Fonts.BODY};
            }}
            QPushButton:hover {{
                background-color: {C.SELECTION_BG};
                color: {C.SELECTION_TEXT};
                border-color: {C.PRIMARY_BLUE};
            }}
            QPushButton:disabled {{
                color: {C.TEXT_DISABLED};
            }}
        """,
        "QUESTION_LABEL": f"""
            QLabel {{
                font-size: {Fonts.H2};
                font-weight: {Fonts.WEIGHT_BOLD};
                color: {C.TEXT_PRIMARY};
            }}
        """,
        "PROGRESS_LABEL": f"""
            QLabel {{
                font-size: {Fonts.SMALL};
                color: {C.TEXT_SECONDARY};
            }}
        """,
        "SCORE_LABEL": f"""
            QLabel {{
                font-family: Arial;
                font-size: {Fonts.H1};
                font-weight: {Fonts.WEIGHT_BOLD};
                color: {C.SCORE_GOLD};
            }}
        """,
    }


_LIGHT = _build_styles(Colors)
_DARK = _build_styles(ColorsDark)


class Styles:
    # Common QSS fragments (light)
    BUTTON_PRIMARY = _LIGHT["BUTTON_PRIMARY"]
    BUTTON_SECONDARY = _LIGHT["BUTTON_SECONDARY"]
    CHOICE_BUTTON = _LIGHT["CHOICE_BUTTON"]
    QUESTION_LABEL = _LIGHT["QUESTION_LABEL"]
    PROGRESS_LABEL = _LIGHT["PROGRESS_LABEL"]
    SCORE_LABEL = _LIGHT["SCORE_LABEL"]


class StylesDark:
    # Common QSS fragments (dark)
    BUTTON_PRIMARY = _DARK["BUTTON_PRIMARY"]
    BUTTON_SECONDARY = _DARK["BUTTON_SECONDARY"]
    CHOICE_BUTTON = _DARK["CHOICE_BUTTON"]
    QUESTION_LABEL = _DARK["QUESTION_LABEL"]
    PROGRESS_LABEL = _DARK["PROGRESS_LABEL"]
    SCORE_LABEL = _DARK["SCORE_LABEL"]


def _build_global_stylesheet(C) -> str:
    return f"""
    * {{
        font-family: {Fonts.UI_FONT};
        font-size: {Fonts.BODY};
        color: {C.TEXT_PRIMARY};
    }}

    QMainWindow, QWidget {{
        background-color: {C.BACKGROUND};
    }}

    QLabel {{
        background-color: transparent;
        color: {C.TEXT_PRIMARY};
    }}

    QMenuBar, QMenu {{
        background-color: {C.BACKGROUND};
        color: {C.TEXT_PRIMARY};
        border: none;
    }}
    QMenu::item:selected {{
        background-color: {C.SELECTION_BG};
        color: {C.SELECTION_TEXT};
    }}

    QStatusBar {{
        background-color: {C.SURFACE};
        color: {C.TEXT_SECONDARY};
    }}
    """


# Global application stylesheets (helps avoid inheriting OS dark mode on Windows).
GLOBAL_STYLESHEET = _build_global_stylesheet(Colors)
GLOBAL_STYLESHEET_DARK = _build_global_stylesheet(ColorsDark)


def apply_theme(app, is_dark: bool = False) -> None:
    """
    Apply the appropriate stylesheet (light or dark) to the QApplication.
    """
    set_dark_mode(is_dark)
    app.setStyleSheet(GLOBAL_STYLESHEET_DARK if is_dark else GLOBAL_STYLESHEET)


# Module-level dark mode state (set explicitly when theme changes)
_is_dark_mode = False


def set_dark_mode(is_dark: bool):
    """Explicitly set the dark mode state."""
    global _is_dark_mode
    _is_dark_mode = is_dark


def is_dark_mode() -> bool:
    return _is_dark_mode


def get_colors():
    """Get the appropriate color palette based on current theme."""
    return ColorsDark if _is_dark_mode else Colors


def get_styles():
    """Get the appropriate styles based on current theme."""
    return StylesDark if _is_dark_mode else Styles
