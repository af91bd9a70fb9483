"""
UI Theme definitions for the crash toolbar and the demo host windows.
"""


class Theme:
    """Application Theme Colors and Metrics"""

    # --- Colors ---
    PRIMARY_TEXT = "#ffffff"   # White text on colored buttons

    # Backgrounds
    BG_MAIN = "#f3f4f6"        # Gray 100 - Main app background
    BG_WHITE = "#ffffff"       # White - Cards/Panels
    BG_SELECTED = "#e5e7eb"    # Gray 200

    # Text Colors (WCAG compliant)
    TEXT_PRIMARY = "#111827"   # Gray 900 - High contrast text
    TEXT_SECONDARY = "#4b5563" # Gray 600

    # Status Colors
    ERROR = "#dc2626"          # Red 600
    ERROR_HOVER = "#b91c1c"    # Red 700

    # --- Metrics (8px Grid) ---
    SPACING_XS = 4
    SPACING_SM = 8
    SPACING_MD = 16

    RADIUS_MD = 8

    # --- Typography ---
    FONT_SIZE_SM = 12
    FONT_SIZE_LG = 16

    @staticmethod
    def get_stylesheet():
        """Global application stylesheet"""
        return f"""
            QWidget {{
                color: {Theme.TEXT_PRIMARY};
                font-family: 'Segoe UI', system-ui, sans-serif;
            }}

            QMainWindow {{
                background-color: {Theme.BG_MAIN};
            }}

            QMenuBar {{
                background-color: {Theme.BG_WHITE};
                border-bottom: 1px solid {Theme.BG_SELECTED};
            }}
            QMenuBar::item:selected {{
                background-color: {Theme.BG_SELECTED};
            }}
        """

    @staticmethod
    def get_toolbar_stylesheet():
        """Stylesheet for the crash toolbar buttons"""
        return f"""
            QToolBar#crashmeToolbar {{
                background-color: {Theme.BG_WHITE};
                border-bottom: 1px solid {Theme.BG_SELECTED};
                spacing: {Theme.SPACING_SM}px;
                padding: {Theme.SPACING_XS}px;
            }}
            QToolBar#crashmeToolbar QToolButton {{
                background-color: {Theme.ERROR};
                color: {Theme.PRIMARY_TEXT};
                border: none;
                border-radius: {Theme.RADIUS_MD}px;
                padding: {Theme.SPACING_XS}px {Theme.SPACING_MD}px;
                font-size: {Theme.FONT_SIZE_SM}px;
                font-weight: 600;
            }}
            QToolBar#crashmeToolbar QToolButton:hover {{
                background-color: {Theme.ERROR_HOVER};
            }}
        """
