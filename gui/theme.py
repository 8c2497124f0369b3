"""Dark theme stylesheet for the eprename GUI."""

# Color palette
COLORS = {
    "background": "#16181D",
    "panel": "#1F2229",
    "border": "#30343D",
    "accent": "#2FA38A",
    "accent_hover": "#39B89C",
    "text": "#E6E6E6",
    "text_muted": "#9499A3",
    "text_disabled": "#5E636D",
    # Row states in the preview table
    "pending": "#E0B341",
    "unchanged": "#9499A3",
    "skipped": "#9499A3",
    "renamed": "#5BBF6A",
    "error": "#E5534B",
}

DARK_STYLESHEET = f"""
QMainWindow, QDialog, QWidget {{
    background-color: {COLORS["background"]};
    color: {COLORS["text"]};
    font-size: 12pt;
}}

QPushButton {{
    background-color: {COLORS["panel"]};
    border: 1px solid {COLORS["border"]};
    border-radius: 5px;
    padding: 6px 14px;
}}

QPushButton:hover {{
    border-color: {COLORS["accent"]};
}}

QPushButton:disabled {{
    color: {COLORS["text_disabled"]};
}}

QPushButton#primaryButton {{
    background-color: {COLORS["accent"]};
    border-color: {COLORS["accent"]};
    color: white;
}}

QPushButton#primaryButton:hover {{
    background-color: {COLORS["accent_hover"]};
}}

QLineEdit, QPlainTextEdit {{
    background-color: {COLORS["panel"]};
    border: 1px solid {COLORS["border"]};
    border-radius: 5px;
    padding: 6px 10px;
}}

QLineEdit:focus, QPlainTextEdit:focus {{
    border-color: {COLORS["accent"]};
}}

QTableWidget {{
    background-color: {COLORS["panel"]};
    border: 1px solid {COLORS["border"]};
    gridline-color: {COLORS["border"]};
}}

QHeaderView::section {{
    background-color: {COLORS["panel"]};
    color: {COLORS["text_muted"]};
    padding: 6px;
    border: none;
    border-bottom: 1px solid {COLORS["border"]};
}}

QLabel#mutedLabel {{
    color: {COLORS["text_muted"]};
}}
"""
