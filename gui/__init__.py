"""eprename GUI Package."""
from .main_window import MainWindow
from .theme import DARK_STYLESHEET
from .settings_dialog import SettingsDialog
from .prompt_dialog import DialogPrompter, PromptDialog

__all__ = [
    "MainWindow",
    "DARK_STYLESHEET",
    "SettingsDialog",
    "DialogPrompter",
    "PromptDialog",
]
