"""Settings dialog for the eprename GUI."""
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QPushButton, QPlainTextEdit, QLabel, QGroupBox, QMessageBox
)
from PySide6.QtCore import Signal

from eprename.config import (
    DEFAULT_EXCEPTIONS,
    DEFAULT_VIDEO_EXTENSIONS,
    EngineConfig,
    SettingsManager,
)
from eprename.errors import ConfigError


def _split_words(text: str) -> list[str]:
    return [w for w in text.replace(",", " ").split() if w]


class SettingsDialog(QDialog):
    """Edit the title-case exception words and the video extensions."""

    settings_changed = Signal()

    def __init__(self, mgr: SettingsManager, parent=None):
        super().__init__(parent)

        self.setWindowTitle("Settings")
        self.setMinimumWidth(520)

        self.mgr = mgr

        self._setup_ui()
        self._load_current_settings()

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setSpacing(16)

        group = QGroupBox("Renaming Rules")
        form = QFormLayout(group)
        form.setSpacing(10)

        self.exceptions_edit = QPlainTextEdit()
        self.exceptions_edit.setToolTip(
            "Words kept lowercase inside a show title "
            "(still capitalized as the first word)."
        )
        form.addRow("Lowercase words:", self.exceptions_edit)

        self.extensions_edit = QPlainTextEdit()
        self.extensions_edit.setToolTip("File extensions treated as video files.")
        form.addRow("Video extensions:", self.extensions_edit)

        layout.addWidget(group)

        hint = QLabel("Separate entries with spaces or commas.")
        hint.setObjectName("mutedLabel")
        layout.addWidget(hint)

        button_layout = QHBoxLayout()
        button_layout.addStretch()

        reset_btn = QPushButton("Reset to Defaults")
        reset_btn.clicked.connect(self._reset_defaults)

        cancel_btn = QPushButton("Cancel")
        cancel_btn.clicked.connect(self.reject)

        save_btn = QPushButton("Save")
        save_btn.setObjectName("primaryButton")
        save_btn.clicked.connect(self._save_and_close)

        button_layout.addWidget(reset_btn)
        button_layout.addWidget(cancel_btn)
        button_layout.addWidget(save_btn)

        layout.addLayout(button_layout)

    # ------------------------------------------------------------------
    # Load / save
    # ------------------------------------------------------------------

    def _load_current_settings(self):
        config = self.mgr.engine_config()
        self.exceptions_edit.setPlainText(", ".join(sorted(config.exceptions)))
        self.extensions_edit.setPlainText(", ".join(sorted(config.video_extensions)))

    def _save_and_close(self):
        try:
            config = EngineConfig(
                exceptions=_split_words(self.exceptions_edit.toPlainText()),
                video_extensions=_split_words(self.extensions_edit.toPlainText()),
            )
        except ConfigError as e:
            QMessageBox.warning(self, "Invalid Settings", str(e))
            return

        if not config.video_extensions:
            QMessageBox.warning(
                self, "Invalid Settings", "At least one video extension is required."
            )
            return

        for key, value in config.to_dict().items():
            self.mgr.set(key, value)

        if self.mgr.save():
            self.settings_changed.emit()
            self.accept()
        else:
            QMessageBox.warning(
                self, "Save Error", "Could not save settings to file."
            )

    def _reset_defaults(self):
        self.exceptions_edit.setPlainText(", ".join(sorted(DEFAULT_EXCEPTIONS)))
        self.extensions_edit.setPlainText(", ".join(sorted(DEFAULT_VIDEO_EXTENSIONS)))
