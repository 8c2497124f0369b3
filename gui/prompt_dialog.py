"""Modal dialog asking for a missing season number or show name."""
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QPushButton, QLabel, QLineEdit
)

from eprename.models import PromptKind
from .theme import COLORS


QUESTIONS = {
    PromptKind.SEASON: (
        "Season Number",
        "This file only carries an episode number. Which season is it?",
        "e.g. 1, 02, Season 3",
    ),
    PromptKind.SHOW_TITLE: (
        "Show Name",
        "This file name starts with the episode marker. Which show is it?",
        "e.g. The Night Manager",
    ),
}


class PromptDialog(QDialog):
    """Ask for one value. Skip (or closing the dialog) declines."""

    def __init__(self, kind: PromptKind, filename: str, default: str | None = None, parent=None):
        super().__init__(parent)

        title, question, placeholder = QUESTIONS[kind]
        self.setWindowTitle(title)
        self.setMinimumWidth(460)
        self.setModal(True)

        layout = QVBoxLayout(self)
        layout.setSpacing(14)

        header = QLabel(question)
        header.setWordWrap(True)
        header.setStyleSheet(f"color: {COLORS['accent']}; font-weight: bold;")
        layout.addWidget(header)

        file_label = QLabel(f"<b>File:</b> {filename}")
        file_label.setWordWrap(True)
        layout.addWidget(file_label)

        self.input = QLineEdit(default or "")
        self.input.setPlaceholderText(placeholder)
        self.input.selectAll()
        layout.addWidget(self.input)

        btn_layout = QHBoxLayout()
        btn_layout.addStretch()

        skip_btn = QPushButton("Skip File")
        skip_btn.clicked.connect(self.reject)

        ok_btn = QPushButton("OK")
        ok_btn.setObjectName("primaryButton")
        ok_btn.setDefault(True)
        ok_btn.clicked.connect(self.accept)

        btn_layout.addWidget(skip_btn)
        btn_layout.addWidget(ok_btn)
        layout.addLayout(btn_layout)

    def answer(self) -> str:
        return self.input.text().strip()


class DialogPrompter:
    """Prompter that shows a :class:`PromptDialog` per question.

    Like the terminal prompter, the last accepted answer becomes the
    default for the next file.
    """

    def __init__(self, parent=None):
        self.parent = parent
        self._last: dict[PromptKind, str] = {}

    def ask(self, kind: PromptKind, suggested_default: str | None, filename: str) -> str | None:
        default = self._last.get(kind) or suggested_default
        dialog = PromptDialog(kind, filename, default, self.parent)
        if dialog.exec() != QDialog.Accepted:
            return None
        answer = dialog.answer()
        if answer:
            self._last[kind] = answer
        return answer or None
