"""Main window for the eprename GUI."""
from pathlib import Path

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLineEdit, QTableWidget, QTableWidgetItem,
    QHeaderView, QPlainTextEdit, QLabel, QFileDialog,
    QMessageBox, QAbstractItemView
)
from PySide6.QtGui import QBrush, QColor

from eprename.config import SettingsManager
from eprename.engine import RenameEngine
from eprename.errors import ConflictError
from eprename.models import PlanSet
from eprename.renamer import directory_defaults, find_video_files, rename_file
from .prompt_dialog import DialogPrompter
from .settings_dialog import SettingsDialog
from .theme import COLORS

COL_ORIGINAL = 0
COL_NEW = 1
COL_STATUS = 2


class MainWindow(QMainWindow):
    """Folder picker, preview table and rename button."""

    def __init__(self, settings: SettingsManager | None = None):
        super().__init__()

        self.setWindowTitle("eprename - TV Episode Renamer")
        self.setMinimumSize(900, 600)

        self.settings = settings or SettingsManager()
        self.plan_set = PlanSet()
        self._rows: dict[str, int] = {}

        self._setup_ui()

        last_folder = self.settings.get("last_folder", "")
        if last_folder:
            self.folder_edit.setText(last_folder)
        self._update_button_states()

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        # Folder row
        folder_layout = QHBoxLayout()
        self.folder_edit = QLineEdit()
        self.folder_edit.setPlaceholderText("Folder with episode files...")
        self.folder_edit.textChanged.connect(self._on_folder_changed)

        browse_btn = QPushButton("Browse...")
        browse_btn.clicked.connect(self._browse)

        self.scan_btn = QPushButton("Scan")
        self.scan_btn.clicked.connect(self._scan)

        settings_btn = QPushButton("Settings")
        settings_btn.clicked.connect(self._open_settings)

        folder_layout.addWidget(self.folder_edit, 1)
        folder_layout.addWidget(browse_btn)
        folder_layout.addWidget(self.scan_btn)
        folder_layout.addWidget(settings_btn)
        layout.addLayout(folder_layout)

        # Preview table
        self.table = QTableWidget(0, 3)
        self.table.setHorizontalHeaderLabels(["Original", "New Name", "Status"])
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.verticalHeader().setVisible(False)
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(COL_ORIGINAL, QHeaderView.Stretch)
        header.setSectionResizeMode(COL_NEW, QHeaderView.Stretch)
        header.setSectionResizeMode(COL_STATUS, QHeaderView.ResizeToContents)
        layout.addWidget(self.table, 1)

        # Log panel
        log_label = QLabel("Log")
        log_label.setObjectName("mutedLabel")
        layout.addWidget(log_label)

        self.log_view = QPlainTextEdit()
        self.log_view.setReadOnly(True)
        self.log_view.setMaximumHeight(140)
        layout.addWidget(self.log_view)

        # Bottom row
        bottom = QHBoxLayout()
        self.summary_label = QLabel("")
        self.summary_label.setObjectName("mutedLabel")
        bottom.addWidget(self.summary_label, 1)

        self.rename_btn = QPushButton("Rename")
        self.rename_btn.setObjectName("primaryButton")
        self.rename_btn.clicked.connect(self._rename)
        bottom.addWidget(self.rename_btn)
        layout.addLayout(bottom)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _log(self, message: str):
        self.log_view.appendPlainText(message)

    def _folder(self) -> Path | None:
        text = self.folder_edit.text().strip()
        if not text:
            return None
        path = Path(text)
        return path if path.is_dir() else None

    def _update_button_states(self):
        self.scan_btn.setEnabled(self._folder() is not None)
        self.rename_btn.setEnabled(bool(self.plan_set.changes()))

    def _add_row(self, original: str, new_name: str, status: str, tooltip: str = ""):
        row = self.table.rowCount()
        self.table.insertRow(row)
        self.table.setItem(row, COL_ORIGINAL, QTableWidgetItem(original))
        self.table.setItem(row, COL_NEW, QTableWidgetItem(new_name))
        self.table.setItem(row, COL_STATUS, QTableWidgetItem(""))
        self._set_status(row, status, tooltip)
        self._rows[original] = row

    def _set_status(self, row: int, status: str, tooltip: str = ""):
        item = self.table.item(row, COL_STATUS)
        item.setText(status.upper())
        item.setForeground(QBrush(QColor(COLORS.get(status, COLORS["text"]))))
        item.setToolTip(tooltip)

    def _clear(self):
        self.plan_set = PlanSet()
        self._rows.clear()
        self.table.setRowCount(0)
        self.summary_label.setText("")

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def _on_folder_changed(self, _text: str):
        self._clear()
        self._update_button_states()

    def _browse(self):
        folder = QFileDialog.getExistingDirectory(
            self, "Select Folder", self.folder_edit.text() or str(Path.home())
        )
        if folder:
            self.folder_edit.setText(folder)

    def _open_settings(self):
        dialog = SettingsDialog(self.settings, self)
        dialog.settings_changed.connect(lambda: self._log("Settings saved."))
        dialog.exec()

    def _scan(self):
        folder = self._folder()
        if folder is None:
            return
        self._clear()
        self.settings.set("last_folder", str(folder))
        self.settings.save()

        config = self.settings.engine_config()
        names = find_video_files(folder, config)
        self._log(f"Scanning {folder}: {len(names)} video file(s)")
        if not names:
            self._update_button_states()
            return

        show_default, season_default = directory_defaults(folder)
        engine = RenameEngine(config)
        result = engine.plan_batch(
            names,
            DialogPrompter(self),
            season_default=season_default,
            show_default=show_default,
        )

        for plan in result.plan_set:
            self._add_row(plan.source, plan.target, "unchanged" if plan.is_noop else "pending")
        for skipped in result.skipped:
            self._add_row(skipped.name, "", "skipped", skipped.reason)
            self._log(f"[SKIP] {skipped.name}: {skipped.reason}")

        try:
            engine.validate(result.plan_set, [item.name for item in folder.iterdir()])
        except ConflictError as e:
            for conflict in e.conflicts:
                for source in conflict.sources:
                    self._set_status(self._rows[source], "error", conflict.describe())
                self._log(f"[CONFLICT] {conflict.describe()}")
            QMessageBox.critical(
                self,
                "Conflicts Detected",
                "No files will be renamed. Resolve these conflicts first:\n\n"
                + "\n".join(c.describe() for c in e.conflicts),
            )
            self._update_button_states()
            return

        self.plan_set = result.plan_set
        count = len(self.plan_set.changes())
        self.summary_label.setText(f"{count} file(s) to rename, {len(result.skipped)} skipped")
        self._update_button_states()

    def _rename(self):
        folder = self._folder()
        changes = self.plan_set.changes()
        if folder is None or not changes:
            return

        reply = QMessageBox.question(
            self,
            "Confirm Rename",
            f"Proceed with renaming {len(changes)} files?",
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No,
        )
        if reply != QMessageBox.Yes:
            self._log("Renaming cancelled by user.")
            return

        renamed = errors = 0
        for plan in self.plan_set.apply_order():
            row = self._rows[plan.source]
            success, error = rename_file(folder / plan.source, folder / plan.target)
            if success:
                renamed += 1
                self._set_status(row, "renamed")
                self._log(f"Renamed: {plan.source} -> {plan.target}")
            else:
                errors += 1
                self._set_status(row, "error", error or "")
                self._log(f"[ERROR] {plan.source}: {error}")

        self.plan_set = PlanSet()
        self.summary_label.setText(f"Renamed: {renamed} | Errors: {errors}")
        self._update_button_states()
