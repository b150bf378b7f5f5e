from __future__ import annotations

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QStatusBar,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from pytxt.services.ui.presenters.main_presenter import MainPresenter
from pytxt.utils.constants import DARK_STYLESHEET, LIGHT_STYLESHEET, REMOVABLE_CHARACTERS

AI_IDLE_LABEL = "Write with AI"
AI_BUSY_LABEL = "Writing with AI..."


class MainWindow(QMainWindow):
    """Passive Qt view; every user intent is forwarded to the attached MainPresenter."""

    def __init__(self, *, app_title: str = "PyTextEditor") -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(1000, 680)

        self._presenter: MainPresenter | None = None
        # Set while the presenter pushes text in, so it is not echoed back as an edit
        self._updating = False

        # Widgets
        self.file_name_edit = QLineEdit(self)
        self.file_name_edit.setPlaceholderText("File Name...")

        self.editor = QPlainTextEdit(self)
        self.editor.setPlaceholderText("Start typing here...")

        self.ai_button = QPushButton(AI_IDLE_LABEL, self)
        self.copy_button = QPushButton("Copy", self)
        self.clear_button = QPushButton("Clear", self)
        self.save_button = QPushButton("Save", self)

        name_row = QHBoxLayout()
        name_row.addWidget(QLabel("File name:", self))
        name_row.addWidget(self.file_name_edit, 1)

        buttons = QHBoxLayout()
        for b in (self.ai_button, self.copy_button, self.clear_button, self.save_button):
            buttons.addWidget(b)
        buttons.addStretch(1)

        root = QVBoxLayout()
        root.addLayout(name_row)
        root.addWidget(self.editor, 1)
        root.addLayout(buttons)
        central = QWidget(self)
        central.setLayout(root)
        self.setCentralWidget(central)

        self._build_actions()
        self._build_toolbar()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

    # ---------- UI creation ----------
    def _build_actions(self):
        self.remove_char_actions: dict[str, QAction] = {}
        for ch in REMOVABLE_CHARACTERS:
            act = QAction(
                f"Remove {ch}",
                self,
                triggered=lambda chk=False, c=ch: self._forward("remove_character", c),
            )
            self.remove_char_actions[ch] = act

        self.act_extra_spaces = QAction(
            "Remove Extra Spaces", self, triggered=lambda: self._forward("remove_extra_spaces")
        )
        self.act_all_spaces = QAction(
            "Remove All Spaces", self, triggered=lambda: self._forward("remove_all_spaces")
        )
        self.act_save = QAction(
            "Save…", self, shortcut=QKeySequence.StandardKey.Save,
            triggered=lambda: self._forward("save"),
        )
        self.act_ai = QAction(
            AI_IDLE_LABEL, self, shortcut="Ctrl+Shift+G",
            triggered=lambda: self._forward("write_with_ai"),
        )
        self.act_dark = QAction(
            "Dark Mode", self, checkable=True, checked=False,
            triggered=lambda chk=False: self._forward("toggle_theme"),
        )
        self.exit_action = QAction("&Exit", self, shortcut="Ctrl+Q")
        self.exit_action.triggered.connect(QApplication.instance().quit)

    def _build_toolbar(self):
        tb = QToolBar("Cleanup", self)
        tb.setMovable(False)
        for a in self.remove_char_actions.values():
            tb.addAction(a)
        tb.addSeparator()
        tb.addAction(self.act_extra_spaces)
        tb.addAction(self.act_all_spaces)
        tb.addSeparator()
        tb.addAction(self.act_dark)
        self.addToolBar(tb)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_save)
        filem.addSeparator()
        filem.addAction(self.exit_action)

        editm = m.addMenu("&Edit")
        editm.addAction(self.act_ai)
        editm.addSeparator()
        for a in self.remove_char_actions.values():
            editm.addAction(a)
        editm.addAction(self.act_extra_spaces)
        editm.addAction(self.act_all_spaces)

        viewm = m.addMenu("&View")
        viewm.addAction(self.act_dark)

    # ---------- Presenter wiring ----------
    def attach_presenter(self, presenter: MainPresenter) -> None:
        self._presenter = presenter
        self.editor.textChanged.connect(self._on_text_changed)
        self.file_name_edit.textEdited.connect(presenter.on_file_name_edited)
        self.ai_button.clicked.connect(lambda: self._forward("write_with_ai"))
        self.copy_button.clicked.connect(lambda: self._forward("copy"))
        self.clear_button.clicked.connect(lambda: self._forward("clear"))
        self.save_button.clicked.connect(lambda: self._forward("save"))

    def _forward(self, name: str, *args) -> None:
        if self._presenter is not None:
            getattr(self._presenter, name)(*args)

    def _on_text_changed(self):
        if self._updating or self._presenter is None:
            return
        self._presenter.on_text_edited(self.editor.toPlainText())

    # ---------- IMainView ----------
    def get_editor_text(self) -> str:
        return self.editor.toPlainText()

    def set_editor_text(self, text: str) -> None:
        self._updating = True
        try:
            self.editor.setPlainText(text)
        finally:
            self._updating = False

    def set_file_name(self, name: str) -> None:
        self.file_name_edit.setText(name)

    def set_loading(self, loading: bool) -> None:
        self.ai_button.setEnabled(not loading)
        self.act_ai.setEnabled(not loading)
        self.ai_button.setText(AI_BUSY_LABEL if loading else AI_IDLE_LABEL)

    def set_dark_mode(self, dark: bool) -> None:
        self.setStyleSheet(DARK_STYLESHEET if dark else LIGHT_STYLESHEET)
        self.act_dark.blockSignals(True)
        self.act_dark.setChecked(dark)
        self.act_dark.blockSignals(False)

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statusBar().showMessage(text, msec)
