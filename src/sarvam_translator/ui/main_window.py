"""Main Window - Translator shell: key entry, language pickers, text panes and history."""

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QGuiApplication, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from sarvam_translator.core import LanguageCatalog, TranslationRecord

STATUS_COLORS = {
    "success": "green",
    "info": "gray",
    "warning": "darkorange",
    "danger": "red",
    "error": "red",
}


class MainWindow(QMainWindow):
    """Renders translator state and forwards user actions as signals. Holds no translation logic."""

    save_api_key_clicked = Signal(str)
    api_key_edited = Signal(str)
    translate_clicked = Signal()
    swap_clicked = Signal()
    input_changed = Signal()
    languages_changed = Signal()
    clear_input_clicked = Signal()
    clear_output_clicked = Signal()
    copy_clicked = Signal()
    history_copy_requested = Signal(str)
    clear_history_clicked = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Sarvam Translator")
        self.setGeometry(100, 100, 1000, 720)

        self._setup_ui()
        self._setup_shortcuts()

    def _setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(12, 12, 12, 12)
        main_layout.setSpacing(8)

        # API key row
        key_layout = QHBoxLayout()
        key_layout.addWidget(QLabel("API key"))
        self.api_key_input = QLineEdit()
        self.api_key_input.setEchoMode(QLineEdit.EchoMode.Password)
        self.api_key_input.setPlaceholderText("Enter your Sarvam AI API key")
        self.api_key_input.textChanged.connect(self.api_key_edited.emit)
        self.api_key_input.returnPressed.connect(self._emit_save_api_key)
        key_layout.addWidget(self.api_key_input, 1)
        self.save_key_button = QPushButton("Save")
        self.save_key_button.clicked.connect(self._emit_save_api_key)
        key_layout.addWidget(self.save_key_button)
        main_layout.addLayout(key_layout)

        self.api_key_status = QLabel("")
        main_layout.addWidget(self.api_key_status)

        # Language row
        lang_layout = QHBoxLayout()
        self.source_combo = QComboBox()
        for code, name in LanguageCatalog.source_languages():
            self.source_combo.addItem(name, code)
        self.target_combo = QComboBox()
        for code, name in LanguageCatalog.target_languages():
            self.target_combo.addItem(name, code)
        self.set_languages("auto", "hi-IN")
        self.source_combo.currentIndexChanged.connect(lambda _: self.languages_changed.emit())
        self.target_combo.currentIndexChanged.connect(lambda _: self.languages_changed.emit())

        self.swap_button = QPushButton("⇄")
        self.swap_button.setToolTip("Swap languages")
        self.swap_button.clicked.connect(self.swap_clicked.emit)

        lang_layout.addWidget(self.source_combo, 1)
        lang_layout.addWidget(self.swap_button)
        lang_layout.addWidget(self.target_combo, 1)
        main_layout.addLayout(lang_layout)

        # Text panes
        panes_layout = QHBoxLayout()

        input_layout = QVBoxLayout()
        self.input_text = QPlainTextEdit()
        self.input_text.setPlaceholderText("Enter text to translate")
        self.input_text.textChanged.connect(self.input_changed.emit)
        input_layout.addWidget(self.input_text, 1)
        input_footer = QHBoxLayout()
        self.char_count_label = QLabel("0 characters")
        input_footer.addWidget(self.char_count_label)
        input_footer.addStretch()
        self.clear_input_button = QPushButton("Clear")
        self.clear_input_button.clicked.connect(self.clear_input_clicked.emit)
        input_footer.addWidget(self.clear_input_button)
        input_layout.addLayout(input_footer)
        panes_layout.addLayout(input_layout, 1)

        output_layout = QVBoxLayout()
        self.output_text = QTextEdit()
        self.output_text.setReadOnly(True)
        self.output_text.setPlaceholderText("Your translation will appear here")
        output_layout.addWidget(self.output_text, 1)
        output_footer = QHBoxLayout()
        self.time_label = QLabel("")
        self.time_label.setStyleSheet("color: gray;")
        output_footer.addWidget(self.time_label)
        output_footer.addStretch()
        self.copy_button = QPushButton("Copy")
        self.copy_button.clicked.connect(self.copy_clicked.emit)
        self.clear_output_button = QPushButton("Clear")
        self.clear_output_button.clicked.connect(self.clear_output_clicked.emit)
        output_footer.addWidget(self.copy_button)
        output_footer.addWidget(self.clear_output_button)
        output_layout.addLayout(output_footer)
        panes_layout.addLayout(output_layout, 1)

        main_layout.addLayout(panes_layout, 2)

        self.translate_button = QPushButton("Translate")
        self.translate_button.clicked.connect(self.translate_clicked.emit)
        main_layout.addWidget(self.translate_button)

        # History
        history_header = QHBoxLayout()
        history_title = QLabel("History")
        history_title.setStyleSheet("font-weight: bold;")
        history_header.addWidget(history_title)
        history_header.addStretch()
        self.clear_history_button = QPushButton("Clear history")
        self.clear_history_button.clicked.connect(self.clear_history_clicked.emit)
        history_header.addWidget(self.clear_history_button)
        main_layout.addLayout(history_header)

        self.history_list = QListWidget()
        self.history_list.itemDoubleClicked.connect(self._on_history_item_activated)
        main_layout.addWidget(self.history_list, 1)

        self.empty_history_label = QLabel("No translations yet")
        self.empty_history_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_history_label.setStyleSheet("color: gray;")
        main_layout.addWidget(self.empty_history_label)

        self.set_output_actions_enabled(False)
        self.set_translate_enabled(False)

    def _setup_shortcuts(self):
        QShortcut(QKeySequence("Ctrl+Return"), self, activated=self.translate_clicked.emit)
        QShortcut(QKeySequence("Ctrl+K"), self, activated=self.focus_input)

    def _emit_save_api_key(self):
        self.save_api_key_clicked.emit(self.api_key_input.text())

    def _on_history_item_activated(self, item: QListWidgetItem):
        translated = item.data(Qt.ItemDataRole.UserRole)
        if translated:
            self.history_copy_requested.emit(translated)

    # Reads

    def get_input_text(self) -> str:
        return self.input_text.toPlainText()

    def source_code(self) -> str:
        return self.source_combo.currentData() or ""

    def target_code(self) -> str:
        return self.target_combo.currentData() or ""

    # Updates

    def set_api_key_text(self, key: str) -> None:
        self.api_key_input.blockSignals(True)
        self.api_key_input.setText(key)
        self.api_key_input.blockSignals(False)

    def set_languages(self, source: str, target: str) -> None:
        source_index = self.source_combo.findData(source)
        target_index = self.target_combo.findData(target)
        if source_index >= 0:
            self.source_combo.setCurrentIndex(source_index)
        if target_index >= 0:
            self.target_combo.setCurrentIndex(target_index)

    def set_input_text(self, text: str) -> None:
        self.input_text.setPlainText(text)

    def focus_input(self) -> None:
        self.input_text.setFocus()

    def update_char_count(self, count: int, level: str) -> None:
        self.char_count_label.setText(f"{count} characters")
        color = {"warning": "darkorange", "error": "red"}.get(level)
        self.char_count_label.setStyleSheet(f"color: {color};" if color else "")

    def set_translate_enabled(self, enabled: bool) -> None:
        self.translate_button.setEnabled(enabled)

    def set_output_actions_enabled(self, enabled: bool) -> None:
        self.copy_button.setEnabled(enabled)
        self.clear_output_button.setEnabled(enabled)

    def show_translating(self, translating: bool) -> None:
        if translating:
            self.translate_button.setEnabled(False)
            self.translate_button.setText("Translating...")
            self.output_text.clear()
            self.output_text.setPlaceholderText("Translating...")
        else:
            self.translate_button.setText("Translate")
            self.output_text.setPlaceholderText("Your translation will appear here")

    def show_translation(self, text: str) -> None:
        self.output_text.setStyleSheet("")
        self.output_text.setPlainText(text)

    def show_translation_error(self, message: str) -> None:
        self.output_text.setStyleSheet("color: red;")
        self.output_text.setPlainText(message)

    def clear_output_display(self) -> None:
        self.output_text.setStyleSheet("")
        self.output_text.clear()
        self.time_label.clear()

    def set_translation_time(self, duration: Optional[float]) -> None:
        self.time_label.setText(f"Completed in {duration:.1f}s" if duration is not None else "")

    def render_history(self, records: list[TranslationRecord]) -> None:
        self.history_list.clear()
        self.empty_history_label.setVisible(not records)
        for record in records:
            item = QListWidgetItem(
                f"{record.original}\n{record.translated}\n"
                f"{LanguageCatalog.display_name(record.source_code)} → "
                f"{LanguageCatalog.display_name(record.target_code)}  {record.duration:.1f}s"
            )
            item.setData(Qt.ItemDataRole.UserRole, record.translated)
            item.setToolTip("Double-click to copy the translation")
            self.history_list.addItem(item)

    def show_api_key_status(self, message: str, level: str) -> None:
        self.api_key_status.setText(message)
        self.api_key_status.setStyleSheet(f"color: {STATUS_COLORS.get(level, 'gray')};")

    def show_alert(self, message: str, level: str = "info") -> None:
        """Transient message in the status bar; auto-dismisses after 5 seconds."""
        self.statusBar().setStyleSheet(f"color: {STATUS_COLORS.get(level, 'gray')};")
        self.statusBar().showMessage(message, 5000)

    def copy_to_clipboard(self, text: str) -> bool:
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            return False
        clipboard.setText(text)
        return True
