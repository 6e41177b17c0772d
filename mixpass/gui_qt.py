"""
Qt GUI for MixPass.

One window: character class toggles, length, random source, and the
generated password with Generate / Copy actions.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QComboBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from .clipboard import ClipboardCopier
from .cli import generate_password_with_meta
from .config import GeneratorConfig, DEFAULT_CONFIG
from .entropy import SOURCE_KINDS
from .errors import MixPassError

logger = logging.getLogger(__name__)

MAX_LENGTH = 128


class GeneratorWidget(QWidget):
    """
    Controls + password display.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        copier: ClipboardCopier | None = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.config = replace(config or DEFAULT_CONFIG)
        self.copier = copier or ClipboardCopier()

        # Clipboard auto-clear
        self._clipboard_value: str | None = None
        self._clipboard_timer = QTimer(self)
        self._clipboard_timer.setSingleShot(True)
        self._clipboard_timer.timeout.connect(self._on_clipboard_timeout)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        layout.addWidget(self._build_config_group())
        layout.addWidget(self._build_password_group())
        layout.addWidget(self._build_status_label())

    # -- groups --

    def _build_config_group(self) -> QGroupBox:
        group = QGroupBox("Configuration")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        length_label = QLabel("Password length (characters)")
        self.length_spin = QSpinBox()
        self.length_spin.setRange(0, MAX_LENGTH)
        self.length_spin.setValue(min(self.config.length, MAX_LENGTH))

        self.lower_check = QCheckBox("Include lowercase letters")
        self.lower_check.setChecked(self.config.lowercase)
        self.upper_check = QCheckBox("Include uppercase letters")
        self.upper_check.setChecked(self.config.uppercase)
        self.digits_check = QCheckBox("Include numbers")
        self.digits_check.setChecked(self.config.digits)
        self.symbols_check = QCheckBox("Include symbols")
        self.symbols_check.setChecked(self.config.symbols)

        source_row = QHBoxLayout()
        source_row.addWidget(QLabel("Random source"))
        self.source_combo = QComboBox()
        self.source_combo.addItems(list(SOURCE_KINDS))
        self.source_combo.setCurrentText(self.config.source)
        source_row.addWidget(self.source_combo, 1)

        self.autocopy_check = QCheckBox("Auto-copy after generation")
        self.autocopy_check.setChecked(self.config.auto_copy)

        layout.addWidget(length_label)
        layout.addWidget(self.length_spin)
        for check in (
            self.lower_check,
            self.upper_check,
            self.digits_check,
            self.symbols_check,
        ):
            layout.addWidget(check)
        layout.addLayout(source_row)
        layout.addWidget(self.autocopy_check)
        layout.addStretch()

        group.setLayout(layout)
        return group

    def _build_password_group(self) -> QGroupBox:
        group = QGroupBox("Password")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self.password_field = QLineEdit()
        self.password_field.setReadOnly(True)
        pw_font = QFont("Consolas")
        pw_font.setPointSize(14)
        self.password_field.setFont(pw_font)
        self.password_field.setPlaceholderText("Click Generate to create a password...")
        self.password_field.setAlignment(Qt.AlignCenter)

        buttons_row = QHBoxLayout()
        buttons_row.addStretch()
        self.generate_button = QPushButton("Generate")
        gen_font = self.generate_button.font()
        gen_font.setBold(True)
        self.generate_button.setFont(gen_font)
        self.generate_button.setCursor(Qt.PointingHandCursor)
        self.generate_button.clicked.connect(self.on_generate_clicked)

        self.copy_button = QPushButton("Copy to Clipboard")
        self.copy_button.clicked.connect(lambda: self.copy_to_clipboard())

        buttons_row.addWidget(self.generate_button)
        buttons_row.addWidget(self.copy_button)
        buttons_row.addStretch()

        layout.addWidget(self.password_field)
        layout.addLayout(buttons_row)

        group.setLayout(layout)
        return group

    def _build_status_label(self) -> QLabel:
        self.status_label = QLabel("")
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setWordWrap(True)
        return self.status_label

    # -- actions --

    def read_config(self) -> GeneratorConfig:
        """
        Snapshot the form into a config.
        """
        self.config = replace(
            self.config,
            length=self.length_spin.value(),
            lowercase=self.lower_check.isChecked(),
            uppercase=self.upper_check.isChecked(),
            digits=self.digits_check.isChecked(),
            symbols=self.symbols_check.isChecked(),
            source=self.source_combo.currentText(),
            auto_copy=self.autocopy_check.isChecked(),
        )
        return self.config

    def on_generate_clicked(self) -> None:
        cfg = self.read_config()

        try:
            meta = generate_password_with_meta(cfg)
        except MixPassError as exc:
            self._show_error(f"Error while generating password:\n{exc}")
            return

        self.password_field.setText(meta.password)

        if not cfg.enabled_classes():
            self.status_label.setText("Select at least one character type.")
            return

        self.status_label.setText(
            f"Generated {len(meta.password)} characters from "
            f"{len(meta.result.classes)} character types ({cfg.source} source)."
        )

        if cfg.auto_copy and meta.password:
            self.copy_to_clipboard(show_message=False)

    def copy_to_clipboard(self, show_message: bool = True) -> bool:
        password = self.password_field.text()
        if not password:
            self._show_error("No password to copy. Generate one first.")
            return False

        outcome = self.copier.copy(password)
        if not outcome:
            self._show_error("Failed to copy password.")
            return False

        self._arm_clipboard_clear(password)

        if show_message:
            suffix = " (fallback)" if outcome.method != "qt" else ""
            self.status_label.setText(f"Password copied to clipboard{suffix}.")
        return True

    def _arm_clipboard_clear(self, value: str) -> None:
        if self.config.clipboard_clear_ms <= 0:
            return
        self._clipboard_value = value
        self._clipboard_timer.start(self.config.clipboard_clear_ms)

    def _on_clipboard_timeout(self) -> None:
        """
        Clear the clipboard if it still holds the value we placed.
        """
        value, self._clipboard_value = self._clipboard_value, None
        if not value:
            return

        cb = QGuiApplication.clipboard()
        if cb.text() == value:
            cb.clear()
            self.status_label.setText("Clipboard cleared.")

    def _show_error(self, message: str) -> None:
        self.status_label.setText(message)
        msg = QMessageBox(self)
        msg.setWindowTitle("Error")
        msg.setIcon(QMessageBox.Critical)
        msg.setText(message)
        msg.exec()


class MixPassWindow(QMainWindow):
    def __init__(self, config: GeneratorConfig | None = None) -> None:
        super().__init__()

        self.setWindowTitle("MixPass")
        self.setMinimumSize(420, 520)

        self._apply_base_style()

        self.generator_widget = GeneratorWidget(config)
        self.setCentralWidget(self.generator_widget)

    def _apply_base_style(self) -> None:
        self.setStyleSheet(
            """
            QWidget {
                color: #e5e7eb;
                background-color: #05070c;
                font-family: Segoe UI, Arial, sans-serif;
            }
            QGroupBox {
                border: 1px solid #1f2933;
                border-radius: 10px;
                margin-top: 16px;
                background-color: #080b12;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                subcontrol-position: top left;
                padding: 2px 8px;
                color: #7dd3fc;
                font-weight: 600;
            }
            QLineEdit, QSpinBox, QComboBox {
                border: 1px solid #1f2933;
                border-radius: 6px;
                padding: 4px 6px;
                background-color: #050810;
            }
            QPushButton {
                border-radius: 8px;
                padding: 6px 14px;
                background-color: #0b1120;
                border: 1px solid #38bdf8;
            }
            QPushButton:pressed {
                background-color: #000000;
            }
            QCheckBox::indicator:checked {
                border: 1px solid #38bdf8;
                background-color: #38bdf8;
            }
            """
        )


def main() -> None:
    logging.basicConfig(level=logging.WARNING)
    app = QApplication(sys.argv)
    window = MixPassWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
