from __future__ import annotations
from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QPlainTextEdit, QPushButton, QApplication, QLabel
)


class ExportDialog(QDialog):
    """Read-only view of the generated YAML with a copy button."""

    def __init__(self, yaml_text: str, parent=None):
        super().__init__(parent)
        self.setWindowTitle("ESPHome YAML Configuration")
        self.resize(720, 620)

        root = QVBoxLayout(self)
        self.text = QPlainTextEdit(self)
        self.text.setReadOnly(True)
        self.text.setFont(QFontDatabase.systemFont(QFontDatabase.FixedFont))
        self.text.setPlainText(yaml_text)
        root.addWidget(self.text, 1)

        bottom = QHBoxLayout()
        self.lbl_status = QLabel("")
        self.lbl_status.setStyleSheet("color:#667085;")
        self.btn_copy = QPushButton("Copy to Clipboard")
        self.btn_close = QPushButton("Close")
        bottom.addWidget(self.lbl_status, 1)
        bottom.addWidget(self.btn_copy)
        bottom.addWidget(self.btn_close)
        root.addLayout(bottom)

        self.btn_copy.clicked.connect(self._copy)
        self.btn_close.clicked.connect(self.accept)

    def _copy(self):
        QApplication.clipboard().setText(self.text.toPlainText())
        self.lbl_status.setText("Copied.")
