"""
Time Fields
===========
The three hh:mm:ss line edits. They show the live clock while it runs and
become the time input once the clock is paused.
"""
from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QWidget

from hourpuzzle.model.clock import RESET_VALUE, TimeField

FIELD_TOOLTIPS: dict[TimeField, str] = {
    TimeField.HOUR: "Hora (0-23)",
    TimeField.MINUTE: "Minuto (0-60)",
    TimeField.SECOND: "Segundo (0-60)",
}


class TimeFieldEditor(QWidget):
    """Implements `TimeFieldPort` on top of three QLineEdits."""
    edited = Signal(str, str)  # (field name, raw text)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addStretch()

        self._edits: dict[TimeField, QLineEdit] = {}
        for i, field in enumerate(TimeField):
            if i:
                layout.addWidget(QLabel(":", self))
            edit = QLineEdit(RESET_VALUE, self)
            edit.setObjectName(field.value)
            edit.setToolTip(FIELD_TOOLTIPS[field])
            edit.setAlignment(Qt.AlignmentFlag.AlignCenter)
            edit.setFixedWidth(48)
            edit.textEdited.connect(lambda text, f=field: self.edited.emit(f.value, text))
            layout.addWidget(edit)
            self._edits[field] = edit

        layout.addStretch()
        self.set_enabled(False)

    def line_edit(self, field: TimeField) -> QLineEdit:
        return self._edits[field]

    # --- TimeFieldPort ---

    def get(self, field: TimeField) -> str:
        return self._edits[field].text()

    def set(self, field: TimeField, value: str) -> None:
        edit = self._edits[field]
        # avoid resetting the cursor while the user is typing
        if edit.text() != value:
            edit.setText(value)

    def set_enabled(self, enabled: bool) -> None:
        for edit in self._edits.values():
            edit.setEnabled(enabled)

    def is_enabled(self) -> bool:
        return all(edit.isEnabled() for edit in self._edits.values())
