# ui_panels.py
# Contains specialized QFrame classes for each section of the GUI.

from PySide6.QtCore import Qt, Signal, QTimer
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import (
    QFrame, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QGridLayout
)

from config import COPY_FEEDBACK_MS
from data_models import DIGEST_HEX_LENGTHS, CREATED_FROM_BIRTHTIME
from formatting import format_file_size, format_timestamp


class DropZone(QFrame):
    """The area that opens the file dialog on click and accepts a dropped file."""
    clicked = Signal()
    file_dropped = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAcceptDrops(True)
        self.setCursor(Qt.PointingHandCursor)
        self.styles = {}
        layout = QVBoxLayout(self)
        title = QLabel("<b>Drop your file here</b>")
        title.setAlignment(Qt.AlignCenter)
        hint = QLabel("or click to browse")
        hint.setObjectName("mutedLabel")
        hint.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)
        layout.addWidget(hint)

    def set_styles(self, styles):
        self.styles = styles
        self.set_dragging(False)

    def set_dragging(self, is_dragging):
        style_key = 'drop_active' if is_dragging else 'drop_idle'
        self.setStyleSheet(self.styles.get(style_key, ""))

    @staticmethod
    def _first_local_file(mime_data):
        """Returns the first local file path of a drag, or None."""
        if not mime_data.hasUrls():
            return None
        for url in mime_data.urls():
            if url.isLocalFile():
                return url.toLocalFile()
        return None

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.clicked.emit()
        super().mousePressEvent(event)

    def dragEnterEvent(self, event):
        if self._first_local_file(event.mimeData()):
            self.set_dragging(True)
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragLeaveEvent(self, event):
        self.set_dragging(False)
        super().dragLeaveEvent(event)

    def dropEvent(self, event):
        self.set_dragging(False)
        file_path = self._first_local_file(event.mimeData())
        if file_path:
            event.acceptProposedAction()
            self.file_dropped.emit(file_path)


class FileInfoPanel(QFrame):
    """The panel showing path, size and timestamps of the selected file."""
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFrameShape(QFrame.StyledPanel)
        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("<b>File Information</b>"))
        self.path_label = QLabel()
        self.path_label.setWordWrap(True)
        self.path_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.size_label = QLabel()
        self.modified_label = QLabel()
        self.created_label = QLabel()
        for label in (self.path_label, self.size_label, self.modified_label, self.created_label):
            layout.addWidget(label)
        self.clear()

    def clear(self):
        self.path_label.setText("")
        self.size_label.setText("")
        self.modified_label.setText("")
        self.created_label.setText("")

    def show_path(self, file_path):
        self.path_label.setText(f"Path: {file_path}")

    def show_result(self, result):
        self.size_label.setText(f"Size: {format_file_size(result.file_size)}")
        self.modified_label.setText(f"Modified: {format_timestamp(result.modified)}")
        created_text = format_timestamp(result.created)
        if result.created_source != CREATED_FROM_BIRTHTIME:
            # Not a real creation time on this platform.
            created_text += " (last metadata change)"
        self.created_label.setText(f"Created: {created_text}")


class ChecksumPanel(QFrame):
    """The panel listing the four digests, each with its own copy button."""
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFrameShape(QFrame.StyledPanel)
        self.styles = {}
        self.value_labels = {}
        self.copy_buttons = {}
        self.copy_timers = {}

        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("<b>Checksums</b>"))
        grid = QGridLayout()
        for row, name in enumerate(DIGEST_HEX_LENGTHS):
            name_label = QLabel(f"<b>{name.upper()}:</b>")
            copy_button = QPushButton("Copy")
            copy_button.clicked.connect(lambda checked=False, n=name: self.copy_digest(n))
            value_label = QLabel()
            value_label.setObjectName("digestValue")
            value_label.setWordWrap(True)
            value_label.setTextInteractionFlags(Qt.TextSelectableByMouse)

            header = QHBoxLayout()
            header.addWidget(name_label, 1)
            header.addWidget(copy_button)
            grid.addLayout(header, row * 2, 0)
            grid.addWidget(value_label, row * 2 + 1, 0)

            self.value_labels[name] = value_label
            self.copy_buttons[name] = copy_button

            # One timer per button, restarted on every click
            timer = QTimer(copy_button)
            timer.setSingleShot(True)
            timer.setInterval(COPY_FEEDBACK_MS)
            timer.timeout.connect(lambda n=name: self._reset_copy_button(n))
            self.copy_timers[name] = timer
        layout.addLayout(grid)

    def set_styles(self, styles):
        self.styles = styles
        for button in self.copy_buttons.values():
            button.setStyleSheet(self.styles.get('toned_down', ""))

    def clear(self):
        for label in self.value_labels.values():
            label.setText("")

    def show_result(self, result):
        for name, digest in result.digests():
            self.value_labels[name].setText(digest)

    def copy_digest(self, name):
        """Copies one digest to the clipboard and flags the button for a moment."""
        digest = self.value_labels[name].text()
        if not digest:
            return
        QGuiApplication.clipboard().setText(digest)
        button = self.copy_buttons[name]
        button.setText("Copied!")
        button.setStyleSheet(self.styles.get('copied', ""))
        self.copy_timers[name].start()

    def _reset_copy_button(self, name):
        button = self.copy_buttons[name]
        button.setText("Copy")
        button.setStyleSheet(self.styles.get('toned_down', ""))
