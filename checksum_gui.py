# checksum_gui.py

import sys
import os
import logging

from PySide6.QtCore import QThread, Qt
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import (
    QApplication, QWidget, QPushButton, QFileDialog, QLabel,
    QVBoxLayout, QHBoxLayout, QMessageBox
)
from config import APP_NAME, WINDOW_WIDTH, WINDOW_HEIGHT
from workers import ChecksumWorker
import styles

from logger_setup import setup_global_logger
from tray_shell import TrayShell
from ui_panels import DropZone, FileInfoPanel, ChecksumPanel


class ChecksumWindow(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.setMinimumWidth(600)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        # --- Instance variables ---
        self.file_path = None
        self.checksum_worker = None
        # Threads still running, including ones whose result is no longer wanted
        self.running_checks = {}
        self.theme = "dark"
        # Set by TrayShell when a tray icon exists
        self.hide_on_close = False

        self.build_ui()
        self.connect_signals()
        self.apply_theme(self.theme)
        self.show_results(False)

    def build_ui(self):
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(15, 15, 15, 15)
        self.layout.setSpacing(10)

        header_layout = QHBoxLayout()
        title = QLabel(f"<h2># {APP_NAME}</h2>")
        title.setAlignment(Qt.AlignCenter)
        self.btn_theme = QPushButton()
        self.btn_theme.setFixedWidth(90)
        header_layout.addWidget(title, 1)
        header_layout.addWidget(self.btn_theme)
        self.layout.addLayout(header_layout)

        subtitle = QLabel("Select or drop a file to calculate its checksums<br>Supports MD5, SHA1, SHA256, and SHA512")
        subtitle.setObjectName("mutedLabel")
        subtitle.setAlignment(Qt.AlignCenter)
        self.layout.addWidget(subtitle)

        self.drop_zone = DropZone()
        self.layout.addWidget(self.drop_zone)

        self.btn_reset = QPushButton("Reset")
        self.status = QLabel("Ready")
        self.status.setObjectName("mutedLabel")
        status_layout = QHBoxLayout()
        status_layout.addWidget(self.status, 1)
        status_layout.addWidget(self.btn_reset)
        self.layout.addLayout(status_layout)

        self.file_info_panel = FileInfoPanel()
        self.checksum_panel = ChecksumPanel()
        self.layout.addWidget(self.file_info_panel)
        self.layout.addWidget(self.checksum_panel)
        self.layout.addStretch()

        footer = QLabel("All calculations are performed locally on your device")
        footer.setObjectName("mutedLabel")
        footer.setAlignment(Qt.AlignCenter)
        self.layout.addWidget(footer)

    def connect_signals(self):
        self.drop_zone.clicked.connect(self.select_file)
        self.drop_zone.file_dropped.connect(self.start_checksum)
        self.btn_reset.clicked.connect(self.reset)
        self.btn_theme.clicked.connect(self.toggle_theme)

    def apply_theme(self, theme):
        self.theme = theme
        self.COLORS = styles.get_colors(theme)
        self.STYLES = {
            **styles.get_button_styles(self.COLORS),
            **styles.get_drop_zone_styles(self.COLORS)
        }
        self.setStyleSheet(styles.get_main_stylesheet(self.COLORS))
        self.drop_zone.set_styles(self.STYLES)
        self.checksum_panel.set_styles(self.STYLES)
        self.btn_theme.setStyleSheet(self.STYLES['toned_down'])
        self.btn_reset.setStyleSheet(self.STYLES['toned_down'])
        self.btn_theme.setText("Light" if theme == "dark" else "Dark")

    def toggle_theme(self):
        self.apply_theme("light" if self.theme == "dark" else "dark")

    def show_results(self, visible):
        self.checksum_panel.setVisible(visible)
        self.btn_reset.setVisible(visible or self.file_path is not None)
        self.file_info_panel.setVisible(self.file_path is not None)

    def center_on_screen(self):
        screen = self.screen() or QGuiApplication.primaryScreen()
        if screen is None:
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())

    def select_file(self):
        file_path, _ = QFileDialog.getOpenFileName(self, "Select File", "", "All Files (*)")
        if file_path:
            self.start_checksum(file_path)

    def start_checksum(self, file_path):
        self.file_path = file_path
        self.file_info_panel.clear()
        self.file_info_panel.show_path(file_path)
        self.checksum_panel.clear()
        self.show_results(False)
        self.status.setText(f"Calculating checksums for {os.path.basename(file_path)}...")

        self._forget_finished_checks()
        check_thread = QThread()
        worker = ChecksumWorker(file_path)
        worker.moveToThread(check_thread)
        self.checksum_worker = worker
        self.running_checks[check_thread] = worker

        worker.finished.connect(self.handle_checksum_finished)
        worker.error_occurred.connect(self.handle_checksum_error)
        worker.finished.connect(check_thread.quit)
        worker.error_occurred.connect(check_thread.quit)
        check_thread.started.connect(worker.run)
        check_thread.start()

    def _forget_finished_checks(self):
        self.running_checks = {
            thread: worker for thread, worker in self.running_checks.items() if thread.isRunning()
        }

    def _is_current(self, request):
        return self.checksum_worker is not None and request is self.checksum_worker.request

    def handle_checksum_finished(self, request, result):
        if not self._is_current(request):
            logging.info(f"Ignoring stale result for {request.path}")
            return
        self.checksum_worker = None
        self.file_info_panel.show_result(result)
        self.checksum_panel.show_result(result)
        self.show_results(True)
        self.status.setText("Done")
        self.adjustSize()

    def handle_checksum_error(self, request, error_message):
        if not self._is_current(request):
            logging.info(f"Ignoring stale error for {request.path}: {error_message}")
            return
        self.checksum_worker = None
        logging.error(f"Checksum calculation failed: {error_message}")
        self.status.setText("[ERROR] Could not calculate checksums.")
        QMessageBox.critical(self, "Error Calculating Checksums", error_message)

    def reset(self):
        # Results of a check still in flight are dropped when they arrive.
        self.checksum_worker = None
        self.file_path = None
        self.file_info_panel.clear()
        self.checksum_panel.clear()
        self.show_results(False)
        self.status.setText("Ready")
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

    def closeEvent(self, event):
        if self.hide_on_close:
            event.ignore()
            self.hide()
            return
        for check_thread in list(self.running_checks):
            check_thread.quit()
            check_thread.wait()
        event.accept()


def main():
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    setup_global_logger()

    window = ChecksumWindow()
    # The tray has to outlive the event loop.
    tray = TrayShell(window, app)
    window.center_on_screen()
    window.show()
    exit_code = app.exec()
    logging.info(f"{APP_NAME} exited with code {exit_code}.")
    if tray.is_available:
        tray.tray_icon.hide()
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
