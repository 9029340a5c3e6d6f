# tray_shell.py
# Owns the system tray icon and its menu for the lifetime of the application.

import logging
from PySide6.QtCore import QObject
from PySide6.QtWidgets import QApplication, QMenu, QStyle, QSystemTrayIcon

from config import APP_NAME


class TrayShell(QObject):
    """
    Built once at startup. Exposes show/hide/toggle/quit as explicit commands
    for the tray menu, the tray icon and the rest of the application.
    """
    def __init__(self, window, app=None):
        super().__init__()
        self.window = window
        self.app = app or QApplication.instance()
        self.tray_icon = None
        self.menu = None

        if not QSystemTrayIcon.isSystemTrayAvailable():
            logging.warning("No system tray available. Closing the window will quit the application.")
            return

        icon = self.app.windowIcon()
        if icon.isNull():
            icon = self.app.style().standardIcon(QStyle.SP_FileDialogDetailedView)

        self.menu = QMenu()
        self.menu.addAction("Show/Hide", self.toggle_window)
        self.menu.addSeparator()
        self.menu.addAction("Quit", self.quit)

        self.tray_icon = QSystemTrayIcon(icon, self)
        self.tray_icon.setToolTip(APP_NAME)
        self.tray_icon.setContextMenu(self.menu)
        self.tray_icon.activated.connect(self.on_activated)
        self.tray_icon.show()

        # With a tray icon, closing the window only hides it.
        self.window.hide_on_close = True
        self.app.setQuitOnLastWindowClosed(False)
        logging.info("Tray icon created.")

    @property
    def is_available(self):
        return self.tray_icon is not None

    def on_activated(self, reason):
        # Left click toggles, right click opens the menu.
        if reason == QSystemTrayIcon.Trigger:
            self.toggle_window()

    def show_window(self):
        self.window.show()
        self.window.raise_()
        self.window.activateWindow()

    def hide_window(self):
        self.window.hide()

    def toggle_window(self):
        if self.window.isVisible():
            self.hide_window()
        else:
            self.show_window()

    def quit(self):
        logging.info("Quit requested.")
        self.window.hide_on_close = False
        if self.tray_icon:
            self.tray_icon.hide()
        self.window.close()
        self.app.quit()
