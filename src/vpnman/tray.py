"""Menu bar icon and menu."""

from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QMenu, QSystemTrayIcon

from vpnman.backend.models import VPNConfiguration

from .constants import (
    APP_NAME,
    STATUS_CONNECTED,
    STATUS_DISCONNECTED,
    get_icon,
)


class VPNTrayIcon(QObject):
    """Menu bar icon listing VPN configurations."""

    toggle_requested = pyqtSignal(str)  # configuration id
    refresh_requested = pyqtSignal()
    launch_at_login_toggled = pyqtSignal(bool)
    quit_requested = pyqtSignal()

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)

        self.tray = QSystemTrayIcon(parent)
        self.tray.setToolTip(APP_NAME)

        self._status = STATUS_DISCONNECTED
        self._config_actions: list[QAction] = []

        self._icons = {
            STATUS_DISCONNECTED: get_icon("vpn-disconnected"),
            STATUS_CONNECTED: get_icon("vpn-connected"),
        }

        # Fallback to app icon
        app_icon = get_icon("app-icon")
        if not app_icon.isNull():
            for status in self._icons:
                if self._icons[status].isNull():
                    self._icons[status] = app_icon

        self._setup_menu()
        self._update_icon()

    def _setup_menu(self):
        self.menu = QMenu()

        # Configuration actions are inserted before this separator
        self._configs_end = self.menu.addSeparator()

        refresh_action = self.menu.addAction("Refresh")
        refresh_action.triggered.connect(self.refresh_requested.emit)

        self.menu.addSeparator()

        self._launch_at_login_action = self.menu.addAction("Launch at Login")
        self._launch_at_login_action.setCheckable(True)
        self._launch_at_login_action.triggered.connect(self.launch_at_login_toggled.emit)

        self.menu.addSeparator()

        quit_action = self.menu.addAction("Quit")
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.quit_requested.emit)

        self.tray.setContextMenu(self.menu)

    def update_configurations(self, configs: list[VPNConfiguration]):
        """Rebuild the configuration entries of the menu."""
        for action in self._config_actions:
            self.menu.removeAction(action)
            action.deleteLater()
        self._config_actions = []

        for config in configs:
            action = QAction(config.name, self.menu)
            action.setCheckable(True)
            action.setChecked(config.is_connected)
            action.setToolTip(config.service_type)
            # Keep the check mark in sync with the controller, not the click
            action.triggered.connect(
                lambda checked, a=action, c=config: self._on_config_triggered(a, c)
            )
            self.menu.insertAction(self._configs_end, action)
            self._config_actions.append(action)

    def _on_config_triggered(self, action: QAction, config: VPNConfiguration):
        action.setChecked(config.is_connected)
        self.toggle_requested.emit(config.id)

    def set_connected_indicator(self, connected: bool):
        """Show whether any VPN configuration is connected."""
        self._status = STATUS_CONNECTED if connected else STATUS_DISCONNECTED
        self._update_icon()
        state = "Connected" if connected else "Disconnected"
        self.tray.setToolTip(f"{APP_NAME} - {state}")

    def set_launch_at_login(self, enabled: bool):
        self._launch_at_login_action.setChecked(enabled)

    def _update_icon(self):
        icon = self._icons.get(self._status, self._icons[STATUS_DISCONNECTED])
        self.tray.setIcon(icon)

    def show(self):
        self.tray.show()

    def hide(self):
        self.tray.hide()
