"""Main application controller for VPNMan."""

import argparse
import logging
import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication, QMessageBox

from vpnman.backend import VPNConfiguration, get_backend
from vpnman.constants import APP_NAME, LOG_FILE, LOGS_DIR, VERSION, get_icon
from vpnman.controller import VPNController
from vpnman.platform.autostart import is_autostart_enabled, set_autostart
from vpnman.platform.preferences import Preferences
from vpnman.tray import VPNTrayIcon
from vpnman.worker import WorkerThread, create_list_thread, create_toggle_thread

log = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Log to stderr and to ~/Library/Logs/vpnman.log."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    file_error = None
    try:
        LOGS_DIR.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(LOG_FILE))
    except OSError as e:
        file_error = e

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )

    if file_error is not None:
        log.warning("Not logging to %s: %s", LOG_FILE, file_error)


def initial_launch_at_login(preference: bool) -> bool:
    """Launch at login state to show at startup.

    The installed LaunchAgent wins over a stale saved preference.
    """
    registered = is_autostart_enabled()
    if registered != preference:
        log.info("Launch at login preference out of sync, using %s", registered)
    return registered

class VPNApplication:
    """Main VPNMan application controller."""

    def __init__(self, argv: Optional[list] = None):
        self.app = QApplication(argv if argv is not None else sys.argv)

        # Application metadata
        self.app.setApplicationName(APP_NAME)
        self.app.setApplicationDisplayName(APP_NAME)
        self.app.setApplicationVersion(VERSION)
        self.app.setQuitOnLastWindowClosed(False)  # Keep running in the menu bar

        app_icon = get_icon("app-icon")
        if not app_icon.isNull():
            self.app.setWindowIcon(app_icon)

        self.backend = get_backend()
        self.controller = VPNController(self.backend)
        self.preferences = Preferences()
        self._threads: list[WorkerThread] = []

        self.tray = VPNTrayIcon()

        # Connect signals
        self.tray.toggle_requested.connect(self._on_toggle_requested)
        self.tray.refresh_requested.connect(self.refresh)
        self.tray.launch_at_login_toggled.connect(self._on_launch_at_login_toggled)
        self.tray.quit_requested.connect(self._quit)
        self.app.aboutToQuit.connect(self._save_preferences)

        self.controller.subscribe(self._on_configurations_changed)

        self._launch_at_login = initial_launch_at_login(self.preferences.launch_at_login)
        self.tray.set_launch_at_login(self._launch_at_login)

    def run(self) -> int:
        """Run the application.

        Returns:
            Exit code
        """
        self.tray.show()
        self.refresh()
        return self.app.exec()

    # Workers

    def _start_thread(self, thread: WorkerThread, on_finished) -> None:
        thread.finished.connect(lambda result, t=thread: self._on_thread_finished(t, on_finished, result))
        thread.error.connect(lambda message, t=thread: self._on_thread_error(t, message))
        self._threads.append(thread)
        thread.start()

    def _release_thread(self, thread: WorkerThread) -> None:
        if thread.isRunning():
            thread.wait(1000)
        if thread in self._threads:
            self._threads.remove(thread)
        thread.deleteLater()

    def _on_thread_finished(self, thread: WorkerThread, handler, result) -> None:
        self._release_thread(thread)
        handler(result)

    def _on_thread_error(self, thread: WorkerThread, message: str) -> None:
        self._release_thread(thread)
        self._alert_error(message)

    # Listing

    def refresh(self) -> None:
        """List configurations in the background."""
        log.debug("Refreshing VPN configurations")
        self._start_thread(create_list_thread(self.backend), self.controller.replace)

    def _on_configurations_changed(self, configs: list[VPNConfiguration]) -> None:
        self.tray.update_configurations(configs)
        self.tray.set_connected_indicator(self.controller.is_any_connected())

    # Toggling

    def _on_toggle_requested(self, config_id: str) -> None:
        config = self.controller.get(config_id)
        if config is None:
            return
        self._start_thread(create_toggle_thread(self.backend, config), self._on_toggle_finished)

    def _on_toggle_finished(self, result: VPNConfiguration) -> None:
        log.info("%s is now %s", result.name, "connected" if result.is_connected else "disconnected")
        self.controller.apply_toggle(result.id, result.is_connected)

    # Launch at login

    def _on_launch_at_login_toggled(self, enabled: bool) -> None:
        self._launch_at_login = enabled
        if not set_autostart(enabled):
            self._alert_error(
                f"Failed to {'enable' if enabled else 'disable'} launch at login.",
                "Failed to register or unregister for launch at login",
            )
        self.tray.set_launch_at_login(self._launch_at_login)

    def _save_preferences(self) -> None:
        self.preferences.launch_at_login = self._launch_at_login

    # Errors

    def _alert_error(self, message: str, additional_info: Optional[str] = None) -> None:
        """Show a blocking error dialog."""
        log.error("%s", message)
        box = QMessageBox()
        box.setIcon(QMessageBox.Icon.Critical)
        box.setWindowTitle(APP_NAME)
        box.setText(message)
        if additional_info:
            box.setInformativeText(additional_info)
        box.exec()

    def _quit(self) -> None:
        self.tray.hide()
        self.app.quit()


def main() -> int:
    """Entry point.

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(prog="vpnman", description=f"{APP_NAME} menu bar VPN toggle")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    args, qt_args = parser.parse_known_args()

    setup_logging(args.debug)
    log.info("Starting %s %s", APP_NAME, VERSION)

    app = VPNApplication([sys.argv[0]] + qt_args)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
