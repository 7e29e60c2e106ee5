"""QThread workers for scutil operations."""

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from vpnman.backend.base import VPNManError
from vpnman.backend.models import VPNConfiguration
from vpnman.controller import VPNController

if TYPE_CHECKING:
    from vpnman.backend.base import VPNBackendProtocol

log = logging.getLogger(__name__)


class ListWorker(QObject):
    """Worker listing VPN configurations."""

    started = pyqtSignal()
    finished = pyqtSignal(object)  # list[VPNConfiguration]
    error = pyqtSignal(str)

    def __init__(self, backend: "VPNBackendProtocol"):
        super().__init__()
        self.backend = backend

    def run(self) -> None:
        self.started.emit()

        try:
            configs = self.backend.list_configurations()
        except VPNManError as e:
            log.error("Listing VPN configurations failed: %s", e)
            self.error.emit(str(e))
            return

        self.finished.emit(configs)


class ToggleWorker(QObject):
    """Worker starting or stopping one VPN configuration."""

    started = pyqtSignal()
    finished = pyqtSignal(object)  # VPNConfiguration with the new state
    error = pyqtSignal(str)

    def __init__(self, backend: "VPNBackendProtocol", config: VPNConfiguration):
        """Initialize the toggle worker.

        Args:
            backend: VPN backend instance
            config: Configuration to toggle, as currently displayed
        """
        super().__init__()
        self.backend = backend
        self.command = VPNController.command_for(config)
        # Outcome fixed at click time; a racing toggle must not invert it
        self.result = replace(config, is_connected=not config.is_connected)

    def run(self) -> None:
        self.started.emit()

        try:
            self.backend.run(self.command)
        except VPNManError as e:
            log.error("'%s' failed: %s", self.command.body, e)
            self.error.emit(str(e))
            return

        self.finished.emit(self.result)


class WorkerThread(QThread):
    """Thread wrapper for workers."""

    started = pyqtSignal()
    finished = pyqtSignal(object)
    error = pyqtSignal(str)

    def __init__(self, worker: QObject):
        super().__init__()
        self.worker = worker

        # Forward signals
        self.worker.started.connect(self.started.emit)
        self.worker.finished.connect(self._on_finished)
        self.worker.error.connect(self.error.emit)

        self.worker.moveToThread(self)

    def _on_finished(self, result):
        self.finished.emit(result)

    def run(self):
        self.worker.run()


def create_list_thread(backend: "VPNBackendProtocol") -> WorkerThread:
    """Create a listing worker thread."""
    return WorkerThread(ListWorker(backend))


def create_toggle_thread(backend: "VPNBackendProtocol", config: VPNConfiguration) -> WorkerThread:
    """Create a start/stop worker thread."""
    return WorkerThread(ToggleWorker(backend, config))
