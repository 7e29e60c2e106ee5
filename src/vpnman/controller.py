"""Owner of the VPN configuration list.

The controller holds the current configurations and publishes every change
to its subscribers. It never touches Qt, so the tray subscribes to it and
the workers feed results back into it on the UI thread.

Toggles are optimistic: after a successful start/stop the record's flag is
flipped without re-listing. Two toggles of the same record racing each
other end in whichever state was applied last.
"""

import logging
from typing import Callable, Optional

from vpnman.backend.base import VPNBackendProtocol
from vpnman.backend.models import Command, VPNConfiguration

log = logging.getLogger(__name__)

Subscriber = Callable[[list[VPNConfiguration]], None]


class VPNController:
    """Holds VPN configurations and maps toggles to scutil commands."""

    def __init__(self, backend: VPNBackendProtocol):
        self.backend = backend
        self._configs: list[VPNConfiguration] = []
        self._subscribers: list[Subscriber] = []

    @property
    def configurations(self) -> list[VPNConfiguration]:
        return list(self._configs)

    def subscribe(self, callback: Subscriber) -> None:
        """Register a callback invoked with the configurations after each change."""
        self._subscribers.append(callback)

    def _publish(self) -> None:
        snapshot = self.configurations
        for callback in self._subscribers:
            callback(snapshot)

    def get(self, config_id: str) -> Optional[VPNConfiguration]:
        for config in self._configs:
            if config.id == config_id:
                return config
        return None

    def _require(self, config_id: str) -> VPNConfiguration:
        config = self.get(config_id)
        if config is None:
            raise KeyError(config_id)
        return config

    def is_any_connected(self) -> bool:
        return any(config.is_connected for config in self._configs)

    def replace(self, configs: list[VPNConfiguration]) -> None:
        """Replace the whole configuration set and publish it."""
        self._configs = list(configs)
        self._publish()

    def refresh(self) -> list[VPNConfiguration]:
        """Re-list configurations from scutil.

        On failure the previous set is kept and the error propagates.
        """
        configs = self.backend.list_configurations()
        self.replace(configs)
        return self.configurations

    @staticmethod
    def command_for(config: VPNConfiguration) -> Command:
        """Command that flips the given configuration's state."""
        if config.is_connected:
            return Command.stop(config.name)
        return Command.start(config.name)

    def apply_toggle(self, config_id: str, connected: bool) -> None:
        """Record the outcome of a successful start/stop and publish it."""
        config = self.get(config_id)
        if config is None:
            # Listing was refreshed while the command ran.
            log.info("Toggled configuration %s no longer listed", config_id)
            return
        config.is_connected = connected
        self._publish()

    def toggle(self, config_id: str) -> VPNConfiguration:
        """Start or stop a configuration synchronously.

        Raises:
            KeyError: If no configuration has this id
            CommandError: If scutil fails; state is left unchanged
        """
        config = self._require(config_id)
        command = self.command_for(config)
        log.info("%s %s", command.action.capitalize(), config.name)

        self.backend.run(command)

        self.apply_toggle(config_id, not config.is_connected)
        return config
