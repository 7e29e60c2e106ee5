"""Shared fixtures."""

import pytest

from vpnman.backend.base import CommandError
from vpnman.backend.models import Command, VPNConfiguration

LISTING = """Available network connection services in the current set (*=enabled):
* (Connected)      ABCD-1234 IKEv2                PPP    "MyVPN"                         [VPN/IKEv2]
* (Disconnected)   EFGH-5678 IPSec                PPP    "Office"                        [VPN/IPSec]
* (Disconnected)   MNOP-3456 PPP                  Modem  "Dialup"                        [PPP/Modem]
* (Disconnected)   IJKL-9012 com.wireguard.macos  VPN    "Home"                          [VPN/WireGuard]
"""


class FakeBackend:
    """In-memory backend recording the commands it is asked to run."""

    def __init__(self, configs=None, fail=False):
        self.configs = configs or []
        self.fail = fail
        self.commands: list[Command] = []

    def run(self, command: Command) -> str:
        self.commands.append(command)
        if self.fail:
            raise CommandError(f"{command.body} failed")
        return ""

    def list_configurations(self) -> list[VPNConfiguration]:
        self.commands.append(Command.list())
        if self.fail:
            raise CommandError("scutil --nc list failed")
        return [
            VPNConfiguration(c.id, c.name, c.is_connected, c.service_type)
            for c in self.configs
        ]

    def start(self, name: str) -> None:
        self.run(Command.start(name))

    def stop(self, name: str) -> None:
        self.run(Command.stop(name))


@pytest.fixture
def configs():
    return [
        VPNConfiguration(id="ABCD-1234", name="MyVPN", is_connected=True, service_type="IKEv2"),
        VPNConfiguration(id="EFGH-5678", name="Office", is_connected=False, service_type="IPSec"),
    ]


@pytest.fixture
def backend(configs):
    return FakeBackend(configs)


@pytest.fixture
def listing():
    return LISTING
