"""scutil command runner and backend.

Every call spawns one shell process; there is no pooling, timeout or
cancellation.
"""

import logging
import subprocess

from vpnman.backend.base import CommandError
from vpnman.backend.models import Command, VPNConfiguration
from vpnman.backend.parser import parse_vpn_list
from vpnman.constants import SHELL

log = logging.getLogger(__name__)


def run_command(command: Command) -> str:
    """Run a scutil command through the shell.

    Args:
        command: Command to execute

    Returns:
        Combined stdout/stderr output

    Raises:
        CommandError: If the process cannot be started, its output is not
            UTF-8, or it exits with a non-zero status
    """
    body = command.body
    log.debug("Running: %s", body)

    try:
        result = subprocess.run(
            [SHELL, "-c", body],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except OSError as e:
        raise CommandError(f"Failed to run '{body}': {e}") from e

    try:
        output = result.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CommandError("Failed to parse output") from e

    if result.returncode != 0:
        log.warning("'%s' exited with status %d", body, result.returncode)
        raise CommandError(output)

    return output


class ScutilBackend:
    """VPN backend driving ``scutil --nc``."""

    def run(self, command: Command) -> str:
        return run_command(command)

    def list_configurations(self) -> list[VPNConfiguration]:
        configs = parse_vpn_list(self.run(Command.list()))
        log.debug("Found %d VPN configuration(s)", len(configs))
        return configs

    def start(self, name: str) -> None:
        self.run(Command.start(name))

    def stop(self, name: str) -> None:
        self.run(Command.stop(name))
