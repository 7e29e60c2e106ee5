"""Base backend protocol and error types."""

from typing import Protocol, runtime_checkable

from vpnman.backend.models import Command, VPNConfiguration


class VPNManError(Exception):
    """Base error for VPN backend operations."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class CommandError(VPNManError):
    """scutil could not be run, its output was not text, or it exited non-zero."""
    pass


class FormatError(VPNManError):
    """A listing line did not match the expected layout."""
    pass


@runtime_checkable
class VPNBackendProtocol(Protocol):
    """Protocol defining the VPN backend interface."""

    def run(self, command: Command) -> str:
        """Run a scutil command.

        Args:
            command: Command to execute

        Returns:
            Combined stdout/stderr text

        Raises:
            CommandError: If the command fails
        """
        ...

    def list_configurations(self) -> list[VPNConfiguration]:
        """List all VPN configurations.

        Raises:
            CommandError: If ``scutil --nc list`` fails
            FormatError: If a listing line cannot be parsed
        """
        ...

    def start(self, name: str) -> None:
        """Start (connect) the named configuration."""
        ...

    def stop(self, name: str) -> None:
        """Stop (disconnect) the named configuration."""
        ...
