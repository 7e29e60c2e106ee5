"""Data types shared by the scutil backend and the UI."""

import shlex
from dataclasses import dataclass
from typing import Optional

LIST = "list"
START = "start"
STOP = "stop"


@dataclass
class VPNConfiguration:
    """One VPN configuration as reported by ``scutil --nc list``."""
    id: str
    name: str
    is_connected: bool
    service_type: str


@dataclass(frozen=True)
class Command:
    """A scutil network-connection command."""
    action: str
    name: Optional[str] = None

    @classmethod
    def list(cls) -> "Command":
        return cls(LIST)

    @classmethod
    def start(cls, name: str) -> "Command":
        return cls(START, name)

    @classmethod
    def stop(cls, name: str) -> "Command":
        return cls(STOP, name)

    @property
    def body(self) -> str:
        """Shell command line for this command."""
        if self.action == LIST:
            return "scutil --nc list"
        if self.action in (START, STOP):
            return f"scutil --nc {self.action} {shlex.quote(self.name or '')}"
        raise ValueError(f"Unknown scutil action: {self.action}")
