"""Backend module - scutil-based VPN configuration access."""

from typing import TYPE_CHECKING

from .base import CommandError, FormatError, VPNManError
from .models import Command, VPNConfiguration

if TYPE_CHECKING:
    from .base import VPNBackendProtocol

# Singleton instance
_backend_instance = None


def get_backend() -> "VPNBackendProtocol":
    """Get the backend singleton.

    Returns:
        ScutilBackend instance
    """
    global _backend_instance
    if _backend_instance is None:
        from .scutil import ScutilBackend
        _backend_instance = ScutilBackend()
    return _backend_instance


__all__ = [
    "Command",
    "CommandError",
    "FormatError",
    "VPNConfiguration",
    "VPNManError",
    "get_backend",
]
