"""Constants and configuration for VPNMan."""

from pathlib import Path

from PyQt6.QtGui import QIcon

from vpnman import __version__

# Application info
APP_NAME = "VPNMan"
APP_ID = "com.github.vpnman"
VERSION = __version__

# Paths
RESOURCES_DIR = Path(__file__).parent / "resources"
ICONS_DIR = RESOURCES_DIR / "icons"
LOGS_DIR = Path.home() / "Library" / "Logs"
LOG_FILE = LOGS_DIR / "vpnman.log"

# Shell used to run scutil
SHELL = "/bin/zsh"

# Status constants
STATUS_DISCONNECTED = "disconnected"
STATUS_CONNECTED = "connected"

# Preferences
KEYRING_SERVICE = "vpnman"
PREFERENCES_KEY = "preferences"
LAUNCH_AT_LOGIN_KEY = "launchAtLogin"


def get_icon(name: str) -> QIcon:
    """Get a bundled icon.

    Args:
        name: Icon name (without extension)

    Returns:
        QIcon instance
    """
    for ext in (".svg", ".png"):
        path = ICONS_DIR / f"{name}{ext}"
        if path.exists():
            return QIcon(str(path))

    return QIcon()
