"""Launch at login via a LaunchAgent plist in ~/Library/LaunchAgents/."""

import logging
import plistlib
import shutil
import subprocess
import sys
from pathlib import Path

from vpnman.constants import APP_ID, APP_NAME, LOGS_DIR

log = logging.getLogger(__name__)

LAUNCH_AGENTS_DIR = Path.home() / "Library" / "LaunchAgents"
AUTOSTART_FILE = LAUNCH_AGENTS_DIR / f"{APP_ID}.plist"


def _find_executable() -> str:
    """Find the executable path for the application."""
    app_bundle_paths = [
        Path(f"/Applications/{APP_NAME}.app/Contents/MacOS/vpnman"),
        Path.home() / f"Applications/{APP_NAME}.app/Contents/MacOS/vpnman",
    ]

    for path in app_bundle_paths:
        if path.exists():
            return str(path)

    installed = shutil.which("vpnman")
    if installed:
        return installed

    # Fallback to the command name (should be in PATH)
    return "vpnman"


def _create_launch_agent_plist() -> dict:
    """Create the LaunchAgent plist dictionary."""
    return {
        "Label": APP_ID,
        "ProgramArguments": [_find_executable()],
        "RunAtLoad": True,
        "KeepAlive": False,
        "ProcessType": "Interactive",
        "LSUIElement": True,
        "StandardOutPath": str(LOGS_DIR / f"{APP_ID}.log"),
        "StandardErrorPath": str(LOGS_DIR / f"{APP_ID}.error.log"),
    }


def is_autostart_enabled() -> bool:
    """Check if autostart is currently enabled."""
    if not AUTOSTART_FILE.exists():
        return False

    try:
        with open(AUTOSTART_FILE, "rb") as f:
            plist = plistlib.load(f)
        return not plist.get("Disabled", False)
    except Exception:
        return False


def enable_autostart() -> bool:
    """Enable autostart for the application.

    Returns:
        True if successfully enabled
    """
    try:
        LAUNCH_AGENTS_DIR.mkdir(parents=True, exist_ok=True)
        LOGS_DIR.mkdir(parents=True, exist_ok=True)

        with open(AUTOSTART_FILE, "wb") as f:
            plistlib.dump(_create_launch_agent_plist(), f)

        if sys.platform == "darwin":
            subprocess.run(["launchctl", "load", str(AUTOSTART_FILE)], capture_output=True)
        log.info("Launch at login enabled: %s", AUTOSTART_FILE)
        return True
    except Exception as e:
        log.error("Failed to enable autostart: %s", e)
        return False


def disable_autostart() -> bool:
    """Disable autostart for the application.

    Returns:
        True if successfully disabled
    """
    try:
        if AUTOSTART_FILE.exists():
            if sys.platform == "darwin":
                subprocess.run(["launchctl", "unload", str(AUTOSTART_FILE)], capture_output=True)
            AUTOSTART_FILE.unlink()
        log.info("Launch at login disabled")
        return True
    except Exception as e:
        log.error("Failed to disable autostart: %s", e)
        return False


def set_autostart(enabled: bool) -> bool:
    """Set autostart state.

    Args:
        enabled: True to enable, False to disable

    Returns:
        True if operation succeeded
    """
    if enabled:
        return enable_autostart()
    else:
        return disable_autostart()
