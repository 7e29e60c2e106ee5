"""Platform-specific modules.

This package provides macOS implementations for:
- autostart: launch at login via a LaunchAgent
- preferences: persisted user preferences
"""
