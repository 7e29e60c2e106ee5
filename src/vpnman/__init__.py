"""VPNMan - menu bar toggle for macOS VPN configurations."""

__version__ = "1.0.0"
