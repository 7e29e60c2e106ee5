"""Parsing of ``scutil --nc list`` output.

Expected line layout (whitespace separated, at least six tokens)::

    * (Connected)    ABCD-1234 IPSec  PPP    "Office"  [VPN/IPSec]
    <idx> <status>   <uuid>    <type> <kind> "<name>"  ...

Only the first six tokens are used, so multi-word names are truncated to
their first word.
"""

import logging

from vpnman.backend.base import FormatError
from vpnman.backend.models import VPNConfiguration

log = logging.getLogger(__name__)

MIN_TOKENS = 6
CONNECTED = "(Connected)"


def filter_vpn_lines(output: str) -> list[str]:
    """Return the non-empty lines mentioning ``vpn`` (any case)."""
    return [
        line for line in output.split("\n")
        if line and "vpn" in line.lower()
    ]


def _unquote(token: str) -> str:
    """Strip surrounding whitespace and one layer of double quotes."""
    token = token.strip()
    if token.startswith('"'):
        token = token[1:]
    if token.endswith('"'):
        token = token[:-1]
    return token.strip()


def parse_vpn_line(line: str) -> VPNConfiguration:
    """Parse one listing line into a configuration.

    Raises:
        FormatError: If the line has fewer than six tokens
    """
    tokens = line.split()
    if len(tokens) < MIN_TOKENS:
        raise FormatError(f"Invalid VPN configuration: {line}")

    return VPNConfiguration(
        id=tokens[2],
        name=_unquote(tokens[5]),
        is_connected=tokens[1] == CONNECTED,
        service_type=tokens[3],
    )


def parse_vpn_list(output: str) -> list[VPNConfiguration]:
    """Parse the full listing text.

    Identifiers are expected to be unique; a repeated identifier keeps the
    first record and drops the rest.
    """
    configs: list[VPNConfiguration] = []
    seen: set[str] = set()

    for line in filter_vpn_lines(output):
        config = parse_vpn_line(line)
        if config.id in seen:
            log.warning("Duplicate VPN identifier %s ignored: %s", config.id, line)
            continue
        seen.add(config.id)
        configs.append(config)

    return configs
