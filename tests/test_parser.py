"""Tests for scutil listing parser."""

import pytest

from vpnman.backend.base import FormatError
from vpnman.backend.models import VPNConfiguration
from vpnman.backend.parser import filter_vpn_lines, parse_vpn_line, parse_vpn_list


class TestFilterVPNLines:
    """Tests for line selection."""

    def test_keeps_only_vpn_lines(self, listing):
        lines = filter_vpn_lines(listing)
        assert len(lines) == 3
        assert all("vpn" in line.lower() for line in lines)

    def test_match_is_case_insensitive(self):
        text = "a line with VPN\nanother with Vpn\nnothing here\n"
        assert filter_vpn_lines(text) == ["a line with VPN", "another with Vpn"]

    def test_empty_output(self):
        assert filter_vpn_lines("") == []


class TestParseVPNLine:
    """Tests for single line parsing."""

    def test_connected_line(self):
        config = parse_vpn_line('1 (Connected) ABCD-1234 IKEv2 PPP "MyVPN"')
        assert config == VPNConfiguration(
            id="ABCD-1234",
            name="MyVPN",
            is_connected=True,
            service_type="IKEv2",
        )

    @pytest.mark.parametrize("status", ["(Disconnected)", "(Connecting)", "Connected"])
    def test_other_status_is_disconnected(self, status):
        config = parse_vpn_line(f'1 {status} ABCD-1234 IKEv2 PPP "MyVPN"')
        assert config.is_connected is False

    def test_too_few_tokens(self):
        line = "1 (Connected) ABCD-1234 IKEv2"
        with pytest.raises(FormatError) as exc_info:
            parse_vpn_line(line)
        assert line in str(exc_info.value)

    def test_strips_one_layer_of_quotes(self):
        config = parse_vpn_line('1 (Connected) ABCD-1234 IKEv2 PPP ""Quoted""')
        assert config.name == '"Quoted"'

    def test_unquoted_name(self):
        config = parse_vpn_line("1 (Connected) ABCD-1234 IKEv2 PPP Plain")
        assert config.name == "Plain"

    def test_multi_word_name_keeps_first_word(self):
        config = parse_vpn_line('* (Disconnected) EFGH-5678 IPSec PPP "Work Office" [IPSec]')
        assert config.name == "Work"

    def test_tabs_separate_tokens(self):
        config = parse_vpn_line('*\t(Connected)\tABCD-1234\tIKEv2\tPPP\t"MyVPN"')
        assert config.id == "ABCD-1234"
        assert config.name == "MyVPN"


class TestParseVPNList:
    """Tests for full listing parsing."""

    def test_parses_listing(self, listing):
        configs = parse_vpn_list(listing)
        assert [c.id for c in configs] == ["ABCD-1234", "EFGH-5678", "IJKL-9012"]
        assert [c.name for c in configs] == ["MyVPN", "Office", "Home"]
        assert [c.is_connected for c in configs] == [True, False, False]
        assert configs[2].service_type == "com.wireguard.macos"

    def test_malformed_vpn_line_fails(self):
        with pytest.raises(FormatError):
            parse_vpn_list('1 (Connected) ABCD-1234 IKEv2 PPP "MyVPN"\nbroken vpn line\n')

    def test_duplicate_ids_keep_first(self):
        text = (
            '1 (Connected) ABCD-1234 IKEv2 PPP "First" [VPN/IKEv2]\n'
            '2 (Disconnected) ABCD-1234 IKEv2 PPP "Second" [VPN/IKEv2]\n'
        )
        configs = parse_vpn_list(text)
        assert len(configs) == 1
        assert configs[0].name == "First"

    def test_no_vpn_lines(self):
        assert parse_vpn_list("Available network connection services\n") == []
