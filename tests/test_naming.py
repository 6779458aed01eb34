"""Tests for server and printer naming rules."""

from __future__ import annotations

import pytest

from printsystem_path import (
    InvalidPrinterNameError,
    InvalidServerNameError,
    ResolverConfig,
    check_printer_name,
    check_server_name,
    is_valid_printer_name,
    is_valid_server_name,
)


class TestServerNames:
    """Tests for server name validation."""

    @pytest.mark.parametrize(
        "name",
        ["SRV1", "print-01", "printsrv.corp.example.com", "192.168.1.20", "a"],
    )
    def test_valid_names(self, name):
        """Test host and computer names are accepted."""
        assert is_valid_server_name(name) is True
        assert check_server_name(name) == name

    @pytest.mark.parametrize(
        "name",
        [
            "",
            "SRV\\1",
            "SRV/1",
            "SRV:1",
            "SRV*",
            "SRV?",
            'SRV"1',
            "SRV<1>",
            "SRV|1",
            "SRV 1",
            "SRV\t1",
            "SRV\x001",
            ".corp",
            "srv..corp",
        ],
    )
    def test_invalid_names(self, name):
        """Test names breaking the rules are rejected."""
        assert is_valid_server_name(name) is False

    def test_non_string(self):
        """Test non-string values are rejected."""
        assert is_valid_server_name(None) is False
        assert is_valid_server_name(1234) is False

    def test_length_limit(self):
        """Test the configured maximum length is enforced."""
        config = ResolverConfig(max_server_name_length=15)

        assert is_valid_server_name("A" * 15, config) is True
        with pytest.raises(InvalidServerNameError, match="exceeds 15"):
            check_server_name("A" * 16, config)

    def test_reserved_characters_reported(self):
        """Test the error names the offending characters."""
        with pytest.raises(InvalidServerNameError, match=r"reserved characters: \*\?"):
            check_server_name("SRV*?")


class TestPrinterNames:
    """Tests for printer name validation."""

    @pytest.mark.parametrize(
        "name",
        ["HP1", "Color LaserJet 4700", "Floor-2 (Accounting)", "Étiquettes", "a/b"],
    )
    def test_valid_names(self, name):
        """Test queue names are accepted, spaces and slashes included."""
        assert is_valid_printer_name(name) is True

    @pytest.mark.parametrize("name", ["", "HP\\1", "\\HP1", "HP\n1"])
    def test_invalid_names(self, name):
        """Test empty names, separators and control characters are rejected."""
        assert is_valid_printer_name(name) is False

    def test_non_string(self):
        """Test non-string values are rejected."""
        with pytest.raises(InvalidPrinterNameError, match="must be a string"):
            check_printer_name(["HP1"])

    def test_length_limit(self):
        """Test the default maximum length."""
        assert is_valid_printer_name("P" * 220) is True
        assert is_valid_printer_name("P" * 221) is False
