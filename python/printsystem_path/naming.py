"""Naming rules for print server and printer names.

Server names must be syntactically valid host/computer names: no UNC
separators, no reserved characters, no whitespace, non-empty dot labels.
Printer names only need to be non-empty and free of the UNC separator
and control characters.
"""

from __future__ import annotations

from typing import Any

from .config import ResolverConfig
from .exceptions import InvalidPrinterNameError, InvalidServerNameError
from .types import UNC_SEPARATOR

SERVER_RESERVED_CHARACTERS = frozenset('\\/:*?"<>|')
PRINTER_RESERVED_CHARACTERS = frozenset(UNC_SEPARATOR)

_DEFAULT_CONFIG = ResolverConfig()


def _has_control_characters(name: str) -> bool:
    return any(ord(ch) < 32 or ord(ch) == 127 for ch in name)


def check_server_name(name: Any, config: ResolverConfig | None = None) -> str:
    """Validate a print server name.

    Args:
        name: Candidate server name.
        config: Limits to apply. Defaults to ResolverConfig().

    Returns:
        The unchanged name.

    Raises:
        InvalidServerNameError: If the name breaks any rule.
    """
    config = config or _DEFAULT_CONFIG

    if not isinstance(name, str):
        raise InvalidServerNameError(f"Server name must be a string, got {type(name).__name__}")
    if not name:
        raise InvalidServerNameError("Server name is empty")
    if len(name) > config.max_server_name_length:
        raise InvalidServerNameError(
            f"Server name exceeds {config.max_server_name_length} characters"
        )
    bad = sorted({ch for ch in name if ch in SERVER_RESERVED_CHARACTERS})
    if bad:
        raise InvalidServerNameError(
            f"Server name '{name}' contains reserved characters: {''.join(bad)}"
        )
    if any(ch.isspace() for ch in name) or _has_control_characters(name):
        raise InvalidServerNameError(f"Server name '{name}' contains whitespace or control characters")
    if any(not label for label in name.split(".")):
        raise InvalidServerNameError(f"Server name '{name}' has an empty label")
    return name


def check_printer_name(name: Any, config: ResolverConfig | None = None) -> str:
    """Validate a printer (queue) name.

    Args:
        name: Candidate printer name.
        config: Limits to apply. Defaults to ResolverConfig().

    Returns:
        The unchanged name.

    Raises:
        InvalidPrinterNameError: If the name breaks any rule.
    """
    config = config or _DEFAULT_CONFIG

    if not isinstance(name, str):
        raise InvalidPrinterNameError(
            f"Printer name must be a string, got {type(name).__name__}"
        )
    if not name:
        raise InvalidPrinterNameError("Printer name is empty")
    if len(name) > config.max_printer_name_length:
        raise InvalidPrinterNameError(
            f"Printer name exceeds {config.max_printer_name_length} characters"
        )
    if any(ch in PRINTER_RESERVED_CHARACTERS for ch in name):
        raise InvalidPrinterNameError(f"Printer name '{name}' contains a UNC separator")
    if _has_control_characters(name):
        raise InvalidPrinterNameError(f"Printer name '{name}' contains control characters")
    return name


def is_valid_server_name(name: Any, config: ResolverConfig | None = None) -> bool:
    """Return True if ``name`` passes check_server_name()."""
    try:
        check_server_name(name, config)
    except InvalidServerNameError:
        return False
    return True


def is_valid_printer_name(name: Any, config: ResolverConfig | None = None) -> bool:
    """Return True if ``name`` passes check_printer_name()."""
    try:
        check_printer_name(name, config)
    except InvalidPrinterNameError:
        return False
    return True


__all__ = [
    "SERVER_RESERVED_CHARACTERS",
    "PRINTER_RESERVED_CHARACTERS",
    "check_server_name",
    "check_printer_name",
    "is_valid_server_name",
    "is_valid_printer_name",
]
