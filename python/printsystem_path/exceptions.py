"""Custom exceptions for printsystem-path.

This module provides the exception hierarchy raised by the pure parsing
utilities and configuration loading. Resolvers never raise for bad
property values; they fall through to the next link in the chain.
"""

from __future__ import annotations


class PrintSystemError(Exception):
    """Base exception for all printsystem-path errors.

    Example:
        >>> try:
        ...     split_unc_path("not-a-unc-path")
        ... except PrintSystemError as e:
        ...     print(f"Path error: {e}")
    """

    pass


class UncPathError(PrintSystemError):
    """Base class for errors raised while splitting a UNC path."""

    pass


class MalformedPathError(UncPathError):
    """Raised when a string does not have the ``\\\\server\\queue`` shape.

    Covers a missing ``\\\\`` prefix and a remainder with zero or more
    than one separator.

    Example:
        >>> try:
        ...     split_unc_path("SRV1\\\\HP1")
        ... except MalformedPathError:
        ...     print("Missing UNC prefix")
    """

    pass


class EmptyComponentError(UncPathError):
    """Raised when the server or queue segment is empty after trimming."""

    pass


class InvalidServerNameError(UncPathError):
    """Raised when a server segment is present but fails the naming rules."""

    pass


class InvalidPrinterNameError(UncPathError):
    """Raised when a queue segment is present but fails the naming rules."""

    pass


class NotYetResolvedError(PrintSystemError):
    """Raised when PathResolver.protocol is read before resolve().

    Example:
        >>> resolver = PathResolver.default({"ServerName": "SRV1"})
        >>> try:
        ...     resolver.protocol
        ... except NotYetResolvedError:
        ...     resolver.resolve()
    """

    pass


class ConfigurationError(PrintSystemError):
    """Raised when a resolver configuration file cannot be loaded.

    Common causes:
    - File does not exist
    - File is not valid YAML
    - Unknown or out-of-range settings
    """

    pass


__all__ = [
    "PrintSystemError",
    "UncPathError",
    "MalformedPathError",
    "EmptyComponentError",
    "InvalidServerNameError",
    "InvalidPrinterNameError",
    "NotYetResolvedError",
    "ConfigurationError",
]
