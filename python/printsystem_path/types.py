r"""Pydantic models for printsystem-path.

This module provides the immutable value types produced by resolution
and UNC path splitting, plus the structured logging context.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field, model_validator

UNC_PREFIX = "\\\\"
UNC_SEPARATOR = "\\"


class TransportProtocol(str, Enum):
    """Transport used to reach a print queue.

    Closed set; never extended at runtime.
    """

    UNKNOWN = "unknown"
    """No resolver in the chain could produce a connection path."""

    UNC = "unc"
    """Windows share path (``\\\\server\\queue``)."""

    TCPIP = "tcpip"
    """Direct TCP/IP connection (``host:port``)."""

    HTTP = "http"
    """HTTP/IPP URL."""


class ProtocolResult(BaseModel):
    r"""Resolved transport for a print queue.

    Created once by the resolver that succeeded and never mutated.

    Example:
        >>> result = ProtocolResult(protocol=TransportProtocol.UNC, path="\\\\SRV1\\HP1")
        >>> result.is_resolved
        True
        >>> ProtocolResult.unknown().path
        ''
    """

    protocol: TransportProtocol = Field(description="Resolved transport family.")
    path: str = Field(
        default="",
        description="Canonical connection path. Empty for UNKNOWN.",
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def _check_path_matches_protocol(self) -> ProtocolResult:
        if self.protocol is TransportProtocol.UNKNOWN and self.path:
            raise ValueError("UNKNOWN protocol must not carry a path")
        if self.protocol is not TransportProtocol.UNKNOWN and not self.path:
            raise ValueError(f"{self.protocol.value} protocol requires a path")
        return self

    @classmethod
    def unknown(cls) -> ProtocolResult:
        """Build the terminal result for an unresolvable dictionary."""
        return cls(protocol=TransportProtocol.UNKNOWN)

    @property
    def is_resolved(self) -> bool:
        """True for any protocol other than UNKNOWN."""
        return self.protocol is not TransportProtocol.UNKNOWN


class ParsedUNCPath(BaseModel):
    """Server and queue components of a ``\\\\server\\queue`` path."""

    print_server_name: str = Field(description="Print server (host) name.")
    print_queue_name: str = Field(description="Print queue (share) name.")

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def path(self) -> str:
        """Rebuild the canonical UNC path from the two components."""
        return build_unc_path(self.print_server_name, self.print_queue_name)


@dataclass
class UncResolverState:
    """Fields captured while a UncPathResolver scans a dictionary.

    Attributes:
        server_name: Last valid ``ServerName`` value seen, if any.
        printer_name: Last valid ``PrinterName`` value seen, if any.
    """

    server_name: str | None = None
    printer_name: str | None = None

    @property
    def built_path(self) -> str | None:
        """Canonical UNC path, present only when both fields were captured."""
        if self.server_name is None or self.printer_name is None:
            return None
        return build_unc_path(self.server_name, self.printer_name)


class LogContext(BaseModel):
    """Structured logging context for resolution events.

    Example:
        >>> context = LogContext(resolver="unc", property_name="ServerName")
        >>> log_debug("Rejected property", context)
    """

    resolver: str | None = Field(default=None, description="Resolver name.")
    property_name: str | None = Field(default=None, description="Property key.")
    protocol: str | None = Field(default=None, description="Resolved protocol.")
    path: str | None = Field(default=None, description="Resolved path.")


def build_unc_path(server_name: str, queue_name: str) -> str:
    """Join a server and queue name into ``\\\\server\\queue``."""
    return f"{UNC_PREFIX}{server_name}{UNC_SEPARATOR}{queue_name}"


__all__ = [
    "UNC_PREFIX",
    "UNC_SEPARATOR",
    "TransportProtocol",
    "ProtocolResult",
    "ParsedUNCPath",
    "UncResolverState",
    "LogContext",
    "build_unc_path",
]
