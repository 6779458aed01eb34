"""Direct TCP/IP resolver.

Builds ``host:port`` from the ``HostAddress`` and ``PortNumber``
properties. The port is optional and falls back to
ResolverConfig.default_tcp_port. IPv6 literals are bracketed.
No connection is attempted and host names are not looked up.
"""

from __future__ import annotations

import ipaddress
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from ...config import ResolverConfig
from ...logging import log_debug
from ...naming import is_valid_server_name
from ...types import LogContext, ProtocolResult, TransportProtocol
from ..base_resolver import BaseResolver, PropertyDictionary, iter_properties

HOST_ADDRESS = "HostAddress"
PORT_NUMBER = "PortNumber"


@dataclass
class TcpIpResolverState:
    """Fields captured while scanning for a TCP/IP endpoint."""

    host: str | None = None
    port: int | None = None
    port_rejected: bool = False


def _parse_port(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value.isdecimal():
            return None
        value = int(value)
    if not isinstance(value, int) or not 1 <= value <= 65535:
        return None
    return value


def validate_and_capture_host(
    value: Any, state: TcpIpResolverState, config: ResolverConfig
) -> bool:
    """Store ``value`` as the host if it is an IP literal or valid host name."""
    if not isinstance(value, str):
        return False
    try:
        address = ipaddress.ip_address(value)
    except ValueError:
        if not is_valid_server_name(value, config):
            return False
        state.host = value
        return True
    state.host = f"[{address.compressed}]" if address.version == 6 else address.compressed
    return True


def validate_and_capture_port(
    value: Any, state: TcpIpResolverState, _config: ResolverConfig
) -> bool:
    """Store ``value`` as the port if it is in 1-65535.

    A rejected value only blocks resolution while no valid port has been
    captured; it never discards an earlier valid one.
    """
    port = _parse_port(value)
    if port is None:
        if state.port is None:
            state.port_rejected = True
        return False
    state.port = port
    state.port_rejected = False
    return True


PROPERTY_VALIDATORS: Mapping[
    str, Callable[[Any, TcpIpResolverState, ResolverConfig], bool]
] = MappingProxyType(
    {
        HOST_ADDRESS: validate_and_capture_host,
        PORT_NUMBER: validate_and_capture_port,
    }
)


class TcpIpPathResolver(BaseResolver):
    """Resolver for direct ``host:port`` print connections."""

    def __init__(
        self,
        next_resolver: BaseResolver | None = None,
        config: ResolverConfig | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            next_resolver: Resolver to delegate to when validation fails.
            config: Default port and naming limits.
        """
        super().__init__(next_resolver)
        self._config = config or ResolverConfig()

    @property
    def name(self) -> str:
        """Return the resolver name."""
        return "tcpip"

    def resolve(self, properties: PropertyDictionary) -> ProtocolResult:
        """Resolve ``host:port``, or delegate.

        A supplied but invalid PortNumber delegates rather than silently
        using the default port, unless a valid PortNumber was also seen;
        the last valid value wins.

        Args:
            properties: Print queue properties.

        Returns:
            TCPIP result, or the successor's result unchanged.
        """
        state = TcpIpResolverState()
        for key, value in iter_properties(properties):
            validator = PROPERTY_VALIDATORS.get(key)
            if validator is None:
                continue
            if not validator(value, state, self._config):
                log_debug(
                    f"TcpIpPathResolver: rejected {key}={value!r}",
                    LogContext(resolver=self.name, property_name=key),
                )

        if state.host is None or state.port_rejected:
            return self.delegate(properties)

        port = state.port if state.port is not None else self._config.default_tcp_port
        return ProtocolResult(protocol=TransportProtocol.TCPIP, path=f"{state.host}:{port}")
