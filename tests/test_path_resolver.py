"""Tests for the PathResolver orchestrator."""

from __future__ import annotations

import pytest

from printsystem_path import (
    BaseResolver,
    DefaultPathResolver,
    EventNames,
    NotYetResolvedError,
    PathResolver,
    ProtocolResult,
    ResolverConfig,
    TransportProtocol,
    UncPathResolver,
)


class CountingResolver(BaseResolver):
    """Wraps another resolver and counts resolve() calls."""

    def __init__(self, inner: BaseResolver) -> None:
        super().__init__()
        self.inner = inner
        self.calls = 0

    @property
    def name(self) -> str:
        return "counting"

    def resolve(self, properties):
        self.calls += 1
        return self.inner.resolve(properties)


class TestPathResolverBasics:
    """Tests for construction and the protocol accessor."""

    def test_protocol_before_resolve_raises(self, unc_chain, unc_properties):
        """Test protocol is unavailable until resolve() runs."""
        resolver = PathResolver(unc_properties, unc_chain)

        assert resolver.is_resolved is False
        with pytest.raises(NotYetResolvedError):
            _ = resolver.protocol

    def test_resolve_success(self, unc_chain, unc_properties):
        """Test a resolvable dictionary returns True and caches the result."""
        resolver = PathResolver(unc_properties, unc_chain)

        assert resolver.resolve() is True
        assert resolver.is_resolved is True
        assert resolver.protocol == ProtocolResult(
            protocol=TransportProtocol.UNC, path=r"\\SRV1\HP1"
        )

    def test_resolve_failure(self, unc_chain):
        """Test an unresolvable dictionary returns False with UNKNOWN cached."""
        resolver = PathResolver({"ServerName": "SRV1"}, unc_chain)

        assert resolver.resolve() is False
        assert resolver.protocol == ProtocolResult(protocol=TransportProtocol.UNKNOWN, path="")

    def test_accessors(self, unc_chain, unc_properties):
        """Test the dictionary and chain head are exposed."""
        resolver = PathResolver(unc_properties, unc_chain)

        assert resolver.properties is unc_properties
        assert resolver.resolver is unc_chain

    def test_protocol_is_cached(self, unc_properties):
        """Test reading protocol does not re-run the chain."""
        counting = CountingResolver(UncPathResolver(DefaultPathResolver()))
        resolver = PathResolver(unc_properties, counting)

        resolver.resolve()
        first = resolver.protocol
        second = resolver.protocol

        assert counting.calls == 1
        assert first is second

    def test_resolve_is_idempotent(self, unc_chain, unc_properties):
        """Test resolving twice on an unchanged dictionary gives equal results."""
        resolver = PathResolver(unc_properties, unc_chain)

        resolver.resolve()
        first = resolver.protocol
        resolver.resolve()

        assert resolver.protocol == first

    def test_resolve_picks_up_dictionary_changes(self, unc_chain):
        """Test re-resolving after a dictionary change overwrites the cache."""
        properties = {"ServerName": "SRV1"}
        resolver = PathResolver(properties, unc_chain)

        assert resolver.resolve() is False

        properties["PrinterName"] = "HP1"
        assert resolver.resolve() is True
        assert resolver.protocol.path == r"\\SRV1\HP1"

        del properties["ServerName"]
        assert resolver.resolve() is False
        assert resolver.protocol.protocol is TransportProtocol.UNKNOWN


class TestDefaultChain:
    """Tests for PathResolver.default()."""

    def test_chain_order(self):
        """Test the default chain links."""
        resolver = PathResolver.default({})

        assert resolver.resolver.chain_names == ["unc", "http", "tcpip", "default"]

    def test_unc_takes_precedence(self):
        """Test UNC wins when several transports are described."""
        properties = {
            "HostAddress": "10.0.0.5",
            "Url": "http://printsrv/printers/HP1",
            "ServerName": "SRV1",
            "PrinterName": "HP1",
        }
        resolver = PathResolver.default(properties)

        assert resolver.resolve() is True
        assert resolver.protocol.protocol is TransportProtocol.UNC

    def test_http_before_tcpip(self):
        """Test HTTP is tried before TCP/IP."""
        properties = {"HostAddress": "10.0.0.5", "Url": "http://printsrv/printers/HP1"}
        resolver = PathResolver.default(properties)

        resolver.resolve()

        assert resolver.protocol.protocol is TransportProtocol.HTTP

    def test_falls_through_to_tcpip(self):
        """Test an invalid UNC pair falls through to TCP/IP."""
        properties = {"ServerName": "", "PrinterName": "HP1", "HostAddress": "10.0.0.5"}
        resolver = PathResolver.default(properties)

        resolver.resolve()

        assert resolver.protocol == ProtocolResult(
            protocol=TransportProtocol.TCPIP, path="10.0.0.5:9100"
        )

    def test_config_shared_by_links(self):
        """Test the config reaches every link."""
        config = ResolverConfig(default_tcp_port=515, max_server_name_length=4)
        properties = {"ServerName": "SRV12", "PrinterName": "HP1", "HostAddress": "SRV1"}
        resolver = PathResolver.default(properties, config=config)

        resolver.resolve()

        assert resolver.protocol.path == "SRV1:515"

    def test_nothing_resolvable(self):
        """Test an empty dictionary ends with UNKNOWN."""
        resolver = PathResolver.default({})

        assert resolver.resolve() is False
        assert resolver.protocol == ProtocolResult.unknown()


class TestPathResolverEvents:
    """Tests for outcome publishing."""

    def test_resolved_event(self, resolution_events, unc_properties):
        """Test a successful resolution publishes protocol.resolved."""
        received = []
        resolution_events.subscribe(EventNames.PROTOCOL_RESOLVED, received.append)

        PathResolver.default(unc_properties, events=resolution_events).resolve()

        assert received == [ProtocolResult(protocol=TransportProtocol.UNC, path=r"\\SRV1\HP1")]

    def test_unresolved_event(self, resolution_events):
        """Test a failed resolution publishes protocol.unresolved."""
        resolved = []
        unresolved = []
        resolution_events.subscribe(EventNames.PROTOCOL_RESOLVED, resolved.append)
        resolution_events.subscribe(EventNames.PROTOCOL_UNRESOLVED, unresolved.append)

        PathResolver.default({}, events=resolution_events).resolve()

        assert resolved == []
        assert unresolved == [ProtocolResult.unknown()]

    def test_no_events_without_bus(self, resolution_events, unc_properties):
        """Test resolvers without a bus publish nothing."""
        received = []
        resolution_events.subscribe(EventNames.PROTOCOL_RESOLVED, received.append)

        PathResolver.default(unc_properties).resolve()

        assert received == []
