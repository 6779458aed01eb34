r"""Path resolver - orchestrates a resolver chain over one property dictionary.

The PathResolver owns a property dictionary reference and the head of a
resolver chain. resolve() walks the chain and caches the result, which is
exposed through the read-only ``protocol`` property.

Default Chain (when using .default()):
- UncPathResolver     - ServerName + PrinterName
- HttpPathResolver    - Url
- TcpIpPathResolver   - HostAddress (+ PortNumber)
- DefaultPathResolver - UNKNOWN

Usage:
    resolver = PathResolver.default({"ServerName": "SRV1", "PrinterName": "HP1"})
    if resolver.resolve():
        connect(resolver.protocol.path)   # \\SRV1\HP1

Custom chains:
    head = UncPathResolver(DefaultPathResolver())
    resolver = PathResolver(properties, head)

Instances are not thread-safe; guard shared instances externally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..events import EventNames
from ..exceptions import NotYetResolvedError
from ..logging import log_debug, log_info
from ..types import LogContext, ProtocolResult

if TYPE_CHECKING:
    from ..config import ResolverConfig
    from ..events import ResolutionEvents
    from .base_resolver import BaseResolver, PropertyDictionary


class PathResolver:
    """Resolves how to connect to a print queue.

    Attributes:
        properties: The property dictionary being resolved.
        resolver: Head of the resolver chain.
    """

    def __init__(
        self,
        properties: PropertyDictionary,
        resolver: BaseResolver,
        events: ResolutionEvents | None = None,
    ) -> None:
        """Initialize the path resolver.

        Args:
            properties: Print queue properties. Never mutated.
            resolver: First link of the resolver chain.
            events: Optional bus that receives each outcome.
        """
        self._properties = properties
        self._resolver = resolver
        self._events = events
        self._protocol: ProtocolResult | None = None

    @classmethod
    def default(
        cls,
        properties: PropertyDictionary,
        config: ResolverConfig | None = None,
        events: ResolutionEvents | None = None,
    ) -> PathResolver:
        """Create a path resolver over the default chain.

        Args:
            properties: Print queue properties.
            config: Settings shared by every link.
            events: Optional bus that receives each outcome.

        Returns:
            PathResolver with UNC -> HTTP -> TCP/IP -> Default.
        """
        from .resolvers import (
            DefaultPathResolver,
            HttpPathResolver,
            TcpIpPathResolver,
            UncPathResolver,
        )

        chain = UncPathResolver(
            HttpPathResolver(
                TcpIpPathResolver(DefaultPathResolver(), config=config),
                config=config,
            ),
            config=config,
        )
        return cls(properties, chain, events=events)

    @property
    def properties(self) -> PropertyDictionary:
        """Return the property dictionary being resolved."""
        return self._properties

    @property
    def resolver(self) -> BaseResolver:
        """Return the head of the resolver chain."""
        return self._resolver

    @property
    def protocol(self) -> ProtocolResult:
        """Return the most recently resolved protocol.

        Raises:
            NotYetResolvedError: If resolve() has never been called.
        """
        if self._protocol is None:
            raise NotYetResolvedError("PathResolver.resolve() has not been called")
        return self._protocol

    @property
    def is_resolved(self) -> bool:
        """True once resolve() has run, whatever its outcome."""
        return self._protocol is not None

    def resolve(self) -> bool:
        """Run the chain and cache its result.

        Each call re-runs the chain, so changes to the dictionary since the
        previous call are picked up.

        Returns:
            True if the result is anything other than UNKNOWN.
        """
        result = self._resolver.resolve(self._properties)
        self._protocol = result

        context = LogContext(
            resolver=self._resolver.name,
            protocol=result.protocol.value,
            path=result.path or None,
        )
        if result.is_resolved:
            log_debug("PathResolver: resolved print queue path", context)
            self._publish(EventNames.PROTOCOL_RESOLVED, result)
        else:
            log_info("PathResolver: no resolver could handle the properties", context)
            self._publish(EventNames.PROTOCOL_UNRESOLVED, result)

        return result.is_resolved

    def _publish(self, event: str, result: ProtocolResult) -> None:
        if self._events is not None:
            self._events.publish(event, result)

    def __repr__(self) -> str:
        return f"PathResolver(chain={self._resolver.chain_names}, protocol={self._protocol!r})"
