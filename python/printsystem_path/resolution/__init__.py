r"""Print path resolution infrastructure.

Resolvers form a linear chain; each either produces a ProtocolResult or
forwards the property dictionary to its successor. The chain always ends
with DefaultPathResolver, which yields UNKNOWN.

Built-in Resolvers:
- UncPathResolver: ServerName + PrinterName -> \\server\queue
- HttpPathResolver: Url -> normalized http(s) URL
- TcpIpPathResolver: HostAddress (+ PortNumber) -> host:port
- DefaultPathResolver: terminal UNKNOWN

Custom Resolvers:
Extend BaseResolver and call delegate() on failure:

    from printsystem_path.resolution import BaseResolver

    class LprResolver(BaseResolver):
        @property
        def name(self):
            return "lpr"

        def resolve(self, properties):
            ...
            return self.delegate(properties)
"""

from __future__ import annotations

from .base_resolver import BaseResolver, PropertyDictionary, iter_properties
from .path_resolver import PathResolver
from .resolvers import (
    DefaultPathResolver,
    HttpPathResolver,
    TcpIpPathResolver,
    UncPathResolver,
)

__all__ = [
    # Core types
    "PropertyDictionary",
    "iter_properties",
    # Resolver base class
    "BaseResolver",
    # Orchestrator
    "PathResolver",
    # Built-in resolvers
    "UncPathResolver",
    "HttpPathResolver",
    "TcpIpPathResolver",
    "DefaultPathResolver",
]
