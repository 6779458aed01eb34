"""HTTP/IPP resolver.

Accepts the ``Url`` property when it parses as an absolute URL with an
allowed scheme (ResolverConfig.http_schemes) and a host. The URL is
normalized by httpx; no request is ever made.

Example:
    >>> resolver = HttpPathResolver(DefaultPathResolver())
    >>> resolver.resolve({"Url": " http://printsrv/printers/HP1 "}).path
    'http://printsrv/printers/HP1'
"""

from __future__ import annotations

from typing import Any

import httpx

from ...config import ResolverConfig
from ...logging import log_debug
from ...types import LogContext, ProtocolResult, TransportProtocol
from ..base_resolver import BaseResolver, PropertyDictionary, iter_properties

URL = "Url"


class HttpPathResolver(BaseResolver):
    """Resolver for HTTP/IPP print queue URLs."""

    def __init__(
        self,
        next_resolver: BaseResolver | None = None,
        config: ResolverConfig | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            next_resolver: Resolver to delegate to when validation fails.
            config: Accepted URL schemes.
        """
        super().__init__(next_resolver)
        self._config = config or ResolverConfig()

    @property
    def name(self) -> str:
        """Return the resolver name."""
        return "http"

    def resolve(self, properties: PropertyDictionary) -> ProtocolResult:
        """Resolve a normalized URL, or delegate.

        Args:
            properties: Print queue properties.

        Returns:
            HTTP result, or the successor's result unchanged.
        """
        url: httpx.URL | None = None
        for key, value in iter_properties(properties):
            if key != URL:
                continue
            parsed = self._parse_url(value)
            if parsed is None:
                log_debug(
                    f"HttpPathResolver: rejected {key}={value!r}",
                    LogContext(resolver=self.name, property_name=key),
                )
                continue
            url = parsed

        if url is None:
            return self.delegate(properties)

        return ProtocolResult(protocol=TransportProtocol.HTTP, path=str(url))

    def _parse_url(self, value: Any) -> httpx.URL | None:
        if not isinstance(value, str) or not value.strip():
            return None
        try:
            url = httpx.URL(value.strip())
        except httpx.InvalidURL:
            return None
        if url.scheme not in self._config.http_schemes or not url.host:
            return None
        return url
