"""Abstract base class for print path resolvers.

This module defines the contract that all resolvers must implement.
Resolvers form a strictly linear chain: each one owns at most one
successor and delegates to it when it cannot resolve the dictionary.

Resolution Contract:
1. name - Human-readable identifier for logging/debugging
2. resolve() - Return a ProtocolResult; never raise for bad input
3. delegate() - Forward to the successor, or UNKNOWN at the end of the chain

Example Implementation:
    class LprResolver(BaseResolver):
        @property
        def name(self) -> str:
            return "lpr"

        def resolve(self, properties: PropertyDictionary) -> ProtocolResult:
            if "QueueHost" not in properties:
                return self.delegate(properties)
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Union

from ..logging import log_trace
from ..types import ProtocolResult

PropertyDictionary = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


def iter_properties(properties: PropertyDictionary) -> Iterator[tuple[str, Any]]:
    """Yield (key, value) pairs in dictionary order.

    Accepts a mapping or an iterable of pairs; the latter may repeat keys.
    """
    if isinstance(properties, Mapping):
        yield from properties.items()
    else:
        yield from properties


class BaseResolver(ABC):
    """Abstract base class for print path resolvers.

    Attributes:
        next_resolver: The successor link, or None for a terminal link.
    """

    def __init__(self, next_resolver: BaseResolver | None = None) -> None:
        """Initialize the resolver.

        Args:
            next_resolver: Resolver to delegate to when this one fails.
        """
        self._next_resolver = next_resolver

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this resolver (for logging/debugging).

        Returns:
            The resolver name.
        """
        ...

    @abstractmethod
    def resolve(self, properties: PropertyDictionary) -> ProtocolResult:
        """Resolve a connection path from the property dictionary.

        Args:
            properties: Print queue properties. Read, never mutated.

        Returns:
            This resolver's result, or the successor's result unchanged.
        """
        ...

    @property
    def next_resolver(self) -> BaseResolver | None:
        """Return the successor link."""
        return self._next_resolver

    def delegate(self, properties: PropertyDictionary) -> ProtocolResult:
        """Forward resolution to the successor.

        Args:
            properties: Print queue properties.

        Returns:
            The successor's result, or UNKNOWN when there is no successor.
        """
        if self._next_resolver is None:
            log_trace(f"{self.name}: end of chain, returning unknown")
            return ProtocolResult.unknown()

        log_trace(f"{self.name}: delegating to {self._next_resolver.name}")
        return self._next_resolver.resolve(properties)

    def chain(self) -> list[BaseResolver]:
        """List the links from this resolver to the end of the chain.

        Returns:
            Resolvers in delegation order, starting with self.

        Raises:
            ValueError: If the chain loops back on itself.
        """
        links: list[BaseResolver] = []
        seen: set[int] = set()
        link: BaseResolver | None = self
        while link is not None:
            if id(link) in seen:
                raise ValueError(f"Resolver chain is cyclic at '{link.name}'")
            seen.add(id(link))
            links.append(link)
            link = link.next_resolver
        return links

    @property
    def chain_names(self) -> list[str]:
        """Get names of resolvers in delegation order.

        Returns:
            List of resolver names.
        """
        return [r.name for r in self.chain()]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(next={self._next_resolver!r})"
