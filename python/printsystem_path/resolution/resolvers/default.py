"""Default resolver (terminal link).

Always returns an UNKNOWN result and never delegates. Placed at the end
of every chain so that resolution always produces a value.
"""

from __future__ import annotations

from ...types import ProtocolResult
from ..base_resolver import BaseResolver, PropertyDictionary


class DefaultPathResolver(BaseResolver):
    """Terminal resolver that always yields UNKNOWN."""

    def __init__(self) -> None:
        """Initialize the resolver with no successor."""
        super().__init__(next_resolver=None)

    @property
    def name(self) -> str:
        """Return the resolver name."""
        return "default"

    def resolve(self, _properties: PropertyDictionary) -> ProtocolResult:
        """Ignore the dictionary and return UNKNOWN.

        Args:
            _properties: Print queue properties (unused, part of interface).

        Returns:
            ProtocolResult.unknown().
        """
        return ProtocolResult.unknown()
