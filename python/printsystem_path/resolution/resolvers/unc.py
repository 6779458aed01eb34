r"""UNC path resolver.

Builds ``\\ServerName\PrinterName`` from a print queue property
dictionary. Each recognized property is checked by a validator looked up
in a read-only table; unrecognized properties are ignored. Values are
trimmed of surrounding whitespace before validation, exactly as
split_unc_path() trims segments, so every path built here splits back
into the same components.

A rejected property does not stop the scan: the remaining properties are
still validated, and the resolver delegates only after the whole
dictionary has been read. When a key repeats (pair-iterable input), the
last value that validates wins.

Example:
    >>> resolver = UncPathResolver(DefaultPathResolver())
    >>> resolver.resolve({"ServerName": "SRV1", "PrinterName": "HP1"}).path
    '\\\\SRV1\\HP1'
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from ...config import ResolverConfig
from ...logging import log_debug
from ...naming import is_valid_printer_name, is_valid_server_name
from ...types import LogContext, ProtocolResult, TransportProtocol, UncResolverState
from ...unc_path import validate_unc_path
from ..base_resolver import BaseResolver, PropertyDictionary, iter_properties

SERVER_NAME = "ServerName"
PRINTER_NAME = "PrinterName"

Validator = Callable[[Any, UncResolverState, ResolverConfig], bool]


def _trimmed(value: Any) -> Any:
    # Segments are trimmed the same way split_unc_path() trims them.
    return value.strip() if isinstance(value, str) else value


def validate_and_capture_server_name(
    value: Any, state: UncResolverState, config: ResolverConfig
) -> bool:
    """Store the trimmed ``value`` as the server name if it is a valid host name."""
    name = _trimmed(value)
    if not is_valid_server_name(name, config):
        return False
    state.server_name = name
    return True


def validate_and_capture_printer_name(
    value: Any, state: UncResolverState, config: ResolverConfig
) -> bool:
    """Store the trimmed ``value`` as the printer name if it is a valid queue name."""
    name = _trimmed(value)
    if not is_valid_printer_name(name, config):
        return False
    state.printer_name = name
    return True


PROPERTY_VALIDATORS: Mapping[str, Validator] = MappingProxyType(
    {
        SERVER_NAME: validate_and_capture_server_name,
        PRINTER_NAME: validate_and_capture_printer_name,
    }
)


class UncPathResolver(BaseResolver):
    """Resolver for ``\\\\server\\queue`` share paths."""

    def __init__(
        self,
        next_resolver: BaseResolver | None = None,
        config: ResolverConfig | None = None,
        validators: Mapping[str, Validator] = PROPERTY_VALIDATORS,
    ) -> None:
        """Initialize the resolver.

        Args:
            next_resolver: Resolver to delegate to when validation fails.
            config: Naming limits. Defaults to ResolverConfig().
            validators: Property name to validator table.
        """
        super().__init__(next_resolver)
        self._config = config or ResolverConfig()
        self._validators = validators
        self._state = UncResolverState()

    @property
    def name(self) -> str:
        """Return the resolver name."""
        return "unc"

    @property
    def server_name(self) -> str | None:
        """Server name captured by the most recent resolve()."""
        return self._state.server_name

    @property
    def printer_name(self) -> str | None:
        """Printer name captured by the most recent resolve()."""
        return self._state.printer_name

    def resolve(self, properties: PropertyDictionary) -> ProtocolResult:
        """Resolve a UNC path, or delegate if the fields are missing or invalid.

        Args:
            properties: Print queue properties.

        Returns:
            UNC result, or the successor's result unchanged.
        """
        self._state = self._capture(properties)

        path = self._state.built_path
        if path is None:
            return self.delegate(properties)

        return ProtocolResult(protocol=TransportProtocol.UNC, path=path)

    def _capture(self, properties: PropertyDictionary) -> UncResolverState:
        state = UncResolverState()
        for key, value in iter_properties(properties):
            validator = self._validators.get(key)
            if validator is None:
                continue
            if not validator(value, state, self._config):
                log_debug(
                    f"UncPathResolver: rejected {key}={value!r}",
                    LogContext(resolver=self.name, property_name=key),
                )
        return state

    @staticmethod
    def validate_unc_path(path: Any, config: ResolverConfig | None = None) -> bool:
        """Return True if ``path`` splits into a valid server and queue.

        Args:
            path: The UNC path to check.
            config: Naming limits. Defaults to ResolverConfig().
        """
        return validate_unc_path(path, config)
