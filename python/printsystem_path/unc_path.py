r"""UNC path splitting.

Pure string parsing of ``\\server\queue`` paths into their two
components. No network or filesystem access is performed.

Example:
    >>> parsed = split_unc_path("\\\\SRV1\\HP1")
    >>> parsed.print_server_name, parsed.print_queue_name
    ('SRV1', 'HP1')
    >>> validate_unc_path("SRV1\\HP1")
    False
"""

from __future__ import annotations

from typing import Any

from .config import ResolverConfig
from .exceptions import EmptyComponentError, MalformedPathError, UncPathError
from .naming import check_printer_name, check_server_name
from .types import UNC_PREFIX, UNC_SEPARATOR, ParsedUNCPath


def split_unc_path(raw_path: Any, config: ResolverConfig | None = None) -> ParsedUNCPath:
    r"""Split ``\\server\queue`` into server and queue names.

    Segments are trimmed of surrounding whitespace; casing is preserved.

    Args:
        raw_path: The UNC path to split.
        config: Naming limits. Defaults to ResolverConfig().

    Returns:
        The parsed components.

    Raises:
        MalformedPathError: Missing ``\\`` prefix, or not exactly one
            separator after it.
        EmptyComponentError: Server or queue segment is blank.
        InvalidServerNameError: Server segment breaks the naming rules.
        InvalidPrinterNameError: Queue segment breaks the naming rules.
    """
    if not isinstance(raw_path, str):
        raise MalformedPathError(f"UNC path must be a string, got {type(raw_path).__name__}")
    if not raw_path.startswith(UNC_PREFIX):
        raise MalformedPathError(f"'{raw_path}' does not start with {UNC_PREFIX}")

    segments = raw_path[len(UNC_PREFIX) :].split(UNC_SEPARATOR)
    if len(segments) != 2:
        raise MalformedPathError(
            f"'{raw_path}' must contain exactly one separator after the prefix, "
            f"found {len(segments) - 1}"
        )

    server_name, queue_name = (segment.strip() for segment in segments)
    if not server_name:
        raise EmptyComponentError(f"'{raw_path}' has an empty server name")
    if not queue_name:
        raise EmptyComponentError(f"'{raw_path}' has an empty queue name")

    check_server_name(server_name, config)
    check_printer_name(queue_name, config)

    return ParsedUNCPath(print_server_name=server_name, print_queue_name=queue_name)


def validate_unc_path(path: Any, config: ResolverConfig | None = None) -> bool:
    """Return True only if split_unc_path() accepts ``path``."""
    try:
        split_unc_path(path, config)
    except UncPathError:
        return False
    return True


__all__ = [
    "split_unc_path",
    "validate_unc_path",
]
