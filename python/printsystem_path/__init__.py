r"""
printsystem-path

Resolves how a client physically connects to a print queue. Given the
queue's property dictionary, a chain of resolvers picks a transport (UNC
share, direct TCP/IP, or HTTP) and builds its canonical path.

Example:
    >>> import printsystem_path
    >>> resolver = printsystem_path.PathResolver.default(
    ...     {"ServerName": "SRV1", "PrinterName": "HP1"}
    ... )
    >>> resolver.resolve()
    True
    >>> resolver.protocol.path
    '\\\\SRV1\\HP1'

    >>> # Split a known UNC path
    >>> parsed = printsystem_path.split_unc_path("\\\\SRV1\\HP1")
    >>> parsed.print_queue_name
    'HP1'

    >>> # Structured logging
    >>> printsystem_path.configure_logging("debug")
    >>> printsystem_path.log_debug("Resolving", {"queue": "HP1"})
"""

from __future__ import annotations

from .config import CONFIG_ENV_VAR, ResolverConfig, load_config
from .events import EventNames, ResolutionEvents
from .exceptions import (
    ConfigurationError,
    EmptyComponentError,
    InvalidPrinterNameError,
    InvalidServerNameError,
    MalformedPathError,
    NotYetResolvedError,
    PrintSystemError,
    UncPathError,
)
from .logging import (
    configure_logging,
    log_debug,
    log_error,
    log_info,
    log_trace,
    log_warn,
)
from .naming import (
    check_printer_name,
    check_server_name,
    is_valid_printer_name,
    is_valid_server_name,
)
from .resolution import (
    BaseResolver,
    DefaultPathResolver,
    HttpPathResolver,
    PathResolver,
    PropertyDictionary,
    TcpIpPathResolver,
    UncPathResolver,
)
from .types import (
    LogContext,
    ParsedUNCPath,
    ProtocolResult,
    TransportProtocol,
    UncResolverState,
    build_unc_path,
)
from .unc_path import split_unc_path, validate_unc_path

__version__ = "0.1.0"


def version() -> str:
    """Return the package version string."""
    return __version__


__all__ = [
    "__version__",
    "version",
    # Types
    "TransportProtocol",
    "ProtocolResult",
    "ParsedUNCPath",
    "UncResolverState",
    "LogContext",
    "PropertyDictionary",
    # UNC paths
    "build_unc_path",
    "split_unc_path",
    "validate_unc_path",
    # Naming rules
    "check_server_name",
    "check_printer_name",
    "is_valid_server_name",
    "is_valid_printer_name",
    # Resolution
    "BaseResolver",
    "PathResolver",
    "UncPathResolver",
    "HttpPathResolver",
    "TcpIpPathResolver",
    "DefaultPathResolver",
    # Configuration
    "CONFIG_ENV_VAR",
    "ResolverConfig",
    "load_config",
    # Events
    "EventNames",
    "ResolutionEvents",
    # Exceptions
    "PrintSystemError",
    "UncPathError",
    "MalformedPathError",
    "EmptyComponentError",
    "InvalidServerNameError",
    "InvalidPrinterNameError",
    "NotYetResolvedError",
    "ConfigurationError",
    # Logging
    "configure_logging",
    "log_error",
    "log_warn",
    "log_info",
    "log_debug",
    "log_trace",
]
