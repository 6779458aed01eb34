"""Built-in resolver implementations.

- UncPathResolver: ServerName + PrinterName -> \\\\server\\queue
- HttpPathResolver: Url -> normalized http(s) URL
- TcpIpPathResolver: HostAddress (+ PortNumber) -> host:port
- DefaultPathResolver: terminal link, always UNKNOWN
"""

from __future__ import annotations

from .default import DefaultPathResolver
from .http import HttpPathResolver
from .tcpip import TcpIpPathResolver
from .unc import UncPathResolver

__all__ = [
    "UncPathResolver",
    "HttpPathResolver",
    "TcpIpPathResolver",
    "DefaultPathResolver",
]
