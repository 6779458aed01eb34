"""pytest configuration and fixtures for printsystem_path tests.

This module provides shared fixtures: sample property dictionaries,
resolver chains, and a fresh ResolutionEvents bus.
"""

from __future__ import annotations

from collections.abc import Generator
from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from printsystem_path import ResolutionEvents, UncPathResolver


@pytest.fixture
def unc_properties() -> dict[str, Any]:
    """Provide a property dictionary that resolves to \\\\SRV1\\HP1."""
    return {
        "ServerName": "SRV1",
        "PrinterName": "HP1",
        "Location": "Building 4",
    }


@pytest.fixture
def unc_chain() -> UncPathResolver:
    """Provide UncPathResolver -> DefaultPathResolver."""
    from printsystem_path import DefaultPathResolver, UncPathResolver

    return UncPathResolver(DefaultPathResolver())


@pytest.fixture
def resolution_events() -> Generator[ResolutionEvents, None, None]:
    """Provide a fresh, started ResolutionEvents bus for each test."""
    from printsystem_path import ResolutionEvents

    ResolutionEvents.reset_instance()
    events = ResolutionEvents.instance()
    events.start()
    yield events
    events.stop()
    ResolutionEvents.reset_instance()
