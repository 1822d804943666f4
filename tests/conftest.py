"""
Root conftest.py for the sqltags test suite.

Pytest plugin that checks TRA (Test Responsibility Architecture) and Tier markers.
- Reports tests missing a TRA marker or tier marker
- Applies tier timeouts when pytest-timeout is installed

Usage:
    @pytest.mark.tier(1)
    @pytest.mark.tra("UseCase.TableNameExtractor")
    def test_something():
        ...

Configuration:
    Set TRA_ENFORCE=1 to fail collection on marker errors (default: warn)
    Set TIER_TIMEOUT_MULTIPLIER to scale tier timeouts on slow machines
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


# Valid TRA namespace prefixes
VALID_TRA_PREFIXES = frozenset(
    [
        "Domain.Invariant",
        "Domain.Policy",
        "UseCase",
        "Port",
        "Adapter",
        "Contract",
    ]
)

# Tier timeout limits in seconds (0 = no limit)
TIER_TIMEOUTS: dict[int, float] = {
    0: 0.1,
    1: 2.0,
    2: 30.0,
    3: 300.0,
    4: 0,
}


def pytest_configure(config: Config) -> None:
    """Register custom markers for TRA and Tier enforcement."""
    config.addinivalue_line(
        "markers",
        "tra(anchor): Test Responsibility Anchor - declares the single responsibility this test protects. "
        "Must start with one of: Domain.Invariant, Domain.Policy, UseCase, Port, Adapter, Contract",
    )
    config.addinivalue_line(
        "markers",
        "tier(level): Test tier (0=instant, 1=fast, 2=standard, 3=slow, 4=manual). "
        "Determines when test runs and enforces timeout.",
    )
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "property: Property-based tests using Hypothesis")
    config.addinivalue_line("markers", "concurrency: Concurrency tests with threading")
    config.addinivalue_line(
        "markers",
        "no_parallel: Tests that cannot run in parallel (shared state)",
    )


def _get_tier(item: Item) -> int | None:
    """Extract tier level from item's markers."""
    for marker in item.iter_markers(name="tier"):
        if marker.args:
            tier = marker.args[0]
            if isinstance(tier, int) and 0 <= tier <= 4:
                return tier
    return None


def _marker_errors(items: list[Item]) -> list[str]:
    """Validate TRA and tier markers on all tests.

    Returns:
        List of error messages. Empty if all valid.
    """
    errors = []

    for item in items:
        tra_markers = list(item.iter_markers(name="tra"))
        if not tra_markers:
            errors.append(f"{item.nodeid}: Missing @pytest.mark.tra('...')")
        else:
            anchor = tra_markers[0].args[0] if tra_markers[0].args else None
            if not isinstance(anchor, str) or not any(
                anchor == prefix or anchor.startswith(f"{prefix}.")
                for prefix in VALID_TRA_PREFIXES
            ):
                valid = ", ".join(sorted(VALID_TRA_PREFIXES))
                errors.append(
                    f"{item.nodeid}: Invalid TRA anchor {anchor!r}. Must start with one of: {valid}"
                )

        if _get_tier(item) is None:
            errors.append(f"{item.nodeid}: Missing or invalid @pytest.mark.tier()")

    return errors


def _apply_tier_timeouts(items: list[Item]) -> None:
    """Apply timeout based on tier level.

    Only applies if pytest-timeout is installed and no explicit timeout is set.
    """
    try:
        import pytest_timeout as _  # type: ignore[import-untyped]  # noqa: F401
    except ImportError:
        return

    multiplier = float(os.environ.get("TIER_TIMEOUT_MULTIPLIER", "1.0"))

    for item in items:
        tier = _get_tier(item)
        if tier is None or any(item.iter_markers(name="timeout")):
            continue

        timeout = TIER_TIMEOUTS.get(tier, 0)
        if timeout > 0:
            item.add_marker(pytest.mark.timeout(timeout * multiplier))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Check TRA and Tier markers at collection time."""
    errors = _marker_errors(items)

    if errors:
        if os.environ.get("TRA_ENFORCE", "warn") == "1":
            pytest.fail(
                "TRA/Tier Enforcement Errors:\n" + "\n".join(f"  - {e}" for e in errors),
                pytrace=False,
            )
        print("\nTRA/Tier Enforcement Warnings:")
        for error in errors:
            print(f"  {error}")

    _apply_tier_timeouts(items)


@pytest.hookimpl(trylast=True)
def pytest_report_header(config: Config) -> str:
    """Add enforcement info to pytest header."""
    return f"TRA enforcement: {os.environ.get('TRA_ENFORCE', 'warn')}"
