"""ContextVar-based scan configuration for dfalex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Scanner reads the active config once, at construction.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from dfalex.config import ScanConfig, ScanStrategy, scan_config_context

    with scan_config_context(ScanConfig(strategy=ScanStrategy.EXPLICIT)):
        scanner = Scanner("i in int")
        kind = scanner.next_token()

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum


class ScanStrategy(Enum):
    """How the scanner materializes the transition function.

    - EXPLICIT: per-state branching logic
    - TABLE: dense transition table indexed by state and symbol class

    """

    EXPLICIT = "explicit"
    TABLE = "table"


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        strategy: Transition strategy used when a Scanner is not given one
        trace: Log every transition at DEBUG level
        validate_table: Validate the transition table when a table-driven
            Scanner is created

    """

    strategy: ScanStrategy = ScanStrategy.TABLE
    trace: bool = False
    validate_table: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Unknown keys are silently ignored. ``strategy`` may be given as a
        ScanStrategy or as its string value.

        Example:
            >>> config = ScanConfig.from_dict({"strategy": "explicit", "x": 1})
            >>> config.strategy
            <ScanStrategy.EXPLICIT: 'explicit'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "strategy" in filtered:
            filtered["strategy"] = ScanStrategy(filtered["strategy"])
        return cls(**filtered)


_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.
    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: ScanConfig to use within the context.
    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "ScanStrategy",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
