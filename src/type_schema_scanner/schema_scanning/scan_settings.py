"""Per-scan settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScanSettings:
    """Options read once at the start of every scan."""

    infer_unannotated_types: bool = True


DEFAULT_SCAN_SETTINGS = ScanSettings()
