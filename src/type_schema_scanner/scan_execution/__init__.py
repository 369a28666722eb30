"""Scan execution exports."""

from .scan_contracts import ScanOutcome, ScanRequest
from .scan_use_case import ScanExecutionError, execute_configured_scan, execute_scan

__all__ = [
    "ScanExecutionError",
    "ScanOutcome",
    "ScanRequest",
    "execute_configured_scan",
    "execute_scan",
]
