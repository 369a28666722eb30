"""Schema scanning exports."""

from .data_object_scanner import DataObjectScanner, ScanError, scan_data_object
from .scan_settings import DEFAULT_SCAN_SETTINGS, ScanSettings
from .traversal_frames import NodeSlot, TraversalFrame

__all__ = [
    "DEFAULT_SCAN_SETTINGS",
    "DataObjectScanner",
    "NodeSlot",
    "ScanError",
    "ScanSettings",
    "TraversalFrame",
    "scan_data_object",
]
