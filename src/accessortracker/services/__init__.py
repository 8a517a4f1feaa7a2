"""
Service layer for accessortracker.
"""

from .configuration_service import ConfigurationService, ScanConfig, UnifiedConfig
from .file_scan_service import FileScanService

__all__ = [
    'ConfigurationService',
    'FileScanService',
    'ScanConfig',
    'UnifiedConfig',
]
