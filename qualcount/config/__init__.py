"""
Configuration module - scan configuration and related constants
"""

from .scan_config import (
    ScanConfig,
    get_default_config,
    DEFAULT_MIN_QUAL_SCORE,
    LEGACY_MIN_QUAL_SCORE,
    MAX_QUAL_SCORE,
)

__all__ = [
    'ScanConfig',
    'get_default_config',
    'DEFAULT_MIN_QUAL_SCORE',
    'LEGACY_MIN_QUAL_SCORE',
    'MAX_QUAL_SCORE',
]
