"""
Scanning module - FASTQ record framing and quality counting
"""

from .record_scanner import RecordScanner, TruncatedRecordError, InvalidQualityError, iter_quality_lines
from .scan_result import ScanResult

__all__ = [
    'RecordScanner',
    'TruncatedRecordError',
    'InvalidQualityError',
    'iter_quality_lines',
    'ScanResult'
]
