"""
qualcount - count reads and high-quality bases in FASTQ files

Main features:
- 4-line FASTQ record framing with truncated record detection
- Phred+33 quality decoding and thresholding
- Reads / high-quality bases / all bases summary for shell pipelines

Author: Jarning Gau
"""

__version__ = "1.3.0"
__author__ = "Jarning Gau"

# Export main API interfaces
from .api import count_quality_bases
from .config.scan_config import ScanConfig
from .scanning import RecordScanner, ScanResult, TruncatedRecordError, InvalidQualityError

__all__ = [
    '__version__',
    '__author__',
    # Main API
    'count_quality_bases',
    'ScanConfig',
    'RecordScanner',
    'ScanResult',
    'TruncatedRecordError',
    'InvalidQualityError'
]
