"""
Utility modules
"""

from .misc import open_fastq_input, FileOpenError
from .quality import strip_terminator, decode_quality, count_high_quality, first_underflow
__all__ = [
    'open_fastq_input',
    'FileOpenError',
    'strip_terminator',
    'decode_quality',
    'count_high_quality',
    'first_underflow'
]
