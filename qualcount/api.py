#!/usr/bin/env python3
"""
qualcount Main API Module

Provides a simplified high-level interface for counting high-quality bases
"""

import logging
import time
from dataclasses import replace
from pathlib import Path
from typing import Optional, Union, IO

from .config.scan_config import ScanConfig, DEFAULT_MIN_QUAL_SCORE
from .scanning.record_scanner import RecordScanner
from .scanning.scan_result import ScanResult
from .utils.misc import open_fastq_input

logger = logging.getLogger(__name__)


def count_quality_bases(
    source: Union[str, Path, IO, None] = None,
    threshold: int = DEFAULT_MIN_QUAL_SCORE,
    config: Optional[ScanConfig] = None,
    missing_input: Optional[str] = None,
    verbose: bool = False
) -> ScanResult:
    """
    Count reads, high-quality bases and all bases of a FASTQ input

    Args:
        source: File path, open handle (text or binary), or None / "-" for standard input
        threshold: Minimum quality score, ignored when config is given
        config: Complete scan configuration
        missing_input: Override of config.missing_input ('error' or 'stdin')
        verbose: Whether to print a summary after the scan

    Returns:
        Scan result
    """
    start_time = time.time()

    if config is None:
        config = ScanConfig(threshold=threshold)
    if missing_input is not None:
        config = replace(config, missing_input=missing_input)

    scanner = RecordScanner(config)

    if source is not None and hasattr(source, 'readline'):
        result = scanner.scan(source)
    else:
        path = str(source) if source is not None else None
        handle, should_close = open_fastq_input(path, config.missing_input)
        try:
            result = scanner.scan(handle)
        finally:
            if should_close:
                handle.close()

    logger.info(f"Scanned {result.reads} reads in {time.time() - start_time:.2f} seconds")
    if verbose:
        result.print_summary()

    return result
