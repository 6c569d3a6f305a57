#!/usr/bin/env python3
"""
FASTQ record scanner

Groups input lines into 4-line FASTQ records and folds every quality line
into three running counters: reads, high-quality bases and all bases.
"""

import logging
from typing import Iterator, Optional

from ..config.scan_config import ScanConfig
from ..utils.quality import (
    QualityLine,
    strip_terminator,
    decode_quality,
    count_high_quality,
    first_underflow,
)
from .scan_result import ScanResult

logger = logging.getLogger(__name__)


class TruncatedRecordError(ValueError):
    """A started record ended before its 2nd, 3rd or 4th line."""

    def __init__(self, line_index: int, record_number: int):
        self.line_index = line_index
        self.record_number = record_number
        super().__init__(f"Truncated FASTQ record {record_number}: line {line_index} is missing")


class InvalidQualityError(ValueError):
    """A quality character lies below the encoding offset."""

    def __init__(self, record_number: int, position: int, char):
        self.record_number = record_number
        self.position = position
        self.char = char
        super().__init__(
            f"Invalid quality character {char!r} at position {position + 1} of record {record_number}"
        )


def iter_quality_lines(handle) -> Iterator[QualityLine]:
    """
    Read 4 lines per record and yield the raw quality line (4th line).

    The header, sequence and separator lines are not inspected. An empty
    read on the first line of a record ends iteration; an empty read on any
    later line raises TruncatedRecordError.
    """
    record_number = 0
    while True:
        if not handle.readline():  # 1st line
            return
        record_number += 1
        for line_index in (2, 3):
            if not handle.readline():
                raise TruncatedRecordError(line_index, record_number)
        qual_line = handle.readline()  # 4th line
        if not qual_line:
            raise TruncatedRecordError(4, record_number)
        yield qual_line


class RecordScanner:
    """
    Single-pass reducer over FASTQ quality lines

    Counters persist across calls to consume() and scan(), so a scanner can
    be fed several streams in turn; use reset() to start over.
    """

    def __init__(self, config: Optional[ScanConfig] = None):
        self.config = config or ScanConfig()
        self.reset()

    def reset(self):
        self.reads = 0
        self.high_quality_bases = 0
        self.all_bases = 0

    def consume(self, quality_line: QualityLine):
        """Fold one raw quality line into the counters"""
        config = self.config
        qual = strip_terminator(quality_line, config.trim_mode)
        scores = decode_quality(qual, config.offset)

        if config.underflow == 'reject':
            position = first_underflow(scores)
            if position >= 0:
                raise InvalidQualityError(self.reads + 1, position, qual[position:position + 1])
            underflow = 'clamp'
        else:
            underflow = config.underflow

        self.all_bases += len(scores)
        self.high_quality_bases += count_high_quality(scores, config.threshold, underflow, config.offset)
        self.reads += 1

    def scan(self, handle) -> ScanResult:
        """
        Scan a stream to exhaustion

        Args:
            handle: Readable text or binary handle

        Returns:
            ScanResult with the accumulated counts

        Raises:
            TruncatedRecordError: the last record is incomplete
            InvalidQualityError: underflow policy is 'reject' and a character is below the offset
        """
        log_every = self.config.log_every
        for qual_line in iter_quality_lines(handle):
            self.consume(qual_line)
            if log_every and self.reads % log_every == 0:
                logger.debug(
                    f"Processed {self.reads} reads: {self.high_quality_bases}/{self.all_bases} bases "
                    f">= Q{self.config.threshold}"
                )
        return self.result()

    def result(self) -> ScanResult:
        return ScanResult(
            reads=self.reads,
            high_quality_bases=self.high_quality_bases,
            all_bases=self.all_bases,
            threshold=self.config.threshold,
        )
