#!/usr/bin/env python3
"""
Scan result data structures
"""

import pandas as pd
from typing import Dict
from dataclasses import dataclass


TSV_COLUMNS = ('reads', 'high_quality_bases', 'all_bases')


@dataclass
class ScanResult:
    """
    Aggregate counts of one FASTQ scan

    Attributes:
        reads: Number of complete 4-line records consumed
        high_quality_bases: Bases whose score reached the threshold
        all_bases: All bases on the quality lines
        threshold: Threshold the scan was run with
    """
    reads: int = 0
    high_quality_bases: int = 0
    all_bases: int = 0
    threshold: int = 0

    def __post_init__(self):
        """Validate count consistency"""
        if min(self.reads, self.high_quality_bases, self.all_bases) < 0:
            raise ValueError("Counts cannot be negative")
        if self.high_quality_bases > self.all_bases:
            raise ValueError(
                f"high_quality_bases ({self.high_quality_bases}) cannot exceed all_bases ({self.all_bases})"
            )

    @property
    def fraction_high_quality(self) -> float:
        """Return the share of high-quality bases"""
        if not self.all_bases:
            return 0.0
        return self.high_quality_bases / self.all_bases

    def to_tsv_line(self) -> str:
        """Format counts as reads<TAB>high-quality bases<TAB>all bases"""
        return f"{self.reads}\t{self.high_quality_bases}\t{self.all_bases}"

    def to_dict(self) -> Dict[str, int]:
        return {
            'reads': self.reads,
            'high_quality_bases': self.high_quality_bases,
            'all_bases': self.all_bases,
        }

    def to_df(self) -> pd.DataFrame:
        """Convert counts to a one-row pandas DataFrame

        Returns:
            pd.DataFrame: columns reads, high_quality_bases, all_bases
        """
        return pd.DataFrame([self.to_dict()], columns=list(TSV_COLUMNS))

    def print_summary(self, file=None):
        """Print a human readable summary"""
        print("FASTQ Quality Count Summary", file=file)
        print("=" * 40, file=file)
        print(f"Threshold: Q{self.threshold}", file=file)
        print(f"Reads: {self.reads}", file=file)
        print(f"All bases: {self.all_bases}", file=file)
        print(f"High-quality bases: {self.high_quality_bases} ({self.fraction_high_quality:.1%})", file=file)
