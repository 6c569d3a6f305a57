#!/usr/bin/env python3
"""
Quality string decoding functions

Converts raw FASTQ quality lines into signed Phred scores and counts the
bases that reach a threshold
"""

import numpy as np
from typing import Union

from Bio.SeqIO.QualityIO import SANGER_SCORE_OFFSET


QualityLine = Union[str, bytes, bytearray]


def strip_terminator(line: QualityLine, trim_mode: str = 'terminator') -> QualityLine:
    """
    Remove the line terminator from a quality line

    Args:
        line: Raw line as returned by readline()
        trim_mode: 'terminator' removes '\\n' and then '\\r' only when present,
            'legacy' always drops exactly one trailing character

    Returns:
        The quality characters without the terminator
    """
    if trim_mode == 'legacy':
        return line[:-1]
    if trim_mode != 'terminator':
        raise ValueError(f"Unsupported trim mode: {trim_mode}")

    newline, carriage = ('\n', '\r') if isinstance(line, str) else (b'\n', b'\r')
    if line.endswith(newline):
        line = line[:-1]
    if line.endswith(carriage):
        line = line[:-1]
    return line


def quality_codes(line: QualityLine) -> np.ndarray:
    """Return the code point of every character in the line as int64"""
    if isinstance(line, str):
        codes = np.frombuffer(line.encode('utf-32-le'), dtype='<u4')
    else:
        codes = np.frombuffer(line, dtype=np.uint8)
    return codes.astype(np.int64)


def decode_quality(line: QualityLine, offset: int = SANGER_SCORE_OFFSET) -> np.ndarray:
    """
    Decode a quality line into signed Phred scores

    Characters below the offset give negative scores; callers decide how
    to treat them.
    """
    return quality_codes(line) - offset


def count_high_quality(scores: np.ndarray, threshold: int, underflow: str = 'wrap',
                       offset: int = SANGER_SCORE_OFFSET) -> int:
    """
    Count scores that reach the threshold

    Args:
        scores: Signed scores from decode_quality()
        threshold: Minimum score counted as high quality
        underflow: 'wrap' counts negative scores and characters with code 128
            or above as high quality (signed chars wrap to a huge unsigned value
            in the legacy tool), 'clamp' treats negative scores as 0
        offset: Offset the scores were decoded with

    Returns:
        Number of high-quality bases
    """
    if underflow == 'wrap':
        return int(np.count_nonzero((scores >= threshold) | (scores < 0) | (scores + offset >= 128)))
    if underflow == 'clamp':
        return int(np.count_nonzero(np.maximum(scores, 0) >= threshold))
    raise ValueError(f"Unsupported underflow policy: {underflow}")


def first_underflow(scores: np.ndarray) -> int:
    """Return the index of the first negative score, or -1 if there is none"""
    negative = np.flatnonzero(scores < 0)
    return int(negative[0]) if negative.size else -1
