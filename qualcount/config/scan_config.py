#!/usr/bin/env python3
"""
Scan configuration module

Holds the quality threshold and the policies that control how quality
lines are measured and decoded during a scan
"""

import json
from pathlib import Path
from typing import Dict, Any, Union
from dataclasses import dataclass, asdict

from Bio.SeqIO.QualityIO import SANGER_SCORE_OFFSET


DEFAULT_MIN_QUAL_SCORE = 16
LEGACY_MIN_QUAL_SCORE = 20  # default of the older single-argument tool
MAX_QUAL_SCORE = 65535

TRIM_MODES = ('terminator', 'legacy')
UNDERFLOW_POLICIES = ('wrap', 'clamp', 'reject')
MISSING_INPUT_POLICIES = ('error', 'stdin')


@dataclass(frozen=True)
class ScanConfig:
    """
    Scan configuration data class

    Attributes:
        threshold: Minimum decoded quality score counted as high quality
        offset: ASCII offset of the quality encoding (Phred+33)
        trim_mode: 'terminator' strips the line terminator only if present,
            'legacy' always drops one trailing character
        underflow: Handling of characters below the offset ('wrap', 'clamp', 'reject')
        missing_input: Behaviour when the input path cannot be opened ('error', 'stdin')
        log_every: Emit a progress log line every N records, 0 disables
    """
    threshold: int = DEFAULT_MIN_QUAL_SCORE
    offset: int = SANGER_SCORE_OFFSET
    trim_mode: str = 'terminator'
    underflow: str = 'wrap'
    missing_input: str = 'error'
    log_every: int = 0

    def __post_init__(self):
        """Validate configuration parameters"""
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, int):
            raise ValueError(f"threshold must be an integer, got {self.threshold!r}")
        if not 0 <= self.threshold <= MAX_QUAL_SCORE:
            raise ValueError(f"threshold must be within 0-{MAX_QUAL_SCORE}, got {self.threshold}")
        if not isinstance(self.offset, int) or self.offset < 0:
            raise ValueError(f"offset must be a non-negative integer, got {self.offset!r}")
        if self.trim_mode not in TRIM_MODES:
            raise ValueError(f"Unsupported trim mode: {self.trim_mode}")
        if self.underflow not in UNDERFLOW_POLICIES:
            raise ValueError(f"Unsupported underflow policy: {self.underflow}")
        if self.missing_input not in MISSING_INPUT_POLICIES:
            raise ValueError(f"Unsupported missing input policy: {self.missing_input}")
        if not isinstance(self.log_every, int) or self.log_every < 0:
            raise ValueError(f"log_every must be a non-negative integer, got {self.log_every!r}")

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> 'ScanConfig':
        """Load configuration from dictionary, rejecting unknown keys"""
        if not isinstance(config_data, dict):
            raise ValueError(f"Configuration must be a JSON object, got {type(config_data).__name__}")
        unknown = set(config_data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return cls(**config_data)

    @classmethod
    def from_file(cls, config_file: Union[str, Path]) -> 'ScanConfig':
        """Load configuration from JSON file"""
        config_path = Path(config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file does not exist: {config_file}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)

        return cls.from_dict(config_data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def get_default_config() -> ScanConfig:
    """Get the default scan configuration (threshold 16, Phred+33)"""
    return ScanConfig()
