#!/usr/bin/env python3
"""
Command line interface for qualcount

Examples:
    qualcount mouse_R1.fastq
    qualcount < mouse_R1.fastq
    qualcount 20 mouse_R1.fastq
    qualcount -q 21 mouse_R1.fastq
    qualcount -q 22 mouse_R1.fastq | awk '{ print $3 }'
    head -n 40000 mouse_R1.fastq | qualcount -q24
"""

import re
import sys
import argparse
import logging
from dataclasses import replace
from typing import List, Optional, Tuple

from . import __version__
from .api import count_quality_bases
from .config.scan_config import (
    ScanConfig,
    DEFAULT_MIN_QUAL_SCORE,
    MAX_QUAL_SCORE,
    TRIM_MODES,
    UNDERFLOW_POLICIES,
)

PROG = "qualcount"
USAGE = (
    f"Usage: {PROG} [min_qscore or -q min_qscore (default: {DEFAULT_MIN_QUAL_SCORE})] input.fastq\n"
    "Output: number of reads, higher-scored bases, and all bases"
)

logger = logging.getLogger(__name__)


class MalformedArgumentError(ValueError):
    """Raised for a threshold argument that is not an integer in range."""


# ============================================================================
# Argument Parsing and Logging Setup
# ============================================================================

def setup_logging(log_level=logging.WARNING, log_file=None):
    """Setup logging configuration for the package logger."""
    package_logger = logging.getLogger("qualcount")
    package_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    package_logger.handlers = []

    formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s',
                                  datefmt='%Y-%m-%d %H:%M:%S')

    # stdout carries the counts, so the console handler writes to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    return package_logger


def is_small_int(arg: str) -> bool:
    """Return True for a 1-2 digit string (0-99)"""
    return re.fullmatch(r'[0-9]{1,2}', arg) is not None


def parse_threshold(value: str) -> int:
    """Convert a threshold argument, failing clearly instead of defaulting to zero"""
    try:
        threshold = int(value, 10)
    except ValueError:
        raise MalformedArgumentError(f"Invalid minimal quality score: {value!r}") from None
    if not 0 <= threshold <= MAX_QUAL_SCORE:
        raise MalformedArgumentError(
            f"Minimal quality score must be within 0-{MAX_QUAL_SCORE}, got {threshold}"
        )
    return threshold


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; -h and -v are handled by main()"""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Count reads, higher-scored bases and all bases in a FASTQ file.",
        add_help=False,
    )
    parser.add_argument('-h', '--help', action='store_true',
                        help='Print simple usage and exit')
    parser.add_argument('-v', '--version', action='store_true',
                        help='Print programme name and version and exit')
    parser.add_argument('-q', '--min-qscore', type=str, default=None,
                        help=f'Minimal quality score (default: {DEFAULT_MIN_QUAL_SCORE})')
    parser.add_argument('--config', type=str, default=None,
                        help='JSON scan configuration file; command line options take precedence')
    parser.add_argument('--trim-mode', choices=TRIM_MODES, default=None,
                        help="'terminator' strips the newline only if present, 'legacy' always drops one character")
    parser.add_argument('--underflow', choices=UNDERFLOW_POLICIES, default=None,
                        help='Handling of quality characters below the Phred+33 offset')
    parser.add_argument('--stdin-fallback', action='store_true',
                        help='Read standard input when the input file cannot be opened')
    parser.add_argument('--header', action='store_true',
                        help='Print a header line before the counts')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Also write log messages to this file')
    parser.add_argument('inputs', nargs='*',
                        help='Input FASTQ file; standard input when omitted')
    return parser


def parse_arguments(argv: List[str]) -> Tuple[argparse.Namespace, List[str]]:
    """
    Parse command line arguments.

    A 1-2 digit first argument is taken as the minimal quality score.

    Returns:
        (namespace, unknown options)
    """
    leading_threshold = None
    if argv and is_small_int(argv[0]):
        leading_threshold, argv = argv[0], argv[1:]

    args, extras = build_parser().parse_known_args(argv)
    args.leading_threshold = leading_threshold

    unknown = [arg for arg in extras if arg.startswith('-') and arg != '-']
    args.inputs = args.inputs + [arg for arg in extras if arg not in unknown]
    return args, unknown


def build_config(args: argparse.Namespace) -> ScanConfig:
    """Merge the optional config file with command line overrides"""
    config = ScanConfig.from_file(args.config) if args.config else ScanConfig()

    overrides = {}
    # -q takes precedence over a leading small integer
    threshold_arg = args.min_qscore if args.min_qscore is not None else args.leading_threshold
    if threshold_arg is not None:
        overrides['threshold'] = parse_threshold(threshold_arg)
    if args.trim_mode:
        overrides['trim_mode'] = args.trim_mode
    if args.underflow:
        overrides['underflow'] = args.underflow
    if args.stdin_fallback:
        overrides['missing_input'] = 'stdin'

    return replace(config, **overrides) if overrides else config


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    args, unknown = parse_arguments(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    if args.help:
        print(USAGE)
        return 0
    if args.version:
        print(f"{PROG} ver. {__version__}")
        return 0

    for opt in unknown:
        print(f"Unknown option: {opt}", file=sys.stderr)

    input_path = args.inputs[-1] if args.inputs else None
    for ignored in args.inputs[:-1]:
        logger.warning(f"Ignoring extra argument: {ignored}")

    try:
        config = build_config(args)
        logger.debug(f"Scan configuration: {config.to_dict()}")
        result = count_quality_bases(input_path, config=config)
    except (ValueError, OSError) as exc:
        # Truncated records, invalid quality, bad arguments and unreadable input
        logger.error(str(exc))
        return 1

    if args.header:
        sys.stdout.write(result.to_df().to_csv(sep='\t', index=False, lineterminator='\n'))
    else:
        print(result.to_tsv_line())
    return 0


if __name__ == "__main__":
    sys.exit(main())
