import logging
import sys

logger = logging.getLogger(__name__)


class FileOpenError(OSError):
    """Raised when a named FASTQ input cannot be opened."""


def open_fastq_input(file_path=None, missing_input="error"):
    """
    Open a FASTQ input in binary mode.

    `None` or "-" selects standard input. Returns (handle, should_close);
    standard input is never reported as closable.
    """
    if file_path is None or file_path == "-":
        return sys.stdin.buffer, False

    try:
        return open(file_path, "rb"), True
    except OSError as exc:
        if missing_input == "stdin":
            logger.warning(f"Cannot open {file_path} ({exc.strerror}), reading standard input instead")
            return sys.stdin.buffer, False
        raise FileOpenError(exc.errno, f"Cannot open input file: {exc.strerror}", file_path) from exc
