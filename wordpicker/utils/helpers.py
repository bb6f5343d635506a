"""Shared utility functions for wordpicker."""

import numbers
import os


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def strip_quotes(line: str) -> str:
    """Remove one leading and one trailing quote character from a line.

    e.g., '"apple",' -> 'apple', "'pear'" -> 'pear'
    """
    line = line.strip().rstrip(",").strip()
    if line[:1] in ("'", '"'):
        line = line[1:]
    if line[-1:] in ("'", '"'):
        line = line[:-1]
    return line


def is_number(value: object) -> bool:
    """Check whether a value is a real number (bool does not count)."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)
