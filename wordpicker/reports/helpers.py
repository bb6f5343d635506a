"""Helper functions for report generation."""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import TextIO

from loguru import logger


def format_time(seconds: float) -> str:
    """Format seconds into human-readable time."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, secs = divmod(seconds, 60)
    return f"{int(minutes)}m {secs:.1f}s"


def write_report_header(f: TextIO, title: str) -> None:
    """Write a standard report header with title and timestamp.

    Args:
        f: File object to write to
        title: Title of the report
    """
    f.write("=" * 80 + "\n")
    f.write(f"{title}\n")
    f.write("=" * 80 + "\n")
    f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")


def write_section_header(f: TextIO, title: str) -> None:
    """Write a section header with separator line.

    Args:
        f: File object to write to
        title: Section title
    """
    f.write(f"{title}\n")
    f.write("-" * 70 + "\n")


def write_file_safely(
    filepath: Path,
    write_content: Callable[[TextIO], None],
    description: str,
) -> None:
    """Open a report file and write it with the given callback.

    Args:
        filepath: Destination file
        write_content: Callback receiving the open file
        description: What is being written, for the error message

    Raises:
        OSError: If the file cannot be written
    """
    try:
        with open(filepath, "w", encoding="utf-8") as f:
            write_content(f)
    except OSError as e:
        logger.error(f"Error {description} to {filepath}: {e}")
        raise
