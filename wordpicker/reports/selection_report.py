"""Selection report generation."""

from datetime import datetime
from pathlib import Path
from typing import TextIO

from wordpicker.processing.stages import PipelineStats
from wordpicker.reports.helpers import (
    format_time,
    write_file_safely,
    write_report_header,
    write_section_header,
)


def _write_funnel(f: TextIO, stats: PipelineStats) -> None:
    write_section_header(f, "Stage Funnel:")
    f.write(f"  Input words:           {stats.input_words:,}\n")
    f.write(f"  After filters:         {stats.after_filters:,}\n")
    f.write(f"  After phonetic dedup:  {stats.after_dedup:,}\n")
    f.write(f"  Weighted pool:         {stats.weighted_pool:,}\n")
    f.write(f"  Selected:              {stats.selected:,}\n")
    f.write(f"  Seeded shuffle:        {'yes' if stats.seeded else 'no'}\n")
    f.write(f"  Elapsed:               {format_time(stats.elapsed_time)}\n\n")


def _write_rejections(f: TextIO, stats: PipelineStats) -> None:
    write_section_header(f, "Rejections by Filter:")
    if not stats.rejections and not stats.phonetic_duplicates:
        f.write("  None\n\n")
        return
    for name, count in sorted(stats.rejections.items(), key=lambda item: (-item[1], item[0])):
        f.write(f"  {name:<40} {count:,}\n")
    if stats.phonetic_duplicates:
        f.write(f"  {'phonetic_distinct':<40} {stats.phonetic_duplicates:,}\n")
    f.write("\n")


def _write_option_notes(f: TextIO, stats: PipelineStats) -> None:
    if stats.unsupported_options:
        f.write(
            "Options requiring linguistic metadata (all words excluded): "
            f"{', '.join(stats.unsupported_options)}\n"
        )
    if stats.inert_options:
        f.write(f"Options with no effect: {', '.join(stats.inert_options)}\n")
    if stats.unsupported_options or stats.inert_options:
        f.write("\n")


def write_selection_report(stats: PipelineStats, words: list[str], report_dir: Path) -> Path:
    """Write a text report describing one selection run.

    Args:
        stats: Statistics from SelectionPipeline.last_stats
        words: Selected words as emitted
        report_dir: Directory to write the report to (created if missing)

    Returns:
        Path of the written report
    """
    report_dir.mkdir(parents=True, exist_ok=True)
    filepath = report_dir / f"selection_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.txt"

    def write_content(f: TextIO) -> None:
        write_report_header(f, "WORD SELECTION REPORT")
        _write_funnel(f, stats)
        _write_rejections(f, stats)
        _write_option_notes(f, stats)
        write_section_header(f, "Selected Words:")
        for position, word in enumerate(words, 1):
            f.write(f"  {position:>4}. {word}\n")
        if not words:
            f.write("  None\n")

    write_file_safely(filepath, write_content, "writing selection report")
    return filepath
