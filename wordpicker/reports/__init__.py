"""Report generation for wordpicker."""

from .selection_report import write_selection_report

__all__ = ["write_selection_report"]
