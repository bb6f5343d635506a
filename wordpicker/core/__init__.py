"""Core domain types for wordpicker."""

from .config import CaseOption, SelectionConfig, SortOrder, load_config
from .errors import ConfigurationError, SourceLoadError, WordPickerError
from .types import SelectionResult, WordMetadata

__all__ = [
    "CaseOption",
    "ConfigurationError",
    "SelectionConfig",
    "SelectionResult",
    "SortOrder",
    "SourceLoadError",
    "WordMetadata",
    "WordPickerError",
    "load_config",
]
