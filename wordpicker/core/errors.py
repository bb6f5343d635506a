"""Exception types raised by wordpicker."""


class WordPickerError(Exception):
    """Base class for all wordpicker errors."""


class ConfigurationError(WordPickerError, ValueError):
    """Raised when the requested word count or the configuration is invalid."""


class SourceLoadError(WordPickerError):
    """Raised when no word source can be resolved or read."""
