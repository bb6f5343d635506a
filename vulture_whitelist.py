"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validators - used by framework via @field_validator decorator
_.parse_string_list  # noqa: F821  # unused method (wordpicker/core/config.py:173)
_.parse_debug_words  # noqa: F821  # unused method (wordpicker/core/config.py:181)
_.compile_pattern  # noqa: F821  # unused method (wordpicker/core/config.py:191)
_.check_history  # noqa: F821  # unused method (wordpicker/core/config.py:202)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (wordpicker/core/config.py:211)

# Pydantic model_config class variable - read by framework at class definition time
# Required to allow Pattern and callables in the SelectionConfig model
model_config  # noqa: F821  # unused variable (wordpicker/core/config.py:76)

# Pydantic model_config class variable - read by framework at class definition time
model_config  # noqa: F821  # unused variable (wordpicker/core/types.py:11)

# Public API exported for callers composing their own pipelines
record_history  # unused function (wordpicker/processing/stages/selection.py:39)
shuffle_words  # unused function (wordpicker/processing/stages/ordering.py:18)
