"""
Exception hierarchy.

Construction errors are raised by value objects before anything is built.
Input validation errors are raised by the optimization pipeline before any
side effect. Both are ValueErrors so callers can treat them as bad input.
"""


class PromptCoreError(Exception):
    """Base class for all package errors."""


class ConstructionError(PromptCoreError, ValueError):
    """A value object rejected its input."""


class EmptyDescriptorError(ConstructionError):
    """Style descriptor is empty after trimming."""


class LengthExceededError(ConstructionError):
    """Style descriptor is longer than the character budget."""


class InvalidGenreError(ConstructionError):
    """Genre selection is empty, too large, duplicated or unsupported."""


class InvalidLanguageError(ConstructionError):
    """Language code is not supported."""


class ScoreRangeError(ConstructionError):
    """A 0-100 score was outside its range."""


class RatingRangeError(ConstructionError):
    """A user rating was outside its range."""


class InputValidationError(PromptCoreError, ValueError):
    """A generation or optimization request is missing data or out of range."""
