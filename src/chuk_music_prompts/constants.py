"""
Constants and enums for the prompt system.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class ComplianceLevel(str, Enum):
    """Ordinal risk tier for compliance findings (safe < caution < warning < unsafe)."""

    SAFE = "safe"
    CAUTION = "caution"
    WARNING = "warning"
    UNSAFE = "unsafe"

    @property
    def rank(self) -> int:
        """Ordinal position, higher is worse."""
        return LEVEL_RANK[self]


LEVEL_RANK: dict[ComplianceLevel, int] = {
    ComplianceLevel.SAFE: 0,
    ComplianceLevel.CAUTION: 1,
    ComplianceLevel.WARNING: 2,
    ComplianceLevel.UNSAFE: 3,
}


class ComplianceCategory(str, Enum):
    """Rule taxonomy. Declaration order is the recommendation order."""

    COPYRIGHT = "copyright"
    TRADEMARK = "trademark"
    INAPPROPRIATE_CONTENT = "inappropriate_content"
    COMMERCIAL_USE = "commercial_use"
    PRIVACY = "privacy"
    CULTURAL_SENSITIVITY = "cultural_sensitivity"


class StyleCategory(str, Enum):
    """Classification buckets for style descriptor elements."""

    GENRE = "genre"
    INSTRUMENT = "instrument"
    MOOD = "mood"
    OTHER = "other"


class OptimizationMode(str, Enum):
    """Target flavour for prompt optimization."""

    SUNO = "suno"
    GENERAL = "general"
    CREATIVE = "creative"


class OptimizationType(str, Enum):
    """Kind of change an optimization pass made."""

    REMOVED = "removed"
    SHORTENED = "shortened"
    REORDERED = "reordered"
    MERGED = "merged"


class QualityTier(str, Enum):
    """How well the generation service handles a language."""

    HIGHEST = "highest"
    HIGH = "high"
    MEDIUM = "medium"
    BASIC = "basic"


# Style descriptor limits
STYLE_MAX_LENGTH = 120
STYLE_MIN_ELEMENTS = 2
STYLE_MAX_ELEMENTS = 8
STYLE_SEPARATOR = ", "

# Order used when an over-budget descriptor has to drop elements
DEFAULT_PRIORITY_ORDER: tuple[StyleCategory, ...] = (
    StyleCategory.GENRE,
    StyleCategory.MOOD,
    StyleCategory.INSTRUMENT,
    StyleCategory.OTHER,
)

# Genre selection
MAX_GENRES = 5

# Prompt entity
TITLE_MAX_LENGTH = 100
RATING_RANGE = (1, 5)

# Optimization pipeline
TARGET_LENGTH_RANGE = (20, 500)
DEFAULT_TARGET_LENGTH = 120
PRIORITY_RANGE = (1, 10)
LEVEL_RANGE = (1, 10)  # energy and complexity selections
DEFAULT_PRIORITIES: dict[str, int] = {
    "genres": 10,
    "instruments": 8,
    "mood": 7,
    "technical": 6,
}
OPTIMIZED_TITLE_SUFFIX = "_optimized"

# Compliance scoring
SEVERITY_PENALTIES: dict[ComplianceLevel, int] = {
    ComplianceLevel.UNSAFE: 30,
    ComplianceLevel.WARNING: 20,
    ComplianceLevel.CAUTION: 10,
    ComplianceLevel.SAFE: 5,
}
STRICT_MODE_PENALTY = 5
EXCERPT_CONTEXT = 20
MANY_ISSUES_THRESHOLD = 5

# Quality score weights
QUALITY_WEIGHTS: dict[str, float] = {
    "genre_clarity": 0.3,
    "style_optimization": 0.4,
    "language_optimization": 0.2,
    "completeness": 0.1,
}


class ErrorMessages:
    """Standardized error messages."""

    EMPTY_STYLE = "Style descriptor cannot be empty."
    STYLE_TOO_LONG = "Style descriptor must be at most {limit} characters, got {length}."
    EMPTY_GENRE = "Genre cannot be empty."
    TOO_MANY_GENRES = "At most {limit} genres can be selected, got {count}."
    DUPLICATE_GENRE = "Duplicate genres are not allowed: {genre}."
    UNSUPPORTED_GENRE = "Unsupported genre: '{genre}'."
    UNSUPPORTED_LANGUAGE = "Unsupported language: '{code}'."
    SCORE_OUT_OF_RANGE = "{name} must be between 0 and 100, got {value}."
    RATING_OUT_OF_RANGE = "Rating must be between {low} and {high}, got {value}."
    MISSING_PROMPT = "No prompt was supplied."
    INVALID_TARGET_LENGTH = "Target length must be between {low} and {high}, got {value}."
    INVALID_MODE = "Invalid optimization mode: '{mode}'. Expected one of: {choices}."
    INVALID_PRIORITY = "Priority '{name}' must be between {low} and {high}, got {value}."
    NO_GENRES = "Select at least one genre."
    NO_LANGUAGE = "Select a language."
    INVALID_SELECTION = "Invalid {name}: {reason}"
    INVALID_LEVEL = "{name} must be between {low} and {high}, got {value}."
    ISSUE_INDEX_OUT_OF_RANGE = "Issue index {index} is out of range (0-{last})."
