"""
Language value - lyric language with its generation quality tier.

The tier drives the quality score; the hints are surfaced to users when a
prompt is optimized.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_music_prompts.constants import ErrorMessages, QualityTier
from chuk_music_prompts.errors import InvalidLanguageError


@dataclass(frozen=True)
class LanguageInfo:
    """Static facts about a supported language."""

    code: str
    display_name: str
    native_name: str
    quality_tier: QualityTier
    recommended_script: str
    optimization_hints: tuple[str, ...]
    mix_compatible: tuple[str, ...]


LANGUAGE_INFO: dict[str, LanguageInfo] = {
    info.code: info
    for info in (
        LanguageInfo(
            "en",
            "English",
            "English",
            QualityTier.HIGHEST,
            "latin",
            (
                "Choose words for clear pronunciation",
                "Keep rhythm and meter in mind",
                "Optimize rhyme patterns",
                "Consider vocal phrasing",
            ),
            ("ja", "es", "fr", "de", "it", "pt", "ko", "zh"),
        ),
        LanguageInfo(
            "ja",
            "Japanese",
            "日本語",
            QualityTier.HIGH,
            "hiragana",
            (
                "Prefer hiragana",
                "Avoid complex kanji",
                "Watch particle readings (ha as wa, he as e)",
                "Use long-vowel marks sparingly",
                "Use katakana for loanwords only",
            ),
            ("en", "ko", "zh"),
        ),
        LanguageInfo(
            "es",
            "Spanish",
            "Español",
            QualityTier.HIGH,
            "latin",
            (
                "Consider dropping accent marks",
                "Use clear consonants",
                "Lean on rhythmic syllable structure",
            ),
            ("en", "fr", "it", "pt"),
        ),
        LanguageInfo(
            "fr",
            "French",
            "Français",
            QualityTier.HIGH,
            "latin",
            (
                "Account for liaison",
                "Consider dropping accent marks",
                "Render nasal vowels carefully",
            ),
            ("en", "es", "it", "de"),
        ),
        LanguageInfo(
            "de",
            "German",
            "Deutsch",
            QualityTier.HIGH,
            "latin",
            (
                "Consider dropping umlauts",
                "Split long compound words",
                "Use stress patterns",
            ),
            ("en", "fr", "it"),
        ),
        LanguageInfo(
            "it",
            "Italian",
            "Italiano",
            QualityTier.HIGH,
            "latin",
            (
                "Use the flowing phonetics of Italian",
                "Consider dropping accent marks",
                "Keep vowels distinct",
            ),
            ("en", "es", "fr"),
        ),
        LanguageInfo(
            "pt",
            "Portuguese",
            "Português",
            QualityTier.MEDIUM,
            "latin",
            ("Account for nasal sounds", "Consider dropping accent marks"),
            ("en", "es"),
        ),
        LanguageInfo(
            "ru",
            "Russian",
            "Русский",
            QualityTier.MEDIUM,
            "cyrillic",
            ("Consider romanized transcription", "Simplify inflected endings"),
            ("en",),
        ),
        LanguageInfo(
            "ko",
            "Korean",
            "한국어",
            QualityTier.HIGH,
            "korean",
            ("Make hangul pronunciation explicit", "Spell for sound changes"),
            ("en", "ja"),
        ),
        LanguageInfo(
            "zh",
            "Chinese",
            "中文",
            QualityTier.MEDIUM,
            "chinese",
            ("Add pinyin alongside characters", "Keep tones in mind"),
            ("en", "ja"),
        ),
        LanguageInfo(
            "ar",
            "Arabic",
            "العربية",
            QualityTier.BASIC,
            "arabic",
            ("Romanized transcription recommended", "Consider Arabic phonology"),
            ("en",),
        ),
        LanguageInfo(
            "hi",
            "Hindi",
            "हिन्दी",
            QualityTier.BASIC,
            "devanagari",
            ("Romanized transcription recommended", "Consider Hindi phonology"),
            ("en",),
        ),
        LanguageInfo(
            "th",
            "Thai",
            "ไทย",
            QualityTier.BASIC,
            "latin",
            ("Keep Thai tones in mind", "Romanized spelling recommended"),
            ("en",),
        ),
        LanguageInfo(
            "vi",
            "Vietnamese",
            "Tiếng Việt",
            QualityTier.BASIC,
            "latin",
            ("Drop tone marks", "Keep syllables clear"),
            ("en",),
        ),
        LanguageInfo(
            "id",
            "Indonesian",
            "Bahasa Indonesia",
            QualityTier.BASIC,
            "latin",
            ("Use Indonesian phonetics", "Keep syllable structure simple"),
            ("en", "ms"),
        ),
        LanguageInfo(
            "ms",
            "Malay",
            "Bahasa Melayu",
            QualityTier.BASIC,
            "latin",
            ("Use Malay phonetics", "Keep syllable structure simple"),
            ("en", "id"),
        ),
        LanguageInfo(
            "tl",
            "Filipino",
            "Filipino",
            QualityTier.BASIC,
            "latin",
            ("Use Filipino phonetics", "Account for Spanish loanwords"),
            ("en",),
        ),
    )
}

HIGH_QUALITY_TIERS = frozenset({QualityTier.HIGHEST, QualityTier.HIGH})


@dataclass(frozen=True)
class Language:
    """A supported lyric language."""

    code: str

    def __post_init__(self) -> None:
        if self.code not in LANGUAGE_INFO:
            raise InvalidLanguageError(ErrorMessages.UNSUPPORTED_LANGUAGE.format(code=self.code))

    @classmethod
    def create(cls, code: str) -> Language:
        """Build from a language code like 'en' or 'ja'."""
        return cls(code)

    @classmethod
    def default(cls) -> Language:
        return cls("en")

    def __str__(self) -> str:
        return self.code

    @property
    def info(self) -> LanguageInfo:
        return LANGUAGE_INFO[self.code]

    @property
    def display_name(self) -> str:
        return self.info.display_name

    @property
    def native_name(self) -> str:
        return self.info.native_name

    @property
    def quality_tier(self) -> QualityTier:
        return self.info.quality_tier

    @property
    def recommended_script(self) -> str:
        return self.info.recommended_script

    @property
    def optimization_hints(self) -> tuple[str, ...]:
        return self.info.optimization_hints

    def is_high_quality(self) -> bool:
        """Highest and high tiers count as high quality."""
        return self.quality_tier in HIGH_QUALITY_TIERS

    def can_mix_with(self, other: Language) -> bool:
        """Check whether lyrics can mix this language with another."""
        return other.code in self.info.mix_compatible

    def optimal_mix_ratio(self, other: Language) -> tuple[int, int]:
        """Primary/secondary percentage split for bilingual lyrics."""
        if {self.code, other.code} == {"en", "ja"}:
            return (70, 30)
        return (80, 20)

    @staticmethod
    def supported_languages() -> tuple[str, ...]:
        return tuple(LANGUAGE_INFO)

    @staticmethod
    def high_quality_languages() -> tuple[str, ...]:
        return tuple(
            code for code, info in LANGUAGE_INFO.items() if info.quality_tier in HIGH_QUALITY_TIERS
        )
