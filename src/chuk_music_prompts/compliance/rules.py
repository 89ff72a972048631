"""
Built-in compliance rules.

Keyword lists are matched as lower-case substrings of the whole corpus,
so short keywords also fire inside longer words.
"""

from __future__ import annotations

from chuk_music_prompts.constants import ComplianceCategory, ComplianceLevel
from chuk_music_prompts.models.compliance import ComplianceRule

# Straight or single quotes around any text: likely a quoted lyric
QUOTED_TEXT_PATTERN = r"[\"'].*[\"']"

# Phone numbers like 090-1234-5678 and e-mail addresses
PERSONAL_INFO_PATTERN = (
    r"\b\d{3}-\d{4}-\d{4}\b|\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"
)


def builtin_rules() -> list[ComplianceRule]:
    """Return a fresh list of the built-in rules."""
    return [
        # Copyright
        ComplianceRule.keywords(
            "Song title reference",
            ComplianceCategory.COPYRIGHT,
            "May reference an existing song title",
            [
                "bohemian rhapsody",
                "imagine",
                "yesterday",
                "hey jude",
                "hotel california",
                "smells like teen spirit",
                "billie jean",
                "like a rolling stone",
                "purple haze",
                "stairway to heaven",
                "sweet child o mine",
            ],
            ComplianceLevel.WARNING,
        ),
        ComplianceRule.keywords(
            "Artist name reference",
            ComplianceCategory.COPYRIGHT,
            "Mentions a well-known artist",
            [
                "beatles",
                "elvis",
                "madonna",
                "michael jackson",
                "prince",
                "bob dylan",
                "rolling stones",
                "led zeppelin",
                "queen",
                "taylor swift",
                "beyonce",
                "eminem",
            ],
            ComplianceLevel.CAUTION,
        ),
        ComplianceRule.pattern(
            "Quoted lyrics",
            ComplianceCategory.COPYRIGHT,
            "May quote lyrics from an existing song",
            QUOTED_TEXT_PATTERN,
            ComplianceLevel.WARNING,
        ),
        # Trademark
        ComplianceRule.keywords(
            "Brand name",
            ComplianceCategory.TRADEMARK,
            "May contain a registered trademark",
            [
                "coca-cola",
                "pepsi",
                "nike",
                "adidas",
                "apple",
                "google",
                "facebook",
                "instagram",
                "twitter",
                "youtube",
                "spotify",
                "netflix",
                "disney",
                "mcdonald",
                "starbucks",
            ],
            ComplianceLevel.CAUTION,
        ),
        # Inappropriate content
        ComplianceRule.keywords(
            "Violent language",
            ComplianceCategory.INAPPROPRIATE_CONTENT,
            "Contains violent language",
            ["kill", "murder", "violence", "blood", "death", "hate"],
            ComplianceLevel.WARNING,
        ),
        ComplianceRule.keywords(
            "Discriminatory language",
            ComplianceCategory.INAPPROPRIATE_CONTENT,
            "May contain discriminatory language",
            ["racist", "sexist", "discrimination", "prejudice"],
            ComplianceLevel.UNSAFE,
        ),
        ComplianceRule.keywords(
            "Adult content",
            ComplianceCategory.INAPPROPRIATE_CONTENT,
            "May contain adult content",
            ["explicit", "adult", "sexual", "nsfw"],
            ComplianceLevel.WARNING,
        ),
        # Commercial use
        ComplianceRule.keywords(
            "Commercial use restriction",
            ComplianceCategory.COMMERCIAL_USE,
            "Commercial use may be restricted",
            ["sample", "cover", "remix", "tribute", "parody"],
            ComplianceLevel.CAUTION,
        ),
        # Privacy
        ComplianceRule.pattern(
            "Personal information",
            ComplianceCategory.PRIVACY,
            "May contain personal information",
            PERSONAL_INFO_PATTERN,
            ComplianceLevel.UNSAFE,
        ),
        # Cultural sensitivity
        ComplianceRule.keywords(
            "Cultural stereotype",
            ComplianceCategory.CULTURAL_SENSITIVITY,
            "May contain cultural stereotypes",
            ["stereotype", "cultural appropriation", "offensive"],
            ComplianceLevel.CAUTION,
        ),
        ComplianceRule.keywords(
            "Religious content",
            ComplianceCategory.CULTURAL_SENSITIVITY,
            "Contains content that needs religious sensitivity",
            ["religious", "sacred", "holy", "blasphemy"],
            ComplianceLevel.CAUTION,
        ),
    ]
