"""Controlled industry vocabulary for attendee tags.

Generated tags must be subcategories from this tree. Main category names
are used for grouping in the directory; the fixed default enrichment is
the only result that carries them as tags.
"""

import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class IndustryCategory:
    """A main category and its approved subcategories."""

    name: str
    subcategories: tuple[str, ...]


CATEGORY_TREE: tuple[IndustryCategory, ...] = (
    IndustryCategory(
        "Brand Development and Fan Experience",
        ("Fan Experience", "Brand Strategy", "Community Engagement"),
    ),
    IndustryCategory(
        "Brand Communications",
        ("Public Relations", "Communications", "Content"),
    ),
    IndustryCategory(
        "Journalism and Media Operations",
        ("Journalism", "Media Operations", "Broadcast"),
    ),
    IndustryCategory(
        "Sports Finance and Real Estate",
        ("Finance", "Real Estate", "Consulting"),
    ),
    IndustryCategory(
        "Talent Representation",
        ("Talent Representation", "Athlete Relations", "Negotiations"),
    ),
    IndustryCategory(
        "Sales, Partnerships and Merchandise",
        ("Sales", "Partnerships", "Merchandise"),
    ),
    IndustryCategory(
        "Data and Technology",
        ("Data", "Analytics", "Technology"),
    ),
    IndustryCategory(
        "Team Operations and Coaching",
        ("Team Operations", "Coaching", "Player Development"),
    ),
)

_WHITESPACE = re.compile(r"\s+")


def normalize_label(value: str) -> str:
    """Lower-case and collapse whitespace for label comparison."""
    return _WHITESPACE.sub(" ", value.lower()).strip()


_SUBCATEGORY_INDEX: dict[str, tuple[str, IndustryCategory]] = {
    normalize_label(sub): (sub, category)
    for category in CATEGORY_TREE
    for sub in category.subcategories
}

APPROVED_SUBCATEGORIES: tuple[str, ...] = tuple(
    sub for category in CATEGORY_TREE for sub in category.subcategories
)


def canonical_subcategory(value: Optional[str]) -> Optional[str]:
    """Return the approved spelling of a subcategory, or None if unknown."""
    if not value:
        return None
    entry = _SUBCATEGORY_INDEX.get(normalize_label(value))
    return entry[0] if entry else None


def is_valid_subcategory(value: Optional[str]) -> bool:
    return canonical_subcategory(value) is not None


def main_category_for_subcategory(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    entry = _SUBCATEGORY_INDEX.get(normalize_label(value))
    return entry[1].name if entry else None


def approved_subcategory_prompt_lines() -> str:
    """Render the vocabulary grouped by main category for a prompt."""
    return "\n".join(
        f"- {category.name}: {', '.join(category.subcategories)}"
        for category in CATEGORY_TREE
    )
