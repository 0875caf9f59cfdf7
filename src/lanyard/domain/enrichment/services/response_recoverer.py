"""Turns raw model output into an EnrichmentResult.

Model output is expected to be a JSON object but regularly arrives wrapped
in prose or code fences, or with small syntax slips. Recovery walks an
ordered list of strategies and stops at the first that yields an object:

1. direct     - parse the text as-is
2. extracted  - parse a fenced code block or the widest ``{...}`` span
3. repaired   - normalise smart quotes, drop trailing commas, parse again

``attempt`` reports failure so the caller can re-prompt once; ``recover``
never fails and falls back to ``DEFAULT_ENRICHMENT``.
"""

import json
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

from lanyard.domain.enrichment.industry import canonical_subcategory
from lanyard.domain.enrichment.value_objects import (
    MAX_INDUSTRY_TAGS,
    SUMMARY_LENGTH,
    EnrichmentResult,
    RecoveryTier,
)

logger = logging.getLogger(__name__)

GENERIC_SUMMARY: tuple[str, ...] = (
    "Professional in their field",
    "Experienced industry expert",
    "Open to networking",
)
GENERIC_TAGS: tuple[str, ...] = ("Business", "Professional", "Networking")

DEFAULT_ENRICHMENT = EnrichmentResult(
    summary=(
        "Experienced professional in their field",
        "Focused on collaboration and industry impact",
        "Open to meaningful networking conversations",
    ),
    industry_tags=(
        "Brand Communications",
        "Data and Technology",
        "Sales, Partnerships and Merchandise",
    ),
)

_FENCED_BLOCK = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)
_TRAILING_COMMA = re.compile(r",\s*([}\]])")
_SMART_QUOTES = str.maketrans(
    {
        "“": '"',
        "”": '"',
        "‘": "'",
        "’": "'",
    },
)

Strategy = Callable[[str], Optional[dict[str, Any]]]


@dataclass(frozen=True)
class RecoveryResult:
    result: EnrichmentResult
    tier: RecoveryTier


def _loads_object(text: str) -> Optional[dict[str, Any]]:
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return None
    return data if isinstance(data, dict) else None


def extract_candidate(text: str) -> Optional[str]:
    """Return the most likely JSON span inside ``text``."""
    fenced = _FENCED_BLOCK.search(text)
    if fenced and fenced.group(1).strip():
        return fenced.group(1).strip()

    start = text.find("{")
    end = text.rfind("}")
    if start >= 0 and end > start:
        return text[start : end + 1]
    return None


def repair_json(text: str) -> str:
    return _TRAILING_COMMA.sub(r"\1", text.translate(_SMART_QUOTES))


def _parse_direct(text: str) -> Optional[dict[str, Any]]:
    return _loads_object(text.strip())


def _parse_extracted(text: str) -> Optional[dict[str, Any]]:
    candidate = extract_candidate(text)
    return _loads_object(candidate) if candidate else None


def _parse_repaired(text: str) -> Optional[dict[str, Any]]:
    candidate = extract_candidate(text) or text.strip()
    return _loads_object(repair_json(candidate))


STRATEGIES: tuple[tuple[RecoveryTier, Strategy], ...] = (
    (RecoveryTier.DIRECT, _parse_direct),
    (RecoveryTier.EXTRACTED, _parse_extracted),
    (RecoveryTier.REPAIRED, _parse_repaired),
)


def _clean_strings(values: list[Any]) -> list[str]:
    return [v.strip() for v in values if isinstance(v, str) and v.strip()]


def normalize_summary(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return GENERIC_SUMMARY

    bullets = _clean_strings(value)[:SUMMARY_LENGTH]
    padding = GENERIC_SUMMARY[len(bullets) : SUMMARY_LENGTH]
    return (*bullets, *padding)


def normalize_tags(value: Any, restrict_to_vocabulary: bool = False) -> tuple[str, ...]:
    if not isinstance(value, list):
        return GENERIC_TAGS

    tags: list[str] = []
    for raw_tag in _clean_strings(value):
        canonical = canonical_subcategory(raw_tag)
        if canonical is None and restrict_to_vocabulary:
            continue
        tag = canonical or raw_tag
        if tag not in tags:
            tags.append(tag)

    return tuple(tags[:MAX_INDUSTRY_TAGS]) or GENERIC_TAGS


class ResponseRecoverer:
    """Staged parser for enrichment output.

    Parameters
    ----------
    restrict_to_vocabulary
        Drop tags that are not approved subcategories. Tags that match the
        vocabulary are always rewritten to their canonical spelling.
    """

    def __init__(self, restrict_to_vocabulary: bool = False):
        self._restrict = restrict_to_vocabulary

    def normalize_payload(self, payload: dict[str, Any]) -> EnrichmentResult:
        return EnrichmentResult(
            summary=normalize_summary(payload.get("summary")),
            industry_tags=normalize_tags(payload.get("industry_tags"), self._restrict),
        )

    def attempt(self, raw_text: str) -> Optional[RecoveryResult]:
        """Run the parsing tiers; None means the caller should re-prompt."""
        if not raw_text:
            return None

        for tier, strategy in STRATEGIES:
            payload = strategy(raw_text)
            if payload is not None:
                if tier is not RecoveryTier.DIRECT:
                    logger.debug("Recovered model output via %s tier", tier.value)
                return RecoveryResult(self.normalize_payload(payload), tier)

        logger.debug("Unparseable model output: %s", raw_text[:200])
        return None

    def recover(self, raw_text: str) -> RecoveryResult:
        recovered = self.attempt(raw_text)
        if recovered is None:
            logger.warning("Model output unrecoverable, using default result")
            return RecoveryResult(DEFAULT_ENRICHMENT, RecoveryTier.DEFAULT)
        return recovered


def recover(raw_text: str) -> EnrichmentResult:
    """Best-effort conversion of model output; never raises."""
    return ResponseRecoverer().recover(raw_text).result
