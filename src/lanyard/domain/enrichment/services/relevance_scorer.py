"""Scores external profile search hits against a target identity."""

from dataclasses import dataclass
from typing import Optional

from lanyard.domain.enrichment.value_objects import SearchHit

PERSONAL_PROFILE_PATH = "linkedin.com/in/"

NAME_TOKEN_POINTS = 10
JOB_TITLE_TOKEN_POINTS = 5
COMPANY_EXACT_POINTS = 15
COMPANY_TOKEN_POINTS = 3
MIN_TOKEN_LENGTH = 3


@dataclass(frozen=True)
class ScoredCandidate:
    hit: SearchHit
    score: int


def _tokens(value: str) -> list[str]:
    return [t for t in value.lower().split() if len(t) >= MIN_TOKEN_LENGTH]


def is_personal_profile(hit: SearchHit) -> bool:
    """Only personal profile pages are scored; company pages are not."""
    return PERSONAL_PROFILE_PATH in (hit.url or "")


def score(
    candidate: SearchHit,
    name: str,
    job_title: Optional[str] = None,
    company: Optional[str] = None,
) -> int:
    combined = f"{candidate.title} {candidate.content}".lower()
    points = 0

    points += sum(NAME_TOKEN_POINTS for t in _tokens(name) if t in combined)

    if job_title:
        points += sum(
            JOB_TITLE_TOKEN_POINTS for t in _tokens(job_title) if t in combined
        )

    if company:
        if company.lower() in combined:
            points += COMPANY_EXACT_POINTS
        else:
            points += sum(
                COMPANY_TOKEN_POINTS for t in _tokens(company) if t in combined
            )

    return points


def rank(
    hits: list[SearchHit] | tuple[SearchHit, ...],
    name: str,
    job_title: Optional[str] = None,
    company: Optional[str] = None,
) -> list[ScoredCandidate]:
    scored = [
        ScoredCandidate(hit=hit, score=score(hit, name, job_title, company))
        for hit in hits
        if is_personal_profile(hit)
    ]
    # sorted() is stable, so ties keep search order
    return sorted(scored, key=lambda c: c.score, reverse=True)


def pick_best(
    hits: list[SearchHit] | tuple[SearchHit, ...],
    name: str,
    job_title: Optional[str] = None,
    company: Optional[str] = None,
) -> Optional[ScoredCandidate]:
    ranked = rank(hits, name, job_title, company)
    return ranked[0] if ranked else None
