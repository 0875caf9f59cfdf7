"""Search queries and generation prompts for profile enrichment."""

from typing import Optional

from lanyard.domain.enrichment.industry import approved_subcategory_prompt_lines
from lanyard.domain.enrichment.value_objects import EnrichmentRequest, SearchContext

DISAMBIGUATING_TERMS = ("professional profile", "career background", "biography")
PROFILE_SITE_HINT = "site:linkedin.com/in"

ENRICHMENT_PROMPT_TEMPLATE = """You are a professional conference networking assistant. Your job is to create concise, engaging professional summaries.

TASK:
1. Analyze the provided information about a conference attendee
2. Create exactly 3 bullet points that capture their professional vibe (achievements, expertise, interesting facts)
3. Extract 1 to 3 subcategory tags from the approved list.

RULES:
- Each bullet point should be 10-20 words
- Focus on accomplishments, expertise, and what makes them interesting to network with
- Be specific but concise
- Keep a professional yet approachable tone
- If information is limited, keep statements general and based only on provided fields
- Treat the user-provided "About" text as the most reliable source and do not contradict it
- If a LinkedIn URL is provided, assume it is the correct profile and prioritize it in the summary
- If sources are missing or ambiguous, avoid guessing specific employers or achievements

INDUSTRY TAGS RULES:
- Choose 1 to 3 SUBCATEGORY tags from the approved list below (use exact casing and wording).
- Tags should be distinct and align with the profile summary.
- Do NOT output the main category names; only subcategories.

APPROVED SUBCATEGORY LIST (grouped by main category):
{approved_tags}

OUTPUT FORMAT (JSON only):
{{
  "summary": ["bullet 1", "bullet 2", "bullet 3"],
  "industry_tags": ["tag1", "tag2", "tag3"]
}}

Analyze this person and create their professional summary:

{profile}

Information found:
{context}

Return ONLY valid JSON. Do not include markdown, code fences, or extra commentary."""  # NOQA: E501

STRICT_SUFFIX = (
    '\n\nIMPORTANT: Return ONLY a valid JSON object with keys "summary" and '
    '"industry_tags". Do not include any other text.'
)


def build_enrichment_search_query(request: EnrichmentRequest) -> str:
    terms = [request.name]
    terms.extend(
        value
        for value in (request.job_title, request.company, request.linkedin_url)
        if value
    )
    if request.about:
        terms.append(f'"{request.about}"')
    terms.extend(DISAMBIGUATING_TERMS)
    return " ".join(terms)


def build_profile_search_query(
    name: str,
    job_title: Optional[str] = None,
    company: Optional[str] = None,
) -> str:
    terms = [name]
    if job_title:
        terms.append(job_title)
    if company:
        terms.append(company)
    terms.append(PROFILE_SITE_HINT)
    return " ".join(terms)


def _format_profile(request: EnrichmentRequest) -> str:
    lines = [f"Name: {request.name}"]
    if request.job_title:
        lines.append(f"Job Title: {request.job_title}")
    if request.company:
        lines.append(f"Company: {request.company}")
    if request.about:
        lines.append(f"About (user-provided): {request.about}")
    if request.linkedin_url:
        lines.append(f"LinkedIn: {request.linkedin_url}")
    return "\n".join(lines)


def build_enrichment_prompt(request: EnrichmentRequest, context: SearchContext) -> str:
    return ENRICHMENT_PROMPT_TEMPLATE.format(
        approved_tags=approved_subcategory_prompt_lines(),
        profile=_format_profile(request),
        context=context.render(),
    )


def build_strict_prompt(prompt: str) -> str:
    return f"{prompt}{STRICT_SUFFIX}"
