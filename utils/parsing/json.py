import json
import logging
import math
import re
from typing import Any, Optional

from models import (
    CategoryScore,
    OverallScore,
    PartialAnalysis,
    PartialCategoryScore,
    PartialOverallScore,
    WebsiteAnalysis,
    mean_score,
    round_half_up,
)

logger = logging.getLogger(__name__)

CATEGORIES = ("onboarding", "ux", "growth")
DEFAULT_SCORE = 50
DEFAULT_SUMMARY = "Analysis completed successfully."

FALLBACK_ISSUE = "Analysis parsing failed"
FALLBACK_SUGGESTION = "Please try again"
FALLBACK_SUMMARY = "Analysis failed to parse. Please try again."

_OPENING_FENCE = re.compile(r"^```[\w+-]*[ \t]*\n?")
_CLOSING_FENCE = re.compile(r"\n?```\s*$")


def strip_code_fences(text: str) -> str:
    """Trim *text* and remove a surrounding ``` / ```json fenced block."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _OPENING_FENCE.sub("", cleaned, count=1)
        cleaned = _CLOSING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def _valid_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, int):
        # JSON ints are unbounded; clamp before converting so float() cannot overflow
        return float(min(100, max(0, value)))
    if not math.isfinite(value):
        return None
    return float(value)


def _string_list(value: Any) -> Optional[list]:
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    return None


def _clamp_score(value: float) -> int:
    return min(100, max(0, round_half_up(value)))


def extract_partial(data: dict) -> PartialAnalysis:
    """
    Pick out the fields of a decoded Claude response that have the expected type.

    Anything missing or of the wrong type is left as None so the merge step
    decides the default.
    """
    categories = {}
    for name in CATEGORIES:
        section = data.get(name)
        if not isinstance(section, dict):
            categories[name] = PartialCategoryScore()
            continue
        categories[name] = PartialCategoryScore(
            score=_valid_number(section.get("score")),
            issues=_string_list(section.get("issues")),
            suggestions=_string_list(section.get("suggestions")),
        )

    overall = data.get("overall")
    if isinstance(overall, dict):
        summary = overall.get("summary")
        partial_overall = PartialOverallScore(
            score=_valid_number(overall.get("score")),
            summary=summary if isinstance(summary, str) and summary.strip() else None,
        )
    else:
        partial_overall = PartialOverallScore()

    return PartialAnalysis(overall=partial_overall, **categories)


def merge_with_defaults(
    partial: PartialAnalysis, trust_provider_overall: bool = True
) -> WebsiteAnalysis:
    """
    Fill every gap in *partial* with its default.

    Category score defaults to 50 and lists to empty. The overall score is the
    provider's when present and trusted, otherwise the rounded mean of the
    three category scores.
    """
    categories = {}
    for name in CATEGORIES:
        section: PartialCategoryScore = getattr(partial, name)
        categories[name] = CategoryScore(
            score=_clamp_score(section.score) if section.score is not None else DEFAULT_SCORE,
            issues=section.issues or [],
            suggestions=section.suggestions or [],
        )

    if trust_provider_overall and partial.overall.score is not None:
        overall_score = _clamp_score(partial.overall.score)
    else:
        overall_score = mean_score(*(categories[name].score for name in CATEGORIES))

    return WebsiteAnalysis(
        overall=OverallScore(
            score=overall_score,
            summary=partial.overall.summary or DEFAULT_SUMMARY,
        ),
        **categories,
    )


def fallback_analysis() -> WebsiteAnalysis:
    """Uniform low-confidence result used when Claude's output cannot be decoded."""
    category = CategoryScore(
        score=DEFAULT_SCORE,
        issues=[FALLBACK_ISSUE],
        suggestions=[FALLBACK_SUGGESTION],
    )
    return WebsiteAnalysis(
        onboarding=category,
        ux=category,
        growth=category,
        overall=OverallScore(score=DEFAULT_SCORE, summary=FALLBACK_SUMMARY),
    )


def parse_analysis_response(
    response_text: str, trust_provider_overall: bool = True
) -> WebsiteAnalysis:
    """
    Parse Claude's text output into a WebsiteAnalysis.

    Never raises: malformed output degrades to fallback_analysis() so the
    user still gets a (low-confidence) result.

    Args:
        response_text: Raw text response from Claude
        trust_provider_overall: Keep Claude's overall score when it is valid

    Returns:
        A structurally complete WebsiteAnalysis
    """
    cleaned = strip_code_fences(response_text or "")

    try:
        data = json.loads(cleaned)
    except (ValueError, RecursionError) as e:
        logger.warning(f"⚠️ Claude response is not valid JSON: {str(e)}")
        logger.debug(f"Response preview: {cleaned[:200]}...")
        return fallback_analysis()

    if not isinstance(data, dict):
        logger.warning(
            f"⚠️ Claude response JSON is a {type(data).__name__}, expected an object"
        )
        return fallback_analysis()

    return merge_with_defaults(extract_partial(data), trust_provider_overall)
