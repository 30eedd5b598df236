"""
Local heuristic scoring for a scraped page.

Produces the same WebsiteAnalysis shape as the Claude path using keyword and
markup checks only. Pure and deterministic: no network, no clock, no state.
"""

import re

from models import CategoryScore, OverallScore, ScrapedPage, WebsiteAnalysis, mean_score

ONBOARDING_BASELINE = 85
UX_BASELINE = 80
GROWTH_BASELINE = 75

_CTA_PATTERN = re.compile(r"sign up|get started|try free|start trial", re.IGNORECASE)
_INPUT_PATTERN = re.compile(r"<input")

SUMMARY_TIERS = (
    (90, "Excellent! Your website follows PLG best practices with strong conversion potential."),
    (80, "Good foundation with room for optimization. Focus on the highlighted areas for improvement."),
    (70, "Decent start but several areas need attention to maximize growth potential."),
)
LOW_SCORE_SUMMARY = "Significant improvements needed to optimize for product-led growth."


class _Scorecard:
    def __init__(self, baseline: int):
        self.score = baseline
        self.issues = []
        self.suggestions = []

    def deduct(self, points: int, issue: str, suggestion: str):
        self.issues.append(issue)
        self.suggestions.append(suggestion)
        self.score -= points

    def result(self) -> CategoryScore:
        return CategoryScore(
            score=max(0, self.score), issues=self.issues, suggestions=self.suggestions
        )


def _contains_any(text: str, *phrases: str) -> bool:
    return any(phrase in text for phrase in phrases)


def analyze_onboarding(content: str, html: str) -> CategoryScore:
    card = _Scorecard(ONBOARDING_BASELINE)
    lowered = content.lower()

    if not _contains_any(lowered, "get started", "sign up"):
        card.deduct(
            15,
            "Missing clear call-to-action above the fold",
            'Add a prominent "Get Started" or "Sign Up" button in the hero section',
        )

    if not _contains_any(lowered, "customer", "testimonial"):
        card.deduct(
            10,
            "Limited social proof visible",
            "Add customer testimonials or logos to build trust",
        )

    if len(_CTA_PATTERN.findall(content)) < 2:
        card.deduct(
            10,
            "Few call-to-action buttons throughout the page",
            "Add multiple CTAs throughout the page journey",
        )

    return card.result()


def analyze_ux(content: str, html: str) -> CategoryScore:
    card = _Scorecard(UX_BASELINE)

    if "<nav" not in html and "menu" not in content.lower():
        card.deduct(
            15,
            "Navigation structure unclear",
            "Add clear navigation menu with logical hierarchy",
        )

    if not _contains_any(html, "viewport", "responsive"):
        card.deduct(
            20,
            "Mobile optimization concerns",
            "Ensure responsive design for mobile users",
        )

    if len(_INPUT_PATTERN.findall(html)) > 5:
        card.deduct(
            10,
            "Forms may be too complex",
            "Simplify forms to reduce friction",
        )

    return card.result()


def analyze_growth(content: str, html: str) -> CategoryScore:
    card = _Scorecard(GROWTH_BASELINE)
    lowered = content.lower()

    if not _contains_any(lowered, "free", "download"):
        card.deduct(
            15,
            "No visible lead magnets or free offerings",
            "Add lead magnets like free guides, trials, or tools",
        )

    if "email" not in html and "newsletter" not in lowered:
        card.deduct(
            20,
            "Limited email capture opportunities",
            "Add newsletter signup or email capture forms",
        )

    if not _contains_any(lowered, "limited", "exclusive"):
        card.deduct(
            10,
            "No urgency or scarcity elements",
            "Add limited-time offers or exclusive access to create urgency",
        )

    return card.result()


def summarize(score: int) -> str:
    for threshold, summary in SUMMARY_TIERS:
        if score >= threshold:
            return summary
    return LOW_SCORE_SUMMARY


def analyze_heuristically(page: ScrapedPage) -> WebsiteAnalysis:
    """Score *page* with keyword checks instead of Claude."""
    content = page.markdown or ""
    html = page.html or ""

    onboarding = analyze_onboarding(content, html)
    ux = analyze_ux(content, html)
    growth = analyze_growth(content, html)
    overall_score = mean_score(onboarding.score, ux.score, growth.score)

    return WebsiteAnalysis(
        onboarding=onboarding,
        ux=ux,
        growth=growth,
        overall=OverallScore(score=overall_score, summary=summarize(overall_score)),
    )
