import json

from models import ScrapedPage


RESPONSE_FORMAT_EXAMPLE = """{
  "onboarding": {
    "score": 85,
    "issues": ["Missing clear CTA above fold", "No social proof visible"],
    "suggestions": ["Add prominent signup button in hero", "Include customer testimonials"]
  },
  "ux": {
    "score": 75,
    "issues": ["Navigation unclear", "No mobile optimization"],
    "suggestions": ["Simplify main navigation", "Add responsive design"]
  },
  "growth": {
    "score": 60,
    "issues": ["No lead magnets", "Limited email capture"],
    "suggestions": ["Add free resource download", "Include newsletter signup"]
  },
  "overall": {
    "score": 73,
    "summary": "Good foundation but needs optimization in growth mechanisms and mobile experience."
  }
}"""


def get_growth_prompt(
    page: ScrapedPage, content_limit: int = 3000, html_limit: int = 1000
) -> str:
    """
    Generate the Growth 101 analysis prompt for a scraped page.

    Page content is clipped by character count (not tokens) so the prompt
    size stays bounded no matter how large the page is.

    Args:
        page: Scraped page from Firecrawl
        content_limit: Max characters of markdown to embed
        html_limit: Max characters of HTML to embed

    Returns:
        Complete prompt string asking Claude for a JSON-only response.
    """
    content = page.markdown[:content_limit]
    html = page.html[:html_limit]
    metadata = json.dumps(page.metadata, default=str)

    return f"""You are a Growth 101 expert analyzing a website for user acquisition, retention, and conversion optimization.

WEBSITE DATA:
Content: {content}
HTML Structure: {html}
Metadata: {metadata}

Analyze this website based on Growth 101 principles and provide scores (0-100) for:

1. **ONBOARDING** - How easy is it for new users to get started?
   - Clear value proposition above the fold
   - Obvious primary call-to-action
   - Minimal friction in signup/trial process
   - Social proof and trust signals

2. **UX/UI** - How user-friendly is the experience?
   - Navigation clarity and structure
   - Mobile responsiveness indicators
   - Page loading and performance signals
   - Visual hierarchy and readability

3. **GROWTH POTENTIAL** - How well optimized for growth loops?
   - Lead magnets and free value
   - Email capture opportunities
   - Viral/sharing mechanisms
   - Urgency and scarcity elements

RESPOND ONLY WITH VALID JSON in this exact format:
{RESPONSE_FORMAT_EXAMPLE}

DO NOT include any text outside the JSON structure."""
