#!/usr/bin/env python3
"""
System Validation Script for the Website Growth Analyzer

Checks the analysis pipeline:
1. Configuration and credential formats
2. Response parsing and heuristic scoring (offline)
3. Live Firecrawl and Anthropic key verification
4. End-to-end analysis of a real website

Usage:
    python3 scripts/validate_system.py --mode [quick|full] [--url URL]

    quick: Configuration and offline checks only (no network)
    full: Also verifies keys with the providers and analyzes --url
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, List

# Add parent directory to path to import project modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from analyzer.heuristics import analyze_heuristically
from analyzer.pipeline import WebsiteAnalyzer
from config import Settings, settings
from models import ScrapedPage
from utils.parsing.json import parse_analysis_response
from utils.validation.credentials import (
    CONFIGURED,
    credential_status,
    startup_warnings,
    verify_anthropic_key,
    verify_firecrawl_key,
)


class SystemValidator:
    """Validates the components of the growth analyzer."""

    def __init__(self, config: Settings, verbose: bool = True):
        self.config = config
        self.verbose = verbose
        self.results: Dict[str, bool] = {}
        self.errors: List[str] = []

    def log(self, message: str, level: str = "INFO"):
        """Print log message if verbose mode is enabled."""
        if self.verbose:
            prefix = {
                "INFO": "ℹ️ ",
                "SUCCESS": "✅",
                "ERROR": "❌",
                "WARNING": "⚠️ ",
                "TEST": "🧪"
            }.get(level, "")
            print(f"{prefix} {message}")

    def test_configuration(self) -> bool:
        """Report analysis mode and credential status."""
        self.log("Testing configuration...", "TEST")
        self.log(f"Analysis mode: {self.config.ANALYSIS_MODE}", "INFO")

        for provider, status in credential_status(self.config).items():
            self.log(f"{provider}: {status}", "SUCCESS" if status == CONFIGURED else "WARNING")

        warnings = startup_warnings(self.config)
        for warning in warnings:
            self.log(warning, "WARNING")
        if warnings:
            self.errors.extend(warnings)
        return not warnings

    def test_response_parsing(self) -> bool:
        """Parse a fenced sample reply and a malformed one."""
        self.log("Testing response parsing...", "TEST")

        parsed = parse_analysis_response('```json\n{"onboarding": {"score": 90}}\n```')
        fallback = parse_analysis_response("not json at all")

        ok = (
            parsed.onboarding.score == 90
            and parsed.ux.score == 50
            and fallback.overall.summary.startswith("Analysis failed to parse")
        )
        if ok:
            self.log("Response parser handled fenced and malformed replies", "SUCCESS")
        else:
            self.errors.append("Response parser returned unexpected scores")
            self.log("Response parser returned unexpected scores", "ERROR")
        return ok

    def test_heuristics(self) -> bool:
        """Score a small sample page locally."""
        self.log("Testing heuristic analyzer...", "TEST")

        page = ScrapedPage(
            markdown="Sign up free today",
            html="<nav></nav><input/>",
            source_url="https://example.com",
        )
        analysis = analyze_heuristically(page)
        self.log(f"Heuristic overall score: {analysis.overall.score}", "INFO")
        return 0 <= analysis.overall.score <= 100

    def test_live_keys(self) -> bool:
        """Verify the configured keys with the providers."""
        self.log("Verifying API keys with providers...", "TEST")

        ok = True
        if verify_firecrawl_key(self.config, self.config.FIRECRAWL_API_KEY):
            self.log("Firecrawl API key is working", "SUCCESS")
        else:
            self.errors.append("Firecrawl API key verification failed")
            self.log("Firecrawl API key verification failed", "ERROR")
            ok = False

        if self.config.requires_anthropic:
            if verify_anthropic_key(self.config, self.config.ANTHROPIC_API_KEY):
                self.log("Anthropic API key is working", "SUCCESS")
            else:
                self.errors.append("Anthropic API key verification failed")
                self.log("Anthropic API key verification failed", "ERROR")
                ok = False
        return ok

    def test_end_to_end(self, url: str) -> bool:
        """Run one full analysis of *url*."""
        self.log(f"Running end-to-end analysis of {url}...", "TEST")

        outcome = WebsiteAnalyzer(self.config).run_analysis(url)
        if not outcome.success:
            self.errors.append(outcome.error)
            self.log(outcome.error, "ERROR")
            return False

        analysis = outcome.data
        self.log(
            f"Onboarding {analysis.onboarding.score} | UX {analysis.ux.score} | "
            f"Growth {analysis.growth.score} | Overall {analysis.overall.score}",
            "SUCCESS",
        )
        self.log(analysis.overall.summary, "INFO")
        return True

    def run(self, mode: str, url: str) -> bool:
        self.results["configuration"] = self.test_configuration()
        self.results["response_parsing"] = self.test_response_parsing()
        self.results["heuristics"] = self.test_heuristics()

        if mode == "full":
            self.results["live_keys"] = self.test_live_keys()
            if self.results["live_keys"]:
                self.results["end_to_end"] = self.test_end_to_end(url)

        print("\n" + "=" * 60)
        for name, passed in self.results.items():
            print(f"{'✅' if passed else '❌'} {name}")
        print("=" * 60)

        return all(self.results.values())


def main():
    parser = argparse.ArgumentParser(description="Validate the Website Growth Analyzer setup")
    parser.add_argument("--mode", choices=["quick", "full"], default="quick")
    parser.add_argument("--url", default="https://example.com")
    parser.add_argument("--quiet", action="store_true")
    args = parser.parse_args()

    validator = SystemValidator(settings, verbose=not args.quiet)
    sys.exit(0 if validator.run(args.mode, args.url) else 1)


if __name__ == "__main__":
    main()
