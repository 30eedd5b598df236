# Parsing subpackage - Claude response parsing
from .json import parse_analysis_response, fallback_analysis, strip_code_fences

__all__ = [
    "parse_analysis_response",
    "fallback_analysis",
    "strip_code_fences",
]
