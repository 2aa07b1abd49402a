"""
Fuzzy Matching Module

Best-of-N name matching combining:
- Name normalization (abbreviation expansion, stopword removal)
- Fuzzy scoring (rapidfuzz)
- Ambiguity rejection (ties at the top score never match)
"""

from matching.exceptions import ExitCode, FuzzyMatchError, InvalidArgumentError
from matching.matcher import (
    Candidate,
    FuzzyMatcher,
    MatchResult,
    ScoredCandidate,
    clamp_confidence,
    find_best_match,
    match,
)
from matching.normalizer import Normalizer, normalize
from matching.scorers import ScoringMethod

__all__ = [
    "Candidate",
    "ExitCode",
    "FuzzyMatchError",
    "FuzzyMatcher",
    "InvalidArgumentError",
    "MatchResult",
    "Normalizer",
    "ScoredCandidate",
    "ScoringMethod",
    "clamp_confidence",
    "find_best_match",
    "match",
    "normalize",
]
