"""
Best-of-N fuzzy matching.

Scores every candidate against a source string, then accepts the single best
candidate only when it is unambiguous and meets the confidence threshold.
A tie at the top score is always rejected, even at 100.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from config.logging import logger
from matching.exceptions import InvalidArgumentError
from matching.normalizer import normalize
from matching.scorers import ScoringMethod, score_all

MIN_CONFIDENCE = 0
MAX_CONFIDENCE = 100


@dataclass(frozen=True)
class Candidate:
    """A normalized candidate and its position in the original input list."""
    index: int
    value: str


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate with its score against the source."""
    candidate: Candidate
    score: int

    @property
    def index(self) -> int:
        return self.candidate.index

    @property
    def value(self) -> str:
        return self.candidate.value


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a match attempt."""
    is_match: bool = False
    score: int = 0
    index: int = -1
    value: Optional[str] = None
    reason: str = "below_threshold"  # match | collision | below_threshold

    @classmethod
    def no_match(cls, best_score: int, reason: str = "below_threshold") -> "MatchResult":
        return cls(is_match=False, score=best_score, reason=reason)

    @classmethod
    def matched(cls, best: ScoredCandidate) -> "MatchResult":
        return cls(
            is_match=True,
            score=best.score,
            index=best.index,
            value=best.value,
            reason="match",
        )

    def to_dict(self) -> dict:
        """Render the output JSON object. Key order is part of the contract."""
        if self.is_match:
            return {"match": True, "score": self.score, "index": self.index, "value": self.value}
        return {"match": False, "score": self.score, "index": -1}

    def __repr__(self) -> str:
        if self.is_match:
            return f"<MatchResult({self.value!r}, index={self.index}, score={self.score})>"
        return f"<MatchResult(no match, score={self.score}, {self.reason})>"


def clamp_confidence(value: int) -> int:
    """Clamp a confidence threshold to [0, 100]."""
    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, int(value)))


def _as_candidates(candidates: Sequence[Union[str, Candidate]]) -> list[Candidate]:
    return [
        c if isinstance(c, Candidate) else Candidate(index=i, value=c)
        for i, c in enumerate(candidates)
    ]


class FuzzyMatcher:
    """
    Selects the unambiguous best candidate for a source string.

    Selection policy:
    1. Score every candidate with the configured method
    2. Take the maximum score
    3. If more than one candidate has the maximum score -> no match (collision)
    4. If the maximum score is below confidence -> no match
    5. Otherwise the unique top candidate is the match

    Usage:
        matcher = FuzzyMatcher("tokensortratio", confidence=80)
        result = matcher.match("acme", ["acme", "widgets"])
        if result.is_match:
            print(result.index, result.score)
    """

    def __init__(
        self,
        method: Union[str, ScoringMethod],
        confidence: int,
        workers: int = 1,
    ):
        """
        Initialize matcher.

        Args:
            method: One of the six scoring method names (case-insensitive)
            confidence: Minimum score (0-100) to accept a match; the caller clamps
            workers: Scoring workers, see matching.scorers.score_all

        Raises:
            InvalidArgumentError: if the method is not recognized
        """
        self.method = ScoringMethod.parse(method)
        self.confidence = confidence
        self.workers = workers

    def score_candidates(
        self,
        source: str,
        candidates: Sequence[Union[str, Candidate]],
    ) -> list[ScoredCandidate]:
        """Score candidates against the source, keeping input order."""
        items = _as_candidates(candidates)
        scores = score_all(
            self.method, source, [c.value for c in items], workers=self.workers
        )
        scored = [ScoredCandidate(candidate=c, score=s) for c, s in zip(items, scores)]

        for sc in scored:
            logger.debug(f"[{sc.index}] {sc.value!r} -> {sc.score} ({self.method.value})")

        return scored

    def match(
        self,
        source: str,
        candidates: Sequence[Union[str, Candidate]],
    ) -> MatchResult:
        """
        Find the best candidate for a normalized source.

        Args:
            source: Normalized source string
            candidates: Normalized candidates, or Candidate objects when the
                original indexes differ from list positions

        Returns:
            MatchResult for the unique best candidate, or a no-match carrying
            the best score

        Raises:
            InvalidArgumentError: if candidates is empty or entirely blank
        """
        items = _as_candidates(candidates)
        if not items or all(not c.value or not c.value.strip() for c in items):
            raise InvalidArgumentError("List of candidates cannot be empty.")

        scored = self.score_candidates(source, items)

        max_score = max((sc.score for sc in scored), default=0)
        top = [sc for sc in scored if sc.score == max_score]

        if len(top) > 1:
            logger.info(
                f"Collision: {len(top)} candidates share top score {max_score} "
                f"(indexes {[sc.index for sc in top]})"
            )
            return MatchResult.no_match(max_score, reason="collision")

        if max_score < self.confidence:
            logger.info(f"Best score {max_score} below confidence {self.confidence}")
            return MatchResult.no_match(max_score, reason="below_threshold")

        best = top[0]
        logger.info(f"Matched {best.value!r} at index {best.index} (score {best.score})")
        return MatchResult.matched(best)


def match(
    source: str,
    candidates: Sequence[Union[str, Candidate]],
    method: Union[str, ScoringMethod],
    confidence: int,
    workers: int = 1,
) -> MatchResult:
    """Match a normalized source against normalized candidates."""
    return FuzzyMatcher(method, confidence, workers=workers).match(source, candidates)


def find_best_match(
    source: str,
    candidates: Sequence[str],
    method: Union[str, ScoringMethod],
    confidence: int,
    workers: int = 1,
) -> MatchResult:
    """
    Normalize raw inputs and match them.

    The source and every candidate are normalized independently; result
    indexes refer to positions in the raw candidate list.
    """
    matcher = FuzzyMatcher(method, clamp_confidence(confidence), workers=workers)
    normalized_source = normalize(source)
    normalized = [Candidate(index=i, value=normalize(c)) for i, c in enumerate(candidates)]

    logger.debug(f"Source {source!r} -> {normalized_source!r}")
    return matcher.match(normalized_source, normalized)
