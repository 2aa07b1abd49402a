"""
Scoring methods backed by rapidfuzz.

Each method is an integer similarity in [0, 100]; an empty string scores 0
against anything. rapidfuzz returns floats, which are rounded half-to-even.
"""

from enum import Enum
from typing import Callable, Sequence, Union

import numpy as np
from rapidfuzz import fuzz, process

from matching.exceptions import InvalidArgumentError


class ScoringMethod(str, Enum):
    """Named fuzzy-string-similarity algorithm."""
    RATIO = "ratio"
    PARTIAL_RATIO = "partialratio"
    TOKEN_SORT_RATIO = "tokensortratio"
    TOKEN_SET_RATIO = "tokensetratio"
    PARTIAL_TOKEN_SORT_RATIO = "partialtokensortratio"
    PARTIAL_TOKEN_SET_RATIO = "partialtokensetratio"

    @classmethod
    def parse(cls, name: Union[str, "ScoringMethod"]) -> "ScoringMethod":
        """
        Resolve a method name case-insensitively.

        Raises:
            InvalidArgumentError: if the name is not a recognized method
        """
        if isinstance(name, cls):
            return name
        try:
            return cls((name or "").strip().lower())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise InvalidArgumentError(
                f"Unknown method '{name}'. Expected one of: {valid}"
            ) from None

    @property
    def scorer(self) -> Callable[..., float]:
        return _SCORERS[self]


_SCORERS: dict[ScoringMethod, Callable[..., float]] = {
    ScoringMethod.RATIO: fuzz.ratio,
    ScoringMethod.PARTIAL_RATIO: fuzz.partial_ratio,
    ScoringMethod.TOKEN_SORT_RATIO: fuzz.token_sort_ratio,
    ScoringMethod.TOKEN_SET_RATIO: fuzz.token_set_ratio,
    ScoringMethod.PARTIAL_TOKEN_SORT_RATIO: fuzz.partial_token_sort_ratio,
    ScoringMethod.PARTIAL_TOKEN_SET_RATIO: fuzz.partial_token_set_ratio,
}


def _to_int(value: float) -> int:
    return max(0, min(100, int(round(float(value)))))


def score(method: Union[str, ScoringMethod], s1: str, s2: str) -> int:
    """Score a single pair of strings. Empty strings score 0 against anything."""
    method = ScoringMethod.parse(method)
    if not s1 or not s2:
        return 0
    return _to_int(method.scorer(s1, s2))


def score_all(
    method: Union[str, ScoringMethod],
    source: str,
    candidates: Sequence[str],
    workers: int = 1,
) -> list[int]:
    """
    Score every candidate against the source.

    Args:
        method: Scoring method or its name
        source: Normalized source string
        candidates: Normalized candidate strings
        workers: 1 scores in-process; -1 or >1 scores with
            rapidfuzz.process.cdist (-1 uses all cores)

    Returns:
        Scores in candidate order; pairs with an empty side score 0

    Raises:
        InvalidArgumentError: if workers is 0 or below -1
    """
    method = ScoringMethod.parse(method)
    if workers == 0 or workers < -1:
        raise InvalidArgumentError(f"workers must be -1 or a positive integer, got {workers}")
    if not candidates:
        return []
    if not source:
        return [0] * len(candidates)

    if workers == 1:
        return [score(method, source, c) for c in candidates]

    matrix = process.cdist(
        [source], list(candidates), scorer=method.scorer, dtype=np.float64, workers=workers
    )
    return [_to_int(value) if c else 0 for c, value in zip(candidates, matrix[0])]
