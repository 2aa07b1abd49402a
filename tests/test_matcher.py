"""
Tests for best-of-N match selection.
"""

import pytest

from matching import (
    Candidate,
    FuzzyMatcher,
    InvalidArgumentError,
    MatchResult,
    clamp_confidence,
    find_best_match,
    match,
)


# ============================================================================
# Selection policy
# ============================================================================


def test_unique_best_above_threshold():
    """A single top scorer at or above confidence is a match."""
    result = match("acme", ["widgets", "acme", "acme corporation"], "ratio", 80)
    assert result.is_match
    assert result.index == 1
    assert result.score == 100
    assert result.value == "acme"
    assert result.reason == "match"


def test_score_equal_to_confidence_matches():
    result = match("acme", ["acme widgets", "xyz"], "ratio", 50)
    assert result.is_match
    assert result.index == 0
    assert result.score == 50


def test_below_threshold_is_no_match():
    result = match("acme", ["acme widgets", "xyz"], "ratio", 90)
    assert not result.is_match
    assert result.score == 50
    assert result.index == -1
    assert result.value is None
    assert result.reason == "below_threshold"


@pytest.mark.parametrize("confidence", [0, 50, 100])
def test_tie_at_top_score_is_never_a_match(confidence):
    """Two candidates sharing the maximum score reject the match, even at 100."""
    result = match("acme", ["acme", "widgets", "acme"], "ratio", confidence)
    assert not result.is_match
    assert result.score == 100
    assert result.index == -1
    assert result.reason == "collision"


def test_tie_below_maximum_does_not_block_match():
    result = match("acme", ["xyz", "acme", "xyz"], "ratio", 80)
    assert result.is_match
    assert result.index == 1


def test_collision_takes_priority_over_threshold():
    result = match("acme", ["xyz", "qrs"], "ratio", 90)
    assert not result.is_match
    assert result.score == 0
    assert result.reason == "collision"


def test_method_changes_outcome():
    candidates = ["widgets acme", "gadgets"]
    assert not match("acme widgets", candidates, "ratio", 100).is_match
    assert match("acme widgets", candidates, "tokensortratio", 100).is_match


def test_original_indexes_are_preserved():
    candidates = [Candidate(index=5, value="xyz"), Candidate(index=9, value="acme")]
    result = match("acme", candidates, "ratio", 80)
    assert result.index == 9


def test_score_candidates_keeps_input_order():
    matcher = FuzzyMatcher("ratio", 0)
    scored = matcher.score_candidates("acme", ["xyz", "acme", "acme widgets"])
    assert [sc.index for sc in scored] == [0, 1, 2]
    assert [sc.score for sc in scored] == [0, 100, 50]


def test_parallel_workers_give_same_result():
    candidates = ["acme corporation", "acme", "acme widgets", "gadgets"]
    sequential = match("acme", candidates, "ratio", 80, workers=1)
    parallel = match("acme", candidates, "ratio", 80, workers=2)
    assert parallel == sequential


# ============================================================================
# Validation
# ============================================================================


@pytest.mark.parametrize("candidates", [[], [""], ["", "  "]])
def test_empty_candidates_rejected(candidates):
    with pytest.raises(InvalidArgumentError):
        match("acme", candidates, "ratio", 80)


def test_unknown_method_rejected():
    with pytest.raises(InvalidArgumentError):
        FuzzyMatcher("foo", 80)


def test_method_name_is_case_insensitive():
    assert match("acme", ["acme", "xyz"], "TokenSetRatio", 80).is_match


@pytest.mark.parametrize(
    "value, expected",
    [(-5, 0), (0, 0), (70, 70), (100, 100), (150, 100)],
)
def test_clamp_confidence(value, expected):
    assert clamp_confidence(value) == expected


# ============================================================================
# Result rendering
# ============================================================================


def test_match_result_dict_key_order():
    result = match("acme", ["xyz", "acme"], "ratio", 80)
    assert list(result.to_dict()) == ["match", "score", "index", "value"]
    assert result.to_dict() == {"match": True, "score": 100, "index": 1, "value": "acme"}


def test_no_match_dict_key_order():
    result = MatchResult.no_match(42)
    assert list(result.to_dict()) == ["match", "score", "index"]
    assert result.to_dict() == {"match": False, "score": 42, "index": -1}


# ============================================================================
# Normalize + match
# ============================================================================


def test_find_best_match_acme_example():
    """'Acme Corp' and 'Acme Corporation' normalize identically and collide."""
    result = find_best_match(
        "Acme & Co Ltd",
        ["Acme Corp", "Acme Corporation", "Widgets Inc"],
        method="ratio",
        confidence=70,
    )
    assert not result.is_match
    assert result.score == 58
    assert result.reason == "collision"


def test_find_best_match_reports_raw_index():
    result = find_best_match("Widgets", ["", "Widgets Inc.", "Acme"], "ratio", 80)
    assert result.is_match
    assert result.index == 1
    assert result.value == "widgets"


def test_find_best_match_duplicates_after_normalization():
    result = find_best_match("Acme", ["Acme Inc", "The Acme Company"], "ratio", 10)
    assert not result.is_match
    assert result.score == 100


def test_find_best_match_clamps_confidence():
    assert find_best_match("Acme", ["Acme", "Widgets"], "ratio", 150).is_match
    result = find_best_match("Acme", ["Xyz", "Widgets"], "ratio", -20)
    assert result.is_match
    assert result.index == 1


def test_find_best_match_blank_candidates_after_normalization():
    with pytest.raises(InvalidArgumentError):
        find_best_match("Acme", ["The Company", "Ltd."], "ratio", 80)


def test_blank_source_never_matches():
    """A source that normalizes to nothing does not match a blank candidate."""
    result = find_best_match("The", ["", "Acme"], "ratio", 50)
    assert not result.is_match
    assert result.score == 0
    assert result.index == -1


def test_blank_candidate_scores_zero():
    result = match("acme", ["", "acme widgets"], "ratio", 40)
    assert result.is_match
    assert result.index == 1
