import pytest

from config import ScoringWeights
from services.scoring import (
    FIT_MESSAGES,
    blend_score,
    combine_fit_score,
    fit_message,
    rule_based_insights,
    skill_match_ratio,
)


def test_skill_match_ratio():
    assert skill_match_ratio(["React", "AWS"], ["React", "AWS", "GCP", "SQL"]) == 0.5
    assert skill_match_ratio([], []) == 0.0


def test_combine_fit_score_default_weights():
    # 50 * 0.3 + (2/4) * 100 * 0.7 = 15 + 35
    assert combine_fit_score(50.0, ["A", "B"], ["A", "B", "C", "D"]) == 50


def test_combine_fit_score_legacy_weights():
    weights = ScoringWeights(similarity=0.6, skill=0.4)
    # 50 * 0.6 + 50 * 0.4
    assert combine_fit_score(50.0, ["A"], ["A", "B"], weights) == 50
    assert combine_fit_score(80.0, [], ["A", "B"], weights) == 48


def test_combine_fit_score_without_job_skills_uses_similarity_only():
    weights = ScoringWeights()
    assert blend_score(73.0, [], [], weights) == 73.0 * weights.similarity
    assert combine_fit_score(73.0, [], [], weights) == 22  # 21.9


def test_combine_fit_score_rounds_half_up():
    weights = ScoringWeights(similarity=0.5, skill=0.5)
    assert combine_fit_score(1.0, [], [], weights) == 1  # 0.5 -> 1
    assert combine_fit_score(5.0, [], [], weights) == 3  # 2.5 -> 3


def test_combine_fit_score_clamps():
    assert combine_fit_score(100.0000001, ["A"], ["A"]) == 100
    assert combine_fit_score(-20.0, [], []) == 0
    assert combine_fit_score(float("nan"), [], []) == 0


@pytest.mark.parametrize("base", [0.0, 12.5, 49.99, 100.0, 100.00000000000003])
@pytest.mark.parametrize("matched,job", [
    ([], []),
    ([], ["A"]),
    (["A"], ["A"]),
    (["A"], ["A", "B", "C"]),
])
def test_combine_fit_score_bounded_integer(base, matched, job):
    score = combine_fit_score(base, matched, job)
    assert isinstance(score, int)
    assert 0 <= score <= 100


@pytest.mark.parametrize("score,bucket", [
    (0, 4), (49, 4), (50, 3), (59, 3), (60, 2), (69, 2), (70, 1), (79, 1), (80, 0), (100, 0),
])
def test_fit_message_buckets(score, bucket):
    assert fit_message(score) == FIT_MESSAGES[bucket][1]


def test_fit_messages_are_distinct():
    messages = [m for _, m in FIT_MESSAGES]
    assert len(messages) == 5
    assert len(set(messages)) == 5


def test_weights_must_sum_to_one():
    with pytest.raises(ValueError):
        ScoringWeights(similarity=0.5, skill=0.6)


def test_weights_must_be_non_negative():
    with pytest.raises(ValueError):
        ScoringWeights(similarity=1.5, skill=-0.5)


class TestRuleBasedInsights:
    def test_matched_and_missing(self):
        insights = rule_based_insights(
            ["React", "TypeScript", "AWS", "Docker"],
            ["Kubernetes"],
            "React TypeScript AWS Docker Kubernetes",
            "5 years of React experience",
        )
        assert insights == [
            "Strong alignment in React, TypeScript, AWS skills.",
            "Consider developing skills in Kubernetes to improve your match.",
        ]

    def test_missing_experience_indicators(self):
        insights = rule_based_insights([], [], "Python", "Python hobbyist")
        assert any("accomplishments" in i for i in insights)

    def test_leadership_hint(self):
        insights = rule_based_insights([], [], "Leadership role", "I developed software")
        assert any("leadership" in i for i in insights)

    def test_no_leadership_hint_when_soft_skills_present(self):
        insights = rule_based_insights([], [], "Leadership role", "I developed strong communication")
        assert not any("leadership" in i for i in insights)

    def test_empty_inputs(self):
        insights = rule_based_insights([], [], "", "")
        assert insights == [
            "Consider adding more specific examples of your accomplishments and years of experience."
        ]
