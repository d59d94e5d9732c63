from __future__ import annotations

import logging

import pytest

from eq_core.evaluator import EQScoreEvaluator, evaluate
from eq_core.types import Answer, Option, Question

from tests.conftest import answers_at, build_synthetic_battery, mcq, pair, single


def _scaled_likert(reversed_: bool = False) -> list[Option]:
    labels = ["Strongly Disagree", "Disagree", "Neutral", "Agree", "Strongly Agree"]
    scores = [20, 40, 60, 80, 100]
    if reversed_:
        scores = scores[::-1]
    return [Option(label=lbl, value=i + 1, score=s) for i, (lbl, s) in enumerate(zip(labels, scores))]


def _answers_by_score(items: list[Question], score: float) -> dict[str, object]:
    return {q.id: next(o.value for o in q.options if o.score == score) for q in items}


def test_four_question_scenario():
    battery = [
        Question(id="p1_pos", text="I notice my feelings", type="likert", module="Goleman",
                 submodule="self-awareness", options=_scaled_likert(), inconsistency_pair_id="p1"),
        Question(id="p1_rev", text="I miss my feelings", type="likert", module="Goleman",
                 submodule="self-awareness", options=_scaled_likert(True), inconsistency_pair_id="p1",
                 is_reversed=True),
        Question(id="e1", text="I listen", type="likert", module="Goleman", submodule="empathy",
                 options=_scaled_likert()),
        Question(id="e2", text="I notice others", type="likert", module="Goleman", submodule="empathy",
                 options=_scaled_likert()),
    ]
    answers = {"p1_pos": "Strongly Agree", "p1_rev": "Strongly Disagree", "e1": "Agree", "e2": "Agree"}

    res = evaluate(battery, answers)

    assert res.inconsistency_index == 0.0
    assert res.inconsistency_rating == "Excellent"
    goleman = res.module_scores["Goleman"]
    assert goleman.submodules["empathy"] == 80.0
    assert goleman.submodules["self-awareness"] == 100.0
    assert goleman.score == 90.0
    assert res.overall_score == 90.0
    assert res.eq_rating == "Very High"

    pair_row = res.inconsistency_pairs[0]
    assert (pair_row.positive_response, pair_row.reversed_response, pair_row.expected_response) == (5.0, 1.0, 1.0)


def test_all_top_scores_give_top_bucket(synthetic_battery):
    res = evaluate(synthetic_battery, _answers_by_score(synthetic_battery, 100))
    assert res.overall_score == 100.0
    assert res.eq_rating == "Very High"
    assert res.inconsistency_index == 0.0


def test_all_zero_scores_give_bottom_bucket(synthetic_battery):
    res = evaluate(synthetic_battery, _answers_by_score(synthetic_battery, 0))
    assert res.overall_score == 0.0
    assert res.eq_rating == "Low"
    # disagreeing with a positive and agreeing with its reversal is still consistent
    assert res.inconsistency_index == 0.0


def test_module_score_is_mean_of_submodule_means():
    battery = [
        single("a1", "M", "A"),
        single("b1", "M", "B"),
        single("b2", "M", "B"),
        single("b3", "M", "B"),
    ]
    answers = {"a1": 5, "b1": 1, "b2": 1, "b3": 1}
    res = evaluate(battery, answers)
    assert res.module_scores["M"].submodules == {"A": 100.0, "B": 0.0}
    assert res.module_scores["M"].score == 50.0


def test_overall_is_mean_of_module_scores():
    battery = [single("x", "One", "S"), single("y", "Two", "S"), single("z", "Two", "T")]
    res = evaluate(battery, {"x": 5, "y": 1, "z": 3})
    assert res.module_scores["One"].score == 100.0
    assert res.module_scores["Two"].score == 25.0
    assert res.overall_score == 62.5
    assert res.eq_rating == "Average"


def test_weighted_submodule_mean():
    battery = [single("h", "M", "S", weight=3.0), single("l", "M", "S")]
    res = evaluate(battery, {"h": 5, "l": 1})
    assert res.module_scores["M"].submodules["S"] == 75.0


def test_mcq_scores_by_value_and_label():
    battery = [mcq("m1", "EQ-i 2.0", "Interpersonal"), mcq("m2", "EQ-i 2.0", "Interpersonal")]
    res = evaluate(battery, {"m1": "b", "m2": "Change the subject"})
    assert res.module_scores["EQ-i 2.0"].submodules["Interpersonal"] == 70.0


def test_string_values_match_numeric_options():
    battery = [single("s", "M", "S")]
    assert evaluate(battery, {"s": "4"}).overall_score == 75.0


def test_accepts_answer_list():
    battery = [single("s", "M", "S")]
    res = evaluate(battery, [Answer(question_id="s", value=2)])
    assert res.overall_score == 25.0


def test_inconsistent_pairs_raise_index():
    battery = pair("p1", "M", "A") + pair("p2", "M", "B")
    # p1 fully contradicted, p2 consistent
    answers = {"p1_pos": 5, "p1_rev": 5, "p2_pos": 4, "p2_rev": 2}
    res = evaluate(battery, answers)
    deviations = {p.pair_id: p.deviation for p in res.inconsistency_pairs}
    assert deviations == {"p1": 100.0, "p2": 0.0}
    assert res.inconsistency_index == 50.0
    assert res.inconsistency_rating == "Poor"


def test_partial_deviation_is_percentage_of_scale():
    battery = pair("p1", "M", "A")
    res = evaluate(battery, {"p1_pos": 5, "p1_rev": 2})
    assert res.inconsistency_index == 25.0
    assert res.inconsistency_rating == "Good"


def test_battery_without_pairs_is_consistent():
    battery = [single("s", "M", "S")]
    res = evaluate(battery, {"s": 3})
    assert res.inconsistency_index == 0.0
    assert res.inconsistency_rating == "Excellent"
    assert res.inconsistency_pairs == []


def test_repeat_evaluation_is_identical(synthetic_battery):
    answers = answers_at(synthetic_battery, 2)
    ev = EQScoreEvaluator()
    assert ev.evaluate(synthetic_battery, answers) == ev.evaluate(synthetic_battery, answers)


def test_submodule_flat_view():
    battery = build_synthetic_battery(modules=["Goleman"])
    res = evaluate(battery, answers_at(battery, 4))
    assert set(res.submodule_scores) == {"Goleman_Paired", "Goleman_Empathy", "Goleman_Motivation"}


def test_extra_answers_are_ignored_with_warning(caplog):
    battery = [single("s", "M", "S")]
    with caplog.at_level(logging.WARNING, logger="eq_core.validators"):
        res = evaluate(battery, {"s": 5, "ghost": 1})
    assert res.overall_score == 100.0
    assert "ghost" in caplog.text


def test_rounding_places_respected():
    battery = [single("a", "M", "S"), single("b", "M", "S"), single("c", "M", "S")]
    res = EQScoreEvaluator(round_places=1).evaluate(battery, {"a": 2, "b": 2, "c": 1})
    assert res.overall_score == 16.7


@pytest.mark.parametrize("bad", [
    dict(type="essay"),
    dict(options=[]),
    dict(weight=0),
    dict(module=""),
])
def test_question_construction_rejects_bad_definitions(bad):
    base = dict(id="q", text="t", type="likert", module="M", submodule="S", options=[Option("A", 1, 50)])
    base.update(bad)
    with pytest.raises(ValueError):
        Question(**base)


def test_option_score_must_be_bounded():
    with pytest.raises(ValueError):
        Option(label="x", value=1, score=120)


def test_question_from_camel_case_dict():
    q = Question.from_dict({
        "id": "q1",
        "text": "I stay calm",
        "type": "LIKERT",
        "module": "Goleman",
        "submodule": "Self-Regulation",
        "inconsistencyPairId": "calm",
        "isReversed": True,
        "options": [{"label": "No", "value": 1, "score": 100}, {"label": "Yes", "value": 2, "score": 0}],
    })
    assert q.type == "likert"
    assert q.inconsistency_pair_id == "calm" and q.is_reversed is True
    assert q.options[1].score == 0.0


def test_question_from_dict_parses_reversed_flag_strictly():
    base = {
        "id": "q1", "module": "M", "submodule": "S",
        "options": [{"label": "No", "value": 1, "score": 0}, {"label": "Yes", "value": 2, "score": 100}],
    }
    assert Question.from_dict({**base, "isReversed": "false"}).is_reversed is False
    assert Question.from_dict({**base, "is_reversed": "True"}).is_reversed is True
    assert Question.from_dict(base).is_reversed is False
    with pytest.raises(ValueError):
        Question.from_dict({**base, "isReversed": "no"})
