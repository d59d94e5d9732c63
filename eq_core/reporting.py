# eq_core/reporting.py
from __future__ import annotations
from typing import Any, Dict, Mapping, Optional, Sequence

from .scoring import score_question
from .types import EvaluationResult, Question


# -------- utils: make any object JSON-safe ----------
def to_basic(x: Any) -> Any:
    if x is None or isinstance(x, (bool, int, float, str)):
        return x
    if isinstance(x, dict):
        return {str(k): to_basic(v) for k, v in x.items()}
    if isinstance(x, (list, tuple, set)):
        return [to_basic(v) for v in x]
    if hasattr(x, "__dict__"):
        return to_basic(vars(x))
    return str(x)


def result_to_dict(result: EvaluationResult) -> Dict[str, Any]:
    """Plain dict of an evaluation, including the flat submodule view."""
    data = to_basic(result)
    data["submodule_scores"] = dict(result.submodule_scores)
    return data


def response_rows(questions: Sequence[Question], answers: Mapping[str, object]) -> list[Dict[str, Any]]:
    rows = []
    for q in questions:
        if q.id not in answers:
            continue
        score, meta = score_question(q, answers[q.id])
        rows.append({
            "question_id": q.id,
            "question": q.text,
            "answer": meta["label"],
            "score": score,
            "module": q.module,
            "submodule": q.submodule,
        })
    return rows


def detailed_analysis(
    result: EvaluationResult,
    questions: Sequence[Question],
    answers: Mapping[str, object],
    meta: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Report payload for a completed test:
    scores, consistency block with pair texts, per-response rows.
    """
    texts = {q.id: q.text for q in questions}
    pairs = []
    for p in result.inconsistency_pairs:
        row = to_basic(p)
        row["positive_text"] = texts.get(p.positive_id, "")
        row["reversed_text"] = texts.get(p.reversed_id, "")
        pairs.append(row)
    return {
        "meta": dict(meta or {}),
        "scores": {
            "overall": result.overall_score,
            "rating": result.eq_rating,
            "modules": {m: to_basic(ms) for m, ms in result.module_scores.items()},
            "submodules": result.submodule_scores,
        },
        "consistency": {
            "index": result.inconsistency_index,
            "rating": result.inconsistency_rating,
            "pairs": pairs,
        },
        "responses": response_rows(questions, answers),
    }
